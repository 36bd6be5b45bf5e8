# js_packer/minifier.py
"""
JavaScript minification backends.

``rjsmin`` is the default; ``terser`` is used through its CLI when selected
and gives real syntax checking (a script it rejects raises
:class:`MinifyError`, which the script store turns into a raw fallback).
"""
from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import rjsmin

from js_packer.config import PackerConfig

__all__ = ("MinifyError", "Minifier", "RjsminMinifier", "TerserMinifier", "build_minifier")


class MinifyError(Exception):
    """The minifier rejected a script."""


class Minifier:
    """Source text in, minified text out; raises :class:`MinifyError`."""

    def minify(self, source: str) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class RjsminMinifier(Minifier):
    def __init__(self, options: Optional[Dict[str, Any]] = None) -> None:
        self.options: Dict[str, Any] = dict(options or {})

    def minify(self, source: str) -> str:
        try:
            return rjsmin.jsmin(source, **self.options)
        except (TypeError, ValueError) as exc:
            raise MinifyError(str(exc)) from exc


class TerserMinifier(Minifier):
    def __init__(
        self,
        args: Sequence[str] = ("-c", "-m"),
        terser_path: Optional[str] = None,
        timeout: float = 30,
    ) -> None:
        self.args: List[str] = list(args)
        self.terser_path = terser_path
        self.timeout = timeout

    def minify(self, source: str) -> str:
        binary = self.terser_path or find_terser()
        if binary is None:
            raise MinifyError("terser executable not found")
        try:
            result = subprocess.run(  # noqa: S603
                [binary, *self.args],
                input=source,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise MinifyError((exc.stderr or "").strip() or f"terser exited with {exc.returncode}") from exc
        except (subprocess.TimeoutExpired, OSError) as exc:
            raise MinifyError(str(exc)) from exc
        return result.stdout


def find_terser() -> Optional[str]:
    """Search order: ./node_modules/.bin/terser -> PATH."""
    local = Path.cwd() / "node_modules" / ".bin" / "terser"
    if local.exists():
        return str(local)
    return shutil.which("terser")


def build_minifier(config: PackerConfig) -> Optional[Minifier]:
    """Return the configured backend, or None when minification is disabled."""
    if not config.uglify:
        return None
    if config.minifier == "terser":
        return TerserMinifier(config.terser_args, config.terser_path)
    return RjsminMinifier(config.uglify_options)
