# File: tests/conftest.py
import asyncio
from pathlib import Path
from typing import Callable, Dict, List, Union

import pytest

from js_packer.config import PackerConfig
from js_packer.logger import logger
from js_packer.minifier import Minifier, RjsminMinifier


def page(*scripts: str, head: str = "") -> bytes:
    """Build a small HTML document whose body holds *scripts* verbatim."""
    body = "".join(scripts)
    return f"<html><head>{head}</head><body><p>hi</p>{body}</body></html>".encode("utf-8")


class FakeFetcher:
    """Stands in for RemoteFetcher; records every URL it is asked for."""

    def __init__(self, responses: Dict[str, Union[str, Exception]]) -> None:
        self.responses = responses
        self.calls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        await asyncio.sleep(0)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


class CountingMinifier(Minifier):
    """rjsmin, plus a log of every source it was given."""

    def __init__(self) -> None:
        self.sources: List[str] = []
        self._inner = RjsminMinifier()

    def minify(self, source: str) -> str:
        self.sources.append(source)
        return self._inner.minify(source)


@pytest.fixture()
def source_dir(tmp_path) -> Path:
    """
    Content root with two local scripts: js/a.js and js/b.js.
    """
    root = tmp_path / "src"
    (root / "js").mkdir(parents=True)
    (root / "js" / "a.js").write_text("var a = 1;\n", encoding="utf-8")
    (root / "js" / "b.js").write_text("var b = 2;\n", encoding="utf-8")
    return root


@pytest.fixture()
def make_config(source_dir) -> Callable[..., PackerConfig]:
    """
    Factory for PackerConfig instances pointing at the temporary content root.
    """

    def _make(**overrides) -> PackerConfig:
        overrides.setdefault("source_dir", source_dir)
        return PackerConfig(**overrides)

    return _make


@pytest.fixture()
def counting_minifier() -> CountingMinifier:
    return CountingMinifier()


@pytest.fixture()
def packer_caplog(caplog, monkeypatch):
    """
    caplog wired to the project logger (which does not propagate by default).
    """
    monkeypatch.setattr(logger, "propagate", True)
    caplog.set_level("DEBUG", logger=logger.name)
    return caplog
