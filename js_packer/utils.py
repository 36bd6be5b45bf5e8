# File: js_packer/utils.py
"""js_packer.utils: hashing of scripts and bundles, remote URL and local path helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Sequence, Union
from urllib.parse import urlparse

from js_packer.logger import logger

__all__: Sequence[str] = (
    "BUNDLE_KEY_SEPARATOR",
    "script_key",
    "bundle_key",
    "is_remote_source",
    "normalize_remote_url",
    "resolve_local_path",
)

BUNDLE_KEY_SEPARATOR = "."


def script_key(value: str) -> str:
    """SHA-1 hex digest of a source attribute or of inline code."""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def bundle_key(script_keys: Sequence[str]) -> str:
    """Hash of the ordered key list; ``[a, b]`` and ``[b, a]`` differ."""
    return script_key(BUNDLE_KEY_SEPARATOR.join(script_keys))


def is_remote_source(src: str) -> bool:
    return src.startswith(("//", "http"))


def normalize_remote_url(url: str) -> str:
    """Rewrite protocol-relative ``//host/path`` to ``http://host/path``."""
    if url.startswith("//"):
        normalized = "http:" + url
        logger.debug("Normalized URL: %s -> %s", url, normalized)
        return normalized
    return url


def resolve_local_path(root: Union[str, Path], src: str) -> Path:
    """Map a ``src`` attribute onto the content root.

    Site-absolute sources (``/js/app.js``) are still resolved under *root*;
    query strings and fragments are ignored.
    """
    relative = urlparse(src).path.lstrip("/")
    return Path(root).expanduser() / relative
