# === FILE: js_packer/parser/html_parser.py ===
"""HTML parsing utilities for JsPacker.

Thin seam over BeautifulSoup so the scanner and the emitter agree on how a
document is parsed, where new ``<script>`` elements go and how the tree is
written back:

* :func:`parse_document` - bytes/str → :class:`~bs4.BeautifulSoup`.
* :func:`iter_scripts` - ``<script>`` tags in document order.
* :func:`script_text` - raw inner text of a script element.
* :func:`append_script` - add a ``<script>`` to ``<body>`` (or the root).
* :func:`serialize_document` - tree → UTF-8 bytes.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = (
    "parse_document",
    "iter_scripts",
    "script_text",
    "append_script",
    "serialize_document",
)

_PARSER = "html.parser"


def parse_document(content: Union[bytes, str]) -> BeautifulSoup:
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return BeautifulSoup(content, _PARSER)


def iter_scripts(soup: BeautifulSoup) -> List[Tag]:
    """Return a snapshot of all ``<script>`` tags so callers may remove them while iterating."""
    return [tag for tag in soup.find_all("script") if isinstance(tag, Tag)]


def script_text(element: Tag) -> str:
    # html.parser keeps script bodies as a single unescaped string
    return element.string or ""


def append_script(
    soup: BeautifulSoup,
    *,
    src: Optional[str] = None,
    code: Optional[str] = None,
) -> Tag:
    """Append a new ``<script>`` to ``<body>``; documents without a body get it at the root."""
    tag = soup.new_tag("script")
    if src is not None:
        tag["src"] = src
    if code is not None:
        tag.string = code
    parent = soup.body if soup.body is not None else soup
    parent.append(tag)
    return tag


def serialize_document(soup: BeautifulSoup) -> bytes:
    return str(soup).encode("utf-8")
