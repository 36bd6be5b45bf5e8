# js_packer/parser/classifier.py
"""
Classification of ``<script>`` elements into remote, local, inline,
excluded and unrecognized references.
"""
from __future__ import annotations

from typing import Final

from bs4.element import Tag

from js_packer.models import (
    ExcludedScript,
    InlineScript,
    LocalScript,
    RemoteScript,
    ScriptReference,
    UnrecognizedScript,
)
from js_packer.parser.html_parser import script_text
from js_packer.utils import is_remote_source

__all__ = ("EXCLUDE_ATTR", "EXCLUDE_VALUE", "JS_MIME_TYPE", "is_excluded", "classify")

EXCLUDE_ATTR: Final[str] = "data-packer"
EXCLUDE_VALUE: Final[str] = "exclude"
JS_MIME_TYPE: Final[str] = "text/javascript"


def is_excluded(element: Tag) -> bool:
    return element.get(EXCLUDE_ATTR) == EXCLUDE_VALUE


def classify(element: Tag) -> ScriptReference:
    """
    Decide what kind of script *element* is. Does not touch the element.

    Order: exclusion marker, then ``src`` (remote or local), then the
    ``type`` attribute for inline code.
    """
    if is_excluded(element):
        return ExcludedScript()

    src = element.get("src")
    if isinstance(src, str) and src:
        if is_remote_source(src):
            return RemoteScript(url=src)
        return LocalScript(path=src)

    script_type = element.get("type")
    if script_type is None or str(script_type).strip().lower() == JS_MIME_TYPE:
        return InlineScript(code=script_text(element))

    return UnrecognizedScript()
