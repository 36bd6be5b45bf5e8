# js_packer/models.py
"""
Data models for JsPacker: discovered script references, stored script
records, bundles and the outcome of a run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


# --------------------------------------------------------------------------- #
# Script references (result of classifying one <script> element)              #
# --------------------------------------------------------------------------- #


@dataclass(slots=True, frozen=True)
class RemoteScript:
    """``<script src>`` pointing at ``http...`` or a protocol-relative ``//`` URL."""

    url: str


@dataclass(slots=True, frozen=True)
class LocalScript:
    """``<script src>`` pointing at a file under the content root."""

    path: str


@dataclass(slots=True, frozen=True)
class InlineScript:
    """JavaScript written directly inside the element."""

    code: str


@dataclass(slots=True, frozen=True)
class ExcludedScript:
    """Element carrying ``data-packer="exclude"``."""


@dataclass(slots=True, frozen=True)
class UnrecognizedScript:
    """Anything else (JSON data blocks, templates, modules...)."""


ScriptReference = Union[RemoteScript, LocalScript, InlineScript, ExcludedScript, UnrecognizedScript]


# --------------------------------------------------------------------------- #
# Store records                                                               #
# --------------------------------------------------------------------------- #


class RecordState(str, Enum):
    CLAIMED = "claimed"
    READY = "ready"
    FALLBACK = "fallback"


@dataclass(slots=True)
class ScriptRecord:
    """Acquisition result for one unique script key."""

    key: str
    origin: str
    raw_content: Optional[str] = None
    final_content: Optional[str] = None
    state: RecordState = RecordState.CLAIMED


# --------------------------------------------------------------------------- #
# Bundles & run outcome                                                       #
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class Bundle:
    """Ordered script keys shared by every document in ``using_documents``."""

    bundle_key: str
    script_keys: Tuple[str, ...]
    using_documents: List[str] = field(default_factory=list)


@dataclass(slots=True)
class PackResult:
    """Outcome of one packing run, handed to the completion callback."""

    bundles: List[Bundle] = field(default_factory=list)
    artifacts: List[str] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
