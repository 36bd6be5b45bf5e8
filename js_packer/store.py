# File: js_packer/store.py
"""js_packer.store: content-addressed cache of scripts, one record per key."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from js_packer.logger import logger
from js_packer.minifier import Minifier, MinifyError
from js_packer.models import RecordState, ScriptRecord

__all__ = ["ScriptStore"]


class ScriptStore:
    """
    Dedup gate and content table for a single run.

    The first :meth:`claim` for a key wins and obliges the caller to acquire
    the content and hand it to :meth:`set`; every later claim only learns
    that the key is already taken.
    """

    def __init__(self, minifier: Optional[Minifier] = None) -> None:
        self.minifier = minifier
        self._records: Dict[str, ScriptRecord] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ScriptRecord]:
        return iter(self._records.values())

    def claim(self, key: str, origin: str) -> bool:
        """Reserve *key*. Returns True when it had already been claimed."""
        if key in self._records:
            return True
        self._records[key] = ScriptRecord(key=key, origin=origin)
        logger.debug("+-->  processing %s", origin)
        return False

    def release(self, key: str) -> None:
        """Forget a claim whose acquisition was abandoned."""
        record = self._records.get(key)
        if record is not None and record.state is RecordState.CLAIMED:
            del self._records[key]

    def set(self, key: str, content: str) -> ScriptRecord:
        """Store raw *content* for a claimed key, minifying it when enabled."""
        record = self._records[key]
        record.raw_content = content

        if self.minifier is None:
            record.final_content = content
            record.state = RecordState.READY
            return record

        try:
            record.final_content = self.minifier.minify(content)
            record.state = RecordState.READY
        except MinifyError as exc:
            logger.warning("Error while minifying %s: %s", record.origin, exc)
            record.final_content = content
            record.state = RecordState.FALLBACK
        return record

    def get(self, key: str) -> ScriptRecord:
        return self._records[key]

    def content(self, key: str) -> str:
        record = self._records[key]
        if record.state is RecordState.CLAIMED or record.final_content is None:
            raise LookupError(f"script {key} ({record.origin}) has no content yet")
        return record.final_content
