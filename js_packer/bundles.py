# File: js_packer/bundles.py
"""js_packer.bundles: grouping of documents by their ordered script list."""

from __future__ import annotations

from typing import Dict, Iterator, List, Sequence

from js_packer.logger import logger
from js_packer.models import Bundle
from js_packer.utils import bundle_key

__all__ = ["BundleGrouper"]


class BundleGrouper:
    """Maps bundle keys to bundles, in the order they were first seen."""

    def __init__(self) -> None:
        self._bundles: Dict[str, Bundle] = {}

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> Iterator[Bundle]:
        return iter(self._bundles.values())

    def __getitem__(self, key: str) -> Bundle:
        return self._bundles[key]

    @property
    def bundles(self) -> List[Bundle]:
        return list(self._bundles.values())

    def register(self, document: str, script_keys: Sequence[str]) -> Bundle:
        """Record that *document* needs exactly *script_keys*, in that order."""
        if not script_keys:
            raise ValueError(f"document {document!r} has no scripts to bundle")
        key = bundle_key(script_keys)
        bundle = self._bundles.get(key)
        if bundle is None:
            bundle = Bundle(bundle_key=key, script_keys=tuple(script_keys))
            self._bundles[key] = bundle
        if document not in bundle.using_documents:
            bundle.using_documents.append(document)
        logger.debug('register usage of packed script "%s" for file "%s"', key, document)
        return bundle
