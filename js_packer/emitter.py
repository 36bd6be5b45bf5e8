# File: js_packer/emitter.py
"""js_packer.emitter: phase two, materializes every bundle once all scripts are known."""

from __future__ import annotations

from typing import Iterable, List, MutableMapping

from js_packer.config import PackerConfig
from js_packer.logger import logger
from js_packer.models import Bundle
from js_packer.parser.html_parser import append_script, parse_document, serialize_document
from js_packer.store import ScriptStore

__all__ = ["OutputEmitter"]


class OutputEmitter:
    """Writes one shared file per bundle, or inlines the payload into its pages."""

    def __init__(self, config: PackerConfig, store: ScriptStore) -> None:
        self.config = config
        self.store = store

    def payload(self, bundle: Bundle) -> str:
        """Concatenation of the bundle's scripts, each terminated by a newline."""
        return "".join(self.store.content(key) + "\n" for key in bundle.script_keys)

    def emit(self, bundles: Iterable[Bundle], files: MutableMapping[str, bytes]) -> List[str]:
        """Materialize *bundles* into *files*; returns the externalized paths written."""
        artifacts: List[str] = []
        for bundle in bundles:
            logger.debug(
                'create packed script "%s", used by %d files',
                bundle.bundle_key,
                len(bundle.using_documents),
            )
            packed = self.payload(bundle)

            if not self.config.inline:
                target = self.config.bundle_file(bundle.bundle_key)
                logger.debug('write packed script "%s" in "%s" file', bundle.bundle_key, target)
                files[target] = packed.encode("utf-8")
                artifacts.append(target)
                continue

            for document in bundle.using_documents:
                logger.debug('include packed script "%s" in "%s" file', bundle.bundle_key, document)
                soup = parse_document(files[document])
                append_script(soup, code=packed)
                files[document] = serialize_document(soup)
        return artifacts
