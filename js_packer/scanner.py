# === FILE: js_packer/scanner.py ===
"""
Phase one of a run: walk every HTML document, collect its scripts into the
store, strip them from the page and group the page by its script list.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, MutableMapping, Optional, Union

from js_packer.bundles import BundleGrouper
from js_packer.config import PackerConfig
from js_packer.logger import logger
from js_packer.models import (
    ExcludedScript,
    InlineScript,
    LocalScript,
    RemoteScript,
    ScriptReference,
    UnrecognizedScript,
)
from js_packer.parser.classifier import EXCLUDE_ATTR, classify
from js_packer.parser.html_parser import (
    append_script,
    iter_scripts,
    parse_document,
    serialize_document,
)
from js_packer.remote.coordinator import FetchCoordinator
from js_packer.store import ScriptStore
from js_packer.utils import resolve_local_path, script_key

__all__ = ["DocumentScanner"]


class DocumentScanner:
    """Synchronous scan over a file collection; remote work is only scheduled."""

    def __init__(
        self,
        config: PackerConfig,
        store: ScriptStore,
        grouper: BundleGrouper,
        coordinator: FetchCoordinator,
        source_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.config = config
        self.store = store
        self.grouper = grouper
        self.coordinator = coordinator
        self.source_dir = Path(source_dir) if source_dir is not None else config.source_dir

    def scan(self, files: MutableMapping[str, bytes]) -> None:
        logger.debug("> minification is %s", "enabled" if self.config.uglify else "disabled")
        for path in list(files):
            if path.endswith(self.config.html_extension):
                self.scan_document(path, files)

    def scan_document(self, path: str, files: MutableMapping[str, bytes]) -> List[str]:
        """Process one document and return its ordered script keys."""
        soup = parse_document(files[path])
        scripts = iter_scripts(soup)
        logger.debug('processing %d scripts in "%s" file', len(scripts), path)

        page_scripts: List[str] = []
        mutated = False

        for element in scripts:
            reference = classify(element)
            if isinstance(reference, ExcludedScript):
                del element[EXCLUDE_ATTR]
                mutated = True
                logger.debug("- skipping excluded script tag")
                continue

            if isinstance(reference, UnrecognizedScript):
                logger.debug('- skipping unknown script tag in file "%s"\n%s', path, element)
                continue

            key = self._acquire(reference)
            if key is None:
                continue

            page_scripts.append(key)
            element.decompose()
            mutated = True

        if page_scripts:
            bundle = self.grouper.register(path, page_scripts)
            if not self.config.inline:
                append_script(soup, src=self.config.bundle_url(bundle.bundle_key))

        if mutated:
            files[path] = serialize_document(soup)
        return page_scripts

    def _acquire(self, reference: ScriptReference) -> Optional[str]:
        """Claim the script behind *reference*; None when it cannot be packed."""
        if isinstance(reference, RemoteScript):
            key = script_key(reference.url)
            logger.debug('+ remote script located at "%s"', reference.url)
            if not self.store.claim(key, f"remote script {reference.url}"):
                self.coordinator.schedule(key, reference.url)
            return key

        if isinstance(reference, LocalScript):
            key = script_key(reference.path)
            logger.debug('+ local script located at "%s"', reference.path)
            script_path = resolve_local_path(self.source_dir, reference.path)
            if not self.store.claim(key, f"local script {script_path}"):
                if not script_path.is_file():
                    logger.warning("File missing: %s", script_path)
                    self.store.release(key)
                    return None
                # bytes keep CRLF intact; undecodable bytes become U+FFFD
                self.store.set(key, script_path.read_bytes().decode("utf-8", errors="replace"))
            return key

        if isinstance(reference, InlineScript):
            key = script_key(reference.code)
            logger.debug('+ inline script identified by "%s"', key)
            if not self.store.claim(key, "inline script"):
                self.store.set(key, reference.code)
            return key

        return None
