# File: js_packer/engine.py
"""js_packer.engine: orchestration of a packing run (scan → fetch barrier → emit)."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping, Optional, Union

from js_packer.bundles import BundleGrouper
from js_packer.config import PackerConfig
from js_packer.emitter import OutputEmitter
from js_packer.logger import logger
from js_packer.minifier import Minifier, build_minifier
from js_packer.models import PackResult
from js_packer.remote.coordinator import FetchCoordinator
from js_packer.remote.fetcher import RemoteFetcher
from js_packer.scanner import DocumentScanner
from js_packer.store import ScriptStore

__all__ = ["PipelineError", "PackContext", "Engine", "packer"]

Files = MutableMapping[str, bytes]
DoneCallback = Callable[[Optional[BaseException]], None]

_UNSET: Any = object()


class PipelineError(Exception):
    """A run was aborted; no bundles were produced."""


@dataclass(slots=True)
class PackContext:
    """State owned by one run and discarded with it."""

    store: ScriptStore
    grouper: BundleGrouper
    coordinator: FetchCoordinator


class Engine:
    """Facade for the CLI, host pipelines and tests."""

    def __init__(
        self,
        config: Optional[PackerConfig] = None,
        *,
        source_dir: Optional[Union[str, Path]] = None,
        fetcher: Any = None,
        minifier: Optional[Minifier] = _UNSET,
    ) -> None:
        self.config = config or PackerConfig()
        self.source_dir = Path(source_dir) if source_dir is not None else self.config.source_dir
        self.fetcher = fetcher
        self.minifier = build_minifier(self.config) if minifier is _UNSET else minifier

    async def pack_async(self, files: Files) -> PackResult:
        """Run both phases over *files* in place and report the outcome."""
        logger.info("Packing scripts of %d files…", len(files))
        async with AsyncExitStack() as stack:
            fetcher = self.fetcher
            if fetcher is None:
                fetcher = await stack.enter_async_context(RemoteFetcher(self.config))

            store = ScriptStore(self.minifier)
            ctx = PackContext(store, BundleGrouper(), FetchCoordinator(store, fetcher))
            scanner = DocumentScanner(
                self.config, ctx.store, ctx.grouper, ctx.coordinator, self.source_dir
            )

            try:
                scanner.scan(files)
            except Exception as exc:
                await ctx.coordinator.drain()
                return self._failed("Scanning failed", exc)

            try:
                await ctx.coordinator.barrier()
            except Exception as exc:
                return self._failed("Fetching remote scripts failed", exc)

            try:
                artifacts = OutputEmitter(self.config, ctx.store).emit(ctx.grouper, files)
            except Exception as exc:
                return self._failed("Bundling failed", exc)

        result = PackResult(bundles=ctx.grouper.bundles, artifacts=artifacts)
        logger.info(
            "Packed %d unique scripts into %d bundles (%d remote)",
            len(ctx.store),
            len(result.bundles),
            len(ctx.coordinator),
        )
        return result

    def pack(self, files: Files, done: Optional[DoneCallback] = None) -> PackResult:
        """Synchronous entry point; *done* receives None or the pipeline error."""
        result = asyncio.run(self.pack_async(files))
        if done is not None:
            done(result.error)
        return result

    @staticmethod
    def _failed(message: str, exc: BaseException) -> PackResult:
        logger.error("%s: %s", message, exc)
        error = PipelineError(f"{message}: {exc}")
        error.__cause__ = exc
        return PackResult(error=error)


def packer(
    options: Union[PackerConfig, Mapping[str, Any], None] = None,
) -> Callable[..., PackResult]:
    """
    Plugin factory for site-generator pipelines.

    ``packer({"inline": True})(files, done, source_dir="src")`` mutates
    *files* in place and calls ``done(error_or_None)`` once.
    """
    if isinstance(options, PackerConfig):
        config = options
    elif isinstance(options, Mapping):
        config = PackerConfig.model_validate(dict(options))
    else:
        config = PackerConfig()

    def plugin(
        files: Files,
        done: Optional[DoneCallback] = None,
        source_dir: Optional[Union[str, Path]] = None,
    ) -> PackResult:
        return Engine(config, source_dir=source_dir).pack(files, done)

    return plugin
