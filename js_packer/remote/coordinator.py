# js_packer/remote/coordinator.py
"""
Tracks the asynchronous fetches started while scanning and exposes a single
barrier that resolves once every one of them has settled.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, List, Protocol, Set

from js_packer.logger import logger
from js_packer.store import ScriptStore
from js_packer.utils import normalize_remote_url

__all__ = ("FetchCoordinator",)


class _Fetcher(Protocol):
    def fetch(self, url: str) -> Awaitable[str]: ...


class FetchCoordinator:
    def __init__(self, store: ScriptStore, fetcher: _Fetcher) -> None:
        self.store = store
        self.fetcher = fetcher
        self._pending: Set[asyncio.Task[None]] = set()
        self._tasks: List[asyncio.Task[None]] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def schedule(self, key: str, url: str) -> None:
        """Start fetching *url* for a freshly claimed *key*; does not wait."""
        task = asyncio.get_running_loop().create_task(self._fetch(key, normalize_remote_url(url)))
        self._tasks.append(task)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _fetch(self, key: str, url: str) -> None:
        content = await self.fetcher.fetch(url)
        logger.debug("fetched remote script %s (%d bytes)", url, len(content))
        self.store.set(key, content)

    async def barrier(self) -> None:
        """Wait until every scheduled fetch has settled, then re-raise the first failure."""
        if not self._tasks:
            return
        results = await asyncio.gather(*self._tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def drain(self) -> None:
        """Cancel whatever is still running and wait for it to finish."""
        for task in list(self._pending):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
