# js_packer/remote/fetcher.py
"""
Fetcher module: downloads remote scripts with retry/backoff and an optional timeout.
"""
from __future__ import annotations

import asyncio
import random
from typing import Optional, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from js_packer.config import PackerConfig
from js_packer.logger import logger

__all__ = ("RemoteFetchError", "RemoteFetcher")


class RemoteFetchError(Exception):
    """A remote script could not be retrieved; there is nothing to fall back to."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class RemoteFetcher:
    """Handles HTTP fetching of script bodies with retries/backoff."""

    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)
    backoff_cap: float = 60

    def __init__(self, config: PackerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> RemoteFetcher:
        if self.session is None:
            timeout = ClientTimeout(total=self.config.fetch_timeout)
            self.session = ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> str:
        """
        GET *url* and return the body as text.

        Raises RemoteFetchError on a non-2xx final status or once retries are exhausted.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        attempts = 0
        while True:
            try:
                async with self.session.get(url) as resp:
                    status = resp.status
                    if status in self._RETRY_STATUS:
                        raise ClientError(f"retryable status {status}")
                    if not 200 <= status < 300:
                        raise RemoteFetchError(url, f"HTTP {status}")
                    return await resp.text(errors="replace")
            except (ClientError, asyncio.TimeoutError) as e:
                attempts += 1
                if attempts > self.config.retry_times:
                    raise RemoteFetchError(url, str(e) or type(e).__name__) from e
                backoff = min(self.backoff_cap, 2**attempts + random.random())
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, url, backoff
                )
                await asyncio.sleep(backoff)
