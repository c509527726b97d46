"""HTTP transport behind the clients.

The clients only need ``execute(method, url, headers, body) -> (status, bytes)``.
``AiohttpTransport`` provides it with one reusable aiohttp session driven by a
private event loop, so every call blocks until the whole body is buffered.
"""
from __future__ import annotations
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Dict, Optional, Tuple, TypeVar

import aiohttp

from gdax_core.errors import TransportError

log = logging.getLogger(__name__)

T = TypeVar("T")


class Transport(ABC):
    """Blocking single-request HTTP transport."""

    @abstractmethod
    def execute(self, method: str, url: str, headers: Dict[str, str],
                body: str = "") -> Tuple[int, bytes]: ...

    def close(self) -> None:
        pass


class AiohttpTransport(Transport):
    """aiohttp session on a dedicated event loop.

    Not safe to call from a thread that is already running an event loop, and
    not safe for concurrent use from several threads without external locking.
    """

    def __init__(self, timeout_s: float = 10.0):
        self.timeout_s = timeout_s
        self._loop = asyncio.new_event_loop()
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """The open session, or None before the first request."""
        return self._session

    def run(self, coro: Awaitable[T]) -> T:
        """Run ``coro`` to completion on this transport's event loop."""
        if self._loop.is_closed():
            raise TransportError("Transport is closed")
        return self._loop.run_until_complete(coro)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_s),
            )
        return self._session

    async def _fetch(self, method: str, url: str, headers: Dict[str, str],
                     body: str) -> Tuple[int, bytes]:
        session = await self._get_session()
        data = body.encode("utf-8") if body else None
        async with session.request(method, url, headers=headers, data=data) as resp:
            return resp.status, await resp.read()

    def execute(self, method: str, url: str, headers: Dict[str, str],
                body: str = "") -> Tuple[int, bytes]:
        try:
            return self.run(self._fetch(method, url, headers, body))
        except asyncio.TimeoutError as e:
            log.warning("REST %s %s timed out after %.1fs", method, url, self.timeout_s)
            raise TransportError(f"{method} {url} timed out") from e
        except aiohttp.ClientError as e:
            log.warning("REST %s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

    def close(self) -> None:
        if self._loop.is_closed():
            return
        if self._session and not self._session.closed:
            self._loop.run_until_complete(self._session.close())
        self._loop.close()

    def __enter__(self) -> "AiohttpTransport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
