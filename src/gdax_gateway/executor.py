"""Request executors: build headers, dispatch one transport call, decode.

Every call is single-shot. Errors from header building, the transport or the
decoder propagate unchanged to the caller.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from gdax_core.config import DEFAULTS
from gdax_core.types import Credentials, HttpMethod
from gdax_gateway.auth import HeaderBuilder
from gdax_gateway.decoder import decode, is_success
from gdax_gateway.transport import Transport

log = logging.getLogger(__name__)

T = TypeVar("T")


class PublicExecutor:
    """Unauthenticated GET."""

    def __init__(self, transport: Transport,
                 base_url: str = DEFAULTS["base_url"],
                 user_agent: str = DEFAULTS["user_agent"]):
        self.transport = transport
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def _dispatch(self, method: HttpMethod, path: str, headers: Dict[str, str],
                  body: str, parse: Callable[[Any], T]) -> T:
        url = f"{self.base_url}{path}"
        status, content = self.transport.execute(method.value, url, headers, body)
        if is_success(status):
            log.debug("REST %s %s -> %d", method.value, path, status)
        else:
            log.error("REST %s %s failed: %d %s", method.value, path, status,
                      content.decode("utf-8", errors="replace"))
        return decode(status, content, parse)

    def get(self, path: str, parse: Callable[[Any], T]) -> T:
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        return self._dispatch(HttpMethod.GET, path, headers, "", parse)


class AuthenticatedExecutor(PublicExecutor):
    """Signed GET / POST / DELETE."""

    def __init__(self, credentials: Credentials, transport: Transport,
                 base_url: str = DEFAULTS["base_url"],
                 user_agent: str = DEFAULTS["user_agent"],
                 clock: Optional[Callable[[], int]] = None):
        super().__init__(transport, base_url=base_url, user_agent=user_agent)
        self._headers = HeaderBuilder(credentials, user_agent=user_agent, clock=clock)

    def _signed(self, method: HttpMethod, path: str, body: str,
                parse: Callable[[Any], T]) -> T:
        headers = self._headers.build(path, body, method)
        if body:
            headers["Content-Type"] = "application/json"
        return self._dispatch(method, path, headers, body, parse)

    def get(self, path: str, parse: Callable[[Any], T]) -> T:
        return self._signed(HttpMethod.GET, path, "", parse)

    def post(self, path: str, body: str, parse: Callable[[Any], T]) -> T:
        return self._signed(HttpMethod.POST, path, body, parse)

    def delete(self, path: str, parse: Callable[[Any], T]) -> T:
        return self._signed(HttpMethod.DELETE, path, "", parse)
