"""Authentication header construction for the private API."""
from __future__ import annotations
from typing import Callable, Dict, Optional, Union

from gdax_core.config import DEFAULTS
from gdax_core.types import Credentials, HttpMethod
from gdax_core.utils import time_now_s
from gdax_gateway.signer import sign


class HeaderBuilder:
    """Builds the CB-ACCESS-* header set for one request.

    The clock is injectable so tests can pin the timestamp. The timestamp string
    that goes into CB-ACCESS-TIMESTAMP is the same one that was signed; the
    exchange rejects the request if they differ.
    """

    def __init__(self, credentials: Credentials,
                 user_agent: str = DEFAULTS["user_agent"],
                 clock: Optional[Callable[[], int]] = None):
        self._credentials = credentials
        self.user_agent = user_agent
        self._clock = clock or time_now_s

    def build(self, path: str, body: str,
              method: Union[HttpMethod, str]) -> Dict[str, str]:
        method = method.value if isinstance(method, HttpMethod) else str(method)
        timestamp = str(int(self._clock()))
        signature = sign(self._credentials.secret, int(timestamp), method, path, body)
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            "CB-ACCESS-KEY": self._credentials.key,
            "CB-ACCESS-SIGN": signature,
            "CB-ACCESS-PASSPHRASE": self._credentials.passphrase,
            "CB-ACCESS-TIMESTAMP": timestamp,
        }
