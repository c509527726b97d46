"""Factory functions for building clients from a config dict."""
from __future__ import annotations
from typing import Optional

from gdax_core.config import DEFAULTS
from gdax_core.types import Credentials
from gdax_gateway.private import PrivateClient
from gdax_gateway.public import PublicClient
from gdax_gateway.transport import AiohttpTransport, Transport


def create_transport(config: Optional[dict] = None) -> Transport:
    config = config or {}
    return AiohttpTransport(timeout_s=float(config.get("timeout_s", DEFAULTS["timeout_s"])))


def create_public(config: Optional[dict] = None,
                  transport: Optional[Transport] = None) -> PublicClient:
    """Create a public client.

    Args:
        config: Settings from ``load_config`` (base_url, user_agent, timeout_s)
        transport: Reuse an existing transport instead of creating one
    """
    config = config or {}
    return PublicClient(
        transport or create_transport(config),
        base_url=config.get("base_url", DEFAULTS["base_url"]),
        user_agent=config.get("user_agent", DEFAULTS["user_agent"]),
    )


def create_private(credentials: Credentials, config: Optional[dict] = None,
                   transport: Optional[Transport] = None) -> PrivateClient:
    """Create a private client.

    Args:
        credentials: API key, base64 secret and passphrase
        config: Settings from ``load_config`` (base_url, user_agent, timeout_s)
        transport: Reuse an existing transport instead of creating one
    """
    config = config or {}
    return PrivateClient(
        credentials,
        transport or create_transport(config),
        base_url=config.get("base_url", DEFAULTS["base_url"]),
        user_agent=config.get("user_agent", DEFAULTS["user_agent"]),
    )
