"""GDAX REST gateway.

Re-exports the clients and factory so consumers can write::

    from gdax_gateway import PrivateClient, PublicClient, create_private
"""
from gdax_gateway.transport import Transport, AiohttpTransport
from gdax_gateway.public import PublicClient
from gdax_gateway.private import PrivateClient
from gdax_gateway.factory import create_public, create_private, create_transport

__all__ = [
    "Transport",
    "AiohttpTransport",
    "PublicClient",
    "PrivateClient",
    "create_public",
    "create_private",
    "create_transport",
]
