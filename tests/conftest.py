"""Shared test fixtures."""
import sys
import os
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from gdax_core.types import Credentials  # noqa: E402
from fakes import FakeTransport, FIXED_TS, SECRET  # noqa: E402


@pytest.fixture
def credentials():
    return Credentials(key="test-key", secret=SECRET, passphrase="test-pass")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def private_client(credentials, transport):
    from gdax_gateway.private import PrivateClient
    return PrivateClient(credentials, transport, base_url="https://api.test",
                         user_agent="gdax-test/0.1", clock=lambda: FIXED_TS)


@pytest.fixture
def public_client(transport):
    from gdax_gateway.public import PublicClient
    return PublicClient(transport, base_url="https://api.test",
                        user_agent="gdax-test/0.1")
