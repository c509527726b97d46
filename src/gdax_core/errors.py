"""Error hierarchy for the GDAX client.

Every fallible step raises one of these and nothing inside the library catches them,
so callers can tell an exchange rejection (ApiError) apart from a response that did
not match the expected shape (DecodeError).
"""
from __future__ import annotations
from typing import Optional


class GdaxError(Exception):
    """Base class for all client errors."""


class ApiError(GdaxError):
    """Exchange answered with a non-success status.

    ``message`` is the raw response body, verbatim. It is never parsed, even when
    it looks like JSON.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"HTTP {self.status}: {self.message}"


class InvalidSecretKey(GdaxError):
    """The API secret is not valid base64."""

    def __init__(self) -> None:
        super().__init__("API secret is not valid base64")


class TransportError(GdaxError):
    """Network, connection or timeout failure from the transport."""


class DecodeError(GdaxError):
    """A success response did not match the expected structure or vocabulary."""


class EmptyResultError(GdaxError):
    """The exchange returned an empty array where one element was required."""


class ConfigError(GdaxError):
    """Invalid configuration file or missing credentials."""
