"""Request signature for the private API.

signature = base64(HMAC-SHA256(base64decode(secret),
                               timestamp + METHOD + path + body))
"""
from __future__ import annotations
import base64
import binascii
import hashlib
import hmac

from gdax_core.errors import InvalidSecretKey


def decode_secret(secret: str) -> bytes:
    # The secret is the only base64 we ever decode, so any failure here means
    # the credential itself is bad.
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidSecretKey() from None


def signing_message(timestamp: int, method: str, path: str, body: str = "") -> str:
    return f"{timestamp}{method.upper()}{path}{body}"


def sign(secret: str, timestamp: int, method: str, path: str, body: str = "") -> str:
    """Deterministic: identical inputs always give the identical signature."""
    key = decode_secret(secret)
    message = signing_message(timestamp, method, path, body)
    mac = hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(mac).decode("ascii")
