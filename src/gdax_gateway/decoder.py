"""Turns a buffered (status, body) pair into a typed value or a classified error."""
from __future__ import annotations
import logging
from typing import Any, Callable, List, TypeVar

import orjson

from gdax_core.errors import ApiError, DecodeError, EmptyResultError

log = logging.getLogger(__name__)

T = TypeVar("T")


def is_success(status: int) -> bool:
    return 200 <= status < 300


def decode(status: int, body: bytes, parse: Callable[[Any], T]) -> T:
    """Decode a whole response body.

    Non-2xx: the raw body text becomes ``ApiError.message`` as-is.
    2xx: the body is parsed as JSON and handed to ``parse``; any mismatch
    is a ``DecodeError``.
    """
    if not is_success(status):
        raise ApiError(body.decode("utf-8", errors="replace"), status=status)
    try:
        raw = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON body: {e}") from e
    try:
        return parse(raw)
    except DecodeError:
        raise
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise DecodeError(f"Unexpected response shape: {e!r}") from e


def first(items: List[T]) -> T:
    """Unwrap a one-element result array (e.g. DELETE /orders/{id})."""
    if not items:
        raise EmptyResultError("Exchange returned an empty result array")
    if len(items) > 1:
        log.warning("Expected one result, got %d; using the first", len(items))
    return items[0]
