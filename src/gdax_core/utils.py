"""Clock and JSON field coercion helpers shared by the response models."""
from __future__ import annotations
import re
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TypeVar
from uuid import UUID

from gdax_core.errors import DecodeError

T = TypeVar("T")

_INT_RE = re.compile(r"-?\d+", re.ASCII)

_ISO_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[T ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?"
    r"(Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def time_now_s() -> int:
    """Whole seconds since the epoch. Used for the signing timestamp."""
    return int(time.time())


def parse_time(value: Any) -> datetime:
    """Parse the exchange's ISO-8601 timestamps into an aware UTC datetime.

    Handles a trailing ``Z`` and fractional seconds of any length
    (``2016-12-08T20:02:28.53864Z``), which ``fromisoformat`` alone rejects
    on older interpreters.
    """
    if not isinstance(value, str):
        raise DecodeError(f"expected timestamp string, got {type(value).__name__}")
    m = _ISO_RE.match(value.strip())
    if m is None:
        raise DecodeError(f"invalid timestamp: {value!r}")
    date, clock, frac, tz = m.groups()
    frac = ((frac or "") + "000000")[:6]
    if tz is None or tz == "Z":
        tz = "+00:00"
    elif len(tz) == 3:
        tz = f"{tz}:00"
    elif ":" not in tz:
        tz = f"{tz[:3]}:{tz[3:]}"
    try:
        dt = datetime.fromisoformat(f"{date}T{clock}.{frac}{tz}")
    except ValueError:
        raise DecodeError(f"invalid timestamp: {value!r}") from None
    return dt.astimezone(timezone.utc)


def format_time(dt: datetime) -> str:
    """RFC 3339, whole seconds, ``Z`` suffix. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def as_float(value: Any) -> float:
    """Numbers arrive either as JSON numbers or as decimal strings."""
    if isinstance(value, bool) or value is None:
        raise DecodeError(f"expected number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise DecodeError(f"expected numeric string, got {value!r}") from None
    raise DecodeError(f"expected number, got {type(value).__name__}")


def as_int(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise DecodeError(f"expected integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        return int(value)
    raise DecodeError(f"expected integer, got {value!r}")


def as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"expected string, got {type(value).__name__}")
    return value


def as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise DecodeError(f"expected boolean, got {value!r}")
    return value


def as_uuid(value: Any) -> UUID:
    if not isinstance(value, str):
        raise DecodeError(f"expected UUID string, got {type(value).__name__}")
    try:
        return UUID(value)
    except ValueError:
        raise DecodeError(f"invalid UUID: {value!r}") from None


def optional(parse: Callable[[Any], T], value: Any) -> Optional[T]:
    """Apply ``parse`` unless the field is absent or null."""
    if value is None:
        return None
    return parse(value)


def require(obj: Any, name: str) -> Any:
    """Required field lookup with a decode error naming the field."""
    if not isinstance(obj, dict):
        raise DecodeError(f"expected JSON object, got {type(obj).__name__}")
    try:
        return obj[name]
    except KeyError:
        raise DecodeError(f"missing field {name!r}") from None


def as_object(value: Any) -> dict:
    if not isinstance(value, dict):
        raise DecodeError(f"expected JSON object, got {type(value).__name__}")
    return value


def list_of(parse: Callable[[Any], T]) -> Callable[[Any], list]:
    """Lift an element parser to a parser for a JSON array of such elements."""
    def _parse(value: Any) -> list:
        if not isinstance(value, list):
            raise DecodeError(f"expected JSON array, got {type(value).__name__}")
        return [parse(item) for item in value]
    return _parse
