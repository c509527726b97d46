from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union
from uuid import UUID

from gdax_core.errors import DecodeError


class Side(IntEnum):
    BUY = 1
    SELL = -1


class EntryType(Enum):
    FEE = 1
    MATCH = 2
    TRANSFER = 3


class HoldType(Enum):
    ORDER = 1
    TRANSFER = 2


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Level(IntEnum):
    """Order book aggregation level, sent as ``?level=``."""
    BEST = 1    # top bid/ask only
    TOP50 = 2   # 50 aggregated levels per side
    FULL = 3    # every resting order


OrderId = UUID


# ── Wire vocabulary ────────────────────────────────────────────────────
# The exchange spells these in lowercase and the enum names are not the
# wire names, so both directions go through explicit tables.

_SIDE_TO_WIRE = {Side.BUY: "buy", Side.SELL: "sell"}
_SIDE_FROM_WIRE = {"buy": Side.BUY, "sell": Side.SELL}

_ENTRY_TYPE_FROM_WIRE = {
    "fee": EntryType.FEE,
    "match": EntryType.MATCH,
    "transfer": EntryType.TRANSFER,
}

_HOLD_TYPE_FROM_WIRE = {
    "order": HoldType.ORDER,
    "transfer": HoldType.TRANSFER,
}


def _from_wire(table: dict, value, what: str):
    if not isinstance(value, str):
        raise DecodeError(f"Invalid {what}: expected string, got {type(value).__name__}")
    try:
        return table[value.lower()]
    except KeyError:
        raise DecodeError(f"Invalid {what}: {value!r}") from None


def side_to_wire(side: Side) -> str:
    return _SIDE_TO_WIRE[side]


def side_from_wire(value) -> Side:
    """Case-insensitive: "buy", "BUY" and "Buy" all decode to Side.BUY."""
    return _from_wire(_SIDE_FROM_WIRE, value, "side")


def entry_type_from_wire(value) -> EntryType:
    return _from_wire(_ENTRY_TYPE_FROM_WIRE, value, "entry type")


def hold_type_from_wire(value) -> HoldType:
    return _from_wire(_HOLD_TYPE_FROM_WIRE, value, "hold type")


# ── Credentials ────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Credentials:
    key: str
    secret: str         # base64
    passphrase: str

    def __repr__(self) -> str:
        return f"Credentials(key={self.key!r}, secret=***, passphrase=***)"


# ── New orders ─────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Size:
    """Base-asset quantity."""
    amount: float


@dataclass(frozen=True, slots=True)
class Funds:
    """Quote-asset amount to spend."""
    amount: float


SizeOrFunds = Union[Size, Funds]


@dataclass(frozen=True, slots=True)
class Limit:
    side: Side
    product_id: str
    price: float
    size: float


@dataclass(frozen=True, slots=True)
class Market:
    side: Side
    product_id: str
    size_or_funds: SizeOrFunds


@dataclass(frozen=True, slots=True)
class Stop:
    side: Side
    product_id: str
    price: float
    size_or_funds: SizeOrFunds


NewOrder = Union[Limit, Market, Stop]


def limit_order(side: Side, product_id: str, size: float, price: float) -> Limit:
    return Limit(side=side, product_id=product_id, price=price, size=size)


def market_order(side: Side, product_id: str, size_or_funds: SizeOrFunds) -> Market:
    return Market(side=side, product_id=product_id, size_or_funds=size_or_funds)


def stop_order(side: Side, product_id: str, size_or_funds: SizeOrFunds,
               price: float) -> Stop:
    return Stop(side=side, product_id=product_id, price=price,
                size_or_funds=size_or_funds)
