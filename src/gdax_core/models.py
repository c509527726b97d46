"""Typed records for exchange responses.

Each record has a ``from_json`` classmethod that takes the already-parsed JSON
value and raises ``DecodeError`` on any structural mismatch. Numeric fields accept
JSON numbers or decimal strings; the exchange uses both.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar
from uuid import UUID

from gdax_core.errors import DecodeError
from gdax_core.types import (
    Side, EntryType, HoldType,
    side_from_wire, entry_type_from_wire, hold_type_from_wire,
)
from gdax_core.utils import (
    as_float, as_int, as_str, as_bool, as_uuid, as_object,
    optional, parse_time, require, list_of,
)

E = TypeVar("E")


# ── Private: accounts ──────────────────────────────────────────────────

@dataclass(slots=True)
class Account:
    id: UUID
    balance: float
    hold: float
    available: float
    currency: str

    @classmethod
    def from_json(cls, d: Any) -> "Account":
        return cls(
            id=as_uuid(require(d, "id")),
            balance=as_float(require(d, "balance")),
            hold=as_float(require(d, "hold")),
            available=as_float(require(d, "available")),
            currency=as_str(require(d, "currency")),
        )


@dataclass(slots=True)
class EntryDetails:
    order_id: Optional[UUID] = None
    trade_id: Optional[int] = None
    product_id: Optional[str] = None
    transfer_id: Optional[UUID] = None
    transfer_type: Optional[str] = None

    @classmethod
    def from_json(cls, d: Any) -> "EntryDetails":
        d = as_object(d)
        return cls(
            order_id=optional(as_uuid, d.get("order_id")),
            trade_id=optional(as_int, d.get("trade_id")),
            product_id=optional(as_str, d.get("product_id")),
            transfer_id=optional(as_uuid, d.get("transfer_id")),
            transfer_type=optional(as_str, d.get("transfer_type")),
        )


@dataclass(slots=True)
class LedgerEntry:
    id: int
    created_at: datetime
    amount: float
    balance: float
    entry_type: EntryType
    details: Optional[EntryDetails] = None

    @classmethod
    def from_json(cls, d: Any) -> "LedgerEntry":
        return cls(
            id=as_int(require(d, "id")),
            created_at=parse_time(require(d, "created_at")),
            amount=as_float(require(d, "amount")),
            balance=as_float(require(d, "balance")),
            entry_type=entry_type_from_wire(require(d, "type")),
            details=optional(EntryDetails.from_json, d.get("details")),
        )


@dataclass(slots=True)
class Hold:
    id: UUID
    created_at: datetime
    amount: float
    hold_type: HoldType
    ref_id: UUID
    account_id: Optional[UUID] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, d: Any) -> "Hold":
        return cls(
            id=as_uuid(require(d, "id")),
            created_at=parse_time(require(d, "created_at")),
            amount=as_float(require(d, "amount")),
            hold_type=hold_type_from_wire(require(d, "type")),
            ref_id=as_uuid(require(d, "ref")),
            account_id=optional(as_uuid, d.get("account_id")),
            updated_at=optional(parse_time, d.get("updated_at")),
        )


# ── Private: orders ────────────────────────────────────────────────────

@dataclass(slots=True)
class OpenOrder:
    id: UUID
    size: float
    price: float
    product_id: str
    status: str
    filled_size: float
    executed_value: float
    fill_fees: float
    settled: bool
    side: Side
    created_at: datetime

    @classmethod
    def from_json(cls, d: Any) -> "OpenOrder":
        return cls(
            id=as_uuid(require(d, "id")),
            size=as_float(require(d, "size")),
            price=as_float(require(d, "price")),
            product_id=as_str(require(d, "product_id")),
            status=as_str(require(d, "status")),
            filled_size=as_float(require(d, "filled_size")),
            executed_value=as_float(require(d, "executed_value")),
            fill_fees=as_float(require(d, "fill_fees")),
            settled=as_bool(require(d, "settled")),
            side=side_from_wire(require(d, "side")),
            created_at=parse_time(require(d, "created_at")),
        )


@dataclass(slots=True)
class Order:
    id: UUID
    size: float
    price: float
    status: str
    settled: bool
    filled_size: float
    executed_value: float
    product_id: str
    fill_fees: float
    side: Side
    created_at: datetime
    done_reason: Optional[str] = None
    done_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, d: Any) -> "Order":
        return cls(
            id=as_uuid(require(d, "id")),
            size=as_float(require(d, "size")),
            price=as_float(require(d, "price")),
            status=as_str(require(d, "status")),
            settled=as_bool(require(d, "settled")),
            filled_size=as_float(require(d, "filled_size")),
            executed_value=as_float(require(d, "executed_value")),
            product_id=as_str(require(d, "product_id")),
            fill_fees=as_float(require(d, "fill_fees")),
            side=side_from_wire(require(d, "side")),
            created_at=parse_time(require(d, "created_at")),
            done_reason=optional(as_str, d.get("done_reason")),
            done_at=optional(parse_time, d.get("done_at")),
        )


def order_id_from_json(d: Any) -> UUID:
    """Body of a successful POST /orders: ``{"id": "...", ...}``."""
    return as_uuid(require(d, "id"))


# ── Public: products and market data ───────────────────────────────────

@dataclass(slots=True)
class Product:
    id: str
    base_currency: str
    quote_currency: str
    base_min_size: float
    base_max_size: float
    quote_increment: float
    status: str
    margin_enabled: bool
    min_market_funds: float
    max_market_funds: float
    post_only: bool
    limit_only: bool
    cancel_only: bool

    @classmethod
    def from_json(cls, d: Any) -> "Product":
        return cls(
            id=as_str(require(d, "id")),
            base_currency=as_str(require(d, "base_currency")),
            quote_currency=as_str(require(d, "quote_currency")),
            base_min_size=as_float(require(d, "base_min_size")),
            base_max_size=as_float(require(d, "base_max_size")),
            quote_increment=as_float(require(d, "quote_increment")),
            status=as_str(require(d, "status")),
            margin_enabled=as_bool(require(d, "margin_enabled")),
            min_market_funds=as_float(require(d, "min_market_funds")),
            max_market_funds=as_float(require(d, "max_market_funds")),
            post_only=as_bool(require(d, "post_only")),
            limit_only=as_bool(require(d, "limit_only")),
            cancel_only=as_bool(require(d, "cancel_only")),
        )


def _row(value: Any, width: int, what: str) -> list:
    if not isinstance(value, list) or len(value) != width:
        raise DecodeError(f"expected {what} array of {width} elements, got {value!r}")
    return value


@dataclass(slots=True)
class BookEntry:
    """Aggregated level: ``[price, size, num_orders]``."""
    price: float
    size: float
    num_orders: int

    @classmethod
    def from_json(cls, d: Any) -> "BookEntry":
        if isinstance(d, dict):
            d = [require(d, "price"), require(d, "size"), require(d, "num_orders")]
        price, size, num_orders = _row(d, 3, "book entry")
        return cls(price=as_float(price), size=as_float(size),
                   num_orders=as_int(num_orders))


@dataclass(slots=True)
class FullBookEntry:
    """Single resting order: ``[price, size, order_id]``."""
    price: float
    size: float
    order_id: UUID

    @classmethod
    def from_json(cls, d: Any) -> "FullBookEntry":
        if isinstance(d, dict):
            d = [require(d, "price"), require(d, "size"), require(d, "order_id")]
        price, size, order_id = _row(d, 3, "book entry")
        return cls(price=as_float(price), size=as_float(size),
                   order_id=as_uuid(order_id))


@dataclass(slots=True)
class OrderBook(Generic[E]):
    """Flat snapshot; not maintained incrementally."""
    sequence: int
    bids: List[E]
    asks: List[E]

    @classmethod
    def parser(cls, entry_parser):
        """Build a ``from_json`` for a book whose rows are parsed by ``entry_parser``."""
        rows = list_of(entry_parser)

        def _parse(d: Any) -> "OrderBook":
            return cls(
                sequence=as_int(require(d, "sequence")),
                bids=rows(require(d, "bids")),
                asks=rows(require(d, "asks")),
            )
        return _parse


@dataclass(slots=True)
class Tick:
    trade_id: int
    price: float
    size: float
    bid: float
    ask: float
    volume: float
    time: datetime

    @classmethod
    def from_json(cls, d: Any) -> "Tick":
        return cls(
            trade_id=as_int(require(d, "trade_id")),
            price=as_float(require(d, "price")),
            size=as_float(require(d, "size")),
            bid=as_float(require(d, "bid")),
            ask=as_float(require(d, "ask")),
            volume=as_float(require(d, "volume")),
            time=parse_time(require(d, "time")),
        )


@dataclass(slots=True)
class Trade:
    time: datetime
    trade_id: int
    price: float
    size: float
    side: Side

    @classmethod
    def from_json(cls, d: Any) -> "Trade":
        return cls(
            time=parse_time(require(d, "time")),
            trade_id=as_int(require(d, "trade_id")),
            price=as_float(require(d, "price")),
            size=as_float(require(d, "size")),
            side=side_from_wire(require(d, "side")),
        )


_CANDLE_FIELDS = ("time", "low", "high", "open", "close", "volume")


@dataclass(slots=True)
class Candle:
    """Historic rate bucket: ``[time, low, high, open, close, volume]``."""
    time: int
    low: float
    high: float
    open: float
    close: float
    volume: float

    @classmethod
    def from_json(cls, d: Any) -> "Candle":
        if isinstance(d, dict):
            d = [require(d, name) for name in _CANDLE_FIELDS]
        ts, low, high, open_, close, volume = _row(d, 6, "candle")
        return cls(
            time=as_int(ts),
            low=as_float(low),
            high=as_float(high),
            open=as_float(open_),
            close=as_float(close),
            volume=as_float(volume),
        )


@dataclass(slots=True)
class Stats:
    open: float
    high: float
    low: float
    volume: float
    last: float
    volume_30day: float

    @classmethod
    def from_json(cls, d: Any) -> "Stats":
        return cls(
            open=as_float(require(d, "open")),
            high=as_float(require(d, "high")),
            low=as_float(require(d, "low")),
            volume=as_float(require(d, "volume")),
            last=as_float(require(d, "last")),
            volume_30day=as_float(require(d, "volume_30day")),
        )


@dataclass(slots=True)
class Currency:
    id: str
    name: str
    min_size: float

    @classmethod
    def from_json(cls, d: Any) -> "Currency":
        return cls(
            id=as_str(require(d, "id")),
            name=as_str(require(d, "name")),
            min_size=as_float(require(d, "min_size")),
        )


@dataclass(slots=True)
class ServerTime:
    iso: datetime
    epoch: float

    @classmethod
    def from_json(cls, d: Any) -> "ServerTime":
        return cls(
            iso=parse_time(require(d, "iso")),
            epoch=as_float(require(d, "epoch")),
        )
