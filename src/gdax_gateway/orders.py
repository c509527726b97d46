"""Wire encoding for new orders.

Each (order kind, size-or-funds) combination has its own flat JSON layout. The
inactive one of ``size``/``funds`` is left out of the object, never sent as null.
"""
from __future__ import annotations
from typing import Any, Dict

import orjson

from gdax_core.types import (
    Limit, Market, Stop, Size, Funds, NewOrder, SizeOrFunds, side_to_wire,
)


def _size_or_funds(value: SizeOrFunds) -> Dict[str, float]:
    if isinstance(value, Size):
        return {"size": value.amount}
    if isinstance(value, Funds):
        return {"funds": value.amount}
    raise TypeError(f"Expected Size or Funds, got {type(value).__name__}")


def encode_order(order: NewOrder) -> Dict[str, Any]:
    if isinstance(order, Limit):
        return {
            "type": "limit",
            "side": side_to_wire(order.side),
            "product_id": order.product_id,
            "price": order.price,
            "size": order.size,
        }
    if isinstance(order, Market):
        payload: Dict[str, Any] = {
            "type": "market",
            "side": side_to_wire(order.side),
            "product_id": order.product_id,
        }
        payload.update(_size_or_funds(order.size_or_funds))
        return payload
    if isinstance(order, Stop):
        payload = {
            "type": "stop",
            "side": side_to_wire(order.side),
            "product_id": order.product_id,
            "price": order.price,
        }
        payload.update(_size_or_funds(order.size_or_funds))
        return payload
    raise TypeError(f"Expected Limit, Market or Stop, got {type(order).__name__}")


def order_body(order: NewOrder) -> str:
    """Request body exactly as it is signed and sent."""
    return orjson.dumps(encode_order(order)).decode()
