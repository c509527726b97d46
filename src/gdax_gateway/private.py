"""Private (authenticated) client for accounts and orders.

Market data calls are delegated to an embedded PublicClient that shares the
same transport, so ``private.get_products()`` works as well.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional
from uuid import UUID

from gdax_core.config import DEFAULTS
from gdax_core.models import (
    Account, LedgerEntry, Hold, OpenOrder, Order, order_id_from_json,
)
from gdax_core.types import Credentials, NewOrder, OrderId
from gdax_core.utils import as_uuid, list_of
from gdax_gateway.decoder import first
from gdax_gateway.executor import AuthenticatedExecutor
from gdax_gateway.orders import order_body
from gdax_gateway.public import PublicClient
from gdax_gateway.transport import Transport, AiohttpTransport

log = logging.getLogger(__name__)

_STATUS_TERMS = ("status=open", "status=pending", "status=active")


def order_status_query(open: bool, pending: bool, active: bool) -> str:
    """Join the enabled ``status=`` terms with ``&``, preserving order."""
    flags = (open, pending, active)
    return "&".join(term for flag, term in zip(flags, _STATUS_TERMS) if flag)


class PrivateClient:
    def __init__(self, credentials: Credentials,
                 transport: Optional[Transport] = None,
                 base_url: str = DEFAULTS["base_url"],
                 user_agent: str = DEFAULTS["user_agent"],
                 clock: Optional[Callable[[], int]] = None):
        self.transport = transport or AiohttpTransport()
        self.public = PublicClient(self.transport, base_url=base_url,
                                   user_agent=user_agent)
        self._executor = AuthenticatedExecutor(
            credentials, self.transport,
            base_url=base_url, user_agent=user_agent, clock=clock,
        )

    def __getattr__(self, name: str):
        # Only reached for attributes not defined here: fall through to the
        # public client (products, book, ticker, ...).
        if name.startswith("_") or name == "public":
            raise AttributeError(name)
        return getattr(self.public, name)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "PrivateClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- Accounts ---

    def get_accounts(self) -> List[Account]:
        return self._executor.get("/accounts", list_of(Account.from_json))

    def get_account(self, account_id: UUID) -> Account:
        return self._executor.get(f"/accounts/{account_id}", Account.from_json)

    def get_account_history(self, account_id: UUID) -> List[LedgerEntry]:
        return self._executor.get(f"/accounts/{account_id}/ledger",
                                  list_of(LedgerEntry.from_json))

    def get_account_holds(self, account_id: UUID) -> List[Hold]:
        return self._executor.get(f"/accounts/{account_id}/holds",
                                  list_of(Hold.from_json))

    # --- Orders ---

    def post_order(self, order: NewOrder) -> OrderId:
        order_id = self._executor.post("/orders", order_body(order), order_id_from_json)
        log.info("Order placed: %s -> %s", order, order_id)
        return order_id

    def cancel_order(self, order_id: OrderId) -> OrderId:
        """Cancel one order. An empty result array raises EmptyResultError."""
        cancelled = self._executor.delete(f"/orders/{order_id}", list_of(as_uuid))
        result = first(cancelled)
        log.info("Order cancelled: %s", result)
        return result

    def cancel_all_orders(self, product_id: Optional[str] = None) -> List[OrderId]:
        if product_id is not None:
            path = f"/orders?product_id={product_id}"
        else:
            path = "/orders"
        cancelled = self._executor.delete(path, list_of(as_uuid))
        log.info("Cancelled %d orders%s", len(cancelled),
                 f" for {product_id}" if product_id is not None else "")
        return cancelled

    def get_orders_with_status(self, open: bool, pending: bool,
                               active: bool) -> List[OpenOrder]:
        query = order_status_query(open, pending, active)
        path = f"/orders?{query}" if query else "/orders"
        return self._executor.get(path, list_of(OpenOrder.from_json))

    def get_orders(self) -> List[OpenOrder]:
        return self.get_orders_with_status(True, True, True)

    def get_order(self, order_id: OrderId) -> Order:
        return self._executor.get(f"/orders/{order_id}", Order.from_json)
