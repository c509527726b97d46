"""Public (unauthenticated) market data client."""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from gdax_core.config import DEFAULTS
from gdax_core.models import (
    Product, BookEntry, FullBookEntry, OrderBook, Tick, Trade, Candle,
    Stats, Currency, ServerTime,
)
from gdax_core.types import Level
from gdax_core.utils import format_time, list_of
from gdax_gateway.executor import PublicExecutor
from gdax_gateway.transport import Transport, AiohttpTransport


_AGGREGATED_BOOK = OrderBook.parser(BookEntry.from_json)
_FULL_BOOK = OrderBook.parser(FullBookEntry.from_json)


class PublicClient:
    """GET-only client for /products, /currencies and /time."""

    def __init__(self, transport: Optional[Transport] = None,
                 base_url: str = DEFAULTS["base_url"],
                 user_agent: str = DEFAULTS["user_agent"]):
        self.transport = transport or AiohttpTransport()
        self._executor = PublicExecutor(self.transport, base_url=base_url,
                                        user_agent=user_agent)

    @property
    def base_url(self) -> str:
        return self._executor.base_url

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "PublicClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- Products ---

    def get_products(self) -> List[Product]:
        return self._executor.get("/products", list_of(Product.from_json))

    def get_product_book(self, product: str, level: Level = Level.BEST) -> OrderBook:
        level = Level(level)
        parse = _FULL_BOOK if level == Level.FULL else _AGGREGATED_BOOK
        return self._executor.get(f"/products/{product}/book?level={level.value}", parse)

    def get_best_order(self, product: str) -> OrderBook[BookEntry]:
        return self.get_product_book(product, Level.BEST)

    def get_top50_orders(self, product: str) -> OrderBook[BookEntry]:
        return self.get_product_book(product, Level.TOP50)

    def get_full_book(self, product: str) -> OrderBook[FullBookEntry]:
        return self.get_product_book(product, Level.FULL)

    def get_product_ticker(self, product: str) -> Tick:
        return self._executor.get(f"/products/{product}/ticker", Tick.from_json)

    def get_trades(self, product: str) -> List[Trade]:
        return self._executor.get(f"/products/{product}/trades",
                                  list_of(Trade.from_json))

    def get_historic_rates(self, product: str, start: datetime, end: datetime,
                           granularity: int) -> List[Candle]:
        """Candles between ``start`` and ``end``; ``granularity`` in seconds."""
        path = (f"/products/{product}/candles"
                f"?start={format_time(start)}&end={format_time(end)}"
                f"&granularity={int(granularity)}")
        return self._executor.get(path, list_of(Candle.from_json))

    def get_24hr_stats(self, product: str) -> Stats:
        return self._executor.get(f"/products/{product}/stats", Stats.from_json)

    # --- Misc ---

    def get_currencies(self) -> List[Currency]:
        return self._executor.get("/currencies", list_of(Currency.from_json))

    def get_time(self) -> ServerTime:
        return self._executor.get("/time", ServerTime.from_json)
