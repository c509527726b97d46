"""Console entry point for the gdax package.

After ``pip install .`` the ``gdax`` command is available::

    gdax products
    gdax book BTC-USD --level 2
    gdax candles BTC-USD --start 2016-06-10T00:00:00 --end 2016-06-11T12:00:00 --granularity 900
    gdax accounts                  # needs CB_KEY / CB_SECRET / CB_PASSPHRASE
    gdax orders --open --pending
    gdax cancel 2a4b1c9e-...

Results are printed as JSON.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from uuid import UUID

import orjson

from gdax_core.config import load_config, load_credentials
from gdax_core.errors import GdaxError
from gdax_core.types import Side, Level, Size, Funds, limit_order, market_order, side_to_wire
from gdax_gateway.factory import create_private, create_public

log = logging.getLogger("gdax")

PUBLIC_COMMANDS = {"products", "book", "ticker", "trades", "candles", "stats",
                   "currencies", "time"}


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if isinstance(value, Side):
        return side_to_wire(value)
    if isinstance(value, Enum):
        return value.name.lower()
    return value


def dump(value: Any) -> str:
    return orjson.dumps(_jsonable(value), option=orjson.OPT_INDENT_2).decode()


def _datetime(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 datetime: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gdax", description="GDAX REST client")
    parser.add_argument("--config", help="YAML config file (default: $GDAX_CONFIG)")
    parser.add_argument("--log-level", default=None, help="Override config log_level")
    sub = parser.add_subparsers(dest="command", required=True)

    # Public
    sub.add_parser("products", help="List products")
    p = sub.add_parser("book", help="Order book snapshot")
    p.add_argument("product")
    p.add_argument("--level", type=int, choices=[1, 2, 3], default=1)
    for name in ("ticker", "trades", "stats"):
        sub.add_parser(name, help=f"Product {name}").add_argument("product")
    p = sub.add_parser("candles", help="Historic rates")
    p.add_argument("product")
    p.add_argument("--start", type=_datetime, required=True)
    p.add_argument("--end", type=_datetime, required=True)
    p.add_argument("--granularity", type=int, default=60, help="Bucket size in seconds")
    sub.add_parser("currencies", help="List currencies")
    sub.add_parser("time", help="Exchange server time")

    # Private
    sub.add_parser("accounts", help="List accounts")
    for name in ("account", "ledger", "holds"):
        sub.add_parser(name, help=f"Account {name}").add_argument("account_id", type=UUID)
    p = sub.add_parser("orders", help="List orders (all statuses if no flag given)")
    p.add_argument("--open", action="store_true")
    p.add_argument("--pending", action="store_true")
    p.add_argument("--active", action="store_true")
    sub.add_parser("order", help="Get one order").add_argument("order_id", type=UUID)
    sub.add_parser("cancel", help="Cancel one order").add_argument("order_id", type=UUID)
    p = sub.add_parser("cancel-all", help="Cancel all orders")
    p.add_argument("--product", default=None)
    for name in ("buy", "sell"):
        p = sub.add_parser(name, help=f"Place a {name} order")
        p.add_argument("product")
        p.add_argument("--size", type=float, default=None)
        p.add_argument("--funds", type=float, default=None,
                       help="Market order sized by quote amount")
        p.add_argument("--price", type=float, default=None,
                       help="Limit price; omit for a market order")
    return parser


def _run_public(client, args: argparse.Namespace) -> Any:
    cmd = args.command
    if cmd == "products":
        return client.get_products()
    if cmd == "book":
        return client.get_product_book(args.product, Level(args.level))
    if cmd == "ticker":
        return client.get_product_ticker(args.product)
    if cmd == "trades":
        return client.get_trades(args.product)
    if cmd == "candles":
        return client.get_historic_rates(args.product, args.start, args.end,
                                         args.granularity)
    if cmd == "stats":
        return client.get_24hr_stats(args.product)
    if cmd == "currencies":
        return client.get_currencies()
    if cmd == "time":
        return client.get_time()
    raise ValueError(f"Unknown command: {cmd}")


def _new_order(args: argparse.Namespace):
    side = Side.BUY if args.command == "buy" else Side.SELL
    if args.price is not None:
        if args.size is None:
            raise ValueError("Limit orders need --size")
        return limit_order(side, args.product, args.size, args.price)
    if (args.size is None) == (args.funds is None):
        raise ValueError("Market orders need exactly one of --size / --funds")
    amount = Size(args.size) if args.size is not None else Funds(args.funds)
    return market_order(side, args.product, amount)


def _run_private(client, args: argparse.Namespace) -> Any:
    cmd = args.command
    if cmd == "accounts":
        return client.get_accounts()
    if cmd == "account":
        return client.get_account(args.account_id)
    if cmd == "ledger":
        return client.get_account_history(args.account_id)
    if cmd == "holds":
        return client.get_account_holds(args.account_id)
    if cmd == "orders":
        if not (args.open or args.pending or args.active):
            return client.get_orders()
        return client.get_orders_with_status(args.open, args.pending, args.active)
    if cmd == "order":
        return client.get_order(args.order_id)
    if cmd == "cancel":
        return str(client.cancel_order(args.order_id))
    if cmd == "cancel-all":
        return [str(i) for i in client.cancel_all_orders(args.product)]
    if cmd in ("buy", "sell"):
        return str(client.post_order(_new_order(args)))
    raise ValueError(f"Unknown command: {cmd}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.get("log_level", "INFO"))
        if args.command in PUBLIC_COMMANDS:
            with create_public(config) as client:
                result = _run_public(client, args)
        else:
            with create_private(load_credentials(), config) as client:
                result = _run_private(client, args)
    except (GdaxError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(dump(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
