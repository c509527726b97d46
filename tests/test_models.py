"""Tests for response record parsing."""
from datetime import datetime, timezone
from uuid import UUID

import pytest

from gdax_core.errors import DecodeError
from gdax_core.models import (
    LedgerEntry, Hold, OpenOrder, Order, Product, BookEntry, FullBookEntry,
    OrderBook, Tick, Trade, Candle, Stats, Currency, ServerTime, order_id_from_json,
)
from gdax_core.types import Side, EntryType, HoldType
from gdax_core.utils import parse_time, format_time, as_float, as_int

OID = "d50ec984-77a8-460a-b958-66f114b0de9b"


class TestTimeHelpers:
    def test_parse_z_with_short_fraction(self):
        dt = parse_time("2016-12-08T20:02:28.53864Z")
        assert dt == datetime(2016, 12, 8, 20, 2, 28, 538640, tzinfo=timezone.utc)

    def test_parse_offset_and_space(self):
        dt = parse_time("2014-11-07 08:19:27.028459+00")
        assert dt.microsecond == 28459

    def test_parse_no_fraction(self):
        assert parse_time("2015-01-07T23:47:25Z").second == 25

    def test_parse_long_fraction_truncated(self):
        assert parse_time("2015-01-07T23:47:25.123456789Z").microsecond == 123456

    def test_parse_non_utc_offset(self):
        assert parse_time("2015-01-07T23:47:25+01:00").hour == 22

    @pytest.mark.parametrize("bad", ["yesterday", 12345, None])
    def test_parse_invalid(self, bad):
        with pytest.raises(DecodeError):
            parse_time(bad)

    def test_format_time(self):
        dt = datetime(2016, 6, 10, 0, 0, 0, 123, tzinfo=timezone.utc)
        assert format_time(dt) == "2016-06-10T00:00:00Z"

    def test_format_naive_is_utc(self):
        assert format_time(datetime(2016, 6, 11, 12)) == "2016-06-11T12:00:00Z"


class TestNumericCoercion:
    @pytest.mark.parametrize("raw,expected", [("1.5", 1.5), (2, 2.0), (0.25, 0.25)])
    def test_float(self, raw, expected):
        assert as_float(raw) == expected

    @pytest.mark.parametrize("bad", [True, None, "abc", [], {}])
    def test_float_rejects(self, bad):
        with pytest.raises(DecodeError):
            as_float(bad)

    @pytest.mark.parametrize("raw,expected", [(7, 7), ("74", 74), ("-12", -12), (3.0, 3)])
    def test_int(self, raw, expected):
        assert as_int(raw) == expected

    @pytest.mark.parametrize("bad", [False, "1.5", 1.5, None, "\u0663", "--1", ""])
    def test_int_rejects(self, bad):
        with pytest.raises(DecodeError):
            as_int(bad)


class TestLedgerAndHolds:
    def test_ledger_entry_match(self):
        entry = LedgerEntry.from_json({
            "id": "100", "created_at": "2014-11-07T08:19:27.028459Z",
            "amount": "0.001", "balance": "239.669", "type": "match",
            "details": {"order_id": OID, "trade_id": "74", "product_id": "BTC-USD"},
        })
        assert entry.id == 100
        assert entry.entry_type is EntryType.MATCH
        assert entry.details.order_id == UUID(OID)
        assert entry.details.trade_id == 74
        assert entry.details.transfer_id is None

    def test_ledger_entry_without_details(self):
        entry = LedgerEntry.from_json({
            "id": 1, "created_at": "2014-11-07T08:19:27Z",
            "amount": 1, "balance": 2, "type": "FEE",
        })
        assert entry.details is None
        assert entry.entry_type is EntryType.FEE

    def test_ledger_entry_unknown_type(self):
        with pytest.raises(DecodeError):
            LedgerEntry.from_json({
                "id": 1, "created_at": "2014-11-07T08:19:27Z",
                "amount": 1, "balance": 2, "type": "rebate",
            })

    def test_hold(self):
        hold = Hold.from_json({
            "id": "82dcd140-c3c7-4507-8de4-2c529cd1a28f",
            "account_id": "e0b3f39a-183d-453e-b754-0c13e5bab0b3",
            "created_at": "2014-11-06T10:34:47.123456Z",
            "updated_at": "2014-11-06T10:40:47.123456Z",
            "amount": "4.23", "type": "order", "ref": OID,
        })
        assert hold.hold_type is HoldType.ORDER
        assert hold.ref_id == UUID(OID)
        assert hold.amount == 4.23
        assert hold.updated_at > hold.created_at


ORDER = {
    "id": OID, "price": "0.10000000", "size": "0.01000000",
    "product_id": "BTC-USD", "side": "buy", "status": "open",
    "created_at": "2016-12-08T20:02:28.53864Z", "fill_fees": "0.0000000000000000",
    "filled_size": "0.00000000", "executed_value": "0.0000000000000000",
    "settled": False,
}


class TestOrders:
    def test_open_order(self):
        order = OpenOrder.from_json(ORDER)
        assert order.id == UUID(OID)
        assert order.side is Side.BUY
        assert order.price == 0.1
        assert order.settled is False

    def test_order_with_done_fields(self):
        order = Order.from_json(dict(ORDER, status="done", settled=True,
                                     done_reason="filled",
                                     done_at="2016-12-08T20:03:00Z"))
        assert order.done_reason == "filled"
        assert order.done_at.minute == 3

    def test_order_without_done_fields(self):
        order = Order.from_json(ORDER)
        assert order.done_reason is None and order.done_at is None

    def test_bad_side(self):
        with pytest.raises(DecodeError):
            OpenOrder.from_json(dict(ORDER, side="long"))

    def test_settled_must_be_bool(self):
        with pytest.raises(DecodeError):
            OpenOrder.from_json(dict(ORDER, settled="false"))

    def test_new_order_id(self):
        assert order_id_from_json({"id": OID, "status": "pending"}) == UUID(OID)


class TestMarketData:
    def test_product(self):
        product = Product.from_json({
            "id": "BTC-USD", "base_currency": "BTC", "quote_currency": "USD",
            "base_min_size": "0.001", "base_max_size": "10000.00",
            "quote_increment": "0.01", "status": "online", "margin_enabled": False,
            "min_market_funds": "10", "max_market_funds": "1000000",
            "post_only": False, "limit_only": False, "cancel_only": False,
        })
        assert product.base_min_size == 0.001
        assert product.status == "online"

    def test_aggregated_book_from_arrays(self):
        book = OrderBook.parser(BookEntry.from_json)({
            "sequence": 3, "bids": [["295.96", "4.39088265", 2]],
            "asks": [["295.97", "25.23542881", 12]],
        })
        assert book.sequence == 3
        assert book.bids[0] == BookEntry(price=295.96, size=4.39088265, num_orders=2)
        assert book.asks[0].num_orders == 12

    def test_full_book_from_arrays(self):
        book = OrderBook.parser(FullBookEntry.from_json)({
            "sequence": 3, "bids": [["295.96", "0.05088265", OID]], "asks": [],
        })
        assert book.bids[0].order_id == UUID(OID)
        assert book.asks == []

    def test_book_entry_wrong_width(self):
        with pytest.raises(DecodeError):
            BookEntry.from_json(["1", "2"])

    def test_book_entry_from_object(self):
        entry = BookEntry.from_json({"price": "1", "size": "2", "num_orders": 3})
        assert entry.size == 2.0

    def test_tick(self):
        tick = Tick.from_json({
            "trade_id": 4729088, "price": "333.99", "size": "0.193",
            "bid": "333.98", "ask": "333.99", "volume": "5957.11914015",
            "time": "2015-11-14T20:46:03.511254Z",
        })
        assert tick.trade_id == 4729088
        assert tick.volume == 5957.11914015

    def test_trade(self):
        trade = Trade.from_json({
            "time": "2014-11-07T22:19:28.578544Z", "trade_id": 74,
            "price": "10.00000000", "size": "0.01000000", "side": "Sell",
        })
        assert trade.side is Side.SELL

    def test_candle_from_array(self):
        candle = Candle.from_json([1415398768, 0.32, 4.2, 0.35, 4.2, 12.3])
        assert candle == Candle(time=1415398768, low=0.32, high=4.2,
                                open=0.35, close=4.2, volume=12.3)

    def test_candle_wrong_width(self):
        with pytest.raises(DecodeError):
            Candle.from_json([1415398768, 0.32])

    def test_stats(self):
        stats = Stats.from_json({
            "open": "34.19", "high": "95.70", "low": "7.06", "volume": "2.41",
            "last": "90.1", "volume_30day": "100.5",
        })
        assert stats.high == 95.7

    def test_currency(self):
        assert Currency.from_json({"id": "BTC", "name": "Bitcoin",
                                   "min_size": "0.00000001"}).min_size == 1e-8

    def test_server_time(self):
        t = ServerTime.from_json({"iso": "2015-01-07T23:47:25.201Z",
                                  "epoch": 1420674445.201})
        assert t.epoch == 1420674445.201
        assert t.iso.year == 2015
