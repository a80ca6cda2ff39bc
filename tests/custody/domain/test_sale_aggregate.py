"""Tests for the Sale aggregate."""

from custody.sale.events import BottlesSoldToCustomer
from custody.sale.sale import Sale


class TestSaleRecord:
    def test_records_parties_and_bottles(self):
        sale = Sale.record(retailer="acct-r", customer="acct-cu", bottle_ids=["b-1", "b-2"])
        assert sale.retailer == "acct-r"
        assert sale.customer == "acct-cu"
        assert sale.bottle_ids == ["b-1", "b-2"]
        assert sale.sold_at is not None

    def test_raises_one_batched_event(self):
        sale = Sale.record(retailer="acct-r", customer="acct-cu", bottle_ids=["b-1", "b-2"])
        assert len(sale._events) == 1
        event = sale._events[0]
        assert isinstance(event, BottlesSoldToCustomer)
        assert event.sale_id == str(sale.id)
        assert event.bottle_count == 2
        assert event.customer == "acct-cu"
        assert event.retailer == "acct-r"

    def test_empty_sale_is_recorded(self):
        sale = Sale.record(retailer="acct-r", customer="acct-cu", bottle_ids=[])
        assert sale.bottle_ids == []
        assert sale._events[0].bottle_count == 0
