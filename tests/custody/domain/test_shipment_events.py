"""Tests for events raised by the Shipment aggregate."""

import pytest
from custody.errors import ShipmentInTransit
from custody.shipment.events import ShipmentRegistered, ShipmentStatusUpdated
from custody.shipment.shipment import Shipment, ShipmentStatus


def _make_shipment():
    shipment = Shipment.register(
        shipment_id="s-1",
        manufacturer="acct-m",
        carrier="acct-c",
        retailer="acct-r",
        bottle_ids=["b-1", "b-2", "b-3"],
    )
    return shipment


class TestShipmentRegistered:
    def test_raised_on_register(self):
        shipment = _make_shipment()
        assert len(shipment._events) == 1
        event = shipment._events[0]
        assert isinstance(event, ShipmentRegistered)
        assert event.shipment_id == "s-1"
        assert event.manufacturer == "acct-m"
        assert event.carrier == "acct-c"
        assert event.retailer == "acct-r"
        assert event.bottle_count == 3


class TestShipmentStatusUpdated:
    def test_pickup_raises_in_transit(self):
        shipment = _make_shipment()
        shipment._events.clear()
        shipment.pickup("acct-c")
        assert len(shipment._events) == 1
        event = shipment._events[0]
        assert isinstance(event, ShipmentStatusUpdated)
        assert event.status == ShipmentStatus.IN_TRANSIT.value
        assert event.carrier == "acct-c"

    def test_deliver_raises_delivered(self):
        shipment = _make_shipment()
        shipment._events.clear()
        shipment.deliver("acct-c")
        assert shipment._events[0].status == ShipmentStatus.DELIVERED.value
        assert shipment._events[0].updated_at == shipment.delivered_at

    def test_scan_raises_nothing(self):
        shipment = _make_shipment()
        shipment._events.clear()
        shipment.scan("acct-c")
        assert shipment._events == []

    def test_rejected_operation_raises_nothing(self):
        shipment = _make_shipment()
        shipment.pickup("acct-c")
        shipment._events.clear()
        with pytest.raises(ShipmentInTransit):
            shipment.pickup("acct-c")
        assert shipment._events == []
