"""BDD tests for bottle custody across membership, shipments and sales."""

import json

from custody.bottle import registry as bottle_registry
from custody.bottle.registration import RegisterBottle
from custody.errors import CustodyError
from custody.membership.registration import (
    RegisterCarrier,
    RegisterCustomer,
    RegisterManufacturer,
    RegisterRetailer,
)
from custody.sale.selling import SellToCustomer
from custody.shipment import ledger
from custody.shipment.registration import RegisterShipment
from custody.shipment.tracking import TrackShipment
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/bottle_custody.feature")

_REGISTRATIONS = {
    "Manufacturer": RegisterManufacturer,
    "Carrier": RegisterCarrier,
    "Retailer": RegisterRetailer,
    "Customer": RegisterCustomer,
}


def _ids(raw):
    return [i.strip() for i in raw.split(",") if i.strip()]


def _attempt(command, error):
    try:
        current_domain.process(command, asynchronous=False)
    except CustodyError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the registered members")
def registered_members(datatable):
    header, *rows = datatable
    for row in rows:
        record = dict(zip(header, row))
        command_cls = _REGISTRATIONS[record["role"]]
        current_domain.process(command_cls(account=record["account"]), asynchronous=False)


@given(parsers.cfparse('"{manufacturer}" has registered bottles "{bottle_ids}"'))
def registered_bottles(manufacturer, bottle_ids):
    for bottle_id in _ids(bottle_ids):
        current_domain.process(
            RegisterBottle(bottle_id=bottle_id, manufacturer=manufacturer),
            asynchronous=False,
        )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{manufacturer}" ships bottles "{bottle_ids}" as "{shipment_id}" via "{carrier}" to "{retailer}"'))
def ship(manufacturer, bottle_ids, shipment_id, carrier, retailer, error):
    command = RegisterShipment(
        shipment_id=shipment_id,
        manufacturer=manufacturer,
        carrier=carrier,
        retailer=retailer,
        bottle_ids=json.dumps(_ids(bottle_ids)),
    )
    _attempt(command, error)


@when(parsers.cfparse('"{carrier}" performs "{operation}" on "{shipment_id}"'))
def track(carrier, operation, shipment_id, error):
    _attempt(TrackShipment(shipment_id=shipment_id, carrier=carrier, operation=operation), error)


@when(parsers.cfparse('"{retailer}" sells bottles "{bottle_ids}" to "{customer}"'))
def sell(retailer, bottle_ids, customer, error):
    command = SellToCustomer(
        retailer=retailer,
        customer=customer,
        bottle_ids=json.dumps(_ids(bottle_ids)),
    )
    _attempt(command, error)


@when(parsers.cfparse('"{account}" registers as a "{role}"'))
def register_again(account, role, error):
    _attempt(_REGISTRATIONS[role](account=account), error)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{account}" owns bottles "{bottle_ids}"'))
def owns(account, bottle_ids):
    assert bottle_registry.bottles_owned_by(account) == _ids(bottle_ids)


@then(parsers.cfparse('bottle "{bottle_id}" belongs to shipment "{shipment_id}"'))
def belongs_to(bottle_id, shipment_id):
    assert bottle_registry.shipment_of(bottle_id) == shipment_id


@then(parsers.cfparse('shipment "{shipment_id}" does not exist'))
def shipment_missing(shipment_id):
    assert ledger.find_shipment(shipment_id) is None
