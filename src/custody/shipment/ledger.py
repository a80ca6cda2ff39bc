"""Shipment ledger lookups used by the tracking commands and the API."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from custody.errors import ShipmentDoesNotExist
from custody.shipment.shipment import Shipment


def find_shipment(shipment_id: str | None) -> Shipment | None:
    if not shipment_id:
        return None
    try:
        return current_domain.repository_for(Shipment).get(shipment_id)
    except ObjectNotFoundError:
        return None


def get_shipment(shipment_id: str) -> Shipment:
    """Return the shipment, or raise ShipmentDoesNotExist."""
    shipment = find_shipment(shipment_id)
    if shipment is None:
        raise ShipmentDoesNotExist(f"Shipment '{shipment_id}' does not exist")
    return shipment


def shipments_of_manufacturer(account: str) -> list[str]:
    repo = current_domain.repository_for(Shipment)
    return [str(s.shipment_id) for s in repo.shipments_of_manufacturer(account)]


def shipments_of_carrier(account: str) -> list[str]:
    repo = current_domain.repository_for(Shipment)
    return [str(s.shipment_id) for s in repo.shipments_of_carrier(account)]


def shipments_of_retailer(account: str) -> list[str]:
    repo = current_domain.repository_for(Shipment)
    return [str(s.shipment_id) for s in repo.shipments_of_retailer(account)]
