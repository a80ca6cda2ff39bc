"""Shipment tracking — Pickup, Scan and Deliver, driven by the carrier.

Deliver is the second custody transfer: the shipment's bottles pass from the
carrier to the retailer in the same unit of work as the status change.
Scan is a read-only probe and never stages a write.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from custody.bottle import registry as bottle_registry
from custody.domain import custody
from custody.membership.registry import ensure_carrier
from custody.shared.identifiers import validate_identifier
from custody.shipment.ledger import get_shipment
from custody.shipment.shipment import Shipment, ShipmentOperation

logger = structlog.get_logger(__name__)


@custody.command(part_of="Shipment")
class TrackShipment:
    """Record a carrier operation against a shipment."""

    shipment_id = Text(sanitize=False)
    carrier = Identifier(required=True)
    operation = String(required=True, max_length=20, choices=ShipmentOperation)


@custody.command_handler(part_of=Shipment)
class TrackShipmentHandler:
    @handle(TrackShipment)
    def track_shipment(self, command):
        carrier = str(command.carrier)
        ensure_carrier(carrier)

        shipment_id = validate_identifier(command.shipment_id)
        shipment = get_shipment(shipment_id)
        operation = ShipmentOperation(command.operation)

        shipment.track(operation, carrier)
        if operation == ShipmentOperation.SCAN:
            logger.debug("Shipment scanned", shipment_id=shipment_id, carrier=carrier)
            return shipment.status

        if operation == ShipmentOperation.DELIVER:
            for bottle_id in shipment.bottle_ids:
                bottle_registry.transfer_ownership(bottle_id, str(shipment.retailer))

        current_domain.repository_for(Shipment).add(shipment)
        logger.info(
            "Shipment status updated",
            shipment_id=shipment_id,
            carrier=carrier,
            status=shipment.status,
        )
        return shipment.status
