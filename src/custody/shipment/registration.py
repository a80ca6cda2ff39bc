"""Shipment registration — command and handler.

Registering a shipment is the first custody transfer: every listed bottle is
bound to the shipment for good and handed from the manufacturer to the
carrier. All checks run before anything is staged, in this order:

    1. shipment id well-formed and unused
    2. manufacturer, carrier and retailer hold their roles
    3. one to five bottles
    4. each bottle exists, is held by the manufacturer and was never shipped
"""

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from custody.bottle import registry as bottle_registry
from custody.bottle.bottle import Bottle
from custody.domain import custody
from custody.errors import BottleAlreadyShipped, IdExists
from custody.membership.registry import ensure_carrier, ensure_manufacturer, ensure_retailer
from custody.shared.identifiers import parse_id_list, validate_identifier
from custody.shipment.ledger import find_shipment
from custody.shipment.shipment import Shipment, validate_bottle_count

logger = structlog.get_logger(__name__)


@custody.command(part_of="Shipment")
class RegisterShipment:
    """Ship a batch of the manufacturer's bottles to a retailer via a carrier."""

    shipment_id = Text(sanitize=False)
    manufacturer = Identifier(required=True)
    carrier = Identifier()
    retailer = Identifier()
    bottle_ids = Text(sanitize=False)  # JSON list of bottle ids


@custody.command_handler(part_of=Shipment)
class RegisterShipmentHandler:
    @handle(RegisterShipment)
    def register_shipment(self, command):
        shipment_id = validate_identifier(command.shipment_id)
        if find_shipment(shipment_id) is not None:
            raise IdExists(f"Shipment '{shipment_id}' is already registered")

        manufacturer = str(command.manufacturer)
        carrier = str(command.carrier) if command.carrier else None
        retailer = str(command.retailer) if command.retailer else None
        ensure_manufacturer(manufacturer)
        ensure_carrier(carrier)
        ensure_retailer(retailer)

        bottle_ids = parse_id_list(command.bottle_ids)
        validate_bottle_count(bottle_ids)

        bottles: list[Bottle] = []
        seen: set[str] = set()
        for bottle_id in bottle_ids:
            bottle = bottle_registry.check_owner(bottle_id, manufacturer)
            if bottle_id in seen:
                raise BottleAlreadyShipped(f"Bottle '{bottle_id}' is listed more than once")
            bottle.assert_not_shipped()
            seen.add(bottle_id)
            bottles.append(bottle)

        shipment = Shipment.register(
            shipment_id=shipment_id,
            manufacturer=manufacturer,
            carrier=carrier,
            retailer=retailer,
            bottle_ids=bottle_ids,
        )

        bottle_repo = current_domain.repository_for(Bottle)
        for bottle in bottles:
            bottle.assign_to_shipment(shipment_id)
            bottle.transfer_to(carrier)
            bottle_repo.add(bottle)
        current_domain.repository_for(Shipment).add(shipment)

        logger.info(
            "Shipment registered",
            shipment_id=shipment_id,
            manufacturer=manufacturer,
            carrier=carrier,
            retailer=retailer,
            bottle_count=len(bottle_ids),
        )
        return shipment_id
