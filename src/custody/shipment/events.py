"""Shipment events — facts about the shipment lifecycle."""

from protean.fields import DateTime, Identifier, Integer, String

from custody.domain import custody


@custody.event(part_of="Shipment")
class ShipmentRegistered:
    """A manufacturer handed a batch of bottles to a carrier for a retailer."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    manufacturer = Identifier(required=True)
    carrier = Identifier(required=True)
    retailer = Identifier(required=True)
    bottle_count = Integer(required=True)
    registered_at = DateTime(required=True)


@custody.event(part_of="Shipment")
class ShipmentStatusUpdated:
    """The carrier moved the shipment to a new status."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    carrier = Identifier(required=True)
    status = String(required=True)
    updated_at = DateTime(required=True)
