"""Shipment aggregate — a batch of bottles moving from one manufacturer,
via one carrier, to one retailer.

State Machine:
    PENDING → IN_TRANSIT → DELIVERED
    PENDING → DELIVERED
    DELIVERED is terminal.

Only the shipment's own carrier may drive it. ``Scan`` runs every check a
real transition would, but changes nothing and raises no event.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from custody.domain import custody
from custody.errors import (
    NotShipmentCarrier,
    ShipmentHasBeenDelivered,
    ShipmentHasNoBottles,
    ShipmentHasTooManyBottles,
    ShipmentInTransit,
)
from custody.shipment.events import ShipmentRegistered, ShipmentStatusUpdated

MAX_BOTTLES = 5


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ShipmentStatus(Enum):
    PENDING = "Pending"
    IN_TRANSIT = "InTransit"
    DELIVERED = "Delivered"


class ShipmentOperation(Enum):
    PICKUP = "Pickup"
    SCAN = "Scan"
    DELIVER = "Deliver"


_VALID_TRANSITIONS = {
    ShipmentStatus.PENDING: {ShipmentStatus.IN_TRANSIT, ShipmentStatus.DELIVERED},
    ShipmentStatus.IN_TRANSIT: {ShipmentStatus.DELIVERED},
    ShipmentStatus.DELIVERED: set(),  # terminal
}

# Status each operation moves the shipment to; Scan moves nowhere.
_OPERATION_TARGETS = {
    ShipmentOperation.PICKUP: ShipmentStatus.IN_TRANSIT,
    ShipmentOperation.SCAN: None,
    ShipmentOperation.DELIVER: ShipmentStatus.DELIVERED,
}


def validate_bottle_count(bottle_ids: list[str]) -> None:
    if not bottle_ids:
        raise ShipmentHasNoBottles()
    if len(bottle_ids) > MAX_BOTTLES:
        raise ShipmentHasTooManyBottles(f"Shipment has {len(bottle_ids)} bottles; at most {MAX_BOTTLES} are allowed")


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@custody.aggregate
class Shipment:
    shipment_id = Identifier(identifier=True, required=True)
    manufacturer = Identifier(required=True)
    carrier = Identifier(required=True)
    retailer = Identifier(required=True)
    bottles = Text(required=True, sanitize=False)  # JSON list of bottle ids, in shipment order
    status = String(
        max_length=20,
        choices=ShipmentStatus,
        default=ShipmentStatus.PENDING.value,
    )
    registered_at = DateTime(required=True)
    delivered_at = DateTime()

    @invariant.post
    def bottle_count_must_stay_within_limits(self):
        count = len(self.bottle_ids)
        if count < 1 or count > MAX_BOTTLES:
            raise ValidationError({"bottles": [f"Shipment must hold between 1 and {MAX_BOTTLES} bottles"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def register(
        cls,
        shipment_id: str,
        manufacturer: str,
        carrier: str,
        retailer: str,
        bottle_ids: list[str],
    ):
        """Create a pending shipment. Bottle custody is handled by the caller."""
        validate_bottle_count(bottle_ids)

        now = datetime.now(UTC)
        shipment = cls(
            shipment_id=shipment_id,
            manufacturer=manufacturer,
            carrier=carrier,
            retailer=retailer,
            bottles=json.dumps(list(bottle_ids)),
            status=ShipmentStatus.PENDING.value,
            registered_at=now,
        )
        shipment.raise_(
            ShipmentRegistered(
                shipment_id=shipment_id,
                manufacturer=manufacturer,
                carrier=carrier,
                retailer=retailer,
                bottle_count=len(bottle_ids),
                registered_at=now,
            )
        )
        return shipment

    @property
    def bottle_ids(self) -> list[str]:
        if not self.bottles:
            return []
        return json.loads(self.bottles)

    # -------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------
    def assert_trackable(self, operation: ShipmentOperation, carrier: str) -> None:
        """Checks shared by every tracking operation, Scan included."""
        current = ShipmentStatus(self.status)
        if current == ShipmentStatus.DELIVERED:
            raise ShipmentHasBeenDelivered(f"Shipment '{self.shipment_id}' has already been delivered")

        target = _OPERATION_TARGETS[operation]
        if target is not None and target not in _VALID_TRANSITIONS[current]:
            raise ShipmentInTransit(f"Shipment '{self.shipment_id}' has already been picked up")

        if str(self.carrier) != str(carrier):
            raise NotShipmentCarrier(f"Account '{carrier}' does not carry shipment '{self.shipment_id}'")

    def track(self, operation: ShipmentOperation, carrier: str) -> None:
        if operation == ShipmentOperation.PICKUP:
            self.pickup(carrier)
        elif operation == ShipmentOperation.DELIVER:
            self.deliver(carrier)
        else:
            self.scan(carrier)

    def pickup(self, carrier: str) -> None:
        """The carrier collected the bottles from the manufacturer."""
        self.assert_trackable(ShipmentOperation.PICKUP, carrier)
        self.status = ShipmentStatus.IN_TRANSIT.value
        self._announce_status(carrier, datetime.now(UTC))

    def scan(self, carrier: str) -> None:
        self.assert_trackable(ShipmentOperation.SCAN, carrier)

    def deliver(self, carrier: str) -> None:
        """The carrier handed the bottles to the retailer."""
        self.assert_trackable(ShipmentOperation.DELIVER, carrier)
        now = datetime.now(UTC)
        self.status = ShipmentStatus.DELIVERED.value
        self.delivered_at = now
        self._announce_status(carrier, now)

    def _announce_status(self, carrier: str, at: datetime) -> None:
        self.raise_(
            ShipmentStatusUpdated(
                shipment_id=str(self.shipment_id),
                carrier=carrier,
                status=self.status,
                updated_at=at,
            )
        )
