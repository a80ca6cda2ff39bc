"""Bottle aggregate — a uniquely identified bottle and its current custodian.

Custody changes hands at exactly three points, all driven from the shipment
ledger: shipment registration (manufacturer → carrier), delivery
(carrier → retailer) and sale (retailer → customer). ``transfer_to`` is the
only mutator of ``owner`` and performs no membership checks of its own.

``shipment_id`` is the bottle → shipment index. It is written once, when the
bottle joins a shipment, and never cleared, which retires the bottle from
any further shipment.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String

from custody.domain import custody
from custody.bottle.events import BottleRegistered
from custody.errors import BottleAlreadyShipped, BottleNotShipped, NotBottleOwner


class BottleStatus(Enum):
    MANUFACTURED = "Manufactured"
    SHIPMENT_REGISTERED = "ShipmentRegistered"
    IN_TRANSIT = "InTransit"
    DELIVERED = "Delivered"
    SOLD_TO_CUSTOMER = "SoldToCustomer"


@custody.aggregate
class Bottle:
    bottle_id = Identifier(identifier=True, required=True)
    manufacturer = Identifier(required=True)
    owner = Identifier(required=True)
    status = String(
        max_length=20,
        choices=BottleStatus,
        default=BottleStatus.MANUFACTURED.value,
    )
    shipment_id = Identifier()
    registered_at = DateTime(required=True)

    @classmethod
    def register(cls, bottle_id: str, manufacturer: str):
        """Create a bottle owned by the manufacturer that registered it."""
        now = datetime.now(UTC)
        bottle = cls(
            bottle_id=bottle_id,
            manufacturer=manufacturer,
            owner=manufacturer,
            status=BottleStatus.MANUFACTURED.value,
            registered_at=now,
        )
        bottle.raise_(
            BottleRegistered(
                account=manufacturer,
                bottle_id=bottle_id,
                registered_at=now,
            )
        )
        return bottle

    @property
    def is_shipped(self) -> bool:
        return bool(self.shipment_id)

    def is_owned_by(self, account: str) -> bool:
        return str(self.owner) == str(account)

    def assert_owned_by(self, account: str) -> None:
        if not self.is_owned_by(account):
            raise NotBottleOwner(f"Account '{account}' does not own bottle '{self.bottle_id}'")

    def assert_shipped(self) -> None:
        if not self.is_shipped:
            raise BottleNotShipped(f"Bottle '{self.bottle_id}' has never been shipped")

    def assert_not_shipped(self) -> None:
        if self.is_shipped:
            raise BottleAlreadyShipped(f"Bottle '{self.bottle_id}' already belongs to shipment '{self.shipment_id}'")

    def assign_to_shipment(self, shipment_id: str) -> None:
        """Bind the bottle to ``shipment_id`` permanently."""
        self.assert_not_shipped()
        self.shipment_id = shipment_id

    def transfer_to(self, new_owner: str) -> None:
        self.owner = new_owner
