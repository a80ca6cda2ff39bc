"""Repository for the Shipment aggregate."""

from custody.domain import custody
from custody.shipment.shipment import Shipment


@custody.repository(part_of=Shipment)
class ShipmentRepository:
    """Per-party shipment listings, each in registration order."""

    def shipments_of_manufacturer(self, account: str) -> list[Shipment]:
        return self._ordered(manufacturer=account)

    def shipments_of_carrier(self, account: str) -> list[Shipment]:
        return self._ordered(carrier=account)

    def shipments_of_retailer(self, account: str) -> list[Shipment]:
        return self._ordered(retailer=account)

    def _ordered(self, **criteria) -> list[Shipment]:
        shipments = self._dao.query.filter(**criteria).all().items
        return sorted(shipments, key=lambda s: s.registered_at)
