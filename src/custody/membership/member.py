"""Member aggregate — the single role an account holds in the supply chain.

Membership is kept as one account → role mapping rather than a list per
role, so "at most one role per account" is a single keyed lookup. Members
are never removed and their role never changes.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String

from custody.domain import custody
from custody.membership.events import (
    CarrierAdded,
    CustomerAdded,
    ManufacturerAdded,
    RetailerAdded,
)


class Role(Enum):
    MANUFACTURER = "Manufacturer"
    CARRIER = "Carrier"
    RETAILER = "Retailer"
    CUSTOMER = "Customer"


_ADDED_EVENTS = {
    Role.MANUFACTURER: ManufacturerAdded,
    Role.CARRIER: CarrierAdded,
    Role.RETAILER: RetailerAdded,
    Role.CUSTOMER: CustomerAdded,
}


@custody.aggregate
class Member:
    account = Identifier(identifier=True, required=True)
    role = String(required=True, max_length=20, choices=Role)
    registered_at = DateTime(required=True)

    @classmethod
    def register(cls, account: str, role: Role):
        """Create the membership record and announce the new role."""
        now = datetime.now(UTC)
        member = cls(account=account, role=role.value, registered_at=now)
        member.raise_(_ADDED_EVENTS[role](account=account, added_at=now))
        return member
