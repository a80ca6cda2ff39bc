"""Membership events — one per role, raised when an account joins it."""

from protean.fields import DateTime, Identifier

from custody.domain import custody


@custody.event(part_of="Member")
class ManufacturerAdded:
    """An account was registered as a manufacturer."""

    __version__ = 1

    account = Identifier(required=True)
    added_at = DateTime(required=True)


@custody.event(part_of="Member")
class CarrierAdded:
    """An account was registered as a carrier."""

    __version__ = 1

    account = Identifier(required=True)
    added_at = DateTime(required=True)


@custody.event(part_of="Member")
class RetailerAdded:
    """An account was registered as a retailer."""

    __version__ = 1

    account = Identifier(required=True)
    added_at = DateTime(required=True)


@custody.event(part_of="Member")
class CustomerAdded:
    """An account was registered as a customer."""

    __version__ = 1

    account = Identifier(required=True)
    added_at = DateTime(required=True)
