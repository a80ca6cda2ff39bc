"""Rejected-command errors for the custody domain.

Every precondition failure aborts the whole command. Each failure has its own
class so callers can tell them apart; all of them are Protean
``ValidationError`` subclasses, so the unit of work rolls back and the HTTP
layer answers 400 without extra wiring.
"""

from protean.exceptions import ValidationError


class CustodyError(ValidationError):
    """Base class for all rejected custody commands."""

    field = "command"
    message = "Command rejected"

    def __init__(self, message: str | None = None, **kwargs):
        super().__init__({self.field: [message or self.message]}, **kwargs)

    @property
    def code(self) -> str:
        return type(self).__name__


# ---------------------------------------------------------------------------
# Identity / role
# ---------------------------------------------------------------------------
class DuplicateMember(CustodyError):
    field = "account"
    message = "Account is already registered with a role"


class NotManufacturer(CustodyError):
    field = "manufacturer"
    message = "Account is not a registered manufacturer"


class NotCarrier(CustodyError):
    field = "carrier"
    message = "Account is not a registered carrier"


class NotRetailer(CustodyError):
    field = "retailer"
    message = "Account is not a registered retailer"


class NotCustomer(CustodyError):
    field = "customer"
    message = "Account is not a registered customer"


# ---------------------------------------------------------------------------
# Identifier validity
# ---------------------------------------------------------------------------
class IdMissing(CustodyError):
    field = "id"
    message = "Identifier is required"


class IdTooLong(CustodyError):
    field = "id"
    message = "Identifier exceeds 36 bytes"


class IdExists(CustodyError):
    field = "id"
    message = "Identifier is already in use"


class BottleNotExist(CustodyError):
    field = "bottle_id"
    message = "Bottle does not exist"


class ShipmentDoesNotExist(CustodyError):
    field = "shipment_id"
    message = "Shipment does not exist"


# ---------------------------------------------------------------------------
# Shipment composition
# ---------------------------------------------------------------------------
class ShipmentHasNoBottles(CustodyError):
    field = "bottle_ids"
    message = "Shipment must contain at least one bottle"


class ShipmentHasTooManyBottles(CustodyError):
    field = "bottle_ids"
    message = "Shipment cannot contain more than 5 bottles"


class BottleAlreadyShipped(CustodyError):
    field = "bottle_ids"
    message = "Bottle has already been assigned to a shipment"


# ---------------------------------------------------------------------------
# Shipment state
# ---------------------------------------------------------------------------
class ShipmentHasBeenDelivered(CustodyError):
    field = "status"
    message = "Shipment has already been delivered"


class ShipmentInTransit(CustodyError):
    field = "status"
    message = "Shipment is already in transit"


class NotShipmentCarrier(CustodyError):
    field = "carrier"
    message = "Account is not the carrier of this shipment"


# ---------------------------------------------------------------------------
# Ownership
# ---------------------------------------------------------------------------
class NotBottleOwner(CustodyError):
    field = "bottle_ids"
    message = "Account does not currently own the bottle"


class BottleNotShipped(CustodyError):
    field = "bottle_ids"
    message = "Bottle has not been part of any shipment"
