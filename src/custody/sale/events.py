"""Sale events."""

from protean.fields import DateTime, Identifier, Integer

from custody.domain import custody


@custody.event(part_of="Sale")
class BottlesSoldToCustomer:
    """A retailer sold a batch of bottles to a customer.

    One event per sale; individual bottles are not announced.
    """

    __version__ = 1

    sale_id = Identifier(required=True)
    customer = Identifier(required=True)
    retailer = Identifier(required=True)
    bottle_count = Integer(required=True)
    sold_at = DateTime(required=True)
