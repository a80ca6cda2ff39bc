"""Bottle events."""

from protean.fields import DateTime, Identifier

from custody.domain import custody


@custody.event(part_of="Bottle")
class BottleRegistered:
    """A manufacturer registered a new bottle, which it now owns."""

    __version__ = 1

    account = Identifier(required=True)
    bottle_id = Identifier(required=True)
    registered_at = DateTime(required=True)
