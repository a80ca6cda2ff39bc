"""Repository for the Bottle aggregate."""

from custody.bottle.bottle import Bottle
from custody.domain import custody


@custody.repository(part_of=Bottle)
class BottleRepository:
    def bottles_of_manufacturer(self, account: str) -> list[Bottle]:
        """Bottles registered by ``account``, in registration order."""
        bottles = self._dao.query.filter(manufacturer=account).all().items
        return sorted(bottles, key=lambda b: b.registered_at)

    def bottles_owned_by(self, account: str) -> list[Bottle]:
        """Bottles currently in the custody of ``account``."""
        bottles = self._dao.query.filter(owner=account).all().items
        return sorted(bottles, key=lambda b: b.registered_at)
