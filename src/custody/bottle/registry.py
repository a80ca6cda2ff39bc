"""Bottle registry — lookup, ownership check and the custody transfer primitive.

These helpers are called by the shipment ledger inside its own unit of work.
None of them is exposed as a command: bottles change owner only through a
shipment or a sale.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from custody.bottle.bottle import Bottle
from custody.errors import BottleNotExist


def find_bottle(bottle_id: str | None) -> Bottle | None:
    if not bottle_id:
        return None
    try:
        return current_domain.repository_for(Bottle).get(bottle_id)
    except ObjectNotFoundError:
        return None


def check_present(bottle_id: str | None) -> Bottle:
    """Return the bottle, or raise BottleNotExist."""
    bottle = find_bottle(bottle_id)
    if bottle is None:
        raise BottleNotExist(f"Bottle '{bottle_id}' does not exist")
    return bottle


def check_owner(bottle_id: str, account: str) -> Bottle:
    """Return the bottle if ``account`` currently owns it, else raise NotBottleOwner."""
    bottle = check_present(bottle_id)
    bottle.assert_owned_by(account)
    return bottle


def transfer_ownership(bottle_id: str, new_owner: str) -> Bottle:
    """Hand the bottle to ``new_owner`` unconditionally."""
    bottle = check_present(bottle_id)
    bottle.transfer_to(new_owner)
    current_domain.repository_for(Bottle).add(bottle)
    return bottle


def shipment_of(bottle_id: str) -> str | None:
    """The shipment the bottle was bound to, if any."""
    bottle = check_present(bottle_id)
    return str(bottle.shipment_id) if bottle.shipment_id else None


def bottles_of_manufacturer(account: str) -> list[str]:
    return [str(b.bottle_id) for b in current_domain.repository_for(Bottle).bottles_of_manufacturer(account)]


def bottles_owned_by(account: str) -> list[str]:
    return [str(b.bottle_id) for b in current_domain.repository_for(Bottle).bottles_owned_by(account)]
