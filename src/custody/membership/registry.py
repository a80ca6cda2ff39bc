"""Membership registry — registration and the role checks every command uses."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from custody.errors import (
    DuplicateMember,
    NotCarrier,
    NotCustomer,
    NotManufacturer,
    NotRetailer,
)
from custody.membership.member import Member, Role

_ROLE_ERRORS = {
    Role.MANUFACTURER: NotManufacturer,
    Role.CARRIER: NotCarrier,
    Role.RETAILER: NotRetailer,
    Role.CUSTOMER: NotCustomer,
}


def role_of(account: str | None) -> Role | None:
    """The role ``account`` holds, or None when it never registered."""
    if not account:
        return None
    try:
        member = current_domain.repository_for(Member).get(account)
    except ObjectNotFoundError:
        return None
    return Role(member.role)


def is_member(role: Role, account: str | None) -> bool:
    return role_of(account) == role


def ensure_member(role: Role, account: str | None) -> None:
    """Raise the role-specific error unless ``account`` holds ``role``."""
    if not is_member(role, account):
        raise _ROLE_ERRORS[role](f"Account '{account}' is not a registered {role.value.lower()}")


def ensure_manufacturer(account: str | None) -> None:
    ensure_member(Role.MANUFACTURER, account)


def ensure_carrier(account: str | None) -> None:
    ensure_member(Role.CARRIER, account)


def ensure_retailer(account: str | None) -> None:
    ensure_member(Role.RETAILER, account)


def ensure_customer(account: str | None) -> None:
    ensure_member(Role.CUSTOMER, account)


def register(role: Role, account: str) -> Member:
    """Record ``account`` under ``role``.

    Fails with DuplicateMember when the account already holds any role,
    including the one being requested.
    """
    existing = role_of(account)
    if existing is not None:
        raise DuplicateMember(f"Account '{account}' is already registered as {existing.value}")

    member = Member.register(account, role)
    current_domain.repository_for(Member).add(member)
    return member


def members_of(role: Role) -> list[str]:
    return [str(m.account) for m in current_domain.repository_for(Member).members_of(role)]
