"""Application tests for member registration via domain.process()."""

import pytest
from custody.errors import DuplicateMember
from custody.membership import registry
from custody.membership.member import Member, Role
from custody.membership.registration import (
    RegisterCarrier,
    RegisterCustomer,
    RegisterManufacturer,
    RegisterRetailer,
)
from protean import current_domain


def _register(command_cls, account):
    return current_domain.process(command_cls(account=account), asynchronous=False)


class TestRegisterMember:
    def test_returns_account(self):
        assert _register(RegisterManufacturer, "acct-m") == "acct-m"

    def test_persists_member_with_role(self):
        _register(RegisterCarrier, "acct-c")
        member = current_domain.repository_for(Member).get("acct-c")
        assert member.role == Role.CARRIER.value

    @pytest.mark.parametrize(
        "command_cls,role",
        [
            (RegisterManufacturer, Role.MANUFACTURER),
            (RegisterCarrier, Role.CARRIER),
            (RegisterRetailer, Role.RETAILER),
            (RegisterCustomer, Role.CUSTOMER),
        ],
    )
    def test_is_member_of_registered_role_only(self, command_cls, role):
        _register(command_cls, "acct-1")
        for other in Role:
            assert registry.is_member(other, "acct-1") is (other == role)

    def test_stores_added_event(self):
        _register(RegisterRetailer, "acct-r")
        messages = current_domain.event_store.store.read("custody::member")
        added = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Custody.RetailerAdded.v1"
        ]
        assert len(added) == 1


class TestDuplicateMember:
    def test_same_role_twice_is_rejected(self):
        _register(RegisterManufacturer, "acct-1")
        with pytest.raises(DuplicateMember):
            _register(RegisterManufacturer, "acct-1")

    def test_second_role_is_rejected(self):
        _register(RegisterManufacturer, "acct-1")
        with pytest.raises(DuplicateMember):
            _register(RegisterCustomer, "acct-1")
        assert registry.role_of("acct-1") == Role.MANUFACTURER

    def test_rejected_registration_stores_no_event(self):
        _register(RegisterCarrier, "acct-1")
        with pytest.raises(DuplicateMember):
            _register(RegisterRetailer, "acct-1")
        messages = current_domain.event_store.store.read("custody::member")
        types = [m.metadata.headers.type for m in messages if m.metadata and m.metadata.headers]
        assert "Custody.RetailerAdded.v1" not in types


class TestMembershipQueries:
    def test_unknown_account_has_no_role(self):
        assert registry.role_of("nobody") is None
        assert registry.is_member(Role.CUSTOMER, "nobody") is False

    def test_members_of_lists_accounts_in_registration_order(self):
        _register(RegisterRetailer, "acct-r1")
        _register(RegisterCarrier, "acct-c1")
        _register(RegisterRetailer, "acct-r2")
        assert registry.members_of(Role.RETAILER) == ["acct-r1", "acct-r2"]
        assert registry.members_of(Role.CARRIER) == ["acct-c1"]
        assert registry.members_of(Role.CUSTOMER) == []
