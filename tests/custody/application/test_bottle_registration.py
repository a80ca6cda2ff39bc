"""Application tests for bottle registration via domain.process()."""

import pytest
from custody.bottle import registry
from custody.bottle.bottle import Bottle
from custody.bottle.registration import RegisterBottle
from custody.errors import IdExists, IdMissing, IdTooLong, NotManufacturer
from protean import current_domain


def _register_bottle(bottle_id, manufacturer):
    return current_domain.process(
        RegisterBottle(bottle_id=bottle_id, manufacturer=manufacturer),
        asynchronous=False,
    )


class TestRegisterBottle:
    def test_returns_bottle_id(self, members):
        assert _register_bottle("b-1", members["manufacturer"]) == "b-1"

    def test_manufacturer_owns_new_bottle(self, members):
        _register_bottle("b-1", members["manufacturer"])
        bottle = current_domain.repository_for(Bottle).get("b-1")
        assert bottle.owner == members["manufacturer"]

    def test_stores_bottle_registered_event(self, members):
        _register_bottle("b-1", members["manufacturer"])
        messages = current_domain.event_store.store.read("custody::bottle")
        registered = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Custody.BottleRegistered.v1"
        ]
        assert len(registered) == 1

    def test_accepts_36_byte_id(self, members):
        bottle_id = "b" * 36
        assert _register_bottle(bottle_id, members["manufacturer"]) == bottle_id


class TestRegisterBottleRejections:
    @pytest.mark.parametrize("role", ["carrier", "retailer", "customer"])
    def test_non_manufacturer_is_rejected(self, members, role):
        with pytest.raises(NotManufacturer):
            _register_bottle("b-1", members[role])
        assert registry.find_bottle("b-1") is None

    def test_unregistered_account_is_rejected(self, members):
        with pytest.raises(NotManufacturer):
            _register_bottle("b-1", "acct-unknown")

    def test_empty_id_is_rejected(self, members):
        with pytest.raises(IdMissing):
            _register_bottle("", members["manufacturer"])

    def test_37_byte_id_is_rejected(self, members):
        with pytest.raises(IdTooLong):
            _register_bottle("b" * 37, members["manufacturer"])

    def test_role_is_checked_before_id(self, members):
        with pytest.raises(NotManufacturer):
            _register_bottle("", members["carrier"])

    def test_duplicate_id_is_rejected(self, members):
        _register_bottle("b-1", members["manufacturer"])
        with pytest.raises(IdExists):
            _register_bottle("b-1", members["manufacturer"])


class TestBottleQueries:
    def test_bottles_of_manufacturer_in_registration_order(self, members):
        for bottle_id in ["b-2", "b-1", "b-3"]:
            _register_bottle(bottle_id, members["manufacturer"])
        assert registry.bottles_of_manufacturer(members["manufacturer"]) == ["b-2", "b-1", "b-3"]

    def test_bottles_owned_by(self, members):
        _register_bottle("b-1", members["manufacturer"])
        assert registry.bottles_owned_by(members["manufacturer"]) == ["b-1"]
        assert registry.bottles_owned_by(members["carrier"]) == []

    def test_shipment_of_unshipped_bottle_is_none(self, members):
        _register_bottle("b-1", members["manufacturer"])
        assert registry.shipment_of("b-1") is None


class TestBottleIdsAreStoredVerbatim:
    @pytest.mark.parametrize("bottle_id", ["R&D-001", "a<b>&c", "&" * 10, "château-ñ-€", "€" * 12])
    def test_registered_id_is_found_by_original_string(self, members, bottle_id):
        assert _register_bottle(bottle_id, members["manufacturer"]) == bottle_id
        bottle = registry.find_bottle(bottle_id)
        assert bottle is not None
        assert bottle.bottle_id == bottle_id
        assert registry.bottles_of_manufacturer(members["manufacturer"]) == [bottle_id]

    def test_very_long_id_is_too_long(self, members):
        with pytest.raises(IdTooLong):
            _register_bottle("x" * 2000, members["manufacturer"])
