"""Shared BDD fixtures and step definitions for the Custody domain."""

import pytest
from pytest_bdd import parsers, then


@pytest.fixture()
def error():
    """Container for captured custody errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the operation fails with "{code}"'))
@then(parsers.cfparse('the command fails with "{code}"'))
def fails_with(error, code):
    assert error["exc"] is not None, f"expected {code}, but nothing failed"
    assert error["exc"].code == code
