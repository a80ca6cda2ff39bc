import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def custody_bed():
    from custody.domain import custody

    bed = DomainFixture(custody)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(custody_bed):
    """Run each test inside the custody domain and start it from empty stores."""
    with custody_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        for _, broker in current_domain.brokers.items():
            broker._data_reset()

        current_domain.event_store.store._data_reset()


MANUFACTURER = "acct-manufacturer"
CARRIER = "acct-carrier"
RETAILER = "acct-retailer"
CUSTOMER = "acct-customer"


@pytest.fixture()
def members():
    """One registered account per role, keyed by role name."""
    from protean import current_domain

    from custody.membership.registration import (
        RegisterCarrier,
        RegisterCustomer,
        RegisterManufacturer,
        RegisterRetailer,
    )

    current_domain.process(RegisterManufacturer(account=MANUFACTURER), asynchronous=False)
    current_domain.process(RegisterCarrier(account=CARRIER), asynchronous=False)
    current_domain.process(RegisterRetailer(account=RETAILER), asynchronous=False)
    current_domain.process(RegisterCustomer(account=CUSTOMER), asynchronous=False)
    return {
        "manufacturer": MANUFACTURER,
        "carrier": CARRIER,
        "retailer": RETAILER,
        "customer": CUSTOMER,
    }
