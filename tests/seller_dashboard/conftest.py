import pytest
from protean.integrations.pytest import DomainFixture
from protean.utils.globals import current_domain


@pytest.fixture(scope="session")
def seller_dashboard_bed():
    from seller_dashboard.domain import seller_dashboard

    bed = DomainFixture(seller_dashboard)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(seller_dashboard_bed):
    with seller_dashboard_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()
