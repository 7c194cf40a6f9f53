"""Fixtures for cross-domain tests that run through the assembled Nexora app.

The app wires every bounded context into one process, so these fixtures clean
up every domain rather than the single one a context's own tests use.
"""

import pytest


@pytest.fixture(scope="module")
def nexora():
    """Import the app lazily so the event relay only connects for these tests."""
    from app import DOMAINS, app
    from shared.relay import disconnect_event_relay, install_event_relay

    # Reconnects when an earlier module left the relay idle.
    install_event_relay(DOMAINS)

    yield app

    disconnect_event_relay(DOMAINS)


@pytest.fixture(autouse=True)
def clean_domains(nexora):
    yield

    from app import DOMAINS

    for domain in DOMAINS:
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()
            for _, broker in domain.brokers.items():
                broker._data_reset()
            domain.event_store.store._data_reset()
