import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the Protean config overlay before any domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def reset_adapters():
    """Put every swappable adapter back to its default after each test."""
    yield

    from catalogue.storage import reset_storage
    from notifications.channel import reset_channels
    from ordering.clients import reset_clients
    from payments.clients import reset_order_client
    from payments.gateway import reset_gateway
    from shared.tokens import reset_blacklist

    reset_storage()
    reset_channels()
    reset_clients()
    reset_order_client()
    reset_gateway()
    reset_blacklist()


@pytest.fixture()
def token_for():
    """Build a signed access token for a caller with the given role."""
    from shared.security import create_access_token

    def _token(user_id="user-1", role="user", username="asha", email="asha@example.com"):
        return create_access_token({"id": user_id, "username": username, "email": email, "role": role})

    return _token


@pytest.fixture()
def auth_headers(token_for):
    def _headers(user_id="user-1", role="user", username="asha", email="asha@example.com"):
        return {"Authorization": f"Bearer {token_for(user_id, role, username, email)}"}

    return _headers
