import pytest
from fastapi.testclient import TestClient

from loyalty_admin_api.app.core.config import Settings
from loyalty_admin_api.app.core.store import create_store
from loyalty_admin_api.app.main import create_app
from loyalty_admin_api.app.services.crud_service import Latency

# All tests run without the simulated network delay.
TEST_SETTINGS = Settings(simulate_latency=False, seed_data=True, log_level="WARNING")


@pytest.fixture(name="store")
def store_fixture():
    """A seeded store with latency disabled, fresh for every test."""
    return create_store(latency=Latency.disabled())


@pytest.fixture(name="empty_store")
def empty_store_fixture():
    return create_store(latency=Latency.disabled(), seed=False)


@pytest.fixture(name="client")
def client_fixture():
    """Test client for an app whose store is rebuilt from seed data.

    The store is recreated on startup, so tests that need to reach it
    directly should use ``client.app.state.store`` inside the test.
    """
    app = create_app(TEST_SETTINGS)
    with TestClient(app) as client:
        yield client
