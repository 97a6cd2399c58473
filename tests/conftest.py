"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db import EmployeeStore
from app.main import create_app
from app.schemas import CreateEmployeeRequest
from app.services import EmployeeService


@pytest.fixture
def store():
    """Fresh, empty record store for each test"""
    return EmployeeStore()


@pytest.fixture
def service(store):
    return EmployeeService(store)


@pytest.fixture
def make_request():
    """Build a valid create request, overriding any field"""

    def _make(**overrides):
        fields = {"first_name": "Ada", "last_name": "Lovelace"}
        fields.update(overrides)
        return CreateEmployeeRequest(**fields)

    return _make


@pytest.fixture
def settings():
    return Settings(SEED_DEMO_DATA=False)


@pytest.fixture
def client(settings):
    """Test client over an app with its own empty store"""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
