from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from employee_manager.client.rpc import EmployeeClient
from employee_manager.core.config import Settings
from employee_manager.main import create_app
from employee_manager.service import EmployeeService
from employee_manager.store import EmployeeStore


@pytest.fixture
def store() -> EmployeeStore:
    return EmployeeStore.from_url("sqlite://")


@pytest.fixture
def service(store) -> EmployeeService:
    return EmployeeService(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, ENVIRONMENT="development")


@pytest.fixture
def http(settings, store):
    with TestClient(create_app(settings, store)) as client:
        yield client


@pytest.fixture
def rpc_client(http) -> EmployeeClient:
    return EmployeeClient(http_client=http)
