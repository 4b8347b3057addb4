"""
Shared pytest fixtures.

Every fixture is function scoped: each test gets its own repository
(a fresh in-memory store or an SQLite file under ``tmp_path``) and its
own application instance, so no state leaks between tests.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.db import init_db
from employee_api.app.main import create_app
from employee_api.app.repositories.employee_repository import (
    InMemoryEmployeeRepository,
    SQLiteEmployeeRepository,
)
from employee_api.app.schemas.employee import Employee
from employee_api.app.services.employee_service import EmployeeService


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "employees.sqlite")
    init_db(path)
    return path


@pytest.fixture()
def sqlite_repository(db_path: str) -> SQLiteEmployeeRepository:
    return SQLiteEmployeeRepository(db_path)


@pytest.fixture(params=["memory", "sqlite"])
def repository(request):
    """Run a test once against each repository implementation."""
    if request.param == "memory":
        return InMemoryEmployeeRepository()
    return request.getfixturevalue("sqlite_repository")


@pytest.fixture()
def mock_service():
    return create_autospec(EmployeeService, instance=True)


@pytest.fixture()
def mock_client(mock_service):
    """Test client for an app whose routes call ``mock_service``."""
    app = create_app(employee_service=mock_service)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def ramesh() -> Employee:
    return Employee(first_name="Ramesh", last_name="Fadatare", email="ramesh@gmail.com")
