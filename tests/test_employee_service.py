"""Service layer tests with a mocked repository."""

from __future__ import annotations

from unittest.mock import create_autospec

import pytest

from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee
from employee_api.app.services.employee_service import EmployeeService


@pytest.fixture()
def mock_repository():
    return create_autospec(EmployeeRepository, instance=True)


@pytest.fixture()
def service(mock_repository) -> EmployeeService:
    return EmployeeService(mock_repository)


@pytest.mark.asyncio
async def test_save_employee_delegates_to_repository(service, mock_repository, ramesh):
    stored = ramesh.model_copy(update={"id": 1})
    mock_repository.save.return_value = stored

    result = await service.save_employee(ramesh)

    assert result == stored
    mock_repository.save.assert_called_once_with(ramesh)


@pytest.mark.asyncio
async def test_get_all_employees(service, mock_repository):
    employees = [
        Employee(id=1, first_name="Ramesh", last_name="Fadatare", email="ramesh@gmail.com"),
        Employee(id=2, first_name="John", last_name="Cena", email="cena@gmail.com"),
    ]
    mock_repository.find_all.return_value = employees

    result = await service.get_all_employees()

    assert result == employees


@pytest.mark.asyncio
async def test_get_all_employees_empty(service, mock_repository):
    mock_repository.find_all.return_value = []

    assert await service.get_all_employees() == []


@pytest.mark.asyncio
async def test_get_employee_by_id_found(service, mock_repository):
    employee = Employee(id=1, first_name="Ramesh", last_name="Fadatare", email="ramesh@gmail.com")
    mock_repository.find_by_id.return_value = employee

    assert await service.get_employee_by_id(1) == employee
    mock_repository.find_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_get_employee_by_id_missing(service, mock_repository):
    mock_repository.find_by_id.return_value = None

    assert await service.get_employee_by_id(5) is None


@pytest.mark.asyncio
async def test_update_employee_overwrites_through_save(service, mock_repository):
    employee = Employee(id=1, first_name="Ram", last_name="Jadav", email="ram@gmail.com")
    mock_repository.save.return_value = employee

    result = await service.update_employee(employee)

    assert result.email == "ram@gmail.com"
    assert result.first_name == "Ram"
    mock_repository.save.assert_called_once_with(employee)


@pytest.mark.asyncio
async def test_delete_employee(service, mock_repository):
    await service.delete_employee(1)

    mock_repository.delete_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_repository_errors_propagate(service, mock_repository):
    mock_repository.find_all.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError):
        await service.get_all_employees()
