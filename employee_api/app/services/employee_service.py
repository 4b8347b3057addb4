"""
Service layer for employees.

``EmployeeService`` sits between the API handlers and the persistence
layer.  It receives its repository through the constructor and
delegates every call to it without adding validation, so the HTTP
handlers stay independent of how employees are stored.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employees."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def save_employee(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id."""
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def get_all_employees(self) -> List[Employee]:
        return self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.repository.find_by_id(employee_id)

    async def update_employee(self, employee: Employee) -> Employee:
        """Overwrite an existing employee.

        The caller is responsible for ``employee.id`` pointing at a
        stored record; the repository writes the full state as given.
        """
        updated = self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    async def delete_employee(self, employee_id: int) -> None:
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
