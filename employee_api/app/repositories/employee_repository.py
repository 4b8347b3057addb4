"""
Persistence layer for employee records.

``EmployeeRepository`` defines the data‑access operations consumed by
the service layer.  Two implementations are provided:

* :class:`SQLiteEmployeeRepository` stores employees in the
  ``employees`` table of an SQLite database.  A connection is opened
  per operation and always closed afterwards.
* :class:`InMemoryEmployeeRepository` keeps employees in a dictionary
  owned by the instance, which gives every test its own isolated
  store.

All SQL uses parameterized statements.
"""

from __future__ import annotations

import itertools
import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from employee_api.app.core.db import get_connection
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(ABC):
    """Data‑access operations for employees."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert or overwrite ``employee`` and return the stored record.

        An identifier is assigned when ``employee.id`` is ``None``.
        The argument itself is left untouched.
        """

    def save_all(self, employees: Iterable[Employee]) -> List[Employee]:
        """Save each employee in order and return the stored records."""
        return [self.save(employee) for employee in employees]

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """Return every stored employee."""

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Delete the employee if present; a missing id is not an error."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove all employees."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored employees."""


class SQLiteEmployeeRepository(EmployeeRepository):
    """Repository backed by the ``employees`` table."""

    UPSERT = """
        INSERT INTO employees (id, first_name, last_name, email)
        VALUES (?, ?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET
            first_name = excluded.first_name,
            last_name = excluded.last_name,
            email = excluded.email
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def _write(self, cursor: sqlite3.Cursor, employee: Employee) -> int:
        """Insert or update one row and return its id.

        A ``NULL`` id never conflicts, so new rows get the next
        autoincrement value; an existing id is updated in place.
        """
        cursor.execute(
            self.UPSERT,
            (employee.id, employee.first_name, employee.last_name, employee.email),
        )
        return cursor.lastrowid if employee.id is None else employee.id

    def save(self, employee: Employee) -> Employee:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            employee_id = self._write(cursor, employee)
            conn.commit()
            logger.debug("Saved employee %s", employee_id)
            row = cursor.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
            return self._row_to_employee(row)
        finally:
            conn.close()

    def save_all(self, employees: Iterable[Employee]) -> List[Employee]:
        # Single transaction for the whole batch.
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            ids = [self._write(cursor, employee) for employee in employees]
            conn.commit()
            return [
                self._row_to_employee(
                    cursor.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
                )
                for employee_id in ids
            ]
        finally:
            conn.close()

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
            if not row:
                return None
            return self._row_to_employee(row)
        finally:
            conn.close()

    def find_all(self) -> List[Employee]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM employees ORDER BY id").fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def delete_by_id(self, employee_id: int) -> None:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
            logger.debug("Deleted %s row(s) for employee %s", cursor.rowcount, employee_id)
        finally:
            conn.close()

    def delete_all(self) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM employees")
            conn.commit()
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM employees").fetchone()[0]
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        """Convert a database row to an Employee instance."""
        return Employee(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )


class InMemoryEmployeeRepository(EmployeeRepository):
    """Repository keeping employees in a per‑instance dictionary."""

    def __init__(self) -> None:
        self._employees: Dict[int, Employee] = {}
        self._ids = itertools.count(1)

    def save(self, employee: Employee) -> Employee:
        employee_id = employee.id
        if employee_id is None:
            employee_id = next(self._ids)
            # Skip ids already taken by records saved with an explicit id.
            while employee_id in self._employees:
                employee_id = next(self._ids)
        stored = employee.model_copy(update={"id": employee_id})
        self._employees[employee_id] = stored
        return stored.model_copy()

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        employee = self._employees.get(employee_id)
        return employee.model_copy() if employee is not None else None

    def find_all(self) -> List[Employee]:
        return [self._employees[key].model_copy() for key in sorted(self._employees)]

    def delete_by_id(self, employee_id: int) -> None:
        self._employees.pop(employee_id, None)

    def delete_all(self) -> None:
        self._employees.clear()

    def count(self) -> int:
        return len(self._employees)
