"""Employee API client.

This module defines a small client wrapper around the Employee REST
API.  It uses the ``requests`` library internally and exposes one
high‑level method per route:

* :meth:`EmployeeAPI.create_employee` – create a new employee.
* :meth:`EmployeeAPI.list_employees` – return all employees.
* :meth:`EmployeeAPI.get_employee` – fetch a single employee by id.
* :meth:`EmployeeAPI.update_employee` – replace an employee's fields.
* :meth:`EmployeeAPI.delete_employee` – delete an employee.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
Transport failures are reported with ``status_code`` set to ``None``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/api/employees"

Error = Dict[str, Any]


class EmployeeAPI:
    """Client for interacting with the Employee API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds, or ``None`` to leave the
                session default in place (e.g. for a test client).
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response, or ``None`` when the response has no body.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        options: Dict[str, Any] = {"json": json_body, "headers": headers}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, **options)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            if response.content:
                try:
                    err_json = response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _payload(employee: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only the fields the API accepts in a request body."""
        return {key: employee.get(key) for key in ("firstName", "lastName", "email")}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, employee: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee.

        Args:
            employee: Mapping with ``firstName``, ``lastName`` and ``email``.
        Returns:
            A tuple ``(employee, error)``; the returned employee carries
            the server‑assigned ``id``.
        """
        return self._request("POST", EMPLOYEES_PATH, json_body=self._payload(employee))

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees."""
        data, error = self._request("GET", EMPLOYEES_PATH)
        if error:
            return [], error
        return data or [], None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single employee.  A missing id yields a 404 error."""
        return self._request("GET", f"{EMPLOYEES_PATH}/{employee_id}")

    def update_employee(
        self, employee_id: int, employee: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace first name, last name and email of an employee."""
        return self._request("PUT", f"{EMPLOYEES_PATH}/{employee_id}", json_body=self._payload(employee))

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{EMPLOYEES_PATH}/{employee_id}")
        if error:
            return False, error
        return True, None
