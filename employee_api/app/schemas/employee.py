"""
Pydantic schemas for employee records.

An employee has a server‑assigned integer ``id`` plus first name,
last name and email.  On the wire the text fields use camelCase
names (``firstName``, ``lastName``); in Python code either the
snake_case field names or the aliases may be used when constructing
a model.  No validation is applied to field contents; numbers sent
for the text fields are stored as their string form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmployeeBase(BaseModel):
    """Fields shared by request and response payloads."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    first_name: Optional[str] = Field(None, alias="firstName", description="Employee first name")
    last_name: Optional[str] = Field(None, alias="lastName", description="Employee last name")
    email: Optional[str] = Field(None, description="Employee email address")


class EmployeeCreate(EmployeeBase):
    """Request body for creating or replacing an employee.

    An ``id`` sent by the client is ignored; identifiers are assigned
    by the server and taken from the URL on update.
    """


class Employee(EmployeeBase):
    """A stored employee.  ``id`` is ``None`` until first persisted."""

    id: Optional[int] = None
