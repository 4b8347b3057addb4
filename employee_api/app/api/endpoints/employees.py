"""
Employee endpoints.

These routes expose a CRUD API for employee records.  Lookups by id
that find nothing are answered with ``404 Not Found`` and an empty
body; deletion always answers ``200 OK`` whether or not the record
existed.  The ``EmployeeService`` instance is taken from
``app.state`` so that the application factory decides which service
(and repository) the routes use.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from employee_api.app.schemas.employee import Employee, EmployeeCreate
from employee_api.app.services.employee_service import EmployeeService

# Ids are stored as SQLite INTEGER (signed 64-bit); larger values are rejected as malformed.
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

router = APIRouter()


def get_employee_service(request: Request) -> EmployeeService:
    """Return the service configured by ``create_app``."""
    return request.app.state.employee_service


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee and return it with its assigned id."""
    employee = Employee(**employee_in.model_dump())
    return await service.save_employee(employee)


@router.get("", response_model=List[Employee])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """Return all employees (an empty list when there are none)."""
    return await service.get_all_employees()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
):
    """Retrieve a single employee by id."""
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: EmployeeId,
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace the name and email of an existing employee.

    The id always comes from the stored record; an id in the request
    body is ignored.
    """
    existing = await service.get_employee_by_id(employee_id)
    if existing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    employee = existing.model_copy(
        update={
            "first_name": employee_in.first_name,
            "last_name": employee_in.last_name,
            "email": employee_in.email,
        }
    )
    return await service.update_employee(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_200_OK)
async def delete_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Delete an employee.  Unknown ids are not an error."""
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_200_OK)
