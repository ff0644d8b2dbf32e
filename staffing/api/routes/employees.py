"""Employee Routes — CRUD endpoints delegating to EmployeeService.

Invariants:
    - Routes only translate HTTP <-> service calls; every rule lives in EmployeeService
    - DELETE returns 204 on success, 404 when the employee does not exist
    - The list is served at both /employees and /employees/all; /all is declared
      before /{employee_id} so it is never read as an id
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from staffing.core.domain_types import EmployeeId
from staffing.infrastructure.database import get_db
from staffing.infrastructure.employee_repository import SqlEmployeeRepository
from staffing.infrastructure.project_repository import SqlProjectRepository
from staffing.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from staffing.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    # Both repositories share the request session
    return EmployeeService(SqlEmployeeRepository(db), SqlProjectRepository(db))


@router.post(
    "", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate, service: EmployeeService = Depends(get_employee_service),
):
    return await service.create(body.to_fields())


@router.get("", response_model=list[EmployeeResponse])
@router.get("/all", response_model=list[EmployeeResponse])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return await service.find_all()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str, service: EmployeeService = Depends(get_employee_service),
):
    return await service.find_one(EmployeeId(employee_id))


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Partially update an employee, checking name and project references."""
    return await service.update(EmployeeId(employee_id), body.to_fields())


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str, service: EmployeeService = Depends(get_employee_service),
):
    await service.delete(EmployeeId(employee_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
