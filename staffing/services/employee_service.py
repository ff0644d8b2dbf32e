"""Employee Service — name uniqueness and project-reference checks around writes.

Invariants:
    - Name uniqueness is case-insensitive ("Test" and "test" collide)
    - update() tolerates a self-match (same id) so an unchanged name can be re-sent
    - Project references are checked one by one, in list order; the first missing
      id wins and nothing is written
    - An empty projects list skips the reference loop entirely

Design Decisions:
    - Sequential find_by_id over a bulk existence query: the error must name the
      FIRST missing id, which a set-based lookup cannot report
    - Reference check and write are not atomic: a project can vanish in between
"""

import logging

from staffing.core.domain_types import EmployeeId, ProjectId
from staffing.core.errors import NotFoundError, ValidationError
from staffing.core.repository_protocols import EmployeeRepository, ProjectRepository

logger = logging.getLogger(__name__)

ALREADY_EXISTS_MESSAGE = "Employee already exists"
NAME_TAKEN_MESSAGE = "Name already exists"
NOT_FOUND_MESSAGE = "Employee not found"


class EmployeeService:
    """Validation engine for Employee writes."""

    def __init__(self, employees: EmployeeRepository, projects: ProjectRepository):
        self.employees = employees
        self.projects = projects

    async def create(self, employee_data: dict) -> dict:
        existing = await self.employees.find_one_by_name(employee_data["name"])
        if existing:
            logger.info(
                f"Employee name rejected as duplicate: {employee_data['name']}",
                extra={"employee_id": existing["id"]},
            )
            raise ValidationError(ALREADY_EXISTS_MESSAGE, field="name")

        await self._ensure_projects_exist(employee_data.get("projects") or [])

        employee = await self.employees.create(employee_data)
        logger.info(
            f"Employee created: {employee['name']}",
            extra={"employee_id": employee["id"], "operation": "create"},
        )
        return employee

    async def find_all(self) -> list[dict]:
        return await self.employees.find_all()

    async def find_one(self, employee_id: EmployeeId) -> dict:
        employee = await self.employees.find_by_id(employee_id)
        if not employee:
            raise NotFoundError(NOT_FOUND_MESSAGE, "Employee", employee_id)
        return employee

    async def update(self, employee_id: EmployeeId, fields: dict) -> dict:
        """Apply a partial update. Only the provided fields are checked."""
        if fields.get("name") is not None:
            existing = await self.employees.find_one_by_name(fields["name"])
            if existing and existing["id"] != employee_id:
                logger.info(
                    f"Employee rename rejected, name held by {existing['id']}",
                    extra={"employee_id": employee_id},
                )
                raise ValidationError(NAME_TAKEN_MESSAGE, field="name")

        if fields.get("projects") is not None:
            await self._ensure_projects_exist(fields["projects"])

        updated = await self.employees.update(employee_id, fields)
        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, "Employee", employee_id)
        logger.info(
            f"Employee updated: {sorted(fields)}",
            extra={"employee_id": employee_id, "operation": "update"},
        )
        return updated

    async def delete(self, employee_id: EmployeeId) -> None:
        deleted = await self.employees.delete(employee_id)
        if not deleted:
            raise NotFoundError(NOT_FOUND_MESSAGE, "Employee", employee_id)
        logger.info(
            "Employee deleted",
            extra={"employee_id": employee_id, "operation": "delete"},
        )

    async def _ensure_projects_exist(self, project_ids: list[ProjectId]) -> None:
        for project_id in project_ids:
            if not await self.projects.find_by_id(project_id):
                raise NotFoundError(
                    f"Project {project_id} not found", "Project", project_id,
                )
