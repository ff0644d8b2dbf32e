"""Employee Repository — SQLAlchemy implementation of core.EmployeeRepository.

Invariants:
    - Malformed ids are treated as absent (None / False), never raised
    - find_one_by_name compares casefolded names via the name_key column
    - projects is stored as a fresh list on every write (JSON column change tracking)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staffing.core.domain_types import EmployeeId
from staffing.infrastructure.project_repository import parse_id
from staffing.models.employee import Employee, name_key

_UPDATABLE = ("name", "post", "admission", "active", "projects")


class SqlEmployeeRepository:
    """Employee persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, employee_data: dict) -> dict:
        employee = Employee(
            name=employee_data["name"],
            name_key=name_key(employee_data["name"]),
            post=employee_data["post"],
            active=employee_data.get("active", True),
            projects=list(employee_data.get("projects") or []),
        )
        # Column default stamps the creation time when admission is absent
        if employee_data.get("admission") is not None:
            employee.admission = employee_data["admission"]
        self.db.add(employee)
        await self.db.commit()
        await self.db.refresh(employee)
        return employee.to_record()

    async def update(self, employee_id: EmployeeId, fields: dict) -> dict | None:
        employee = await self._get(employee_id)
        if not employee:
            return None
        for key in _UPDATABLE:
            if key not in fields:
                continue
            value = fields[key]
            if key == "projects":
                value = list(value)
            setattr(employee, key, value)
            if key == "name":
                employee.name_key = name_key(value)
        await self.db.commit()
        await self.db.refresh(employee)
        return employee.to_record()

    async def find_one_by_name(self, name: str) -> dict | None:
        result = await self.db.execute(
            select(Employee).where(Employee.name_key == name_key(name)),
        )
        employee = result.scalars().first()
        return employee.to_record() if employee else None

    async def find_by_id(self, employee_id: EmployeeId) -> dict | None:
        employee = await self._get(employee_id)
        return employee.to_record() if employee else None

    async def find_all(self) -> list[dict]:
        result = await self.db.execute(select(Employee))
        return [e.to_record() for e in result.scalars().all()]

    async def delete(self, employee_id: EmployeeId) -> bool:
        employee = await self._get(employee_id)
        if not employee:
            return False
        await self.db.delete(employee)
        await self.db.commit()
        return True

    async def _get(self, employee_id: EmployeeId) -> Employee | None:
        uid = parse_id(employee_id)
        if uid is None:
            return None
        return await self.db.get(Employee, uid)
