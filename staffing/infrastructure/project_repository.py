"""Project Repository — SQLAlchemy implementation of core.ProjectRepository.

Invariants:
    - Malformed ids are treated as absent (None), never raised
    - Every write commits before returning; the returned record reflects the DB row
    - find_one_by_name is an exact, case-sensitive match

Design Decisions:
    - Bound to one AsyncSession per request (shell owns the session lifecycle)
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staffing.core.domain_types import ProjectId
from staffing.models.project import Project


def parse_id(raw_id: str) -> uuid.UUID | None:
    """Parse a client-supplied id; None when it is not a UUID."""
    try:
        return uuid.UUID(str(raw_id))
    except ValueError:
        return None


class SqlProjectRepository:
    """Project persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, project_data: dict) -> dict:
        project = Project(
            name=project_data["name"],
            description=project_data["description"],
            start_date=project_data["start_date"],
            end_date=project_data.get("end_date"),
            active=project_data.get("active", True),
        )
        self.db.add(project)
        await self.db.commit()
        await self.db.refresh(project)
        return project.to_record()

    async def update(self, project_id: ProjectId, fields: dict) -> dict | None:
        project = await self._get(project_id)
        if not project:
            return None
        for key in ("name", "description", "start_date", "end_date", "active"):
            if key in fields:
                setattr(project, key, fields[key])
        await self.db.commit()
        await self.db.refresh(project)
        return project.to_record()

    async def find_one_by_name(self, name: str) -> dict | None:
        result = await self.db.execute(
            select(Project).where(Project.name == name),
        )
        project = result.scalars().first()
        return project.to_record() if project else None

    async def find_by_id(self, project_id: ProjectId) -> dict | None:
        project = await self._get(project_id)
        return project.to_record() if project else None

    async def find_all(self) -> list[dict]:
        result = await self.db.execute(select(Project))
        return [p.to_record() for p in result.scalars().all()]

    async def _get(self, project_id: ProjectId) -> Project | None:
        uid = parse_id(project_id)
        if uid is None:
            return None
        return await self.db.get(Project, uid)
