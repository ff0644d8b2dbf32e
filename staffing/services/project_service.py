"""Project Service — create/update/find with interval and name-uniqueness rules.

Invariants:
    - Every write is the LAST step: all checks run before repository.create/update
    - Name uniqueness is exact (case-sensitive) and update rejects ANY match,
      including the project's own current name re-submitted unchanged
    - Failures abort immediately; repository errors propagate untouched
    - remove() is a stub: projects are never hard-deleted

Design Decisions:
    - Pure interval rules live in core/enforce_dates.py; this class only sequences
      awaits around them (functional core, imperative shell)
    - No self-match exclusion on update (employee_service.py excludes it);
      unifying the two is pending product confirmation
"""

import logging

from staffing.core.domain_types import ProjectId
from staffing.core.enforce_dates import (
    FIELD_LABELS, is_given, validate_create_interval, validate_update_interval,
)
from staffing.core.errors import NotFoundError, ValidationError
from staffing.core.repository_protocols import ProjectRepository

logger = logging.getLogger(__name__)

NAME_TAKEN_MESSAGE = "The project's name already exists"
NOT_FOUND_MESSAGE = "Project not found"


class ProjectService:
    """Validation engine for Project writes."""

    def __init__(self, projects: ProjectRepository):
        self.projects = projects

    async def create(self, project_data: dict) -> dict:
        """Validate the interval and name, then persist."""
        start, end = validate_create_interval(
            project_data.get("start_date"), project_data.get("end_date"),
        )
        await self._ensure_name_available(project_data["name"])

        data = {**project_data, "start_date": start}
        if end is not None:
            data["end_date"] = end
        else:
            data.pop("end_date", None)

        project = await self.projects.create(data)
        logger.info(
            f"Project created: {project['name']}",
            extra={"project_id": project["id"], "operation": "create"},
        )
        return project

    async def find_all(self) -> list[dict]:
        return await self.projects.find_all()

    async def find_one(self, project_id: ProjectId) -> dict:
        project = await self.projects.find_by_id(project_id)
        if not project:
            raise NotFoundError(NOT_FOUND_MESSAGE, "Project", project_id)
        return project

    async def update(self, project_id: ProjectId, fields: dict) -> dict:
        """Apply a partial update after checking dates and name.

        Date checks run against the stored record fetched here; the name check
        runs last so a bad interval is reported before a duplicate name.
        """
        stored = await self.find_one(project_id)

        parsed_dates = validate_update_interval(
            stored, fields.get("start_date"), fields.get("end_date"),
        )
        if fields.get("name") is not None:
            await self._ensure_name_available(fields["name"])

        changes = {
            key: value for key, value in fields.items()
            if key not in FIELD_LABELS or is_given(value)
        }
        updated = await self.projects.update(project_id, {**changes, **parsed_dates})
        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, "Project", project_id)
        logger.info(
            f"Project updated: {sorted(fields)}",
            extra={"project_id": project_id, "operation": "update"},
        )
        return updated

    def remove(self, project_id: ProjectId) -> str:
        # Deletion is not supported; projects are deactivated via `active`.
        return f"This action removes a #{project_id} project"

    async def _ensure_name_available(self, name: str) -> None:
        existing = await self.projects.find_one_by_name(name)
        if existing:
            logger.info(
                f"Project name rejected as duplicate: {name}",
                extra={"project_id": existing["id"]},
            )
            raise ValidationError(NAME_TAKEN_MESSAGE, field="name")
