"""Boundary Protocols — contracts between the engines and persistence.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy models
    - Records cross the boundary as plain dicts with snake_case keys and a str "id"
    - find_by_id / update / delete NEVER raise on a malformed id: they report absence

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the services await them one at a time
"""

from typing import Protocol

from staffing.core.domain_types import ProjectId, EmployeeId


class ProjectRepository(Protocol):
    """Contract for project persistence — implemented by infrastructure."""
    async def create(self, project_data: dict) -> dict: ...
    async def update(self, project_id: ProjectId, fields: dict) -> dict | None: ...
    async def find_one_by_name(self, name: str) -> dict | None: ...
    async def find_by_id(self, project_id: ProjectId) -> dict | None: ...
    async def find_all(self) -> list[dict]: ...


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by infrastructure.

    find_one_by_name matches case-insensitively.
    """
    async def create(self, employee_data: dict) -> dict: ...
    async def update(self, employee_id: EmployeeId, fields: dict) -> dict | None: ...
    async def find_one_by_name(self, name: str) -> dict | None: ...
    async def find_by_id(self, employee_id: EmployeeId) -> dict | None: ...
    async def find_all(self) -> list[dict]: ...
    async def delete(self, employee_id: EmployeeId) -> bool: ...
