"""Project Routes — CRUD endpoints delegating to ProjectService.

Invariants:
    - Routes only translate HTTP <-> service calls; every rule lives in ProjectService
    - Failures propagate as StaffingError and are rendered by api/error_handlers.py
    - DELETE is a stub: projects are never removed from the store
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from staffing.core.domain_types import ProjectId
from staffing.infrastructure.database import get_db
from staffing.infrastructure.project_repository import SqlProjectRepository
from staffing.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from staffing.services.project_service import ProjectService

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(SqlProjectRepository(db))


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreate, service: ProjectService = Depends(get_project_service),
):
    """Create a project after interval and name checks."""
    return await service.create(body.to_fields())


@router.get("", response_model=list[ProjectResponse])
async def list_projects(service: ProjectService = Depends(get_project_service)):
    return await service.find_all()


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str, service: ProjectService = Depends(get_project_service),
):
    return await service.find_one(ProjectId(project_id))


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    """Partially update a project. Only provided fields are checked."""
    return await service.update(ProjectId(project_id), body.to_fields())


@router.delete("/{project_id}")
async def remove_project(
    project_id: str, service: ProjectService = Depends(get_project_service),
):
    return {"message": service.remove(ProjectId(project_id))}
