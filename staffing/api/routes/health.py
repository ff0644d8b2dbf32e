"""Health Routes — liveness plus a readiness check that reads the staffing tables.

Invariants:
    - GET /health/ always returns 200 if the process is up
    - GET /health/ready returns 503 when the database or either table is unreadable
    - A ready response carries the current project and employee counts
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

from staffing.core.errors import StaffingError
from staffing.infrastructure import database
from staffing.models import Employee, Project

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": "staffing-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Ready once both staffing tables answer a count query."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_unavailable")
    try:
        records = await _count_records(manager)
    except StaffingError as e:
        logger.error(
            f"Readiness check failed: {e.message}",
            extra={"error_code": e.code, "operation": "readiness"},
        )
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "records": records,
    }


async def _count_records(manager: database.DatabaseSessionManager) -> dict:
    async with manager.session() as db:
        projects = await db.scalar(select(func.count()).select_from(Project))
        employees = await db.scalar(select(func.count()).select_from(Employee))
    return {"projects": projects, "employees": employees}


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
