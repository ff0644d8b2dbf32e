"""Project ORM — persists a project and its date interval.

Invariants:
    - id is a UUID primary key (client-side default)
    - name is unique at the store level (exact, case-sensitive)
    - end_date is optional; ordering is enforced by the service, not the DB

Design Decisions:
    - Unique index on name backs the service's application-level check
      against concurrent duplicate creates
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from staffing.core.enforce_dates import as_utc
from staffing.db.base import Base


class Project(Base):
    """Project entity."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def to_record(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "start_date": as_utc(self.start_date),
            "end_date": as_utc(self.end_date),
            "active": self.active,
        }
