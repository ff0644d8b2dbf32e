"""Employee ORM — persists an employee and the projects they work on.

Invariants:
    - id is a UUID primary key (client-side default)
    - admission defaults to the creation time, active to True, projects to []
    - name_key (casefolded name) is unique: matches the case-insensitive business rule

Design Decisions:
    - JSON column for projects: ordered list of project id strings, duplicates
      allowed, validated by the service before every write
    - name_key is computed in Python (str.casefold) rather than with SQL lower(),
      which folds ASCII only on SQLite
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from staffing.core.enforce_dates import as_utc
from staffing.db.base import Base


class Employee(Base):
    """Employee entity."""
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    name_key: Mapped[str] = mapped_column(
        String(400), nullable=False, unique=True,
    )
    post: Mapped[str] = mapped_column(String(200), nullable=False)
    admission: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    projects: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    def to_record(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "post": self.post,
            "admission": as_utc(self.admission),
            "active": self.active,
            "projects": list(self.projects or []),
        }


def name_key(name: str) -> str:
    """Case-insensitive identity of an employee name."""
    return name.casefold()
