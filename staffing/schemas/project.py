"""Project Schemas — create/update payloads and the public project shape.

Invariants:
    - ProjectCreate requires name, description, startDate
    - ProjectUpdate fields are all optional; to_fields() drops unset and null values
    - ProjectResponse serializes with camelCase aliases
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from staffing.schemas.common import strip_required_name


class ProjectCreate(BaseModel):
    """Project creation payload."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=10_000)
    start_date: str = Field(alias="startDate")
    end_date: str | None = Field(None, alias="endDate")
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required_name(v)

    def to_fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class ProjectUpdate(BaseModel):
    """Partial project update — only provided fields are validated and applied."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1, max_length=10_000)
    start_date: str | None = Field(None, alias="startDate")
    end_date: str | None = Field(None, alias="endDate")
    active: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_required_name(v) if v is not None else v

    def to_fields(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ProjectResponse(BaseModel):
    """Public-facing project data."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    start_date: datetime = Field(alias="startDate")
    end_date: datetime | None = Field(None, alias="endDate")
    active: bool
