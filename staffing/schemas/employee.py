"""Employee Schemas — create/update payloads and the public employee shape.

Invariants:
    - EmployeeCreate requires name and post
    - projects, when sent, must be a list of id strings (duplicates allowed)
    - EmployeeUpdate.to_fields() drops unset and null values
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from staffing.schemas.common import strip_required_name


class EmployeeCreate(BaseModel):
    """Employee creation payload."""
    name: str = Field(min_length=1, max_length=200)
    post: str = Field(min_length=1, max_length=200)
    admission: datetime | None = None
    active: bool | None = None
    projects: list[str] | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required_name(v)

    def to_fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class EmployeeUpdate(BaseModel):
    """Partial employee update — only provided fields are validated and applied."""
    name: str | None = Field(None, min_length=1, max_length=200)
    post: str | None = Field(None, min_length=1, max_length=200)
    admission: datetime | None = None
    active: bool | None = None
    projects: list[str] | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_required_name(v) if v is not None else v

    def to_fields(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EmployeeResponse(BaseModel):
    """Public-facing employee data."""
    id: str
    name: str
    post: str
    admission: datetime
    active: bool
    projects: list[str]
