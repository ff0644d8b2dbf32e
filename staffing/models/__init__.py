"""ORM Models — SQLAlchemy declarative models for projects and employees.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employees reference projects by id inside a JSON list (no FK table)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from staffing.models.project import Project  # noqa: F401
from staffing.models.employee import Employee  # noqa: F401
