"""Domain Types — identity types that replace bare strings across the codebase.

Invariants:
    - ProjectId and EmployeeId are the string form of the store-assigned UUID
    - Ids coming from clients are opaque: malformed ids are "absent", never errors

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str over UUID: ids travel through JSON bodies (Employee.projects) unparsed
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", str)
EmployeeId = NewType("EmployeeId", str)
