"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; business rules live in services/
    - JSON uses camelCase (startDate, endDate); Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Dates arrive as strings and are parsed by core/enforce_dates.py so that
      "startDate must be a date" is reported by the engine, not by pydantic
"""
