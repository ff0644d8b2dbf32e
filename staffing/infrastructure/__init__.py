"""Infrastructure Layer — database access, repositories, and cross-cutting concerns.

Invariants:
    - Repositories implement the Protocols in core/repository_protocols.py
    - SQLAlchemy types never leak past this layer: records are plain dicts

Design Decisions:
    - One repository module per entity, each bound to a single AsyncSession
"""
