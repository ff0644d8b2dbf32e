"""Services Layer — validation engines for projects and employees.

Invariants:
    - Services receive repositories through their constructor (no globals)
    - Each call issues a strictly ordered sequence of awaited repository calls

Design Decisions:
    - One service per entity for locality; routes build them per request
"""
