"""Pydantic Schemas - request binding and response shaping for catalog records.

Invariants:
    - Wire names are camelCase (aliases); Python attribute names match ORM columns
    - Create/update models never contain a surrogate key

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
