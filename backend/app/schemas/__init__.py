"""Pydantic Schemas — the entity contract layer (inputs, filters, sorts, responses).

Invariants:
    - Wire names are camelCase; Python attributes are snake_case
    - Input models forbid unknown fields, so server-managed fields are rejected
    - Response models accept ORM objects and plain mappings alike

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
