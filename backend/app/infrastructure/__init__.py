"""Infrastructure Layer — database engine, logging and other cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All SQLAlchemy failures leave this layer as ApiError subclasses

Design Decisions:
    - Singletons initialized from the FastAPI lifespan, never at import time
"""
