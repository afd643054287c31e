"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every entity has a string id and server-managed created_at / updated_at

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata holds every table for
      create_all and Alembic autogenerate
"""

from app.models.address import Address  # noqa: F401
from app.models.customer import Customer  # noqa: F401
