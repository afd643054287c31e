"""SQLAlchemy Declarative Base — shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - created_at / updated_at are set by the server, never by clients

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Python-side defaults (not server_default) so values are known after flush
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class EntityMixin:
    """String primary key plus server-managed timestamps."""

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
