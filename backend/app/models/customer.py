"""Customer ORM — the customer record managed through /customers.

Invariants:
    - address_id, when set, points at an existing Address (SET NULL on delete)
    - birthday is a timestamp, not a bare date, to match the wire contract

Design Decisions:
    - address relationship eager-loaded with selectin: responses always carry
      address {id} and async sessions cannot lazy-load
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, EntityMixin
from app.models.address import Address


class Customer(EntityMixin, Base):
    """Customer entity."""
    __tablename__ = "customers"

    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    birthday: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    address_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )

    # Relationships
    address: Mapped[Address | None] = relationship(
        Address, lazy="selectin",
    )
