"""Address ORM — postal address a customer can reference.

Invariants:
    - All descriptive columns are nullable (partial addresses are allowed)
    - Customers reference an address through customers.address_id

Design Decisions:
    - No customers collection on Address: the relation is queried explicitly by
      AddressService so nothing lazy-loads inside an async session
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, EntityMixin


class Address(EntityMixin, Base):
    """Address entity."""
    __tablename__ = "addresses"

    address_1: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_2: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str | None] = mapped_column(Text, nullable=True)
    zip: Mapped[int | None] = mapped_column(Integer, nullable=True)
