"""Boundary Protocols — contracts between controllers and persistence services.

Invariants:
    - Controllers depend on these Protocols, never on the ORM-backed classes
    - find_one / update / delete return None when no record matches; the
      controller turns that into NotFoundError
    - Records may be ORM objects or plain mappings — response models accept both

Design Decisions:
    - Protocol over ABC: structural subtyping, test stubs need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol

from app.core.domain_types import EntityId


class EntityService(Protocol):
    """CRUD contract every entity service satisfies."""
    async def create(self, data: Any) -> Any: ...
    async def find_many(self, args: Any) -> list[Any]: ...
    async def find_one(self, where: Any) -> Any | None: ...
    async def update(self, where: Any, data: Any) -> Any | None: ...
    async def delete(self, where: Any) -> Any | None: ...


class CustomerServiceLike(EntityService, Protocol):
    """Customer persistence contract."""


class AddressServiceLike(EntityService, Protocol):
    """Address persistence contract, plus the customers relation."""
    async def find_customers(
        self, parent_id: EntityId, args: Any,
    ) -> list[Any] | None: ...
    async def connect_customers(
        self, parent_id: EntityId, refs: list[Any],
    ) -> bool: ...
    async def update_customers(
        self, parent_id: EntityId, refs: list[Any],
    ) -> bool: ...
    async def disconnect_customers(
        self, parent_id: EntityId, refs: list[Any],
    ) -> bool: ...
