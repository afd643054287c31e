"""Address Service — address CRUD plus the address → customers relation.

Invariants:
    - Deleting an address detaches its customers first (address_id set to NULL)
    - Relation calls return False when the parent address does not exist
    - Any unknown customer id in a relation call → NotFoundError, nothing written
    - update_customers makes the given list the complete set of customers
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityId
from app.core.errors import NotFoundError
from app.models.address import Address
from app.models.customer import Customer
from app.schemas.address import (
    AddressCreateInput, AddressFindManyArgs, AddressUpdateInput,
    AddressWhereUniqueInput,
)
from app.schemas.customer import CustomerFindManyArgs, CustomerWhereUniqueInput
from app.services.customer_service import RELATIONS as CUSTOMER_RELATIONS
from app.services.query_builder import find_many_statement

logger = logging.getLogger(__name__)


class AddressService:
    """ORM-backed address persistence."""

    def __init__(
        self, db: AsyncSession, default_take: int = 100, max_take: int = 1000,
    ):
        self.db = db
        self.default_take = default_take
        self.max_take = max_take

    async def create(self, data: AddressCreateInput) -> Address:
        address = Address(**data.model_dump(exclude_unset=True))
        self.db.add(address)
        await self.db.commit()
        await self.db.refresh(address)
        logger.info(
            "Address created",
            extra={"entity": "Address", "entity_id": address.id},
        )
        return address

    async def find_many(self, args: AddressFindManyArgs) -> list[Address]:
        stmt = find_many_statement(
            Address, args, self.default_take, self.max_take,
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_one(self, where: AddressWhereUniqueInput) -> Address | None:
        return await self.db.get(Address, where.id)

    async def update(
        self, where: AddressWhereUniqueInput, data: AddressUpdateInput,
    ) -> Address | None:
        address = await self.find_one(where)
        if address is None:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(address, key, value)
        await self.db.commit()
        await self.db.refresh(address)
        logger.info(
            "Address updated",
            extra={"entity": "Address", "entity_id": address.id},
        )
        return address

    async def delete(self, where: AddressWhereUniqueInput) -> Address | None:
        address = await self.find_one(where)
        if address is None:
            return None
        await self._set_address(Customer.address_id == address.id, None)
        await self.db.delete(address)
        await self.db.commit()
        logger.info(
            "Address deleted",
            extra={"entity": "Address", "entity_id": address.id},
        )
        return address

    # --- customers relation ---------------------------------------------------

    async def find_customers(
        self, parent_id: EntityId, args: CustomerFindManyArgs,
    ) -> list[Customer] | None:
        if await self.db.get(Address, parent_id) is None:
            return None
        stmt = find_many_statement(
            Customer, args, self.default_take, self.max_take, CUSTOMER_RELATIONS,
        ).where(Customer.address_id == parent_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def connect_customers(
        self, parent_id: EntityId, refs: list[CustomerWhereUniqueInput],
    ) -> bool:
        if await self.db.get(Address, parent_id) is None:
            return False
        ids = await self._existing_customer_ids(refs)
        await self._set_address(Customer.id.in_(ids), parent_id)
        await self.db.commit()
        return True

    async def update_customers(
        self, parent_id: EntityId, refs: list[CustomerWhereUniqueInput],
    ) -> bool:
        if await self.db.get(Address, parent_id) is None:
            return False
        ids = await self._existing_customer_ids(refs)
        await self._set_address(Customer.address_id == parent_id, None)
        await self._set_address(Customer.id.in_(ids), parent_id)
        await self.db.commit()
        return True

    async def disconnect_customers(
        self, parent_id: EntityId, refs: list[CustomerWhereUniqueInput],
    ) -> bool:
        if await self.db.get(Address, parent_id) is None:
            return False
        ids = await self._existing_customer_ids(refs)
        await self._set_address(
            Customer.id.in_(ids) & (Customer.address_id == parent_id), None,
        )
        await self.db.commit()
        return True

    async def _existing_customer_ids(
        self, refs: list[CustomerWhereUniqueInput],
    ) -> list[str]:
        ids = [ref.id for ref in refs]
        result = await self.db.execute(
            select(Customer.id).where(Customer.id.in_(ids)),
        )
        found = set(result.scalars().all())
        for customer_id in ids:
            if customer_id not in found:
                raise NotFoundError({"id": customer_id})
        return ids

    async def _set_address(self, condition, address_id: str | None) -> None:
        await self.db.execute(
            update(Customer).where(condition).values(address_id=address_id),
        )
