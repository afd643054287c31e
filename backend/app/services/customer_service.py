"""Customer Service — create, list, get, update and delete customers.

Invariants:
    - id / created_at / updated_at never come from input (schemas reject them)
    - address is resolved before write; unknown id → NotFoundError({"id": ...})
    - address explicitly null on update detaches the customer
    - Returned objects always have `address` loaded (refresh after commit)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.models.address import Address
from app.models.customer import Customer
from app.schemas.customer import (
    CustomerCreateInput, CustomerFindManyArgs, CustomerUpdateInput,
    CustomerWhereUniqueInput,
)
from app.services.query_builder import find_many_statement

logger = logging.getLogger(__name__)

RELATIONS = {"address": "address_id"}


class CustomerService:
    """ORM-backed customer persistence."""

    def __init__(
        self, db: AsyncSession, default_take: int = 100, max_take: int = 1000,
    ):
        self.db = db
        self.default_take = default_take
        self.max_take = max_take

    async def create(self, data: CustomerCreateInput) -> Customer:
        values = data.model_dump(exclude_unset=True)
        address_ref = values.pop("address", None)
        customer = Customer(**values)
        customer.address = (
            await self._resolve_address(address_ref["id"]) if address_ref else None
        )
        self.db.add(customer)
        await self.db.commit()
        await self.db.refresh(customer)
        logger.info(
            "Customer created",
            extra={"entity": "Customer", "entity_id": customer.id},
        )
        return customer

    async def find_many(self, args: CustomerFindManyArgs) -> list[Customer]:
        stmt = find_many_statement(
            Customer, args, self.default_take, self.max_take, RELATIONS,
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_one(self, where: CustomerWhereUniqueInput) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.id == where.id),
        )
        return result.scalar_one_or_none()

    async def update(
        self, where: CustomerWhereUniqueInput, data: CustomerUpdateInput,
    ) -> Customer | None:
        customer = await self.find_one(where)
        if customer is None:
            return None
        values = data.model_dump(exclude_unset=True)
        if "address" in values:
            address_ref = values.pop("address")
            customer.address = (
                await self._resolve_address(address_ref["id"])
                if address_ref else None
            )
        for key, value in values.items():
            setattr(customer, key, value)
        await self.db.commit()
        await self.db.refresh(customer)
        logger.info(
            "Customer updated",
            extra={"entity": "Customer", "entity_id": customer.id},
        )
        return customer

    async def delete(self, where: CustomerWhereUniqueInput) -> Customer | None:
        customer = await self.find_one(where)
        if customer is None:
            return None
        await self.db.delete(customer)
        await self.db.commit()
        logger.info(
            "Customer deleted",
            extra={"entity": "Customer", "entity_id": customer.id},
        )
        return customer

    async def _resolve_address(self, address_id: str) -> Address:
        address = await self.db.get(Address, address_id)
        if address is None:
            raise NotFoundError({"id": address_id})
        return address
