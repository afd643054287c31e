"""CustomerService — ORM-backed create / list / get / update / delete.

Invariants:
    - Server assigns id, created_at, updated_at on create
    - Unknown address reference → NotFoundError naming the address id
    - Update touches only fields present in the input; address None detaches
    - find_one / update / delete return None for unknown ids
"""

import pytest

from app.core.errors import NotFoundError
from app.schemas.customer import (
    CustomerCreateInput, CustomerFindManyArgs, CustomerUpdateInput,
    CustomerWhereUniqueInput,
)
from app.services.customer_service import CustomerService


def _args(**query) -> CustomerFindManyArgs:
    return CustomerFindManyArgs.model_validate(query)


async def test_create_assigns_server_fields(test_db):
    service = CustomerService(test_db)
    customer = await service.create(
        CustomerCreateInput(firstName="Ada", email="ada@example.com"),
    )
    assert customer.id
    assert customer.created_at is not None
    assert customer.updated_at is not None
    assert customer.first_name == "Ada"
    assert customer.address is None


async def test_create_connects_existing_address(test_db, seed_address):
    service = CustomerService(test_db)
    customer = await service.create(
        CustomerCreateInput(firstName="Ada", address={"id": seed_address.id}),
    )
    assert customer.address_id == seed_address.id
    assert customer.address.id == seed_address.id


async def test_create_with_unknown_address_raises(test_db):
    service = CustomerService(test_db)
    with pytest.raises(NotFoundError) as exc_info:
        await service.create(
            CustomerCreateInput(firstName="Ada", address={"id": "nope"}),
        )
    assert exc_info.value.message == 'No resource was found for {"id":"nope"}'


async def test_find_many_orders_and_paginates(test_db, seed_customers):
    service = CustomerService(test_db)
    result = await service.find_many(
        _args(orderBy={"firstName": "desc"}, skip="1", take="1"),
    )
    assert [c.first_name for c in result] == ["Alan"]


async def test_find_many_applies_multiple_order_terms(test_db, seed_customers):
    service = CustomerService(test_db)
    result = await service.find_many(
        _args(orderBy=[{"addressId": "asc"}, {"lastName": "asc"}]),
    )
    # NULL address sorts first on SQLite
    assert [c.last_name for c in result] == ["Turing", "Hopper", "Lovelace"]


async def test_find_many_filters_insensitive_contains(test_db, seed_customers):
    service = CustomerService(test_db)
    result = await service.find_many(
        _args(where={"lastName": {"contains": "HOP", "mode": "insensitive"}}),
    )
    assert [c.first_name for c in result] == ["Grace"]


async def test_find_many_filters_by_address(test_db, seed_customers, seed_address):
    service = CustomerService(test_db)
    result = await service.find_many(
        _args(where={"address": {"id": seed_address.id}}, orderBy={"firstName": "asc"}),
    )
    assert [c.first_name for c in result] == ["Ada", "Grace"]


async def test_find_many_in_filter(test_db, seed_customers):
    service = CustomerService(test_db)
    result = await service.find_many(
        _args(where={"email": {"in": ["ada@example.com", "alan@example.com"]}},
              orderBy={"email": "asc"}),
    )
    assert [c.first_name for c in result] == ["Ada", "Alan"]


async def test_find_many_clamps_take(test_db, seed_customers):
    service = CustomerService(test_db, default_take=2, max_take=2)
    assert len(await service.find_many(_args())) == 2
    assert len(await service.find_many(_args(take="50"))) == 2


async def test_find_one_missing_returns_none(test_db):
    service = CustomerService(test_db)
    assert await service.find_one(CustomerWhereUniqueInput(id="missing")) is None


async def test_update_applies_only_sent_fields(test_db, seed_customers):
    ada = seed_customers[0]
    service = CustomerService(test_db)
    updated = await service.update(
        CustomerWhereUniqueInput(id=ada.id), CustomerUpdateInput(phone="555-0100"),
    )
    assert updated.phone == "555-0100"
    assert updated.email == "ada@example.com"
    assert updated.updated_at >= updated.created_at


async def test_update_null_clears_field(test_db, seed_customers):
    ada = seed_customers[0]
    service = CustomerService(test_db)
    updated = await service.update(
        CustomerWhereUniqueInput(id=ada.id), CustomerUpdateInput(email=None),
    )
    assert updated.email is None
    assert updated.first_name == "Ada"


async def test_update_address_null_detaches(test_db, seed_customers):
    ada = seed_customers[0]
    service = CustomerService(test_db)
    updated = await service.update(
        CustomerWhereUniqueInput(id=ada.id), CustomerUpdateInput(address=None),
    )
    assert updated.address_id is None
    assert updated.address is None


async def test_update_unknown_address_raises(test_db, seed_customers):
    service = CustomerService(test_db)
    with pytest.raises(NotFoundError):
        await service.update(
            CustomerWhereUniqueInput(id=seed_customers[2].id),
            CustomerUpdateInput(address={"id": "nope"}),
        )


async def test_update_missing_returns_none(test_db):
    service = CustomerService(test_db)
    result = await service.update(
        CustomerWhereUniqueInput(id="missing"), CustomerUpdateInput(phone="1"),
    )
    assert result is None


async def test_delete_removes_customer(test_db, seed_customers):
    alan = seed_customers[2]
    service = CustomerService(test_db)
    deleted = await service.delete(CustomerWhereUniqueInput(id=alan.id))
    assert deleted.id == alan.id
    assert await service.find_one(CustomerWhereUniqueInput(id=alan.id)) is None


async def test_delete_missing_returns_none(test_db):
    service = CustomerService(test_db)
    assert await service.delete(CustomerWhereUniqueInput(id="missing")) is None
