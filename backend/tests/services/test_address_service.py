"""AddressService — address CRUD and the customers relation.

Invariants:
    - Deleting an address keeps its customers, with address_id NULL
    - find_customers returns None for an unknown address
    - connect / set / disconnect validate every customer id before writing
"""

import pytest
from sqlalchemy import select

from app.core.errors import NotFoundError
from app.models.customer import Customer
from app.schemas.address import (
    AddressCreateInput, AddressFindManyArgs, AddressUpdateInput,
    AddressWhereUniqueInput,
)
from app.schemas.customer import CustomerFindManyArgs, CustomerWhereUniqueInput
from app.services.address_service import AddressService


def _refs(*customers) -> list[CustomerWhereUniqueInput]:
    return [CustomerWhereUniqueInput(id=c.id) for c in customers]


async def _address_ids(test_db) -> dict[str, str | None]:
    result = await test_db.execute(
        select(Customer.first_name, Customer.address_id),
    )
    return {name: address_id for name, address_id in result.all()}


async def test_create_and_find(test_db):
    service = AddressService(test_db)
    address = await service.create(
        AddressCreateInput(address_1="1 Main St", city="Springfield", zip=62701),
    )
    found = await service.find_one(AddressWhereUniqueInput(id=address.id))
    assert found.city == "Springfield"
    assert found.zip == 62701


async def test_find_many_filters_zip_range(test_db):
    service = AddressService(test_db)
    for zip_code in (10001, 20002, 30003):
        await service.create(AddressCreateInput(zip=zip_code))
    result = await service.find_many(AddressFindManyArgs.model_validate({
        "where": {"zip": {"gte": "20000"}}, "orderBy": {"zip": "desc"},
    }))
    assert [a.zip for a in result] == [30003, 20002]


async def test_update_address(test_db, seed_address):
    service = AddressService(test_db)
    updated = await service.update(
        AddressWhereUniqueInput(id=seed_address.id), AddressUpdateInput(state="OR"),
    )
    assert updated.state == "OR"
    assert updated.city == "Springfield"


async def test_update_missing_address_returns_none(test_db):
    service = AddressService(test_db)
    result = await service.update(
        AddressWhereUniqueInput(id="missing"), AddressUpdateInput(state="OR"),
    )
    assert result is None


async def test_delete_detaches_customers(test_db, seed_customers, seed_address):
    service = AddressService(test_db)
    deleted = await service.delete(AddressWhereUniqueInput(id=seed_address.id))
    assert deleted.id == seed_address.id
    assert await _address_ids(test_db) == {"Ada": None, "Grace": None, "Alan": None}


async def test_find_customers(test_db, seed_customers, seed_address):
    service = AddressService(test_db)
    result = await service.find_customers(
        seed_address.id,
        CustomerFindManyArgs.model_validate({"orderBy": {"firstName": "desc"}}),
    )
    assert [c.first_name for c in result] == ["Grace", "Ada"]


async def test_find_customers_unknown_address(test_db):
    service = AddressService(test_db)
    assert await service.find_customers("missing", CustomerFindManyArgs()) is None


async def test_connect_customers(test_db, seed_customers, seed_address):
    service = AddressService(test_db)
    assert await service.connect_customers(seed_address.id, _refs(seed_customers[2]))
    ids = await _address_ids(test_db)
    assert ids["Alan"] == seed_address.id
    assert ids["Ada"] == seed_address.id


async def test_update_customers_replaces_set(test_db, seed_customers, seed_address):
    ada, grace, alan = seed_customers
    service = AddressService(test_db)
    assert await service.update_customers(seed_address.id, _refs(grace, alan))
    assert await _address_ids(test_db) == {
        "Ada": None, "Grace": seed_address.id, "Alan": seed_address.id,
    }


async def test_disconnect_customers(test_db, seed_customers, seed_address):
    ada, grace, alan = seed_customers
    service = AddressService(test_db)
    assert await service.disconnect_customers(seed_address.id, _refs(ada, alan))
    assert await _address_ids(test_db) == {
        "Ada": None, "Grace": seed_address.id, "Alan": None,
    }


async def test_relation_unknown_parent_returns_false(test_db, seed_customers):
    service = AddressService(test_db)
    assert not await service.connect_customers("missing", _refs(seed_customers[0]))
    assert not await service.update_customers("missing", [])
    assert not await service.disconnect_customers("missing", [])


async def test_connect_unknown_customer_writes_nothing(
    test_db, seed_customers, seed_address,
):
    alan = seed_customers[2]
    service = AddressService(test_db)
    refs = _refs(alan) + [CustomerWhereUniqueInput(id="unknown-customer")]
    with pytest.raises(NotFoundError) as exc_info:
        await service.connect_customers(seed_address.id, refs)
    assert exc_info.value.where == {"id": "unknown-customer"}
    assert (await _address_ids(test_db))["Alan"] is None
