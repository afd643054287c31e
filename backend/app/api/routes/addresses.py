"""Address Routes — address CRUD plus the /addresses/{id}/customers relation.

Invariants:
    - A missing address answers 404 with the standard not-found envelope
    - Relation writes (connect / set / disconnect) answer 204 with no body
    - Relation writes need update on Address and read on Customer
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import find_many_args, get_address_service
from app.api.guards import authorize
from app.core.domain_types import Action, EntityId, Resource
from app.core.errors import NotFoundError
from app.core.service_protocols import AddressServiceLike
from app.schemas.address import (
    Address, AddressCreateInput, AddressFindManyArgs, AddressUpdateInput,
    AddressWhereUniqueInput,
)
from app.schemas.customer import (
    Customer, CustomerFindManyArgs, CustomerWhereUniqueInput,
)

router = APIRouter(prefix="/addresses", tags=["addresses"])

_relation_write_guards = [
    Depends(authorize(Resource.ADDRESS, Action.UPDATE)),
    Depends(authorize(Resource.CUSTOMER, Action.READ)),
]


@router.post(
    "", response_model=Address, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(authorize(Resource.ADDRESS, Action.CREATE))],
)
async def create_address(
    body: AddressCreateInput,
    service: AddressServiceLike = Depends(get_address_service),
):
    return await service.create(body)


@router.get(
    "", response_model=list[Address],
    dependencies=[Depends(authorize(Resource.ADDRESS, Action.READ))],
)
async def list_addresses(
    args: AddressFindManyArgs = Depends(find_many_args(AddressFindManyArgs)),
    service: AddressServiceLike = Depends(get_address_service),
):
    return await service.find_many(args)


@router.get(
    "/{address_id}", response_model=Address,
    dependencies=[Depends(authorize(Resource.ADDRESS, Action.READ))],
)
async def get_address(
    address_id: str,
    service: AddressServiceLike = Depends(get_address_service),
):
    result = await service.find_one(AddressWhereUniqueInput(id=address_id))
    if result is None:
        raise NotFoundError({"id": address_id})
    return result


@router.patch(
    "/{address_id}", response_model=Address,
    dependencies=[Depends(authorize(Resource.ADDRESS, Action.UPDATE))],
)
async def update_address(
    address_id: str,
    body: AddressUpdateInput,
    service: AddressServiceLike = Depends(get_address_service),
):
    result = await service.update(AddressWhereUniqueInput(id=address_id), body)
    if result is None:
        raise NotFoundError({"id": address_id})
    return result


@router.delete(
    "/{address_id}", response_model=Address,
    dependencies=[Depends(authorize(Resource.ADDRESS, Action.DELETE))],
)
async def delete_address(
    address_id: str,
    service: AddressServiceLike = Depends(get_address_service),
):
    """Delete an address; its customers keep existing with address null."""
    result = await service.delete(AddressWhereUniqueInput(id=address_id))
    if result is None:
        raise NotFoundError({"id": address_id})
    return result


# ─── customers relation ─────────────────────────────────────────

@router.get(
    "/{address_id}/customers", response_model=list[Customer],
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.READ))],
)
async def list_address_customers(
    address_id: str,
    args: CustomerFindManyArgs = Depends(find_many_args(CustomerFindManyArgs)),
    service: AddressServiceLike = Depends(get_address_service),
):
    result = await service.find_customers(EntityId(address_id), args)
    if result is None:
        raise NotFoundError({"id": address_id})
    return result


@router.post(
    "/{address_id}/customers", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=_relation_write_guards,
)
async def connect_address_customers(
    address_id: str,
    body: list[CustomerWhereUniqueInput],
    service: AddressServiceLike = Depends(get_address_service),
) -> Response:
    if not await service.connect_customers(EntityId(address_id), body):
        raise NotFoundError({"id": address_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{address_id}/customers", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=_relation_write_guards,
)
async def update_address_customers(
    address_id: str,
    body: list[CustomerWhereUniqueInput],
    service: AddressServiceLike = Depends(get_address_service),
) -> Response:
    """Replace the address's customers with exactly the given list."""
    if not await service.update_customers(EntityId(address_id), body):
        raise NotFoundError({"id": address_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{address_id}/customers", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=_relation_write_guards,
)
async def disconnect_address_customers(
    address_id: str,
    body: list[CustomerWhereUniqueInput],
    service: AddressServiceLike = Depends(get_address_service),
) -> Response:
    if not await service.disconnect_customers(EntityId(address_id), body):
        raise NotFoundError({"id": address_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
