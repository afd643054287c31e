"""Customer Routes — create, list, get, update and delete customers.

Invariants:
    - A missing customer answers 404 with message
      `No resource was found for {"id":"<id>"}`
    - POST answers 201; every other success answers 200
    - Responses are camelCase with ISO-8601 timestamps
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import find_many_args, get_customer_service
from app.api.guards import authorize
from app.core.domain_types import Action, Resource
from app.core.errors import NotFoundError
from app.core.service_protocols import CustomerServiceLike
from app.schemas.customer import (
    Customer, CustomerCreateInput, CustomerFindManyArgs, CustomerUpdateInput,
    CustomerWhereUniqueInput,
)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post(
    "", response_model=Customer, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.CREATE))],
)
async def create_customer(
    body: CustomerCreateInput,
    service: CustomerServiceLike = Depends(get_customer_service),
):
    """Create a customer."""
    return await service.create(body)


@router.get(
    "", response_model=list[Customer],
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.READ))],
)
async def list_customers(
    args: CustomerFindManyArgs = Depends(find_many_args(CustomerFindManyArgs)),
    service: CustomerServiceLike = Depends(get_customer_service),
):
    """List customers with where / orderBy / skip / take."""
    return await service.find_many(args)


@router.get(
    "/{customer_id}", response_model=Customer,
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.READ))],
)
async def get_customer(
    customer_id: str,
    service: CustomerServiceLike = Depends(get_customer_service),
):
    result = await service.find_one(CustomerWhereUniqueInput(id=customer_id))
    if result is None:
        raise NotFoundError({"id": customer_id})
    return result


@router.patch(
    "/{customer_id}", response_model=Customer,
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.UPDATE))],
)
async def update_customer(
    customer_id: str,
    body: CustomerUpdateInput,
    service: CustomerServiceLike = Depends(get_customer_service),
):
    """Apply the fields present in the body; absent fields are left alone."""
    result = await service.update(CustomerWhereUniqueInput(id=customer_id), body)
    if result is None:
        raise NotFoundError({"id": customer_id})
    return result


@router.delete(
    "/{customer_id}", response_model=Customer,
    dependencies=[Depends(authorize(Resource.CUSTOMER, Action.DELETE))],
)
async def delete_customer(
    customer_id: str,
    service: CustomerServiceLike = Depends(get_customer_service),
):
    result = await service.delete(CustomerWhereUniqueInput(id=customer_id))
    if result is None:
        raise NotFoundError({"id": customer_id})
    return result
