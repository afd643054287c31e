"""Customer Schemas — create/update inputs, sort and filter contracts, response.

Invariants:
    - CustomerUpdateInput covers address, birthday, email, firstName, lastName,
      phone; id / createdAt / updatedAt are rejected
    - address: null on update detaches the customer from its address
    - CustomerOrderByInput lists every sortable column, addressId included
"""

from pydantic import Field

from app.core.domain_types import SortOrder
from app.schemas.common import (
    ApiModel, InputModel, IsoDateTime, UtcDateTime, WhereUniqueInput, FindManyArgs,
    StringFilter, StringNullableFilter, DateTimeNullableFilter,
)
from app.schemas.address import AddressWhereUniqueInput


class CustomerWhereUniqueInput(WhereUniqueInput):
    pass


class CustomerCreateInput(InputModel):
    address: AddressWhereUniqueInput | None = None
    birthday: UtcDateTime | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class CustomerUpdateInput(InputModel):
    address: AddressWhereUniqueInput | None = None
    birthday: UtcDateTime | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class CustomerOrderByInput(InputModel):
    address_id: SortOrder | None = None
    birthday: SortOrder | None = None
    created_at: SortOrder | None = None
    email: SortOrder | None = None
    first_name: SortOrder | None = None
    id: SortOrder | None = None
    last_name: SortOrder | None = None
    phone: SortOrder | None = None
    updated_at: SortOrder | None = None


class CustomerWhereInput(InputModel):
    address: AddressWhereUniqueInput | None = None
    birthday: DateTimeNullableFilter | None = None
    email: StringNullableFilter | None = None
    first_name: StringNullableFilter | None = None
    id: StringFilter | None = None
    last_name: StringNullableFilter | None = None
    phone: StringNullableFilter | None = None


class CustomerFindManyArgs(FindManyArgs):
    where: CustomerWhereInput | None = None
    order_by: list[CustomerOrderByInput] = Field(default_factory=list)


class AddressRef(ApiModel):
    id: str


class Customer(ApiModel):
    """Customer record as returned by every endpoint."""
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    birthday: IsoDateTime | None = None
    address: AddressRef | None = None
    created_at: IsoDateTime
    updated_at: IsoDateTime
