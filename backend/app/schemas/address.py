"""Address Schemas — create/update inputs, sort and filter contracts, response.

Invariants:
    - address_1 / address_2 keep their snake_case names on the wire
    - zip is an integer within PostgreSQL INTEGER bounds
"""

from pydantic import Field

from app.core.domain_types import SortOrder
from app.schemas.common import (
    ApiModel, InputModel, Int32, IsoDateTime, WhereUniqueInput, FindManyArgs,
    StringFilter, StringNullableFilter, IntNullableFilter,
)


class AddressWhereUniqueInput(WhereUniqueInput):
    pass


class AddressCreateInput(InputModel):
    address_1: str | None = Field(None, alias="address_1")
    address_2: str | None = Field(None, alias="address_2")
    city: str | None = None
    state: str | None = None
    zip: Int32 | None = None


class AddressUpdateInput(InputModel):
    address_1: str | None = Field(None, alias="address_1")
    address_2: str | None = Field(None, alias="address_2")
    city: str | None = None
    state: str | None = None
    zip: Int32 | None = None


class AddressOrderByInput(InputModel):
    address_1: SortOrder | None = Field(None, alias="address_1")
    address_2: SortOrder | None = Field(None, alias="address_2")
    city: SortOrder | None = None
    created_at: SortOrder | None = None
    id: SortOrder | None = None
    state: SortOrder | None = None
    updated_at: SortOrder | None = None
    zip: SortOrder | None = None


class AddressWhereInput(InputModel):
    address_1: StringNullableFilter | None = Field(None, alias="address_1")
    address_2: StringNullableFilter | None = Field(None, alias="address_2")
    city: StringNullableFilter | None = None
    id: StringFilter | None = None
    state: StringNullableFilter | None = None
    zip: IntNullableFilter | None = None


class AddressFindManyArgs(FindManyArgs):
    where: AddressWhereInput | None = None
    order_by: list[AddressOrderByInput] = Field(default_factory=list)


class Address(ApiModel):
    """Address record as returned by every endpoint."""
    id: str
    address_1: str | None = Field(None, alias="address_1")
    address_2: str | None = Field(None, alias="address_2")
    city: str | None = None
    state: str | None = None
    zip: int | None = None
    created_at: IsoDateTime
    updated_at: IsoDateTime
