"""Shared Schema Pieces — base model config, ISO timestamps, filters, pagination.

Invariants:
    - Datetimes serialize as UTC ISO-8601 with milliseconds and a Z suffix
    - A bare scalar where a filter is expected means {equals: value}
    - orderBy accepts one object or a list; both normalize to a list

Design Decisions:
    - alias_generator=to_camel + populate_by_name: snake_case in Python,
      camelCase on the wire, stubs and ORM objects validate by attribute name
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.core.domain_types import QueryMode


def to_iso(value: datetime) -> str:
    """Render as 2024-01-02T03:04:05.000Z (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


IsoDateTime = Annotated[
    datetime, PlainSerializer(to_iso, return_type=str, when_used="json"),
]


def assume_utc(value: datetime) -> datetime:
    """Attach UTC to naive input so storage agrees with to_iso."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDateTime = Annotated[datetime, AfterValidator(assume_utc)]

# Bounds of a PostgreSQL INTEGER column
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class ApiModel(BaseModel):
    """Base for every contract model."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class InputModel(ApiModel):
    """Base for client-supplied bodies and query args — unknown keys rejected."""
    model_config = ConfigDict(extra="forbid")


class WhereUniqueInput(InputModel):
    """Unique-key reference: {id}."""
    id: str


# --- Filters ------------------------------------------------------------------

class _ScalarFilter(InputModel):
    @model_validator(mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        if isinstance(v, (dict, BaseModel)):
            return v
        return {"equals": v}

    @field_validator("in_", mode="before", check_fields=False)
    @classmethod
    def wrap_single_in(cls, v: Any) -> Any:
        if v is None or isinstance(v, list):
            return v
        return [v]


class StringFilter(_ScalarFilter):
    equals: str | None = None
    not_: str | None = Field(None, alias="not")
    in_: list[str] | None = Field(None, alias="in")
    contains: str | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    mode: QueryMode | None = None


class StringNullableFilter(StringFilter):
    pass


class DateTimeNullableFilter(_ScalarFilter):
    equals: UtcDateTime | None = None
    not_: UtcDateTime | None = Field(None, alias="not")
    in_: list[UtcDateTime] | None = Field(None, alias="in")
    lt: UtcDateTime | None = None
    lte: UtcDateTime | None = None
    gt: UtcDateTime | None = None
    gte: UtcDateTime | None = None


class IntNullableFilter(_ScalarFilter):
    equals: Int32 | None = None
    not_: Int32 | None = Field(None, alias="not")
    in_: list[Int32] | None = Field(None, alias="in")
    lt: Int32 | None = None
    lte: Int32 | None = None
    gt: Int32 | None = None
    gte: Int32 | None = None


# --- Find-many args -----------------------------------------------------------

class FindManyArgs(InputModel):
    """where / orderBy / skip / take — subclasses narrow where and orderBy."""
    skip: int | None = Field(None, ge=0)
    take: int | None = Field(None, ge=1)

    @field_validator("order_by", mode="before", check_fields=False)
    @classmethod
    def one_or_many(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (dict, BaseModel)):
            return [v]
        return v
