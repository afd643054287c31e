"""Dependencies — service factories and list-argument parsing for routes.

Invariants:
    - One service instance per request, bound to that request's AsyncSession
    - List arguments come from bracket-notation query strings and are validated
      by the entity's FindManyArgs model; failures surface as 400

Design Decisions:
    - Routes depend on these factories, so tests override them with stubs
"""

from typing import Callable, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.query_args import parse_nested_query
from app.core.service_protocols import AddressServiceLike, CustomerServiceLike
from app.infrastructure.database import get_db
from app.schemas.common import FindManyArgs
from app.services.address_service import AddressService
from app.services.customer_service import CustomerService

ArgsT = TypeVar("ArgsT", bound=FindManyArgs)


def get_customer_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomerServiceLike:
    return CustomerService(db, settings.default_page_size, settings.max_page_size)


def get_address_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AddressServiceLike:
    return AddressService(db, settings.default_page_size, settings.max_page_size)


def find_many_args(model: type[ArgsT]) -> Callable[[Request], ArgsT]:
    """Dependency factory: parse and validate list query args into `model`."""

    def parse(request: Request) -> ArgsT:
        nested = parse_nested_query(request.query_params.multi_items())
        try:
            return model.model_validate(nested)
        except ValidationError as e:
            raise RequestValidationError([
                {**err, "loc": ("query", *err["loc"])}
                for err in e.errors(include_url=False)
            ])

    return parse
