"""Query Builder — translates validated where / orderBy / skip / take into SQL clauses.

Invariants:
    - Input is always a validated args model, so every field name maps to a column
    - Relation filters ({address: {id}}) compare the foreign-key column
    - take is clamped to max_take; a missing take falls back to default_take
    - mode=insensitive lower-cases both sides of string comparisons
"""

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.sql.elements import ColumnElement

from app.core.domain_types import QueryMode, SortOrder
from app.schemas.common import FindManyArgs


def filter_conditions(column: Any, flt: dict[str, Any]) -> list[ColumnElement]:
    """Conditions for one column filter ({equals, contains, lt, ...})."""
    ops = dict(flt)
    insensitive = ops.pop("mode", None) == QueryMode.INSENSITIVE
    target = func.lower(column) if insensitive else column

    def norm(value: Any) -> Any:
        return value.lower() if insensitive and isinstance(value, str) else value

    conditions: list[ColumnElement] = []
    for op, value in ops.items():
        if op == "equals":
            conditions.append(target == norm(value))
        elif op == "not_":
            conditions.append(target != norm(value))
        elif op == "in_":
            conditions.append(target.in_([norm(v) for v in value]))
        elif op == "contains":
            conditions.append(target.contains(norm(value), autoescape=True))
        elif op == "starts_with":
            conditions.append(target.startswith(norm(value), autoescape=True))
        elif op == "ends_with":
            conditions.append(target.endswith(norm(value), autoescape=True))
        elif op == "lt":
            conditions.append(column < value)
        elif op == "lte":
            conditions.append(column <= value)
        elif op == "gt":
            conditions.append(column > value)
        elif op == "gte":
            conditions.append(column >= value)
        else:
            raise ValueError(f"Unsupported filter operator: {op}")
    return conditions


def apply_where(
    stmt: Select, model: type, where: dict[str, Any],
    relations: dict[str, str] | None = None,
) -> Select:
    """Add one WHERE clause per filtered field (AND semantics)."""
    relations = relations or {}
    for field, flt in where.items():
        if field in relations:
            stmt = stmt.where(getattr(model, relations[field]) == flt["id"])
            continue
        stmt = stmt.where(*filter_conditions(getattr(model, field), flt))
    return stmt


def apply_order_by(
    stmt: Select, model: type, order_by: list[dict[str, SortOrder]],
) -> Select:
    """Append ORDER BY terms in the order given."""
    for entry in order_by:
        for field, direction in entry.items():
            column = getattr(model, field)
            stmt = stmt.order_by(
                column.desc() if direction == SortOrder.DESC else column.asc(),
            )
    return stmt


def apply_pagination(
    stmt: Select, skip: int | None, take: int | None,
    default_take: int, max_take: int,
) -> Select:
    limit = min(take or default_take, max_take)
    return stmt.offset(skip or 0).limit(limit)


def find_many_statement(
    model: type, args: FindManyArgs,
    default_take: int, max_take: int,
    relations: dict[str, str] | None = None,
) -> Select:
    """Full SELECT for a list call."""
    dumped = args.model_dump(exclude_none=True)
    stmt = select(model)
    stmt = apply_where(stmt, model, dumped.get("where", {}), relations)
    stmt = apply_order_by(stmt, model, dumped.get("order_by", []))
    return apply_pagination(stmt, args.skip, args.take, default_take, max_take)
