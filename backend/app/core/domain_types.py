"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the string primary key shared by every entity
    - Sort directions and CRUD actions encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", str)


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    """Per-field sort direction used by every *OrderByInput."""
    ASC = "asc"
    DESC = "desc"


class QueryMode(str, Enum):
    """String filter comparison mode."""
    DEFAULT = "default"
    INSENSITIVE = "insensitive"


class Action(str, Enum):
    """CRUD actions checked by the ACL guard."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class Resource(str, Enum):
    """Entities exposed through the API."""
    CUSTOMER = "Customer"
    ADDRESS = "Address"


# ─── Identity ────────────────────────────────────────────────────

@dataclass(frozen=True)
class AuthUser:
    """Identity attached to a request by the authentication guard."""
    username: str
    roles: tuple[str, ...] = field(default_factory=tuple)
