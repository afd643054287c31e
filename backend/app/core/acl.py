"""Access Control — role grants per resource and action.

Invariants:
    - A request is allowed if ANY of the user's roles holds the grant
    - Unknown roles, resources or actions are denied

Design Decisions:
    - Static grant table: the generated app ships a fixed grants list, no
      admin-editable policy
"""

from typing import Iterable

from app.core.domain_types import Action, Resource

Grant = tuple[str, Resource, Action]

GRANTS: frozenset[Grant] = frozenset(
    ("user", resource, action)
    for resource in Resource
    for action in Action
)


def can(
    roles: Iterable[str], resource: Resource, action: Action,
    grants: frozenset[Grant] = GRANTS,
) -> bool:
    """True when any role is granted `action` on `resource`."""
    return any((role, resource, action) in grants for role in roles)
