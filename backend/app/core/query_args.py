"""Query Args — turns bracket-notation query strings into nested dicts.

Invariants:
    - `where[firstName][contains]=an` → {"where": {"firstName": {"contains": "an"}}}
    - Repeated keys and `key[]=` collect into lists
    - Dicts whose keys are all integers become lists ordered by index
    - Structural conflicts (`a=1&a[b]=2`) raise BadRequestError, never guessed

Design Decisions:
    - Values stay strings: Pydantic coerces them when the args model validates
    - Pure function over (key, value) pairs so it works on any multi-dict
"""

import re
from typing import Any, Iterable

from app.core.errors import BadRequestError

_BRACKET = re.compile(r"\[([^\[\]]*)\]")


def split_key(key: str) -> list[str]:
    """Split `a[b][c]` into ["a", "b", "c"]."""
    head, sep, rest = key.partition("[")
    if not sep:
        return [key]
    return [head, *_BRACKET.findall(sep + rest)]


def parse_nested_query(items: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Build a nested structure from flat query-string pairs."""
    result: dict[str, Any] = {}
    for raw_key, value in items:
        parts = split_key(raw_key)
        as_list = len(parts) > 1 and parts[-1] == ""
        if as_list:
            parts = parts[:-1]

        node = result
        for part in parts[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise BadRequestError(f"{raw_key}: conflicting query parameter")
            node = child

        leaf = parts[-1]
        existing = node.get(leaf)
        if existing is None:
            node[leaf] = [value] if as_list else value
        elif isinstance(existing, dict):
            raise BadRequestError(f"{raw_key}: conflicting query parameter")
        elif isinstance(existing, list):
            existing.append(value)
        else:
            node[leaf] = [existing, value]
    return _listify(result)


def _listify(node: Any) -> Any:
    if isinstance(node, list):
        return [_listify(item) for item in node]
    if not isinstance(node, dict):
        return node
    converted = {key: _listify(value) for key, value in node.items()}
    if converted and all(key.isdigit() for key in converted):
        return [converted[key] for key in sorted(converted, key=int)]
    return converted
