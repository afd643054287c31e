"""Query Args — bracket-notation query strings into nested structures.

Tests:
    - Nested keys build nested dicts
    - Repeated keys and `[]` suffixes collect into lists
    - Integer-keyed dicts become ordered lists
    - Conflicting shapes raise BadRequestError
"""

import pytest

from app.core.errors import BadRequestError
from app.core.query_args import parse_nested_query, split_key


def test_split_key_plain():
    assert split_key("take") == ["take"]


def test_split_key_brackets():
    assert split_key("where[firstName][contains]") == ["where", "firstName", "contains"]


def test_split_key_trailing_empty_bracket():
    assert split_key("ids[]") == ["ids", ""]


def test_flat_pairs():
    assert parse_nested_query([("skip", "5"), ("take", "10")]) == {
        "skip": "5", "take": "10",
    }


def test_nested_where_and_order_by():
    result = parse_nested_query([
        ("where[firstName][contains]", "an"),
        ("where[firstName][mode]", "insensitive"),
        ("orderBy[lastName]", "desc"),
    ])
    assert result == {
        "where": {"firstName": {"contains": "an", "mode": "insensitive"}},
        "orderBy": {"lastName": "desc"},
    }


def test_repeated_key_collects_list():
    result = parse_nested_query([
        ("where[id][in]", "a"), ("where[id][in]", "b"),
    ])
    assert result == {"where": {"id": {"in": ["a", "b"]}}}


def test_empty_bracket_forces_list():
    assert parse_nested_query([("where[id][in][]", "a")]) == {
        "where": {"id": {"in": ["a"]}},
    }


def test_indexed_keys_become_ordered_list():
    result = parse_nested_query([
        ("orderBy[1][firstName]", "asc"),
        ("orderBy[0][lastName]", "desc"),
    ])
    assert result == {"orderBy": [{"lastName": "desc"}, {"firstName": "asc"}]}


def test_index_ordering_is_numeric():
    result = parse_nested_query([(f"a[{i}]", str(i)) for i in (10, 2, 1)])
    assert result == {"a": ["1", "2", "10"]}


def test_scalar_then_nested_conflicts():
    with pytest.raises(BadRequestError):
        parse_nested_query([("where", "1"), ("where[firstName]", "Ada")])


def test_nested_then_scalar_conflicts():
    with pytest.raises(BadRequestError):
        parse_nested_query([("where[firstName]", "Ada"), ("where", "1")])


def test_empty_query():
    assert parse_nested_query([]) == {}
