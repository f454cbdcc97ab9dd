"""Unit tests for schema grouping."""

from __future__ import annotations

from jot.tables import SchemaGroup, group_by_schema, is_table_candidate, row_to_object, table_groups


def test_group_consecutive_runs() -> None:
    groups = group_by_schema([{"a": 1}, {"a": 2}, {"b": 3}])
    assert groups == [
        SchemaGroup(["a"], [{"a": 1}, {"a": 2}]),
        SchemaGroup(["b"], [{"b": 3}]),
    ]


def test_schema_is_ordered() -> None:
    groups = group_by_schema([{"a": 1, "b": 2}, {"b": 3, "a": 4}])
    assert [g.keys for g in groups] == [["a", "b"], ["b", "a"]]


def test_returning_schema_reopens_group() -> None:
    groups = group_by_schema([{"a": 1}, {"b": 2}, {"a": 3}])
    assert [g.keys for g in groups] == [["a"], ["b"], ["a"]]


def test_table_candidate() -> None:
    assert is_table_candidate([{"a": 1}, {"b": 2}])
    assert not is_table_candidate([{"a": 1}])
    assert not is_table_candidate([{"a": 1}, [1]])
    assert not is_table_candidate([{"a": 1}, None])
    assert not is_table_candidate([{}, {}])


def test_table_groups_require_reuse() -> None:
    assert table_groups([{"a": 1}, {"b": 2}]) is None
    assert table_groups([{"a": 1}, {"a": 2}]) == [SchemaGroup(["a"], [{"a": 1}, {"a": 2}])]
    assert table_groups([1, 2]) is None


def test_row_to_object() -> None:
    assert row_to_object(["a", "b"], [1, None]) == {"a": 1, "b": None}
