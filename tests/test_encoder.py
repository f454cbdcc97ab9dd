"""Tests for compact Jot serialization."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from jot import JotEncodeError, stringify
from jot.encoder import resolve_options


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (3.14, "3.14"),
        ("hello", "hello"),
        ("hello world", "hello world"),
        ("", '""'),
        ("123", '"123"'),
        ("true", '"true"'),
        ("a:b", '"a:b"'),
        ("a;b", '"a;b"'),
        ("line\nbreak", '"line\\nbreak"'),
    ],
)
def test_scalars(value: Any, expected: str) -> None:
    assert stringify(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([], "[]"),
        ([1, 2, 3], "[1,2,3]"),
        (["a", "b"], "[a,b]"),
        ([[1, 2], []], "[[1,2],[]]"),
        ({}, "{}"),
        ({"name": "Alice", "age": 30}, "{name:Alice,age:30}"),
        ({"a b": 1}, '{"a b":1}'),
        ({"": 1}, '{"":1}'),
        ({"1": "one"}, '{"1":one}'),
    ],
)
def test_containers(value: Any, expected: str) -> None:
    assert stringify(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({"a": {"b": 1}}, "{a.b:1}"),
        ({"a": {"b": {"c": 1}}}, "{a.b.c:1}"),
        ({"a": {"b": 1, "c": 2}}, "{a:{b:1,c:2}}"),
        ({"a": {"b": {"c": 1, "d": 2}}}, "{a.b:{c:1,d:2}}"),
        ({"a": {"b": {}}}, "{a.b:{}}"),
        ({"a.b": 1}, '{"a.b":1}'),
        ({"a.b": {"c": 1}}, '{"a.b":{c:1}}'),
        ({"a": {"x y": 1}}, '{a:{"x y":1}}'),
        ({"a": {"b": [1, 2]}}, "{a.b:[1,2]}"),
    ],
)
def test_key_folding(value: Any, expected: str) -> None:
    assert stringify(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([{"a": 1, "b": 2}, {"a": 3, "b": 4}], "{{:a,b;1,2;3,4}}"),
        ([{"x": 1}, {"x": 2}, {"x": 3}], "{{:x;1;2;3}}"),
        ([{"a": 1}, {"a": 2}, {"b": 3}], "{{:a;1;2;:b;3}}"),
        ([{"a": 1}, {"b": 2}], "[{a:1},{b:2}]"),
        ([{"a": 1}], "[{a:1}]"),
        ([{}, {}], "[{},{}]"),
        ([{"a.b": 1}, {"a.b": 2}], '{{:"a.b";1;2}}'),
        ([{"a": "x y"}, {"a": ""}], '{{:a;x y;""}}'),
        ([{"a": {"b": 1}}, {"a": [1]}], "{{:a;{b:1};[1]}}"),
    ],
)
def test_tables(value: Any, expected: str) -> None:
    assert stringify(value) == expected


def test_nested_table() -> None:
    data = {"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}
    assert stringify(data) == "{users:{{:id,name;1,Alice;2,Bob}}}"


def test_compact_output_has_no_whitespace() -> None:
    data = {
        "users": [{"id": 1, "tags": ["a", "b"]}, {"id": 2, "tags": []}],
        "meta": {"page": {"size": 10}},
        "flags": [True, None, 1.5],
    }
    text = stringify(data)
    assert not any(c.isspace() for c in text)


def test_float_keeps_its_type() -> None:
    assert stringify(1.0) == "1.0"
    assert stringify([1, 1.5]) == "[1,1.5]"


def test_tuples_and_mappings_are_normalized() -> None:
    from collections import OrderedDict

    assert stringify((1, 2)) == "[1,2]"
    assert stringify(OrderedDict([("b", 1), ("a", 2)])) == "{b:1,a:2}"


def test_dataclass_is_normalized() -> None:
    @dataclass
    class Point:
        x: int
        y: int

    assert stringify([Point(1, 2), Point(3, 4)]) == "{{:x,y;1,2;3,4}}"


def test_pydantic_model_is_normalized() -> None:
    class User(BaseModel):
        id: int
        name: str

    assert stringify({"owner": User(id=7, name="Ada")}) == "{owner:{id:7,name:Ada}}"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, [1, math.nan], {"a": math.inf}])
def test_non_finite_numbers_are_rejected(value: Any) -> None:
    with pytest.raises(JotEncodeError, match="non-finite"):
        stringify(value)


def test_unsupported_values_are_rejected() -> None:
    with pytest.raises(JotEncodeError, match="keys must be strings"):
        stringify({1: "one"})
    with pytest.raises(JotEncodeError, match="Cannot encode value of type"):
        stringify({"when": object()})


def test_input_is_not_mutated() -> None:
    data = {"a": {"b": {"c": 1}}, "rows": [{"x": 1}, {"x": 2}]}
    snapshot = copy.deepcopy(data)
    stringify(data)
    stringify(data, {"pretty": True})
    assert data == snapshot


def test_resolve_options_defaults() -> None:
    resolved = resolve_options(None)
    assert resolved.pretty is False
    assert resolved.indent == "  "


def test_resolve_options_accepts_integer_indent() -> None:
    resolved = resolve_options({"pretty": True, "indent": 4})
    assert resolved.indent == "    "
    assert resolve_options({"indent": None}).indent == "  "
