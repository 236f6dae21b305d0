from __future__ import annotations

import pytest

from jsnail.readers import (
    read_boolean,
    read_float,
    read_integer,
    read_mapping,
    read_numeric,
    read_sequence,
    read_text,
    try_read_boolean,
    try_read_float,
    try_read_integer,
    try_read_mapping,
    try_read_numeric,
    try_read_sequence,
    try_read_text,
)

OPTIONAL_READERS = [
    try_read_text,
    try_read_integer,
    try_read_float,
    try_read_numeric,
    try_read_boolean,
    try_read_sequence,
    try_read_mapping,
]

STANDARD_DEFAULTS = [
    (read_text, ""),
    (read_integer, -1),
    (read_float, -1.0),
    (read_numeric, -1.0),
    (read_boolean, False),
    (read_sequence, []),
    (read_mapping, {}),
]

PERSON = {"age": 30, "name": "John", "isStudent": True, "grades": [95, 88, 75]}


def test_end_to_end_example() -> None:
    assert read_integer(PERSON, "age") == 30
    assert read_text(PERSON, "name") == "John"
    assert read_boolean(PERSON, "isStudent") is True
    assert read_sequence(PERSON, "grades") == [95, 88, 75]
    assert read_integer(PERSON, "missing") == -1


@pytest.mark.parametrize("reader", OPTIONAL_READERS)
def test_optional_readers_return_none_for_missing_key(reader) -> None:
    assert reader(PERSON, "missing") is None
    assert reader({"missing": None}, "missing") is None


@pytest.mark.parametrize("container", [None, 3, "age", [PERSON], True])
@pytest.mark.parametrize("reader", OPTIONAL_READERS)
def test_optional_readers_return_none_for_non_mapping_container(
    reader, container: object
) -> None:
    assert reader(container, "age") is None


@pytest.mark.parametrize("reader,expected", STANDARD_DEFAULTS)
def test_defaulted_readers_fall_back_to_standard_default(reader, expected) -> None:
    assert reader(PERSON, "missing") == expected
    assert reader(None, "missing") == expected


def test_caller_default_replaces_standard_default() -> None:
    assert read_text(PERSON, "missing", "n/a") == "n/a"
    assert read_integer(PERSON, "missing", default=0) == 0
    assert read_float(PERSON, "missing", default=0.5) == 0.5
    assert read_numeric(PERSON, "missing", default=7) == 7
    assert read_boolean(PERSON, "missing", default=True) is True


def test_caller_default_is_ignored_when_value_matches() -> None:
    assert read_text(PERSON, "name", "n/a") == "John"
    assert read_integer(PERSON, "age", default=0) == 30
    assert read_boolean({"flag": False}, "flag", default=True) is False


def test_integer_reader_is_strict() -> None:
    data = {"float": 30.0, "text": "30", "bool": True, "int": 30}
    assert try_read_integer(data, "float") is None
    assert try_read_integer(data, "text") is None
    assert try_read_integer(data, "bool") is None
    assert try_read_integer(data, "int") == 30
    assert read_integer(data, "bool") == -1


def test_float_reader_does_not_widen_integers() -> None:
    data = {"int": 3, "float": 3.5, "text": "3.5"}
    assert try_read_float(data, "int") is None
    assert try_read_float(data, "text") is None
    assert try_read_float(data, "float") == 3.5
    assert read_float(data, "int") == -1.0


def test_numeric_reader_keeps_original_type() -> None:
    data = {"int": 3, "float": 3.5, "bool": False, "text": "3"}
    value = try_read_numeric(data, "int")
    assert value == 3 and isinstance(value, int)
    assert try_read_numeric(data, "float") == 3.5
    assert try_read_numeric(data, "bool") is None
    assert try_read_numeric(data, "text") is None


def test_text_and_boolean_readers_do_not_coerce() -> None:
    data = {"number": 12, "flag": "true", "one": 1}
    assert try_read_text(data, "number") is None
    assert try_read_boolean(data, "flag") is None
    assert try_read_boolean(data, "one") is None


def test_sequence_reader_returns_stored_object() -> None:
    grades = [95, 88, 75]
    data = {"grades": grades, "pair": (1, 2), "text": "abc"}
    assert try_read_sequence(data, "grades") is grades
    assert try_read_sequence(data, "pair") == (1, 2)
    assert try_read_sequence(data, "text") is None


def test_mapping_reader_returns_nested_mapping() -> None:
    data = {"address": {"city": "Kyiv"}, "list": [1]}
    address = try_read_mapping(data, "address")
    assert address == {"city": "Kyiv"}
    assert read_text(address, "city") == "Kyiv"
    assert try_read_mapping(data, "list") is None


def test_collection_fallbacks_are_not_shared() -> None:
    first = read_sequence({}, "items")
    second = read_sequence({}, "items")
    assert first is not second
    first.append(1)  # type: ignore[attr-defined]
    assert second == []

    left = read_mapping({}, "meta")
    right = read_mapping({}, "meta")
    assert left is not right
    left["k"] = "v"  # type: ignore[index]
    assert right == {}


@pytest.mark.parametrize(
    "reader",
    OPTIONAL_READERS + [reader for reader, _ in STANDARD_DEFAULTS],
)
def test_readers_are_idempotent(reader) -> None:
    for key in ("age", "name", "isStudent", "grades", "missing"):
        assert reader(PERSON, key) == reader(PERSON, key)


def test_readers_do_not_mutate_container() -> None:
    data = {"grades": [1, 2], "meta": {"a": 1}, "none": None}
    read_sequence(data, "grades")
    read_mapping(data, "meta")
    read_sequence(data, "none")
    read_mapping(data, "missing")
    assert data == {"grades": [1, 2], "meta": {"a": 1}, "none": None}
