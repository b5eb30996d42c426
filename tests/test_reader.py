"""Tests for TypedReader."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from fieldcheck import Absent, Failure, Present, ReaderKeyError, Success, TypedReader


@pytest.fixture
def reader():
    return TypedReader(
        {
            "Name": "Francis",
            "Age": "58",
            "Bad": "58A",
            "Blank": "   ",
            "Price": "12.50",
            "Active": "yes",
            "Born": "1966-03-01",
        }
    )


def test_strict_getters(reader):
    assert reader.get_string("Name") == Success("Francis")
    assert reader.get_int32("Age") == Success(58)
    assert reader.get_uint8("Age") == Success(58)
    assert reader.get_decimal("Price") == Success(Decimal("12.50"))
    assert reader.get_bool("Active") == Success(True)
    assert reader.get_date("Born") == Success(datetime.date(1966, 3, 1))


def test_failure_names_text_and_type(reader):
    assert reader.get_int32("Bad") == Failure(
        "'58A' cannot be converted to an Int32", "Bad", "58A"
    )
    assert reader.get_uuid("Name") == Failure(
        "'Francis' cannot be converted to a UUID", "Name", "Francis"
    )


def test_strict_getter_fails_on_blank(reader):
    assert isinstance(reader.get_int32("Blank"), Failure)


def test_optional_getters(reader):
    assert reader.get_optional_int32("Age") == Success(Present(58))
    assert reader.get_optional_int32("Bad") == Failure(
        "'58A' cannot be converted to an Int32", "Bad", "58A"
    )


@pytest.mark.parametrize(
    "getter",
    [
        "get_optional_string",
        "get_optional_int8",
        "get_optional_int16",
        "get_optional_int32",
        "get_optional_int64",
        "get_optional_uint8",
        "get_optional_uint16",
        "get_optional_uint32",
        "get_optional_uint64",
        "get_optional_float32",
        "get_optional_float64",
        "get_optional_decimal",
        "get_optional_bool",
        "get_optional_uuid",
        "get_optional_datetime",
        "get_optional_date",
        "get_optional_time",
    ],
)
def test_optional_getters_map_blank_to_absent(reader, getter):
    assert getattr(reader, getter)("Blank") == Success(Absent())


def test_unknown_key_raises(reader):
    with pytest.raises(ReaderKeyError) as exc_info:
        reader.get_string("Missing")
    assert str(exc_info.value) == "The key 'Missing' could not be found in the reader"
    assert exc_info.value.to_dict()["available_keys"] == sorted(reader.keys())


def test_reader_error_is_a_key_error(reader):
    with pytest.raises(KeyError):
        reader.is_empty("Missing")


def test_introspection(reader):
    assert reader.is_empty("Blank")
    assert not reader.is_empty("Name")
    assert "Name" in reader
    assert reader.snapshot()["Age"] == "58"


def test_snapshot_is_a_copy():
    source = {"a": "1"}
    reader = TypedReader(source)
    source["a"] = "2"
    reader.snapshot()["a"] = "3"
    assert reader.get_string("a") == Success("1")
