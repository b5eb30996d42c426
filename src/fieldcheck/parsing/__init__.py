"""Leaf text parsers backing the typed reader."""

from __future__ import annotations

from .parsers import (
    FLOAT32_MAX,
    is_blank,
    parse_bool,
    parse_date,
    parse_datetime,
    parse_decimal,
    parse_float32,
    parse_float64,
    parse_int8,
    parse_int16,
    parse_int32,
    parse_int64,
    parse_string,
    parse_time,
    parse_uint8,
    parse_uint16,
    parse_uint32,
    parse_uint64,
    parse_uuid,
)

__all__ = [
    "FLOAT32_MAX",
    "is_blank",
    "parse_bool",
    "parse_date",
    "parse_datetime",
    "parse_decimal",
    "parse_float32",
    "parse_float64",
    "parse_int8",
    "parse_int16",
    "parse_int32",
    "parse_int64",
    "parse_string",
    "parse_time",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "parse_uint64",
    "parse_uuid",
]
