"""TypedReader — typed extraction over a snapshot of validated text.

A reader is only ever built by
:meth:`~fieldcheck.collector.ResultsCollector.map_with_reader` from a fully
valid collector, so every key the collector holds is present.  Asking for
any other key is a programming error and raises
:class:`~fieldcheck.primitives.exceptions.ReaderKeyError`.
"""

from __future__ import annotations

import datetime
import uuid
from collections.abc import Callable, Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import TypeVar

from .parsing import parsers
from .parsing.parsers import is_blank
from .primitives.exceptions import ReaderKeyError
from .primitives.option import Absent, Option, Present
from .primitives.outcome import Failure, Outcome, Success

T = TypeVar("T")

Parser = Callable[[str], Option[T]]


class TypedReader:
    """Read-only ``key -> text`` snapshot with one getter per scalar type.

    Strict getters (``get_int32`` …) return ``Success(value)`` or
    ``Failure(message, key, text)``.  Optional getters
    (``get_optional_int32`` …) return ``Success(Absent())`` for blank
    text, ``Success(Present(value))`` when it parses, and ``Failure``
    otherwise.
    """

    def __init__(self, data: Mapping[str, str]) -> None:
        self._data: Mapping[str, str] = MappingProxyType(dict(data))

    def _value(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise ReaderKeyError(key, list(self._data)) from None

    def _read(self, key: str, parser: Parser[T], label: str) -> Outcome[T]:
        text = self._value(key)
        return parser(text).match(
            present=Success,
            absent=lambda: Failure(f"'{text}' cannot be converted to {label}", key, text),
        )

    def _read_optional(
        self, key: str, parser: Parser[T], label: str
    ) -> Outcome[Option[T]]:
        text = self._value(key)
        if is_blank(text):
            return Success(Absent())
        return self._read(key, parser, label).map(Present)

    # ── Introspection ────────────────────────────────────────────

    def is_empty(self, key: str) -> bool:
        """Whether the text for *key* is blank; never parses."""
        return is_blank(self._value(key))

    def keys(self) -> Iterator[str]:
        return iter(self._data)

    def snapshot(self) -> dict[str, str]:
        """A mutable copy of the raw text this reader was built from."""
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"TypedReader(keys={sorted(self._data)!r})"

    # ── Strict getters ───────────────────────────────────────────

    def get_string(self, key: str) -> Outcome[str]:
        return self._read(key, parsers.parse_string, "a String")

    def get_int8(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_int8, "an Int8")

    def get_int16(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_int16, "an Int16")

    def get_int32(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_int32, "an Int32")

    def get_int64(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_int64, "an Int64")

    def get_uint8(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_uint8, "a UInt8")

    def get_uint16(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_uint16, "a UInt16")

    def get_uint32(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_uint32, "a UInt32")

    def get_uint64(self, key: str) -> Outcome[int]:
        return self._read(key, parsers.parse_uint64, "a UInt64")

    def get_float32(self, key: str) -> Outcome[float]:
        return self._read(key, parsers.parse_float32, "a Float32")

    def get_float64(self, key: str) -> Outcome[float]:
        return self._read(key, parsers.parse_float64, "a Float64")

    def get_decimal(self, key: str) -> Outcome[Decimal]:
        return self._read(key, parsers.parse_decimal, "a Decimal")

    def get_bool(self, key: str) -> Outcome[bool]:
        return self._read(key, parsers.parse_bool, "a Boolean")

    def get_uuid(self, key: str) -> Outcome[uuid.UUID]:
        return self._read(key, parsers.parse_uuid, "a UUID")

    def get_datetime(self, key: str) -> Outcome[datetime.datetime]:
        return self._read(key, parsers.parse_datetime, "a DateTime")

    def get_date(self, key: str) -> Outcome[datetime.date]:
        return self._read(key, parsers.parse_date, "a Date")

    def get_time(self, key: str) -> Outcome[datetime.time]:
        return self._read(key, parsers.parse_time, "a Time")

    # ── Optional getters ─────────────────────────────────────────

    def get_optional_string(self, key: str) -> Outcome[Option[str]]:
        return self._read_optional(key, parsers.parse_string, "a String")

    def get_optional_int8(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_int8, "an Int8")

    def get_optional_int16(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_int16, "an Int16")

    def get_optional_int32(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_int32, "an Int32")

    def get_optional_int64(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_int64, "an Int64")

    def get_optional_uint8(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_uint8, "a UInt8")

    def get_optional_uint16(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_uint16, "a UInt16")

    def get_optional_uint32(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_uint32, "a UInt32")

    def get_optional_uint64(self, key: str) -> Outcome[Option[int]]:
        return self._read_optional(key, parsers.parse_uint64, "a UInt64")

    def get_optional_float32(self, key: str) -> Outcome[Option[float]]:
        return self._read_optional(key, parsers.parse_float32, "a Float32")

    def get_optional_float64(self, key: str) -> Outcome[Option[float]]:
        return self._read_optional(key, parsers.parse_float64, "a Float64")

    def get_optional_decimal(self, key: str) -> Outcome[Option[Decimal]]:
        return self._read_optional(key, parsers.parse_decimal, "a Decimal")

    def get_optional_bool(self, key: str) -> Outcome[Option[bool]]:
        return self._read_optional(key, parsers.parse_bool, "a Boolean")

    def get_optional_uuid(self, key: str) -> Outcome[Option[uuid.UUID]]:
        return self._read_optional(key, parsers.parse_uuid, "a UUID")

    def get_optional_datetime(self, key: str) -> Outcome[Option[datetime.datetime]]:
        return self._read_optional(key, parsers.parse_datetime, "a DateTime")

    def get_optional_date(self, key: str) -> Outcome[Option[datetime.date]]:
        return self._read_optional(key, parsers.parse_date, "a Date")

    def get_optional_time(self, key: str) -> Outcome[Option[datetime.time]]:
        return self._read_optional(key, parsers.parse_time, "a Time")
