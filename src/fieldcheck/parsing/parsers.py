"""
Text parsers: ``str -> Option[T]`` for every scalar type the reader supports.

Blank (empty or whitespace-only) text is always ``Absent`` except for
:func:`parse_string`, which maps blank text to ``Present("")``.  Parsers
never raise for malformed input.
"""

from __future__ import annotations

import datetime
import math
import re
import uuid
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from ..primitives.option import Absent, Option, Present

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

FLOAT32_MAX = 3.4028235e38

_TRUE_WORDS = frozenset({"true", "on", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "off", "no", "0"})


def is_blank(text: str | None) -> bool:
    """``True`` for ``None``, ``""`` or whitespace-only text."""
    return text is None or not text.strip()


def _integer_parser(minimum: int, maximum: int) -> Callable[[str], Option[int]]:
    def parse(text: str) -> Option[int]:
        if is_blank(text) or not _INTEGER_RE.match(text):
            return Absent()
        value = int(text)
        if minimum <= value <= maximum:
            return Present(value)
        return Absent()

    return parse


# ---------------------------------------------------------------------------
# Strings and integers
# ---------------------------------------------------------------------------


def parse_string(text: str) -> Option[str]:
    if is_blank(text):
        return Present("")
    return Present(text)


parse_int8 = _integer_parser(-(2**7), 2**7 - 1)
parse_int16 = _integer_parser(-(2**15), 2**15 - 1)
parse_int32 = _integer_parser(-(2**31), 2**31 - 1)
parse_int64 = _integer_parser(-(2**63), 2**63 - 1)
parse_uint8 = _integer_parser(0, 2**8 - 1)
parse_uint16 = _integer_parser(0, 2**16 - 1)
parse_uint32 = _integer_parser(0, 2**32 - 1)
parse_uint64 = _integer_parser(0, 2**64 - 1)


# ---------------------------------------------------------------------------
# Floating point and decimal
# ---------------------------------------------------------------------------


def parse_float64(text: str) -> Option[float]:
    if is_blank(text) or "_" in text:
        return Absent()
    try:
        return Present(float(text))
    except ValueError:
        return Absent()


def parse_float32(text: str) -> Option[float]:
    """Like :func:`parse_float64` but rejects finite values outside float32."""
    return parse_float64(text).bind(
        lambda v: Present(v) if not math.isfinite(v) or abs(v) <= FLOAT32_MAX else Absent()
    )


def parse_decimal(text: str) -> Option[Decimal]:
    if is_blank(text) or "_" in text:
        return Absent()
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return Absent()
    if not value.is_finite():
        return Absent()
    return Present(value)


# ---------------------------------------------------------------------------
# Booleans and identifiers
# ---------------------------------------------------------------------------


def parse_bool(text: str) -> Option[bool]:
    """
    Parse a boolean word (case-insensitive, surrounding whitespace ignored).

    ``true``, ``on``, ``yes``, ``1`` → ``True``;
    ``false``, ``off``, ``no``, ``0`` → ``False``.
    """
    if is_blank(text):
        return Absent()
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return Present(True)
    if word in _FALSE_WORDS:
        return Present(False)
    return Absent()


def parse_uuid(text: str) -> Option[uuid.UUID]:
    if is_blank(text):
        return Absent()
    try:
        return Present(uuid.UUID(text.strip()))
    except ValueError:
        return Absent()


# ---------------------------------------------------------------------------
# Dates and times (ISO-8601)
# ---------------------------------------------------------------------------


def parse_datetime(text: str) -> Option[datetime.datetime]:
    if is_blank(text):
        return Absent()
    try:
        return Present(datetime.datetime.fromisoformat(text.strip()))
    except ValueError:
        return Absent()


def parse_date(text: str) -> Option[datetime.date]:
    if is_blank(text):
        return Absent()
    try:
        return Present(datetime.date.fromisoformat(text.strip()))
    except ValueError:
        return Absent()


def parse_time(text: str) -> Option[datetime.time]:
    if is_blank(text):
        return Absent()
    try:
        return Present(datetime.time.fromisoformat(text.strip()))
    except ValueError:
        return Absent()
