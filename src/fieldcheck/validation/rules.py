"""
Leaf validator factories.

Every factory returns a :class:`~fieldcheck.validation.validator.Validator`.
``None`` input is treated as ``""``.  ``trim`` and ``extract_number``
replace the input outright.  ``is_integer``, ``regex`` and the date rules
put the normalised text in ``Valid.value`` and keep the original input in
``Valid.text``.
"""

from __future__ import annotations

import datetime
import re
import string
from functools import reduce

from ..parsing.parsers import is_blank, parse_bool, parse_uuid
from .password import PasswordPolicy
from .patterns import DEFAULT_FLAGS, PatternCache
from .result import Valid, ValidationResult, invalid, valid
from .validator import Validator

EMAIL_PATTERN = r"^([\w\.\-_]+)?\w+@[\w\-_]+(\.\w+){1,}$"

BLANK_MESSAGE = "The value cannot be null, empty, or just whitespace"


def _fold(validators: tuple[Validator, ...]) -> Validator:
    return reduce(lambda acc, nxt: acc.and_then(nxt), validators[1:], validators[0])


# ---------------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------------


def trim() -> Validator:
    """Strip surrounding whitespace. Never fails."""

    def run(text: str) -> ValidationResult:
        return valid((text or "").strip())

    return Validator(run, name="trim")


def extract_number(allow_decimals: bool = True) -> Validator:
    """Keep only the digits and decimal points found in the input."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        kept = [c for c in text if c in string.digits or c == "."]
        points = kept.count(".")

        if len(kept) == points:
            return invalid(text, f"No number could be extracted from '{text}'")
        if not allow_decimals and points > 0:
            return invalid(
                text, f"A whole number cannot be reliably extracted from '{text}'"
            )
        if points > 1:
            return invalid(
                text, "There are too many decimal points in the extracted number!"
            )
        return valid("".join(kept))

    return Validator(run, name="extract_number")


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(*validators: Validator) -> Validator:
    """Blank input is invalid; anything else must pass every *validators*."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        if is_blank(text):
            return invalid("", BLANK_MESSAGE)
        return valid(text)

    presence = Validator(run, name="required")
    if not validators:
        return presence
    return _fold((presence, *validators)).named("required")


def optional(*validators: Validator) -> Validator:
    """Blank input is accepted as ``Valid("")`` without running *validators*."""
    rules = _fold(validators) if validators else None

    def run(text: str) -> ValidationResult:
        text = text or ""
        if is_blank(text):
            return valid("")
        if rules is None:
            return valid(text)
        return rules.apply(text)

    return Validator(run, name="optional")


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(length: int) -> Validator:
    def run(text: str) -> ValidationResult:
        text = text or ""
        if len(text) >= length:
            return valid(text)
        return invalid(text, f"The input is shorter than {length}")

    return Validator(run, name=f"min_length({length})")


def max_length(length: int) -> Validator:
    """Valid when the input is strictly shorter than *length*."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        if len(text) < length:
            return valid(text)
        return invalid(text, f"The input must be shorter than {length}")

    return Validator(run, name=f"max_length({length})")


def between(minimum: int, maximum: int) -> Validator:
    return min_length(minimum).and_then(max_length(maximum))


# ---------------------------------------------------------------------------
# Numbers and booleans
# ---------------------------------------------------------------------------


def is_integer(allow_sign: bool = True) -> Validator:
    """Digits with an optional leading ``-``; ``_`` separators are dropped."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        kept: list[str] = []
        for c in text:
            if c == "_":
                continue
            if c not in string.digits and c != "-":
                return invalid(text, "The input should only contain numbers")
            kept.append(c)

        signs = kept.count("-")
        if len(kept) == signs:
            return invalid(text, "The input contains no numbers")
        if signs > 1:
            return invalid(text, "The input is ambiguous as a signed integer")
        if signs == 1 and not allow_sign:
            return invalid(text, "Signs are not allowed in the input")
        if signs == 1 and kept[0] != "-":
            return invalid(text, "The sign must be the first character in the input")
        return Valid("".join(kept), text)

    return Validator(run, name="is_integer")


def is_decimal(allow_signed: bool = True) -> Validator:
    def run(text: str) -> ValidationResult:
        text = text or ""
        not_decimal = f"'{text}' is not a valid decimal number"
        if not text or any(c not in string.digits and c not in ".-" for c in text):
            return invalid(text, not_decimal)

        signs = text.count("-")
        if len(text) == signs + text.count("."):
            return invalid(text, not_decimal)
        if text.count(".") > 1:
            return invalid(text, f"'{text}' has more than one decimal point in it")
        if signs > 1:
            return invalid(text, f"'{text}' has more than one sign in it")
        if signs == 1 and not allow_signed:
            return invalid(text, f"'{text}' is not allowed to be negative")
        if signs == 1 and text[0] != "-":
            return invalid(text, not_decimal)
        return valid(text)

    return Validator(run, name="is_decimal")


def is_boolean() -> Validator:
    """Accepts true/on/yes/1 and false/off/no/0, case-insensitively."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        return parse_bool(text).match(
            present=lambda _: valid(text),
            absent=lambda: invalid(text, f"Unrecognised boolean input '{text}'"),
        )

    return Validator(run, name="is_boolean")


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


def regex(
    pattern: str,
    message: str | None = None,
    cache: PatternCache | None = None,
) -> Validator:
    """Case-insensitive pattern match; the valid payload is lower-cased.

    *message* may reference the input as ``{text}``; any other braces are
    kept literally.  Pass a shared :class:`PatternCache` to reuse compiled
    patterns across factory calls.
    """
    if cache is not None:
        compiled = cache.get(pattern)
    else:
        compiled = re.compile(pattern, DEFAULT_FLAGS)

    def run(text: str) -> ValidationResult:
        text = text or ""
        if compiled.search(text):
            return Valid(text.lower(), text)
        if message is not None:
            return invalid(text, message.replace("{text}", text))
        return invalid(text, f"'{text}' does not match the required pattern")

    return Validator(run, name="regex")


def is_email(cache: PatternCache | None = None) -> Validator:
    return regex(
        EMAIL_PATTERN, "'{text}' is not a valid email address", cache=cache
    ).named("is_email")


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------


def password(policy: PasswordPolicy) -> Validator:
    """Check *policy*; length is fail-fast, the other rules accumulate."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        if len(text) > policy.maximum_length:
            return invalid(text, "The password is too long")
        if len(text) < policy.minimum_length:
            return invalid(text, "The password is too short")

        lower = sum(1 for c in text if c.islower())
        upper = sum(1 for c in text if c.isupper())
        digits = sum(1 for c in text if c.isdigit())
        symbols = sum(1 for c in text if c in policy.accepted_symbols)
        has_space = any(c.isspace() for c in text)

        result: ValidationResult = valid(text)
        if not policy.allow_spaces and has_space:
            result += invalid(text, "The password may not contain spaces")
        if policy.required_lower > lower:
            result += invalid(
                text,
                f"There must be at least {policy.required_lower} lower case letters",
            )
        if policy.required_upper > upper:
            result += invalid(
                text,
                f"There must be at least {policy.required_upper} upper case letters",
            )
        if policy.required_digits > digits:
            result += invalid(
                text,
                f"There must be at least {policy.required_digits} digits "
                "(number characters)",
            )
        if policy.required_symbols > symbols:
            result += invalid(
                text,
                f"There must be at least {policy.required_symbols} symbol "
                f"characters ({policy.accepted_symbols})",
            )
        return result

    return Validator(run, name="password")


# ---------------------------------------------------------------------------
# Dates, times and identifiers
# ---------------------------------------------------------------------------


def is_datetime(fmt: str) -> Validator:
    """Parse with :func:`~datetime.datetime.strptime`; payload is ISO-8601."""

    def run(text: str) -> ValidationResult:
        text = text or ""
        try:
            parsed = datetime.datetime.strptime(text, fmt)
        except ValueError:
            return invalid(
                text,
                "Could not parse the input as a date and time in the format "
                f"supplied ('{fmt}').",
            )
        return Valid(parsed.strftime("%Y-%m-%dT%H:%M:%S"), text)

    return Validator(run, name="is_datetime")


def is_date(fmt: str) -> Validator:
    def run(text: str) -> ValidationResult:
        text = text or ""
        try:
            parsed = datetime.datetime.strptime(text, fmt)
        except ValueError:
            return invalid(
                text,
                f"Could not parse the input as date only in the format supplied ('{fmt}').",
            )
        return Valid(parsed.date().isoformat(), text)

    return Validator(run, name="is_date")


def is_time(fmt: str) -> Validator:
    def run(text: str) -> ValidationResult:
        text = text or ""
        try:
            parsed = datetime.datetime.strptime(text, fmt)
        except ValueError:
            return invalid(
                text,
                f"Could not parse the input as time only in the format supplied ('{fmt}').",
            )
        return Valid(parsed.strftime("%H:%M:%S"), text)

    return Validator(run, name="is_time")


def is_uuid() -> Validator:
    def run(text: str) -> ValidationResult:
        text = text or ""
        return parse_uuid(text).match(
            present=lambda _: valid(text),
            absent=lambda: invalid(text, f"Unable to parse '{text}' as a UUID"),
        )

    return Validator(run, name="is_uuid")

