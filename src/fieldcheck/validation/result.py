"""ValidationResult — ``Valid(value, text)`` or ``Invalid(text, errors)``.

Results merge with :func:`combine` (also spelled ``lhs + rhs``):

============  ============  ==========================================
lhs           rhs           combined
============  ============  ==========================================
Valid         Valid         ``rhs``
Valid         Invalid       ``rhs``
Invalid       Valid         ``lhs``
Invalid       Invalid       ``Invalid(rhs.text, lhs.errors + rhs.errors)``
============  ============  ==========================================

The merge is right-biased for two valid results: the later payload wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar, Union

from typing_extensions import assert_never

R = TypeVar("R")


@dataclass(frozen=True)
class Valid:
    """A passing result.

    ``value`` is the (possibly normalised) payload, ``text`` the input
    that produced it.
    """

    value: str
    text: str

    @property
    def is_valid(self) -> bool:
        return True

    def __add__(self, other: ValidationResult) -> ValidationResult:
        return combine(self, other)

    def map(self, fn: Callable[[str], str]) -> ValidationResult:
        return Valid(fn(self.value), self.text)

    def filter(self, predicate: Callable[[str], bool], message: str) -> ValidationResult:
        if predicate(self.value):
            return self
        return Invalid(self.text, (message,))

    def reduce(self, default: str = "") -> str:
        return self.value

    def reduce_with(self, factory: Callable[[], str]) -> str:
        return self.value

    def match(
        self,
        on_valid: Callable[[Valid], R],
        on_invalid: Callable[[Invalid], R],
    ) -> R:
        return on_valid(self)

    def with_key(self, key: str) -> tuple[str, ValidationResult]:
        return key, self


@dataclass(frozen=True)
class Invalid:
    """A failing result carrying at least one human-readable error."""

    text: str
    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of messages but store an immutable tuple
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Invalid requires at least one error message")
        object.__setattr__(self, "errors", errors)

    @property
    def is_valid(self) -> bool:
        return False

    def __add__(self, other: ValidationResult) -> ValidationResult:
        return combine(self, other)

    def map(self, fn: Callable[[str], str]) -> ValidationResult:
        return self

    def filter(self, predicate: Callable[[str], bool], message: str) -> ValidationResult:
        return self

    def reduce(self, default: str = "") -> str:
        return default

    def reduce_with(self, factory: Callable[[], str]) -> str:
        return factory()

    def match(
        self,
        on_valid: Callable[[Valid], R],
        on_invalid: Callable[[Invalid], R],
    ) -> R:
        return on_invalid(self)

    def with_key(self, key: str) -> tuple[str, ValidationResult]:
        return key, self


ValidationResult = Union[Valid, Invalid]


# ── Factory functions ────────────────────────────────────────────


def valid(text: str) -> Valid:
    """A valid result whose payload is the text itself."""
    return Valid(text, text)


def pure(text: str) -> Valid:
    return valid(text)


def empty() -> Valid:
    """The neutral result: valid with an empty payload."""
    return Valid("", "")


def invalid(text: str, message: str) -> Invalid:
    return Invalid(text, (message,))


def invalid_many(text: str, messages: Iterable[str]) -> Invalid:
    return Invalid(text, tuple(messages))


# ── Merging ──────────────────────────────────────────────────────


def combine(lhs: ValidationResult, rhs: ValidationResult) -> ValidationResult:
    """Merge two results; see the module table for the four cases."""
    match (lhs, rhs):
        case (Valid(), Valid()):
            return rhs
        case (Valid(), Invalid()):
            return rhs
        case (Invalid(), Valid()):
            return lhs
        case (Invalid(), Invalid()):
            return Invalid(rhs.text, lhs.errors + rhs.errors)
        case _:
            raise TypeError(
                f"Cannot combine {type(lhs).__name__} with {type(rhs).__name__}"
            )


def match_result(
    result: ValidationResult,
    on_valid: Callable[[Valid], R],
    on_invalid: Callable[[Invalid], R],
) -> R:
    """Exhaustive two-way dispatch; a third variant fails type checking."""
    match result:
        case Valid():
            return on_valid(result)
        case Invalid():
            return on_invalid(result)
        case _:
            assert_never(result)
