"""Optional Value — ``Present(value)`` or ``Absent()``.

Absence is not failure: it is the valid outcome of "no value supplied".
Both variants are immutable and expose the same operations, so callers
chain ``map``/``bind`` and collapse with ``reduce`` without branching.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from typing_extensions import assert_never

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A supplied value. Never wraps ``None``."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Present cannot wrap None; use Absent() instead")

    @property
    def is_present(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Present(fn(self.value))

    def bind(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def reduce(self, default: T) -> T:
        return self.value

    def reduce_with(self, factory: Callable[[], T]) -> T:
        return self.value

    def match(self, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return present(self.value)


@dataclass(frozen=True)
class Absent:
    """No value was supplied."""

    @property
    def is_present(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return self

    def bind(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return self

    def reduce(self, default: T) -> T:
        return default

    def reduce_with(self, factory: Callable[[], T]) -> T:
        return factory()

    def match(self, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return absent()


Option = Union[Present[T], Absent]


def option_of(value: T | None) -> Option[T]:
    """Lift a possibly-``None`` value into an :data:`Option`."""
    if value is None:
        return Absent()
    return Present(value)


def match_option(
    option: Option[T],
    present: Callable[[T], R],
    absent: Callable[[], R],
) -> R:
    """Exhaustive two-way dispatch; a third variant fails type checking."""
    match option:
        case Present(value=value):
            return present(value)
        case Absent():
            return absent()
        case _:
            assert_never(option)
