"""Outcome — ``Success(value)`` or ``Failure(message, key, text)``.

Used for text → typed-value conversion.  Chaining is fail-fast: the first
``Failure`` short-circuits every later ``bind``.  A ``Failure`` keeps the
key and raw text it came from so it can be folded back into a
:class:`~fieldcheck.collector.ResultsCollector` without losing provenance.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from typing_extensions import assert_never

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

UNMATCHED_PREDICATE = "Unmatched predicate in where clause"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Outcome[U]:
        return Success(fn(self.value))

    def bind(self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return fn(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Outcome[T]:
        """Keep the value if *predicate* holds, else a generic ``Failure``."""
        if predicate(self.value):
            return self
        return Failure(UNMATCHED_PREDICATE, "", "")

    def match(
        self,
        success: Callable[[T], R],
        failure: Callable[[str, str, str], R],
    ) -> R:
        return success(self.value)


@dataclass(frozen=True)
class Failure:
    """A conversion failure with its diagnostic, source key and raw text."""

    message: str
    key: str
    text: str

    @property
    def is_success(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], U]) -> Outcome[U]:
        return self

    def bind(self, fn: Callable[[Any], Outcome[U]]) -> Outcome[U]:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Failure:
        return self

    def match(
        self,
        success: Callable[[Any], R],
        failure: Callable[[str, str, str], R],
    ) -> R:
        return failure(self.message, self.key, self.text)


Outcome = Union[Success[T], Failure]


def match_outcome(
    outcome: Outcome[T],
    success: Callable[[T], R],
    failure: Callable[[Failure], R],
) -> R:
    """Exhaustive two-way dispatch; a third variant fails type checking."""
    match outcome:
        case Success(value=value):
            return success(value)
        case Failure():
            return failure(outcome)
        case _:
            assert_never(outcome)


def collect(steps: Mapping[str, Callable[[], Outcome[Any]]]) -> Outcome[dict[str, Any]]:
    """Run *steps* in order, stopping at the first ``Failure``.

    Each step is a thunk so that steps after a failure are never evaluated.
    On success the values are returned keyed by step name, ready to be
    splatted into a model constructor::

        collect({
            "name": lambda: reader.get_string("Name"),
            "age": lambda: reader.get_int32("Age"),
        }).map(lambda fields: Person(**fields))
    """
    values: dict[str, Any] = {}
    for name, step in steps.items():
        outcome = step()
        if isinstance(outcome, Failure):
            return outcome
        values[name] = outcome.value
    return Success(values)
