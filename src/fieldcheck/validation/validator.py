"""Validator — a named wrapper around ``str -> ValidationResult``."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce

from .result import ValidationResult, combine

ValidatorFunc = Callable[[str], ValidationResult]


class Validator:
    """A pure text validation rule.

    Validators compose with two operators:

    * ``a & b`` (:meth:`and_then`) — run ``a``; if it fails return its
      result without running ``b``, otherwise ``combine(a(text), b(text))``.
    * ``a | b`` (:meth:`or_else`) — return ``a``'s result if valid, else
      ``b``'s result (``a``'s errors are dropped).

    Usage::

        name = required(min_length(3)) & max_length(50)
        result = name.apply("Francis")
    """

    __slots__ = ("_func", "name")

    def __init__(self, func: ValidatorFunc, name: str = "validator") -> None:
        self._func = func
        self.name = name

    def apply(self, text: str) -> ValidationResult:
        """Validate *text*."""
        return self._func(text)

    def __call__(self, text: str) -> ValidationResult:
        return self._func(text)

    def and_then(self, other: Validator) -> Validator:
        def run(text: str) -> ValidationResult:
            result = self.apply(text)
            if not result.is_valid:
                return result
            return combine(result, other.apply(text))

        return Validator(run, name=f"({self.name} & {other.name})")

    def or_else(self, other: Validator) -> Validator:
        def run(text: str) -> ValidationResult:
            result = self.apply(text)
            if result.is_valid:
                return result
            return other.apply(text)

        return Validator(run, name=f"({self.name} | {other.name})")

    def __and__(self, other: Validator) -> Validator:
        return self.and_then(other)

    def __or__(self, other: Validator) -> Validator:
        return self.or_else(other)

    def named(self, name: str) -> Validator:
        """Return the same rule under a different name."""
        return Validator(self._func, name=name)

    @classmethod
    def all(cls, first: Validator, *rest: Validator) -> Validator:
        """Fold validators left to right with :meth:`and_then`."""
        return reduce(lambda acc, nxt: acc.and_then(nxt), rest, first)

    def __repr__(self) -> str:
        return f"Validator({self.name})"
