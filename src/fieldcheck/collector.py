"""ResultsCollector — per-key accumulation of validation results.

Field validation accumulates: adding a second result under an existing key
merges it with :func:`~fieldcheck.validation.result.combine`.  Typed
extraction (:meth:`ResultsCollector.map_with_reader`) is fail-fast; its
first conversion failure is folded back into the collector as one more
``Invalid`` entry.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType, SimpleNamespace
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .primitives.exceptions import FieldNotFoundError
from .primitives.outcome import Failure, Outcome, Success
from .reader import TypedReader
from .validation.result import Invalid, Valid, ValidationResult, combine, empty

logger = logging.getLogger("fieldcheck.collector")

M = TypeVar("M")
R = TypeVar("R")
C = TypeVar("C", bound="ResultsCollector")


def _empty_results() -> Mapping[str, ValidationResult]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ResultsCollector:
    """Immutable ``key -> ValidationResult`` mapping with an aggregate flag.

    Usage::

        collector = (
            ResultsCollector.empty()
            + required(min_length(3)).apply(form["name"]).with_key("Name")
            + required(is_integer()).apply(form["age"]).with_key("Age")
        )
        if not collector.is_valid:
            return collector.errors
    """

    results: Mapping[str, ValidationResult] = field(default_factory=_empty_results)
    is_valid: bool = field(init=False)

    def __post_init__(self) -> None:
        results = MappingProxyType(dict(self.results))
        object.__setattr__(self, "results", results)
        object.__setattr__(
            self, "is_valid", all(r.is_valid for r in results.values())
        )

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def empty(cls) -> ResultsCollector:
        return cls()

    @classmethod
    def create(cls, key: str, result: ValidationResult) -> ResultsCollector:
        return cls({key: result})

    # ── Accumulation ─────────────────────────────────────────────

    def _with_results(self: C, results: dict[str, ValidationResult]) -> C:
        return dataclasses.replace(self, results=results)

    def add(self: C, key: str, result: ValidationResult) -> C:
        """Insert *result*, merging with any existing entry for *key*."""
        return self._insert(key, result)

    def _insert(self: C, key: str, result: ValidationResult) -> C:
        results = dict(self.results)
        existing = results.get(key)
        results[key] = result if existing is None else combine(existing, result)
        return self._with_results(results)

    def merge(self: C, other: ResultsCollector) -> C:
        """Add every entry of *other*, in its order, with :meth:`add` semantics."""
        merged = self
        for key, result in other:
            merged = merged.add(key, result)
        return merged

    def __add__(self: C, other: tuple[str, ValidationResult] | ResultsCollector) -> C:
        if isinstance(other, ResultsCollector):
            return self.merge(other)
        key, result = other
        return self.add(key, result)

    def get(self, key: str) -> ValidationResult:
        """The result for *key*, or an empty valid result if never added."""
        return self.results.get(key, empty())

    def compare(self: C, key1: str, key2: str, message: str) -> C:
        """Mark *key2* invalid when both entries are valid but differ.

        Used for confirmation fields (``password`` / ``password_confirmation``).
        Only *key2* is touched.
        """
        first = self.get(key1)
        second = self.get(key2)
        if not isinstance(first, Valid) or not isinstance(second, Valid):
            return self
        if first.value == second.value:
            return self
        return self.add(key2, Invalid(second.text, (message,)))

    # ── Typed extraction ─────────────────────────────────────────

    def map_with_reader(
        self,
        extract: Callable[[TypedReader], Outcome[M]],
        on_valid: Callable[[M], R],
        on_invalid: Callable[[ResultsCollector], R],
    ) -> R:
        """Bridge a fully valid collector into typed model extraction.

        When the collector is valid, *extract* receives a
        :class:`~fieldcheck.reader.TypedReader` over every valid payload.
        ``Success`` goes to *on_valid*; a ``Failure`` is added under its key
        and the updated collector goes to *on_invalid*.  An invalid
        collector skips *extract* and goes straight to *on_invalid*.
        """
        if not self.is_valid:
            logger.debug("Skipping extraction: %d invalid field(s)", len(self.errors))
            return on_invalid(self)

        reader = TypedReader(
            {
                key: result.value
                for key, result in self.results.items()
                if isinstance(result, Valid)
            }
        )
        outcome = extract(reader)
        match outcome:
            case Success(value=model):
                return on_valid(model)
            case Failure(message=message, key=key, text=text):
                logger.debug("Extraction failed for %r: %s", key, message)
                # Unchecked: a filtered Failure carries an empty key
                return on_invalid(self._insert(key, Invalid(text, (message,))))
            case _:
                raise TypeError(
                    f"Extraction must return an Outcome, got {type(outcome).__name__}"
                )

    # ── Views ────────────────────────────────────────────────────

    @property
    def errors(self) -> dict[str, list[str]]:
        """Display-ready ``{key: [messages]}`` for every invalid entry."""
        return {
            key: list(result.errors)
            for key, result in self.results.items()
            if isinstance(result, Invalid)
        }

    def __iter__(self) -> Iterator[tuple[str, ValidationResult]]:
        return iter(self.results.items())

    def __len__(self) -> int:
        return len(self.results)

    def __contains__(self, key: object) -> bool:
        return key in self.results

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True)
class ModelResultsCollector(ResultsCollector):
    """A collector whose keys must be fields of a pydantic model.

    Keys are still plain strings; an unknown key raises
    :class:`~fieldcheck.primitives.exceptions.FieldNotFoundError` with
    close-match suggestions.  Use :func:`model_keys` for typo-free keys.
    """

    model: type[BaseModel] | None = None

    @classmethod
    def for_model(cls, model: type[BaseModel]) -> ModelResultsCollector:
        return cls(model=model)

    def _check_key(self, key: str) -> None:
        if self.model is None:
            return
        fields = _field_names(self.model)
        if key not in fields:
            raise FieldNotFoundError(key, self.model.__name__, sorted(fields))

    def add(self, key: str, result: ValidationResult) -> ModelResultsCollector:
        self._check_key(key)
        return super().add(key, result)

    def get(self, key: str) -> ValidationResult:
        self._check_key(key)
        return super().get(key)

    def extract_model(
        self,
        on_valid: Callable[[Any], R],
        on_invalid: Callable[[ResultsCollector], R],
    ) -> R:
        """Build the bound model straight from the valid payloads.

        pydantic performs the type conversion; its first error is folded
        back into the collector like a reader ``Failure``.
        """
        if self.model is None:
            raise TypeError("extract_model requires a collector bound to a model")
        model = self.model
        # Model-level errors carry no location; report them on the first field
        fallback_key = next(iter(model.model_fields), "")

        def extract(reader: TypedReader) -> Outcome[Any]:
            values = reader.snapshot()
            try:
                return Success(model.model_validate(values))
            except PydanticValidationError as exc:
                return _failure_from_pydantic(exc, values, fallback_key)

        return self.map_with_reader(extract, on_valid, on_invalid)


def _field_names(model: type[BaseModel]) -> set[str]:
    names = set(model.model_fields)
    names.update(f.alias for f in model.model_fields.values() if f.alias)
    return names


def _failure_from_pydantic(
    exc: PydanticValidationError, values: Mapping[str, str], fallback_key: str
) -> Failure:
    errors = exc.errors()
    if not errors:
        return Failure(str(exc), fallback_key, values.get(fallback_key, ""))
    first = errors[0]
    loc = first.get("loc", ())
    key = str(loc[0]) if loc else fallback_key
    return Failure(first.get("msg", "validation error"), key, values.get(key, ""))


def model_keys(model: type[BaseModel]) -> SimpleNamespace:
    """Key constants for *model*'s fields: ``model_keys(User).email == "email"``."""
    return SimpleNamespace(**{name: name for name in model.model_fields})
