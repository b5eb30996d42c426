"""Exception hierarchy for fieldcheck.

Bad input never raises: it is reported in-band as
:class:`~fieldcheck.validation.result.Invalid` or
:class:`~fieldcheck.primitives.outcome.Failure`.  The exceptions below
signal programmer errors only.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FieldCheckError(Exception):
    """Root exception for the entire fieldcheck library."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ReaderKeyError(FieldCheckError, KeyError):
    """Raised when a :class:`~fieldcheck.reader.TypedReader` is asked for a
    key its snapshot does not contain.

    The snapshot is built from the accumulator that owns every key, so this
    always indicates a bug in the extraction function.
    """

    def __init__(self, key: str, available_keys: list[str] | None = None) -> None:
        self.key = key
        self.available_keys = sorted(available_keys or [])
        super().__init__(f"The key '{key}' could not be found in the reader")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "READER_KEY_NOT_FOUND",
            "key": self.key,
            "available_keys": self.available_keys,
        }


class FieldNotFoundError(FieldCheckError):
    """
    Key is not a declared field of the bound model.

    Uses fuzzy matching to suggest similar field names::

        Invalid field 'pasword' on 'SignUp'.
        Did you mean one of these?
          • password

        Available fields: email, password, password_confirmation
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class PolicyError(FieldCheckError):
    """Raised when a password policy is internally inconsistent."""
