"""Primitives: exceptions, Optional Value and Outcome containers."""

from __future__ import annotations

from .exceptions import (
    FieldCheckError,
    FieldNotFoundError,
    PolicyError,
    ReaderKeyError,
)
from .option import Absent, Option, Present, match_option, option_of
from .outcome import Failure, Outcome, Success, collect, match_outcome

__all__ = [
    "Absent",
    "collect",
    "Failure",
    "FieldCheckError",
    "FieldNotFoundError",
    "match_option",
    "match_outcome",
    "Option",
    "option_of",
    "Outcome",
    "PolicyError",
    "Present",
    "ReaderKeyError",
    "Success",
]
