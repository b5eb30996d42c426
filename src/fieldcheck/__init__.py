"""fieldcheck — composable text validation with typed model extraction.

Validate raw text per field, accumulate every error per key, then convert
the valid text into a typed model in one fail-fast pass.
"""

from __future__ import annotations

from .collector import ModelResultsCollector, ResultsCollector, model_keys
from .config import ConfigReader
from .primitives import (
    Absent,
    Failure,
    FieldCheckError,
    FieldNotFoundError,
    Option,
    Outcome,
    PolicyError,
    Present,
    ReaderKeyError,
    Success,
    collect,
    match_option,
    match_outcome,
    option_of,
)
from .reader import TypedReader
from .validation import (
    Invalid,
    PasswordPolicy,
    PatternCache,
    PolicyBuilder,
    Valid,
    ValidationResult,
    Validator,
    between,
    combine,
    empty,
    extract_number,
    invalid,
    invalid_many,
    is_boolean,
    is_date,
    is_datetime,
    is_decimal,
    is_email,
    is_integer,
    is_time,
    is_uuid,
    match_result,
    max_length,
    min_length,
    optional,
    password,
    pure,
    regex,
    required,
    trim,
    valid,
)

__all__ = [
    # Optional Value / Outcome
    "Absent",
    "Option",
    "Present",
    "match_option",
    "option_of",
    "Failure",
    "Outcome",
    "Success",
    "collect",
    "match_outcome",
    # Validation results
    "Invalid",
    "Valid",
    "ValidationResult",
    "combine",
    "empty",
    "invalid",
    "invalid_many",
    "match_result",
    "pure",
    "valid",
    # Validators
    "PatternCache",
    "Validator",
    "between",
    "extract_number",
    "is_boolean",
    "is_date",
    "is_datetime",
    "is_decimal",
    "is_email",
    "is_integer",
    "is_time",
    "is_uuid",
    "max_length",
    "min_length",
    "optional",
    "password",
    "regex",
    "required",
    "trim",
    # Passwords
    "PasswordPolicy",
    "PolicyBuilder",
    # Accumulation and extraction
    "ModelResultsCollector",
    "ResultsCollector",
    "TypedReader",
    "model_keys",
    # Configuration
    "ConfigReader",
    # Exceptions
    "FieldCheckError",
    "FieldNotFoundError",
    "PolicyError",
    "ReaderKeyError",
]
