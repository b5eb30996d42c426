"""Validation system: ValidationResult, Validator, leaf rules, password policy."""

from __future__ import annotations

from .password import PasswordPolicy, PolicyBuilder
from .patterns import PatternCache
from .result import (
    Invalid,
    Valid,
    ValidationResult,
    combine,
    empty,
    invalid,
    invalid_many,
    match_result,
    pure,
    valid,
)
from .rules import (
    between,
    extract_number,
    is_boolean,
    is_date,
    is_datetime,
    is_decimal,
    is_email,
    is_integer,
    is_time,
    is_uuid,
    max_length,
    min_length,
    optional,
    password,
    regex,
    required,
    trim,
)
from .validator import Validator

__all__ = [
    # Results
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
    # Rules
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
]
