"""PasswordPolicy — immutable password rules plus a fluent builder."""

from __future__ import annotations

import secrets
import string

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..primitives.exceptions import PolicyError

_MIN_GENERATED_LENGTH = 6


class PasswordPolicy(BaseModel):
    """Rules a password must satisfy.

    Usage::

        policy = PasswordPolicy.builder().minimum_length(10).digits(2).build()
        validator = password(policy)
    """

    model_config = ConfigDict(frozen=True)

    minimum_length: int = Field(default=5, ge=0, le=65535)
    maximum_length: int = Field(default=65535, ge=0, le=65535)
    required_upper: int = Field(default=0, ge=0)
    required_lower: int = Field(default=0, ge=0)
    required_digits: int = Field(default=0, ge=0)
    required_symbols: int = Field(default=0, ge=0)
    accepted_symbols: str = "!@#$%^&*"
    allow_spaces: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> PasswordPolicy:
        if self.minimum_length > self.maximum_length:
            raise PolicyError(
                f"Minimum length ({self.minimum_length}) exceeds "
                f"maximum length ({self.maximum_length})"
            )
        if self.required_characters > self.maximum_length:
            raise PolicyError(
                f"The policy requires {self.required_characters} characters "
                f"but allows at most {self.maximum_length}"
            )
        if self.required_symbols and not self.accepted_symbols:
            raise PolicyError("Symbols are required but none are accepted")
        return self

    @property
    def required_characters(self) -> int:
        return (
            self.required_upper
            + self.required_lower
            + self.required_digits
            + self.required_symbols
        )

    # ── Presets ──────────────────────────────────────────────────

    @classmethod
    def lenient(cls) -> PasswordPolicy:
        return cls()

    @classmethod
    def medium(cls) -> PasswordPolicy:
        return cls(
            minimum_length=8,
            required_digits=1,
            required_symbols=1,
            required_upper=1,
            required_lower=1,
        )

    @classmethod
    def strong(cls) -> PasswordPolicy:
        return cls(
            minimum_length=12,
            required_digits=2,
            required_symbols=2,
            required_upper=3,
            required_lower=3,
        )

    @classmethod
    def builder(cls) -> PolicyBuilder:
        return PolicyBuilder(cls())

    # ── Generation ───────────────────────────────────────────────

    def new_password(self) -> str:
        """Generate a random password that satisfies this policy."""
        counts = {
            "symbols": self.required_symbols,
            "digits": self.required_digits,
            "upper": self.required_upper,
        }
        length = max(
            self.required_characters, self.minimum_length, _MIN_GENERATED_LENGTH
        )
        length = min(length, self.maximum_length)

        # One of each character class where the length allows it
        for name, count in counts.items():
            if name == "symbols" and not self.accepted_symbols:
                continue
            if count == 0 and sum(counts.values()) + self.required_lower < length:
                counts[name] = 1

        symbols, digits, upper = counts["symbols"], counts["digits"], counts["upper"]
        chars = [secrets.choice(self.accepted_symbols) for _ in range(symbols)]
        chars += [secrets.choice(string.digits) for _ in range(digits)]
        chars += [secrets.choice(string.ascii_uppercase) for _ in range(upper)]
        chars += [
            secrets.choice(string.ascii_lowercase) for _ in range(length - len(chars))
        ]
        secrets.SystemRandom().shuffle(chars)
        return "".join(chars)


class PolicyBuilder:
    """Fluent builder; :meth:`build` validates the finished policy."""

    def __init__(self, policy: PasswordPolicy) -> None:
        self._values = policy.model_dump()

    def minimum_length(self, length: int) -> PolicyBuilder:
        self._values["minimum_length"] = length
        return self

    def maximum_length(self, length: int) -> PolicyBuilder:
        self._values["maximum_length"] = length
        return self

    def upper_case(self, count: int) -> PolicyBuilder:
        self._values["required_upper"] = count
        return self

    def lower_case(self, count: int) -> PolicyBuilder:
        self._values["required_lower"] = count
        return self

    def digits(self, count: int) -> PolicyBuilder:
        self._values["required_digits"] = count
        return self

    def symbols(self, count: int, accepted: str | None = None) -> PolicyBuilder:
        self._values["required_symbols"] = count
        if accepted is not None:
            self._values["accepted_symbols"] = accepted
        return self

    def allow_spaces(self, allowed: bool = True) -> PolicyBuilder:
        self._values["allow_spaces"] = allowed
        return self

    def build(self) -> PasswordPolicy:
        return PasswordPolicy(**self._values)
