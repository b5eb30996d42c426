"""Tests for PasswordPolicy and the password rule."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fieldcheck import PasswordPolicy, PolicyError, password


def test_presets():
    assert PasswordPolicy.lenient().minimum_length == 5
    medium = PasswordPolicy.medium()
    assert medium.minimum_length == 8
    assert medium.required_characters == 4
    strong = PasswordPolicy.strong()
    assert strong.minimum_length == 12
    assert strong.required_upper == 3


def test_builder_produces_policy():
    policy = (
        PasswordPolicy.builder()
        .minimum_length(10)
        .upper_case(2)
        .digits(2)
        .symbols(1, accepted="#")
        .allow_spaces()
        .build()
    )
    assert policy.minimum_length == 10
    assert policy.required_upper == 2
    assert policy.accepted_symbols == "#"
    assert policy.allow_spaces


def test_policy_is_frozen():
    policy = PasswordPolicy()
    with pytest.raises(ValidationError):
        policy.minimum_length = 1


@pytest.mark.parametrize(
    "values",
    [
        {"minimum_length": 10, "maximum_length": 5},
        {"minimum_length": 0, "maximum_length": 3, "required_digits": 2, "required_upper": 2},
        {"required_symbols": 1, "accepted_symbols": ""},
    ],
)
def test_inconsistent_policy_raises(values):
    with pytest.raises(PolicyError):
        PasswordPolicy(**values)


# -- password rule -----------------------------------------------------------


def test_length_is_checked_first(medium_policy):
    result = password(medium_policy).apply("aB1!")
    assert result.errors == ("The password is too short",)

    too_long = PasswordPolicy(maximum_length=6)
    assert password(too_long).apply("abcdefgh").errors == ("The password is too long",)


def test_accumulates_every_character_rule(medium_policy):
    result = password(medium_policy).apply("all lower")
    assert result.errors == (
        "The password may not contain spaces",
        "There must be at least 1 upper case letters",
        "There must be at least 1 digits (number characters)",
        "There must be at least 1 symbol characters (!@#$%^&*)",
    )


def test_accepts_conforming_password(medium_policy):
    assert password(medium_policy).apply("Abcdef1!").is_valid


@pytest.mark.parametrize(
    "policy",
    [PasswordPolicy.lenient(), PasswordPolicy.medium(), PasswordPolicy.strong()],
)
def test_generated_password_satisfies_policy(policy):
    generated = policy.new_password()
    assert password(policy).apply(generated).is_valid


@pytest.mark.parametrize("maximum", [0, 1, 2, 3])
def test_generated_password_fits_a_tiny_policy(maximum):
    policy = PasswordPolicy(minimum_length=0, maximum_length=maximum)
    generated = policy.new_password()
    assert len(generated) == maximum
    assert password(policy).apply(generated).is_valid


def test_generated_password_adds_optional_classes_when_room_allows():
    generated = PasswordPolicy.lenient().new_password()
    assert any(c.isdigit() for c in generated)
    assert any(c.isupper() for c in generated)
