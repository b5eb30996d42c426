"""Shared fixtures for fieldcheck tests."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from fieldcheck import PasswordPolicy, PatternCache


class Person(BaseModel):
    name: str
    age: int


class SignUp(BaseModel):
    email: str
    password: str
    password_confirmation: str


@pytest.fixture
def pattern_cache():
    """A fresh pattern cache per test."""
    return PatternCache()


@pytest.fixture
def medium_policy():
    return PasswordPolicy.medium()


@pytest.fixture
def person_model():
    return Person


@pytest.fixture
def signup_model():
    return SignUp
