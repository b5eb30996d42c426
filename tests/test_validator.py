"""Tests for Validator composition."""

from __future__ import annotations

from unittest.mock import MagicMock

from fieldcheck import Validator, invalid, valid


def _stub(result, name="stub"):
    """A validator backed by a MagicMock so calls can be counted."""
    func = MagicMock(return_value=result)
    return Validator(func, name=name), func


def test_apply_and_call_are_equivalent():
    validator, func = _stub(valid("x"))
    assert validator.apply("x") == validator("x") == valid("x")
    assert func.call_count == 2


# -- and_then ----------------------------------------------------------------


def test_and_then_short_circuits_on_failure():
    first, _ = _stub(invalid("x", "first failed"))
    second, second_func = _stub(valid("x"))

    result = first.and_then(second).apply("x")

    assert result == invalid("x", "first failed")
    second_func.assert_not_called()


def test_and_then_combines_when_first_passes():
    first, _ = _stub(valid("x"))
    second, second_func = _stub(invalid("x", "second failed"))

    result = (first & second).apply("x")

    assert result == invalid("x", "second failed")
    second_func.assert_called_once_with("x")


def test_and_then_takes_right_payload():
    first = Validator(lambda t: valid(t.strip()))
    second = Validator(lambda t: valid(t.upper()))
    assert (first & second).apply(" a ").value == " A "


# -- or_else -----------------------------------------------------------------


def test_or_else_skips_second_on_success():
    first, _ = _stub(valid("x"))
    second, second_func = _stub(valid("y"))

    assert (first | second).apply("x") == valid("x")
    second_func.assert_not_called()


def test_or_else_drops_first_errors():
    first, _ = _stub(invalid("x", "first"))
    second, _ = _stub(invalid("x", "second"))

    assert first.or_else(second).apply("x") == invalid("x", "second")


# -- Naming ------------------------------------------------------------------


def test_composed_names():
    a, _ = _stub(valid(""), name="a")
    b, _ = _stub(valid(""), name="b")
    assert (a & b).name == "(a & b)"
    assert (a | b).name == "(a | b)"
    assert a.named("alias").name == "alias"
    assert repr(a) == "Validator(a)"


def test_all_folds_left_to_right():
    a, _ = _stub(valid(""), name="a")
    b, _ = _stub(valid(""), name="b")
    c, c_func = _stub(invalid("", "c"), name="c")

    combined = Validator.all(a, b, c)

    assert combined.name == "((a & b) & c)"
    assert combined.apply("") == invalid("", "c")
    c_func.assert_called_once()
