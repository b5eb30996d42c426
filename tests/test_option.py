"""Tests for the Optional Value container."""

from __future__ import annotations

import pytest

from fieldcheck import Absent, Present, match_option, option_of

# -- Construction ------------------------------------------------------------


def test_present_rejects_none():
    with pytest.raises(ValueError):
        Present(None)


def test_option_of_lifts_none_to_absent():
    assert option_of(None) == Absent()
    assert option_of(0) == Present(0)


def test_is_present():
    assert Present("x").is_present
    assert not Absent().is_present


# -- Chaining ----------------------------------------------------------------


def test_map_and_bind_on_present():
    assert Present(2).map(lambda v: v * 3) == Present(6)
    assert Present(2).bind(lambda v: Present(str(v))) == Present("2")
    assert Present(2).bind(lambda v: Absent()) == Absent()


def test_absent_skips_functions():
    def boom(_):
        raise AssertionError("must not be called")

    assert Absent().map(boom) == Absent()
    assert Absent().bind(boom) == Absent()


# -- Collapsing --------------------------------------------------------------


def test_reduce_returns_value_or_default():
    assert Present(5).reduce(0) == 5
    assert Absent().reduce(0) == 0


def test_reduce_with_only_calls_factory_when_absent():
    calls = []

    def factory():
        calls.append(1)
        return 9

    assert Present(5).reduce_with(factory) == 5
    assert calls == []
    assert Absent().reduce_with(factory) == 9
    assert calls == [1]


def test_match_option_dispatches_each_variant():
    assert match_option(Present(1), lambda v: f"got {v}", lambda: "none") == "got 1"
    assert match_option(Absent(), lambda v: f"got {v}", lambda: "none") == "none"
    assert Present(1).match(present=str, absent=lambda: "-") == "1"
    assert Absent().match(present=str, absent=lambda: "-") == "-"
