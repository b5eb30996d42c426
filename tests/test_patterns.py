"""Tests for PatternCache."""

from __future__ import annotations

import logging
import re
import threading

from fieldcheck import PatternCache


def test_get_compiles_once(pattern_cache):
    first = pattern_cache.get(r"^\d+$")
    second = pattern_cache.get(r"^\d+$")
    assert first is second
    assert len(pattern_cache) == 1


def test_default_flags_ignore_case(pattern_cache):
    assert pattern_cache.get("^abc$").match("ABC")


def test_custom_flags():
    cache = PatternCache(flags=0)
    assert cache.get("^abc$").flags & re.IGNORECASE == 0


def test_clear(pattern_cache):
    pattern_cache.get("a")
    pattern_cache.clear()
    assert "a" not in pattern_cache
    assert len(pattern_cache) == 0


def test_logs_compilation(pattern_cache, caplog):
    with caplog.at_level(logging.DEBUG, logger="fieldcheck.validation"):
        pattern_cache.get("x+")
        pattern_cache.get("x+")
    compiled = [r for r in caplog.records if "Compiled pattern" in r.getMessage()]
    assert len(compiled) == 1


def test_concurrent_access_shares_one_pattern(pattern_cache):
    seen = []

    def worker():
        seen.append(pattern_cache.get("[a-z]+"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(p) for p in seen}) == 1
