"""PatternCache — memoised compiled patterns for regex validators."""

from __future__ import annotations

import logging
import re
import threading

logger = logging.getLogger("fieldcheck.validation")

DEFAULT_FLAGS = re.IGNORECASE | re.DOTALL


class PatternCache:
    """Thread-safe get-or-add cache of compiled patterns keyed by source.

    Owned by the caller and handed to :func:`~fieldcheck.validation.rules.regex`
    so that tests never share compiled state by accident.
    """

    def __init__(self, flags: int = DEFAULT_FLAGS) -> None:
        self._flags = flags
        self._patterns: dict[str, re.Pattern[str]] = {}
        self._lock = threading.Lock()

    def get(self, pattern: str) -> re.Pattern[str]:
        compiled = self._patterns.get(pattern)
        if compiled is not None:
            return compiled

        with self._lock:
            compiled = self._patterns.get(pattern)
            if compiled is None:
                compiled = re.compile(pattern, self._flags)
                self._patterns[pattern] = compiled
                logger.debug("Compiled pattern %r into cache", pattern)
            return compiled

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def clear(self) -> None:
        with self._lock:
            self._patterns.clear()
