"""ConfigReader — validate values from a hierarchical in-memory mapping.

Sources are plain nested mappings, such as the output of ``json.load`` or
``tomllib.load`` performed by the caller.  Keys are ``:``-separated paths
(``"database:pool:size"``), optionally rooted at a section.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..collector import ResultsCollector
from ..validation.result import ValidationResult, invalid
from ..validation.validator import Validator

logger = logging.getLogger("fieldcheck.config")

SEPARATOR = ":"


def _split_path(path: str) -> list[str]:
    return [part for part in path.split(SEPARATOR) if part] if path else []


def _to_text(value: Any) -> str | None:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigReader:
    """Reads and validates configuration values into a
    :class:`~fieldcheck.collector.ResultsCollector`.

    Usage::

        reader = ConfigReader(settings, section="database")
        collector = reader.collect({
            "host": required(),
            "port": required(is_integer(allow_sign=False)),
        })
    """

    def __init__(self, source: Mapping[str, Any], section: str | None = None) -> None:
        self._source = source
        self._section = section

    def full_path(self, key: str) -> str:
        if self._section:
            return f"{self._section}{SEPARATOR}{key}"
        return key

    def lookup(self, key: str) -> str | None:
        """The text stored at *key*, or ``None`` when absent or non-scalar."""
        node: Any = self._source
        for part in _split_path(self.full_path(key)):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        if node is self._source:
            return None
        return _to_text(node)

    def validate(self, key: str, validator: Validator) -> ValidationResult:
        text = self.lookup(key)
        if text is None:
            logger.debug("No configuration value at %r", self.full_path(key))
            return invalid("", f"No value could be found for the property: {key}")
        return validator.apply(text)

    def read(self, key: str, validator: Validator) -> ResultsCollector:
        return ResultsCollector.create(key, self.validate(key, validator))

    def read_optional(
        self, key: str, validator: Validator, default: str
    ) -> ResultsCollector:
        """Like :meth:`read`, validating *default* when the value is missing."""
        text = self.lookup(key)
        if text is None:
            text = default
        return ResultsCollector.create(key, validator.apply(text))

    def collect(self, rules: Mapping[str, Validator]) -> ResultsCollector:
        """Fold ``{key: validator}`` into one collector, in mapping order."""
        collector = ResultsCollector.empty()
        for key, validator in rules.items():
            collector = collector.add(key, self.validate(key, validator))
        return collector

    def section(self, name: str) -> ConfigReader:
        """A reader rooted at a nested section."""
        return ConfigReader(self._source, self.full_path(name))
