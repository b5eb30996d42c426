"""Configuration binding over hierarchical in-memory mappings."""

from __future__ import annotations

from .reader import SEPARATOR, ConfigReader

__all__ = [
    "ConfigReader",
    "SEPARATOR",
]
