"""Severity levels understood by every trainer.

Purpose
-------
Offer a domain-specific representation of log severities with a strict total
order, display labels, and conversions to the stdlib :mod:`logging` numbers.

Contents
--------
* :class:`Level` enum with ordinal comparison and presentation metadata.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.

System Role
-----------
Trainers compare an incoming level with their ``volume`` using
:class:`Level` ordering; this is the only filtering mechanism in the system.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering

VERBOSE_LOGGING_LEVEL = 5
"""Stdlib numeric level used for :attr:`Level.VERBOSE`."""

logging.addLevelName(VERBOSE_LOGGING_LEVEL, "VERBOSE")


@total_ordering
class Level(Enum):
    """Enumerated severities ordered from chattiest to most severe."""

    VERBOSE = VERBOSE_LOGGING_LEVEL
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @property
    def ordinal(self) -> int:
        """Return the declaration index (0 for VERBOSE, 5 for CRITICAL)."""

        return _ORDER.index(self)

    @property
    def label(self) -> str:
        """Return the bracketed display label, e.g. ``"[INFO]"``."""

        return f"[{self.name}]"

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level."""

        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.ordinal < other.ordinal

    @classmethod
    def from_name(cls, name: str) -> "Level":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Level":
        """Translate a stdlib logging level integer into :class:`Level`."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_ORDER = tuple(Level)

_ICON_TABLE = {
    Level.VERBOSE: "…",
    Level.DEBUG: "🐞",
    Level.INFO: "ℹ",
    Level.WARNING: "⚠",
    Level.ERROR: "✖",
    Level.CRITICAL: "☠",
}
# Console glyphs displayed next to the level label.


__all__ = ["Level", "VERBOSE_LOGGING_LEVEL"]
