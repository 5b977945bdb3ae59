"""Domain entities and value objects used by the logging dispatcher."""

from __future__ import annotations

from .events import LogEvent
from .levels import Level
from .packs import Pack

__all__ = [
    "Level",
    "LogEvent",
    "Pack",
]
