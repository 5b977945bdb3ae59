"""Trainer packs partitioning output destinations into exclusive groups."""

from __future__ import annotations

from enum import Enum


class Pack(Enum):
    """Category a trainer belongs to.

    Only one trainer per pack may be registered at a time, except for
    :attr:`CUSTOM`, which accepts any number of trainers.
    """

    CONSOLE = "console"
    """Plain process console (stdout/stderr)."""

    SYSTEM = "system"
    """Native system log facility (stdlib logging, journald)."""

    FILE = "file"
    """Log files on disk."""

    CUSTOM = "custom"
    """Anything else; the only pack allowing several trainers."""

    @property
    def allows_multiple(self) -> bool:
        return self is Pack.CUSTOM


__all__ = ["Pack"]
