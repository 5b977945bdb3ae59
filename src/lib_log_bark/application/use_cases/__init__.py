"""Application use cases orchestrating registration, fan-out, and diagnostics."""

from __future__ import annotations

from .process_event import fan_out
from .roster import Roster, admit, dismiss
from .status import StatusSnapshot, render_status

__all__ = [
    "Roster",
    "StatusSnapshot",
    "admit",
    "dismiss",
    "fan_out",
    "render_status",
]
