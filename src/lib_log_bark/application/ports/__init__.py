"""Protocols the application layer depends on."""

from __future__ import annotations

from .detection import CallerTagPort, IsTestingPort
from .time import ClockPort, SystemClock
from .trainer import Trainer

__all__ = [
    "CallerTagPort",
    "ClockPort",
    "SystemClock",
    "IsTestingPort",
    "Trainer",
]
