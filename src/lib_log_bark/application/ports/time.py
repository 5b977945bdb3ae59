"""Port for the wall clock used by timestamp-rendering trainers."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current local timestamp."""

    def now(self) -> datetime: ...


class SystemClock(ClockPort):
    """Concrete clock returning :func:`datetime.now`."""

    def now(self) -> datetime:
        return datetime.now()


__all__ = ["ClockPort", "SystemClock"]
