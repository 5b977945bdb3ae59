"""Ports for call-stack introspection.

Both detectors inspect the current execution stack, so every implementation
is inherently platform specific. The dispatcher only sees
:class:`CallerTagPort`; trainers use :class:`IsTestingPort` to decide
whether they stay silent during automated test runs.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CallerTagPort(Protocol):
    """Derive a short tag identifying the code that issued a log call."""

    def detect(self) -> str:
        """Return the caller tag; never raises."""


@runtime_checkable
class IsTestingPort(Protocol):
    """Tell whether execution currently happens inside a test run."""

    def is_testing(self) -> bool:
        """Return ``True`` while a test framework drives the call stack."""


__all__ = ["CallerTagPort", "IsTestingPort"]
