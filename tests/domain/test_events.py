from __future__ import annotations

import dataclasses

import pytest

from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level


def test_log_event_is_immutable() -> None:
    event = LogEvent(Level.INFO, "Cart", "ready")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "changed"  # type: ignore[misc]


def test_log_event_defaults_to_no_error() -> None:
    event = LogEvent(Level.DEBUG, "", "")
    assert event.error is None
    assert event.error_text() is None


def test_with_tag_returns_retagged_copy() -> None:
    error = ValueError("bad")
    event = LogEvent(Level.ERROR, "Before", "boom", error)
    retagged = event.with_tag("After")
    assert retagged == LogEvent(Level.ERROR, "After", "boom", error)
    assert event.tag == "Before"
