"""Domain event describing a single bark.

Purpose
-------
Provide an immutable representation of one log call travelling from the
dispatcher to every registered trainer.

Contents
--------
* :class:`LogEvent` dataclass with small helper methods.

System Role
-----------
Created once per log call by :class:`lib_log_bark.runtime.Bark`, consumed
synchronously by the fan-out, then discarded. Nothing retains it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .levels import Level


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to trainers.

    Attributes
    ----------
    level:
        :class:`Level` severity of the call.
    tag:
        Global tag or the auto-detected caller tag; may be empty when
        auto-detection is disabled.
    message:
        Message passed by the caller, possibly empty.
    error:
        Optional exception attached to the call.
    """

    level: Level
    tag: str
    message: str
    error: BaseException | None = None

    def error_text(self) -> str | None:
        """Return ``str(error)`` or ``None`` when no error is attached.

        Examples
        --------
        >>> LogEvent(Level.ERROR, 'Tag', 'boom', ValueError('bad')).error_text()
        'bad'
        >>> LogEvent(Level.INFO, 'Tag', 'ok').error_text() is None
        True
        """

        if self.error is None:
            return None
        return str(self.error)

    def with_tag(self, tag: str) -> "LogEvent":
        """Return a copy carrying ``tag``."""

        return replace(self, tag=tag)


__all__ = ["LogEvent"]
