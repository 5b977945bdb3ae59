"""Use case fanning a single log event out to the trainer roster.

Purpose
-------
Hand one :class:`LogEvent` to every registered trainer, synchronously and in
registration order, on the caller's thread.

System Role
-----------
Application-layer step invoked by :class:`lib_log_bark.runtime.Bark` after it
has resolved the tag. Trainers filter by their own volume; nothing here
pre-filters on their behalf.

Alignment Notes
---------------
Trainer failures are not isolated: an exception raised by one trainer aborts
the remaining fan-out for that call and propagates to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable

from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain import LogEvent


def fan_out(trainers: Iterable[Trainer], event: LogEvent) -> None:
    """Deliver ``event`` to each trainer in order."""

    for trainer in trainers:
        trainer.process(event.level, event.tag, event.message, event.error)


__all__ = ["fan_out"]
