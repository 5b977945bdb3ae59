"""Trainer port describing the capability contract of every output handler.

Purpose
-------
Define the abstraction that pluggable sinks implement so the dispatcher can
fan events out without knowing where they end up (console, system log, file,
custom destinations).

Contents
--------
* :class:`Trainer` – runtime-checkable protocol with ``volume``, ``pack`` and
  ``process`` plus two default helpers for explicit subclasses.

System Role
-----------
The dispatcher depends only on this protocol. Trainers are responsible for
their own volume filtering: the dispatcher hands every event to every trainer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack


@runtime_checkable
class Trainer(Protocol):
    """Receive log events and decide whether and how to render them.

    Attributes
    ----------
    volume:
        Minimum :class:`Level` this trainer acts on.
    pack:
        :class:`Pack` used by the dispatcher to enforce one trainer per
        exclusive category.
    """

    volume: Level
    pack: Pack

    def process(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        """Handle one event; must ignore levels below :attr:`volume`."""

    @property
    def label(self) -> str:
        """Return the type identifier listed by ``Bark.status()``."""

        return type(self).__name__

    def accepts(self, level: Level) -> bool:
        """Return ``True`` when ``level`` reaches this trainer's volume."""

        return level >= self.volume


def label_of(trainer: object) -> str:
    """Return the status label of any trainer, including duck-typed ones."""

    return getattr(trainer, "label", None) or type(trainer).__name__


__all__ = ["Trainer", "label_of"]
