"""Registration policy for the trainer roster.

The roster is an ordered tuple: insertion order defines fan-out order. Within
an exclusive :class:`~lib_log_bark.domain.packs.Pack` the last registration
wins, so admitting a trainer evicts any trainer already holding that pack.
The functions here are pure; :class:`lib_log_bark.runtime.Bark` owns the
actual state and swaps the returned tuples in under its lock.
"""

from __future__ import annotations

from collections.abc import Sequence

from lib_log_bark.application.ports.trainer import Trainer

Roster = tuple[Trainer, ...]


def admit(roster: Sequence[Trainer], trainer: Trainer) -> tuple[Roster, Roster]:
    """Return ``(new_roster, evicted)`` after registering ``trainer``.

    Examples
    --------
    >>> from lib_log_bark.domain import Level, Pack
    >>> class _Stub(Trainer):
    ...     def __init__(self, pack):
    ...         self.volume, self.pack = Level.VERBOSE, pack
    ...     def process(self, level, tag, message, error):
    ...         pass
    >>> first, second = _Stub(Pack.CONSOLE), _Stub(Pack.CONSOLE)
    >>> roster, evicted = admit((first,), second)
    >>> roster == (second,) and evicted == (first,)
    True
    >>> roster, evicted = admit((_Stub(Pack.CUSTOM),), _Stub(Pack.CUSTOM))
    >>> len(roster), evicted
    (2, ())
    """

    if trainer.pack.allows_multiple:
        return (*roster, trainer), ()
    evicted = tuple(existing for existing in roster if existing.pack is trainer.pack)
    kept = tuple(existing for existing in roster if existing.pack is not trainer.pack)
    return (*kept, trainer), evicted


def dismiss(roster: Sequence[Trainer], trainer: Trainer) -> Roster:
    """Return ``roster`` without ``trainer`` (identity match); unchanged if absent."""

    return tuple(existing for existing in roster if existing is not trainer)


__all__ = ["Roster", "admit", "dismiss"]
