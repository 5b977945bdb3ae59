"""The dispatcher: leveled entry points, trainer roster, tag and muzzle state.

Purpose
-------
Turn one logging call into one :class:`LogEvent` and hand it to every
registered trainer. Owns the three pieces of mutable state (roster, global
tag, muzzle flag) and guards them with a single lock.

System Role
-----------
Explicitly constructed context object. The package keeps one default
instance (see :mod:`lib_log_bark.runtime._state`) but tests and embedding
applications may build and inject their own.

Concurrency
-----------
Every public operation takes the lock. ``log`` copies the roster reference and
the tag under the lock, then detects the caller tag and fans out *outside*
it: the roster is an immutable tuple replaced on every mutation, so a
concurrent ``register``/``unregister`` never tears an in-flight fan-out,
which simply completes against the snapshot it started with.
"""

from __future__ import annotations

import logging
from threading import RLock

from lib_log_bark.adapters.detection.frames import FrameTagDetector
from lib_log_bark.application.ports.detection import CallerTagPort
from lib_log_bark.application.ports.trainer import Trainer, label_of
from lib_log_bark.application.use_cases.process_event import fan_out
from lib_log_bark.application.use_cases.roster import Roster, admit, dismiss
from lib_log_bark.application.use_cases.status import StatusSnapshot, render_status
from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level

from ._settings import BarkSettings

logger = logging.getLogger(__name__)


class Bark:
    """Logging façade routing barks to the registered trainers.

    Parameters
    ----------
    detector:
        :class:`CallerTagPort` used while no global tag is set; defaults to a
        :class:`FrameTagDetector`.
    auto_tag:
        When ``False`` the detector is never invoked and untagged barks carry
        an empty tag.

    Examples
    --------
    >>> bark = Bark()
    >>> bark.set_tag("Checkout")
    >>> print(bark.status(), end="")
    Bark Status:
      Muzzled: false
      Tag: [global] Checkout
      Trainers: 0
    """

    def __init__(self, *, detector: CallerTagPort | None = None, auto_tag: bool = True) -> None:
        self._lock = RLock()
        self._trainers: Roster = ()
        self._global_tag: str | None = None
        self._muted = False
        self._auto_tag = auto_tag
        self._detector: CallerTagPort = detector if detector is not None else FrameTagDetector()

    @classmethod
    def from_settings(cls, settings: BarkSettings, *, detector: CallerTagPort | None = None) -> "Bark":
        """Build a dispatcher configured by ``settings``."""

        bark = cls(
            detector=detector if detector is not None else FrameTagDetector(max_length=settings.tag_max_length),
            auto_tag=settings.auto_tag,
        )
        if settings.tag is not None:
            bark.set_tag(settings.tag)
        if settings.muted:
            bark.mute()
        return bark

    # -- leveled entry points -------------------------------------------------

    def verbose(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.VERBOSE, message, error)

    def debug(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.DEBUG, message, error)

    def info(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.INFO, message, error)

    def warning(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.WARNING, message, error)

    def error(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.ERROR, message, error)

    def critical(self, message: str, error: BaseException | None = None) -> None:
        self.log(Level.CRITICAL, message, error)

    def log(self, level: Level, message: str, error: BaseException | None = None) -> None:
        """Resolve the tag and fan the bark out to every trainer in order.

        Silent no-op while muzzled or when no trainer is registered; the
        caller-tag detector is not consulted in either case.
        """

        with self._lock:
            if self._muted or not self._trainers:
                return
            trainers = self._trainers
            global_tag = self._global_tag
            auto_tag = self._auto_tag
        tag = self._resolve_tag(global_tag, auto_tag)
        fan_out(trainers, LogEvent(level, tag, message, error))

    def _resolve_tag(self, global_tag: str | None, auto_tag: bool) -> str:
        if global_tag is not None:
            return global_tag
        if not auto_tag:
            return ""
        return self._detector.detect()

    # -- roster ---------------------------------------------------------------

    def register(self, trainer: Trainer) -> None:
        """Add ``trainer``; an existing trainer of the same exclusive pack is replaced."""

        with self._lock:
            self._trainers, evicted = admit(self._trainers, trainer)
        for replaced in evicted:
            logger.debug("trainer %s replaced by %s in pack %s", label_of(replaced), label_of(trainer), trainer.pack.name)
        logger.debug("trainer %s registered", label_of(trainer))

    def unregister(self, trainer: Trainer) -> None:
        """Remove ``trainer`` by identity; no-op when it is not registered."""

        with self._lock:
            self._trainers = dismiss(self._trainers, trainer)

    def release_all(self) -> None:
        """Remove every registered trainer."""

        with self._lock:
            self._trainers = ()

    @property
    def trainers(self) -> Roster:
        """Registered trainers in fan-out order."""

        with self._lock:
            return self._trainers

    # -- muzzle ---------------------------------------------------------------

    def mute(self) -> None:
        with self._lock:
            self._muted = True

    def unmute(self) -> None:
        with self._lock:
            self._muted = False

    @property
    def muted(self) -> bool:
        with self._lock:
            return self._muted

    # -- tagging --------------------------------------------------------------

    def set_tag(self, tag: str) -> None:
        """Use ``tag`` verbatim for every following bark, bypassing detection."""

        with self._lock:
            self._global_tag = tag

    def clear_tag(self) -> None:
        """Drop the global tag so auto-detection applies again."""

        with self._lock:
            self._global_tag = None

    @property
    def global_tag(self) -> str | None:
        with self._lock:
            return self._global_tag

    @property
    def auto_tag(self) -> bool:
        with self._lock:
            return self._auto_tag

    @auto_tag.setter
    def auto_tag(self, enabled: bool) -> None:
        with self._lock:
            self._auto_tag = enabled

    @property
    def detector(self) -> CallerTagPort:
        return self._detector

    # -- lifecycle & diagnostics ----------------------------------------------

    def reset(self) -> None:
        """Release all trainers, clear the global tag, and unmute."""

        with self._lock:
            self._trainers = ()
            self._global_tag = None
            self._muted = False

    def snapshot(self) -> StatusSnapshot:
        with self._lock:
            return StatusSnapshot(
                muted=self._muted,
                global_tag=self._global_tag,
                auto_tag=self._auto_tag,
                trainer_labels=tuple(label_of(trainer) for trainer in self._trainers),
            )

    def status(self) -> str:
        """Return a human-readable snapshot of muzzle, tag mode, and trainers."""

        return render_status(self.snapshot())


__all__ = ["Bark"]
