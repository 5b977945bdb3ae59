"""Trainers forwarding barks to the native system log facilities.

Purpose
-------
Route barks into the platform's own log: the stdlib :mod:`logging` tree (the
Python counterpart of Logcat/NSLog) or systemd-journald.

Contents
--------
* :class:`LoggingTrainer` – stdlib logging, one logger per tag.
* :class:`JournaldTrainer` – ``systemd.journal.send`` with uppercase fields.

System Role
-----------
Both live in :attr:`Pack.SYSTEM`, so registering one replaces the other. By
default they stay silent during test runs to keep test output clean;
``skip_tests=False`` (or :meth:`LoggingTrainer.always_active`) keeps them on.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from lib_log_bark.adapters.detection.testing import StackTestDetector
from lib_log_bark.adapters.formatting import format_traceback
from lib_log_bark.application.ports.detection import IsTestingPort
from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack

Sender = Callable[..., None]
LoggerFactory = Callable[[str], logging.Logger]

_PRIORITY_MAP = {
    Level.VERBOSE: 7,
    Level.DEBUG: 7,
    Level.INFO: 6,
    Level.WARNING: 4,
    Level.ERROR: 3,
    Level.CRITICAL: 2,
}
#: Map :class:`Level` to syslog numeric priorities.


class _SystemTrainer(Trainer):
    pack = Pack.SYSTEM

    def __init__(self, volume: Level, *, skip_tests: bool, test_detector: IsTestingPort | None) -> None:
        self.volume = volume
        self._skip_tests = skip_tests
        self._test_detector = test_detector if test_detector is not None else StackTestDetector()

    @property
    def skip_tests(self) -> bool:
        return self._skip_tests

    def process(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        if self._skip_tests and self._test_detector.is_testing():
            return
        if not self.accepts(level):
            return
        self._write(level, tag, message, error)

    def _write(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        raise NotImplementedError


class LoggingTrainer(_SystemTrainer):
    """Emit barks through :mod:`logging`.

    Each tag maps to the logger ``"<root>.<tag>"`` (or ``root`` for empty
    tags); attached errors travel as ``exc_info`` so configured handlers
    render the traceback. Every record carries the tag as ``bark_tag``.

    :func:`logging.getLogger` keeps every logger it creates for the life of
    the process. Applications barking with unbounded dynamic tags should pass
    ``per_tag_loggers=False`` so all records go to the ``root`` logger and
    handlers read the tag from ``record.bark_tag`` instead.

    Examples
    --------
    >>> records = []
    >>> class _Capture(logging.Handler):
    ...     def emit(self, record):
    ...         records.append(record)
    >>> target = logging.getLogger("doctest_bark")
    >>> target.addHandler(_Capture()); target.setLevel(logging.DEBUG); target.propagate = False
    >>> LoggingTrainer(skip_tests=False, root="doctest_bark").process(Level.INFO, "Cart", "ready", None)
    >>> records[0].name, records[0].getMessage()
    ('doctest_bark.Cart', 'ready')
    """

    def __init__(
        self,
        volume: Level = Level.VERBOSE,
        *,
        skip_tests: bool = True,
        test_detector: IsTestingPort | None = None,
        logger_factory: LoggerFactory = logging.getLogger,
        root: str = "bark",
        per_tag_loggers: bool = True,
    ) -> None:
        super().__init__(volume, skip_tests=skip_tests, test_detector=test_detector)
        self._logger_factory = logger_factory
        self._root = root
        self._per_tag_loggers = per_tag_loggers

    @classmethod
    def always_active(cls, volume: Level = Level.VERBOSE, **kwargs: Any) -> "LoggingTrainer":
        """Return a trainer that keeps logging during test runs too."""

        return cls(volume, skip_tests=False, **kwargs)

    def logger_name(self, tag: str) -> str:
        return f"{self._root}.{tag}" if tag and self._per_tag_loggers else self._root

    def _write(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        target = self._logger_factory(self.logger_name(tag))
        exc_info = (type(error), error, error.__traceback__) if error is not None else None
        target.log(level.to_python_level(), message, exc_info=exc_info, extra={"bark_tag": tag})


def _default_sender(**fields: Any) -> None:  # pragma: no cover - depends on systemd
    """Proxy to :func:`systemd.journal.send`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise RuntimeError("systemd.journal is not available") from exc
    journal.send(**fields)


class JournaldTrainer(_SystemTrainer):
    """Emit barks via ``systemd.journal.send``."""

    def __init__(
        self,
        volume: Level = Level.VERBOSE,
        *,
        sender: Sender | None = None,
        skip_tests: bool = True,
        test_detector: IsTestingPort | None = None,
        identifier_field: str = "SYSLOG_IDENTIFIER",
    ) -> None:
        super().__init__(volume, skip_tests=skip_tests, test_detector=test_detector)
        self._sender = sender if sender is not None else _default_sender
        self._identifier_field = identifier_field.upper()

    def _write(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        self._sender(**self._build_fields(level, tag, message, error))

    def _build_fields(self, level: Level, tag: str, message: str, error: BaseException | None) -> dict[str, Any]:
        """Construct a journald field dictionary.

        Examples
        --------
        >>> trainer = JournaldTrainer(sender=lambda **fields: None, skip_tests=False)
        >>> fields = trainer._build_fields(Level.WARNING, 'Cart', 'low stock', None)
        >>> fields['MESSAGE'], fields['PRIORITY'], fields['SYSLOG_IDENTIFIER']
        ('low stock', 4, 'Cart')
        """
        fields: dict[str, Any] = {
            "MESSAGE": message,
            "PRIORITY": _PRIORITY_MAP[level],
            "BARK_LEVEL": level.name,
        }
        if tag:
            fields[self._identifier_field] = tag
        if error is not None:
            fields["EXCEPTION"] = f"{type(error).__name__}: {error}"
            if level >= Level.ERROR:
                fields["TRACEBACK"] = format_traceback(error)
        return fields


__all__ = ["JournaldTrainer", "LoggingTrainer"]
