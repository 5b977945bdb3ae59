"""Rich-powered console trainers.

Purpose
-------
Print barks to the process console, by default only while tests run so unit
test output shows what the code under test logged.

Contents
--------
* :class:`ConsoleTrainer` – :class:`Trainer` in :attr:`Pack.CONSOLE`.
* :func:`colored_console_trainer` – ConsoleTrainer composed with coloured
  decorations.

System Role
-----------
Human-facing sink. Colour is applied only when the formatter is coloured and
the stream passes :func:`supports_ansi_colors` (or ``colorize`` forces it).
"""

from __future__ import annotations

import sys
import threading
from typing import IO, Any

from rich.console import Console

from lib_log_bark.adapters.detection.color import supports_ansi_colors
from lib_log_bark.adapters.detection.testing import StackTestDetector
from lib_log_bark.adapters.formatting import COLORED, LineFormatter
from lib_log_bark.application.ports.detection import IsTestingPort
from lib_log_bark.application.ports.time import ClockPort
from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack


class ConsoleTrainer(Trainer):
    """Render barks as ``[timestamp ]label - tag: message`` console lines.

    Parameters
    ----------
    volume:
        Minimum level printed (defaults to :attr:`Level.VERBOSE`).
    show_timestamp:
        Prefix lines with ``HH:MM:SS.mmm``.
    formatter:
        :class:`LineFormatter` to use; built from ``show_timestamp`` when omitted.
    stream:
        Target stream; ``sys.stdout`` at call time when omitted.
    tests_only:
        Print only while :meth:`IsTestingPort.is_testing` reports a test run.
    test_detector:
        Detector consulted when ``tests_only`` is set.
    colorize:
        Force colour on/off; ``None`` runs the terminal capability check.
    label:
        Type identifier shown in ``Bark.status()``.

    The lines of one bark are printed under a per-trainer lock so concurrent
    barks never interleave.
    """

    pack = Pack.CONSOLE

    def __init__(
        self,
        volume: Level = Level.VERBOSE,
        *,
        show_timestamp: bool = True,
        formatter: LineFormatter | None = None,
        stream: IO[str] | None = None,
        tests_only: bool = True,
        test_detector: IsTestingPort | None = None,
        colorize: bool | None = None,
        clock: ClockPort | None = None,
        label: str = "ConsoleTrainer",
    ) -> None:
        self.volume = volume
        self._formatter = formatter if formatter is not None else LineFormatter(show_timestamp=show_timestamp, clock=clock)
        self._stream = stream
        self._tests_only = tests_only
        self._test_detector = test_detector if test_detector is not None else StackTestDetector()
        self._colorize = colorize
        self._label = label
        self._lock = threading.Lock()

    @property
    def label(self) -> str:
        return self._label

    @property
    def formatter(self) -> LineFormatter:
        return self._formatter

    def process(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        if self._tests_only and not self._test_detector.is_testing():
            return
        if not self.accepts(level):
            return
        lines = self._formatter.lines(LogEvent(level, tag, message, error))
        with self._lock:
            console = self._console()
            for line in lines:
                console.print(line, soft_wrap=True, highlight=False)

    def _console(self) -> Console:
        stream: IO[Any] = self._stream if self._stream is not None else sys.stdout
        colorize = self._formatter.colored and self._use_color(stream)
        return Console(
            file=stream,
            force_terminal=colorize,
            no_color=not colorize,
            color_system="standard" if colorize else None,
            highlight=False,
        )

    def _use_color(self, stream: IO[Any]) -> bool:
        if self._colorize is not None:
            return self._colorize
        return supports_ansi_colors(stream)


def colored_console_trainer(
    volume: Level = Level.VERBOSE,
    *,
    show_timestamp: bool = True,
    stream: IO[str] | None = None,
    tests_only: bool = True,
    test_detector: IsTestingPort | None = None,
    colorize: bool | None = None,
    clock: ClockPort | None = None,
) -> ConsoleTrainer:
    """Return a :class:`ConsoleTrainer` with per-level ANSI colours.

    Examples
    --------
    >>> colored_console_trainer().label
    'ColoredConsoleTrainer'
    """

    return ConsoleTrainer(
        volume,
        formatter=LineFormatter(COLORED, show_timestamp=show_timestamp, clock=clock),
        stream=stream,
        tests_only=tests_only,
        test_detector=test_detector,
        colorize=colorize,
        label="ColoredConsoleTrainer",
    )


__all__ = ["ConsoleTrainer", "colored_console_trainer"]
