"""Line formatting shared by the console and file trainers.

Why
---
Plain and coloured console output differ only in how the level label and the
error line are decorated. Instead of subclassing a plain trainer and
overriding two hooks, :class:`LineFormatter` takes both decorations as
strategies so plain, coloured, and file output reuse one layout.

Contents
--------
* :class:`Decorations` – pair of level/error decoration callables.
* :data:`PLAIN` / :data:`COLORED` – built-in decoration sets.
* :class:`LineFormatter` – composes ``[timestamp ]label - tag: message`` lines,
  as rich ``Text`` for consoles and as plain strings for files.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from rich.text import Text

from lib_log_bark.application.ports.time import ClockPort, SystemClock
from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level

_STYLE_MAP: Mapping[Level, str] = {
    Level.VERBOSE: "bright_black",
    Level.DEBUG: "blue",
    Level.INFO: "green",
    Level.WARNING: "yellow",
    Level.ERROR: "red",
    Level.CRITICAL: "bright_red",
}
#: Rich styles keyed by :class:`Level` for coloured output.

_ERROR_STYLE = "red"


def _plain_level(level: Level) -> Text:
    return Text(level.label)


def _plain_error(error: BaseException) -> Text:
    return Text(f"Exception: {error}")


def _colored_level(level: Level) -> Text:
    return Text(level.label, style=_STYLE_MAP[level])


def _colored_error(error: BaseException) -> Text:
    return Text(f"Exception: {error}", style=_ERROR_STYLE)


@dataclass(frozen=True)
class Decorations:
    """Strategies rendering the level label and the error line."""

    level: Callable[[Level], Text]
    error: Callable[[BaseException], Text]
    colored: bool = False


PLAIN = Decorations(level=_plain_level, error=_plain_error)
COLORED = Decorations(level=_colored_level, error=_colored_error, colored=True)


def format_traceback(error: BaseException) -> str:
    """Return the formatted traceback of ``error`` without a trailing newline."""

    return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")


class LineFormatter:
    """Compose the text lines emitted for one event.

    Examples
    --------
    >>> formatter = LineFormatter(show_timestamp=False)
    >>> formatter.headline(LogEvent(Level.INFO, 'CartService', 'ready')).plain
    '[INFO] - CartService: ready'
    """

    def __init__(
        self,
        decorations: Decorations = PLAIN,
        *,
        show_timestamp: bool = True,
        clock: ClockPort | None = None,
    ) -> None:
        self._decorations = decorations
        self._show_timestamp = show_timestamp
        self._clock = clock if clock is not None else SystemClock()

    @property
    def colored(self) -> bool:
        return self._decorations.colored

    @property
    def show_timestamp(self) -> bool:
        return self._show_timestamp

    def timestamp(self) -> str:
        """Return the current time as ``HH:MM:SS.mmm``."""

        return self._clock.now().strftime("%H:%M:%S.%f")[:-3]

    def headline(self, event: LogEvent) -> Text:
        line = Text()
        if self._show_timestamp:
            line.append(f"{self.timestamp()} ")
        line.append_text(self._decorations.level(event.level))
        line.append(f" - {event.tag}: {event.message}")
        return line

    def lines(self, event: LogEvent) -> list[Text]:
        """Return the headline plus error line and, for ERROR and above, the traceback."""

        rendered = [self.headline(event)]
        if event.error is not None:
            rendered.append(self._decorations.error(event.error))
            if event.level >= Level.ERROR:
                rendered.append(Text(format_traceback(event.error)))
        return rendered

    def plain_lines(self, event: LogEvent) -> list[str]:
        """Return the same lines as :meth:`lines` as undecorated strings.

        Control characters in the message are kept verbatim.

        Examples
        --------
        >>> formatter = LineFormatter(show_timestamp=False)
        >>> formatter.plain_lines(LogEvent(Level.INFO, "Cart", "a\\tb"))
        ['[INFO] - Cart: a\\tb']
        """

        prefix = f"{self.timestamp()} " if self._show_timestamp else ""
        rendered = [f"{prefix}{event.level.label} - {event.tag}: {event.message}"]
        if event.error is not None:
            rendered.append(f"Exception: {event.error}")
            if event.level >= Level.ERROR:
                rendered.append(format_traceback(event.error))
        return rendered


__all__ = ["COLORED", "Decorations", "LineFormatter", "PLAIN", "format_traceback"]
