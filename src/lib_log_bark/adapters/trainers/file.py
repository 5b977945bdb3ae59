"""Trainer appending plain barks to a log file."""

from __future__ import annotations

import threading
from pathlib import Path

from lib_log_bark.adapters.formatting import LineFormatter
from lib_log_bark.application.ports.time import ClockPort
from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain.events import LogEvent
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack


class FileTrainer(Trainer):
    """Append ``[timestamp ]label - tag: message`` lines to ``path``.

    The file and its parent directories are created on the first accepted
    bark. Output is active in and out of test runs.
    """

    pack = Pack.FILE

    def __init__(
        self,
        path: str | Path,
        volume: Level = Level.VERBOSE,
        *,
        show_timestamp: bool = True,
        encoding: str = "utf-8",
        clock: ClockPort | None = None,
    ) -> None:
        self.volume = volume
        self._path = Path(path)
        self._encoding = encoding
        self._formatter = LineFormatter(show_timestamp=show_timestamp, clock=clock)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def process(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        if not self.accepts(level):
            return
        lines = self._formatter.plain_lines(LogEvent(level, tag, message, error))
        payload = "\n".join(lines) + "\n"
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding=self._encoding) as handle:
                handle.write(payload)


__all__ = ["FileTrainer"]
