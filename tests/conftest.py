from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from io import StringIO

import pytest
from rich.console import Console

from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack
from lib_log_bark.runtime import Bark, clear_bark
from lib_log_bark.runtime._settings import ENV_AUTO_TAG, ENV_MUTED, ENV_TAG, ENV_TAG_MAX_LENGTH


class SpyTrainer(Trainer):
    """Trainer recording every accepted bark as ``(level, tag, message, error)``."""

    def __init__(self, pack: Pack = Pack.CUSTOM, volume: Level = Level.VERBOSE, *, journal: list | None = None, name: str = "") -> None:
        self.pack = pack
        self.volume = volume
        self.records: list[tuple[Level, str, str, BaseException | None]] = []
        self._journal = journal
        self._name = name

    @property
    def label(self) -> str:
        return self._name or type(self).__name__

    def process(self, level: Level, tag: str, message: str, error: BaseException | None) -> None:
        if not self.accepts(level):
            return
        self.records.append((level, tag, message, error))
        if self._journal is not None:
            self._journal.append(self._name)


class FixedClock:
    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class FixedTesting:
    def __init__(self, testing: bool) -> None:
        self.testing = testing

    def is_testing(self) -> bool:
        return self.testing


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep BARK_* variables and the default dispatcher out of every test."""

    for name in (ENV_MUTED, ENV_TAG, ENV_AUTO_TAG, ENV_TAG_MAX_LENGTH):
        monkeypatch.delenv(name, raising=False)
    clear_bark()
    yield
    clear_bark()


@pytest.fixture
def bark() -> Bark:
    return Bark()


@pytest.fixture
def make_spy() -> Callable[..., SpyTrainer]:
    return SpyTrainer


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2025, 9, 23, 14, 5, 9, 123456))


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None, force_terminal=False)
