from __future__ import annotations

from pathlib import Path

from lib_log_bark.adapters.trainers.file import FileTrainer
from lib_log_bark.domain.levels import Level
from lib_log_bark.domain.packs import Pack


def test_file_trainer_creates_parents_and_appends(tmp_path: Path, fixed_clock) -> None:
    target = tmp_path / "logs" / "app.log"
    trainer = FileTrainer(target, clock=fixed_clock)

    trainer.process(Level.INFO, "Cart", "first", None)
    trainer.process(Level.WARNING, "Cart", "second", None)

    assert trainer.pack is Pack.FILE
    assert trainer.path == target
    assert target.read_text(encoding="utf-8") == (
        "14:05:09.123 [INFO] - Cart: first\n"
        "14:05:09.123 [WARNING] - Cart: second\n"
    )


def test_file_trainer_filters_by_volume(tmp_path: Path) -> None:
    target = tmp_path / "app.log"
    trainer = FileTrainer(target, Level.ERROR, show_timestamp=False)

    trainer.process(Level.WARNING, "Cart", "skip", None)

    assert not target.exists()


def test_file_trainer_writes_error_lines(tmp_path: Path) -> None:
    target = tmp_path / "app.log"
    FileTrainer(target, show_timestamp=False).process(Level.WARNING, "Cart", "retry", ValueError("slow"))

    assert target.read_text(encoding="utf-8") == "[WARNING] - Cart: retry\nException: slow\n"


def test_file_trainer_keeps_control_characters_verbatim(tmp_path: Path) -> None:
    target = tmp_path / "app.log"
    FileTrainer(target, show_timestamp=False).process(Level.INFO, "Cart", "a\tb\rc\x0cd", None)

    assert target.read_bytes() == b"[INFO] - Cart: a\tb\rc\x0cd\n"
