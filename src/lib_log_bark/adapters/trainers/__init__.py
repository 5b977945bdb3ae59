"""Concrete trainers shipped with the library."""

from __future__ import annotations

from .console import ConsoleTrainer, colored_console_trainer
from .file import FileTrainer
from .system import JournaldTrainer, LoggingTrainer

__all__ = [
    "ConsoleTrainer",
    "FileTrainer",
    "JournaldTrainer",
    "LoggingTrainer",
    "colored_console_trainer",
]
