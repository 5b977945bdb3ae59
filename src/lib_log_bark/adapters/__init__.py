"""Adapters: stack introspection, formatting, and concrete trainers."""

from __future__ import annotations

from .detection import FrameTagDetector, StackTestDetector, SymbolTagDetector, is_running_tests, supports_ansi_colors
from .formatting import COLORED, PLAIN, Decorations, LineFormatter
from .trainers import ConsoleTrainer, FileTrainer, JournaldTrainer, LoggingTrainer, colored_console_trainer

__all__ = [
    "COLORED",
    "ConsoleTrainer",
    "Decorations",
    "FileTrainer",
    "FrameTagDetector",
    "JournaldTrainer",
    "LineFormatter",
    "LoggingTrainer",
    "PLAIN",
    "StackTestDetector",
    "SymbolTagDetector",
    "colored_console_trainer",
    "is_running_tests",
    "supports_ansi_colors",
]
