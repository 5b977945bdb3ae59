"""Public package surface for Bark, the trainer-based logging facade.

Applications register trainers (console, system log, file, or their own) and
bark through the module-level functions::

    import lib_log_bark as bark

    bark.register(bark.colored_console_trainer(tests_only=False))
    bark.info("service started")

Tags default to the name of the calling class (or module) unless a global tag
is set with :func:`set_tag`.
"""

from __future__ import annotations

from .adapters import (
    COLORED,
    PLAIN,
    ConsoleTrainer,
    Decorations,
    FileTrainer,
    FrameTagDetector,
    JournaldTrainer,
    LineFormatter,
    LoggingTrainer,
    StackTestDetector,
    SymbolTagDetector,
    colored_console_trainer,
    is_running_tests,
    supports_ansi_colors,
)
from .application.ports import CallerTagPort, IsTestingPort, Trainer
from .domain import Level, LogEvent, Pack
from .runtime import (
    Bark,
    BarkSettings,
    build_bark,
    clear_bark,
    clear_tag,
    critical,
    current_bark,
    debug,
    error,
    info,
    install,
    log,
    mute,
    register,
    release_all,
    reset,
    set_tag,
    status,
    unmute,
    unregister,
    verbose,
    warning,
)

__all__ = [
    "Bark",
    "BarkSettings",
    "COLORED",
    "CallerTagPort",
    "ConsoleTrainer",
    "Decorations",
    "FileTrainer",
    "FrameTagDetector",
    "IsTestingPort",
    "JournaldTrainer",
    "Level",
    "LineFormatter",
    "LogEvent",
    "LoggingTrainer",
    "PLAIN",
    "Pack",
    "StackTestDetector",
    "SymbolTagDetector",
    "Trainer",
    "build_bark",
    "clear_bark",
    "clear_tag",
    "colored_console_trainer",
    "critical",
    "current_bark",
    "debug",
    "error",
    "info",
    "install",
    "is_running_tests",
    "log",
    "mute",
    "register",
    "release_all",
    "reset",
    "set_tag",
    "status",
    "supports_ansi_colors",
    "unmute",
    "unregister",
    "verbose",
    "warning",
]
