"""Module-level façade over the default :class:`Bark` dispatcher.

Purpose
-------
Give host applications the one-line ``bark.info("...")`` experience without
threading a dispatcher object through their code. Every function here
delegates to :func:`current_bark`, which lazily builds the default instance
from :class:`BarkSettings` resolved against the environment.

Contents
--------
* Leveled entry points: ``verbose``, ``debug``, ``info``, ``warning``,
  ``error``, ``critical`` and the generic ``log``.
* Roster management: ``register``, ``unregister``, ``release_all``.
* Muzzle and tag control: ``mute``, ``unmute``, ``set_tag``, ``clear_tag``.
* Lifecycle: ``reset``, ``status``, ``install``, ``clear_bark``.

System Role
-----------
Outer shell of the clean-architecture layout. Tests that need isolation build
their own :class:`Bark` or swap the default via :func:`install`.
"""

from __future__ import annotations

from lib_log_bark.application.ports.trainer import Trainer
from lib_log_bark.domain.levels import Level

from ._bark import Bark
from ._settings import BarkSettings
from ._state import build_bark, clear_bark, current_bark, install, is_installed


def verbose(message: str, error: BaseException | None = None) -> None:
    current_bark().verbose(message, error)


def debug(message: str, error: BaseException | None = None) -> None:
    current_bark().debug(message, error)


def info(message: str, error: BaseException | None = None) -> None:
    current_bark().info(message, error)


def warning(message: str, error: BaseException | None = None) -> None:
    current_bark().warning(message, error)


def error(message: str, error: BaseException | None = None) -> None:
    current_bark().error(message, error)


def critical(message: str, error: BaseException | None = None) -> None:
    current_bark().critical(message, error)


def log(level: Level | str, message: str, error: BaseException | None = None) -> None:
    """Bark at ``level``; strings are resolved with :meth:`Level.from_name`."""

    resolved = level if isinstance(level, Level) else Level.from_name(level)
    current_bark().log(resolved, message, error)


def register(trainer: Trainer) -> None:
    current_bark().register(trainer)


def unregister(trainer: Trainer) -> None:
    current_bark().unregister(trainer)


def release_all() -> None:
    current_bark().release_all()


def mute() -> None:
    current_bark().mute()


def unmute() -> None:
    current_bark().unmute()


def set_tag(tag: str) -> None:
    current_bark().set_tag(tag)


def clear_tag() -> None:
    current_bark().clear_tag()


def reset() -> None:
    """Release all trainers, clear the global tag and unmute the default dispatcher."""

    current_bark().reset()


def status() -> str:
    return current_bark().status()


__all__ = [
    "Bark",
    "BarkSettings",
    "build_bark",
    "clear_bark",
    "clear_tag",
    "critical",
    "current_bark",
    "debug",
    "error",
    "info",
    "install",
    "is_installed",
    "log",
    "mute",
    "register",
    "release_all",
    "reset",
    "set_tag",
    "status",
    "unmute",
    "unregister",
    "verbose",
    "warning",
]
