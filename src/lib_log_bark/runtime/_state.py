"""Default dispatcher container and access helpers."""

from __future__ import annotations

from threading import RLock

from ._bark import Bark
from ._settings import BarkSettings

_BARK: Bark | None = None
_STATE_LOCK = RLock()


def install(bark: Bark) -> None:
    """Install ``bark`` as the default dispatcher used by the module-level API."""

    with _STATE_LOCK:
        global _BARK
        _BARK = bark


def clear_bark() -> None:
    """Forget the default dispatcher; the next access builds a fresh one."""

    with _STATE_LOCK:
        global _BARK
        _BARK = None


def build_bark(settings: BarkSettings | None = None) -> Bark:
    """Construct a dispatcher from ``settings`` (defaults to the environment)."""

    return Bark.from_settings(settings if settings is not None else BarkSettings.from_env())


def current_bark() -> Bark:
    """Return the default dispatcher, building it from the environment on first use."""

    with _STATE_LOCK:
        global _BARK
        if _BARK is None:
            _BARK = build_bark()
        return _BARK


def is_installed() -> bool:
    """Return ``True`` when a default dispatcher exists."""

    with _STATE_LOCK:
        return _BARK is not None


__all__ = [
    "build_bark",
    "clear_bark",
    "current_bark",
    "install",
    "is_installed",
]
