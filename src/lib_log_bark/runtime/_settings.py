"""Runtime settings resolved from explicit arguments and environment variables.

Environment variables
---------------------
``BARK_MUTED``
    Start muzzled (``1/true/yes/on`` or ``0/false/no/off``).
``BARK_TAG``
    Global tag overriding auto-detection.
``BARK_AUTO_TAG``
    Toggle caller-tag auto-detection (defaults to on).
``BARK_TAG_MAX_LENGTH``
    Positive integer limiting auto-detected tag length.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

ENV_MUTED = "BARK_MUTED"
ENV_TAG = "BARK_TAG"
ENV_AUTO_TAG = "BARK_AUTO_TAG"
ENV_TAG_MAX_LENGTH = "BARK_TAG_MAX_LENGTH"


def parse_bool(name: str, raw: str) -> bool:
    """Interpret ``raw`` as a boolean flag named ``name``.

    Examples
    --------
    >>> parse_bool("BARK_MUTED", " Yes ")
    True
    >>> parse_bool("BARK_MUTED", "off")
    False
    """

    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY)}, got {raw!r}")


def parse_max_length(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class BarkSettings:
    """Initial configuration for a :class:`~lib_log_bark.runtime.Bark` instance."""

    muted: bool = False
    tag: str | None = None
    auto_tag: bool = True
    tag_max_length: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "BarkSettings":
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        Keyword ``overrides`` take precedence over the environment.
        """

        env = os.environ if environ is None else environ
        settings = cls()
        if (raw := env.get(ENV_MUTED)) is not None and raw.strip():
            settings = replace(settings, muted=parse_bool(ENV_MUTED, raw))
        if (raw := env.get(ENV_TAG)) is not None and raw != "":
            settings = replace(settings, tag=raw)
        if (raw := env.get(ENV_AUTO_TAG)) is not None and raw.strip():
            settings = replace(settings, auto_tag=parse_bool(ENV_AUTO_TAG, raw))
        if (raw := env.get(ENV_TAG_MAX_LENGTH)) is not None and raw.strip():
            settings = replace(settings, tag_max_length=parse_max_length(ENV_TAG_MAX_LENGTH, raw))
        if overrides:
            settings = replace(settings, **overrides)
        return settings


__all__ = [
    "BarkSettings",
    "ENV_AUTO_TAG",
    "ENV_MUTED",
    "ENV_TAG",
    "ENV_TAG_MAX_LENGTH",
    "parse_bool",
    "parse_max_length",
]
