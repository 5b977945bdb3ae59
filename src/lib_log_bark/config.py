"""Optional ``.env`` support for the runtime settings.

Purpose
-------
Let operators keep ``BARK_*`` variables in a ``.env`` file next to the
project instead of exporting them in every shell.

Contents
--------
* :data:`DOTENV_ENV_VAR` – environment toggle consulted when no explicit flag
  is given.
* :func:`should_use_dotenv` – precedence rule (explicit flag beats the toggle).
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.

System Role
-----------
Configuration edge. Values already present in :data:`os.environ` always win
over ``.env`` entries, and explicit arguments to :class:`BarkSettings` win
over both.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

from .runtime._settings import parse_bool

DOTENV_ENV_VAR = "BARK_USE_DOTENV"

logger = logging.getLogger(__name__)

_DOTENV_LOCK = Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def should_use_dotenv(explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` files should be loaded.

    Examples
    --------
    >>> should_use_dotenv(True, "0")
    True
    >>> should_use_dotenv(None, "yes")
    True
    >>> should_use_dotenv(None, None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None or not env_value.strip():
        return False
    return parse_bool(DOTENV_ENV_VAR, env_value)


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``path`` or the nearest ``.env`` above the working directory.

    Returns the resolved file that was loaded, or ``None`` when none exists.
    Subsequent calls return the first result without reading the file again.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        if path is not None:
            candidate = Path(path)
            located = str(candidate) if candidate.is_file() else ""
        else:
            located = find_dotenv(usecwd=True)
        _DOTENV_LOADED = True
        if not located:
            logger.debug("no .env file found")
            _DOTENV_PATH = None
            return None
        _DOTENV_PATH = Path(located).resolve()
        load_dotenv(_DOTENV_PATH, override=False)
        logger.debug("loaded environment from %s", _DOTENV_PATH)
        return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
