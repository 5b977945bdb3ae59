"""Terminal colour capability check.

Raw ANSI escape sequences written to a non-interactive console (IDE test
panes, CI log files, pipes) show up as garbage, so coloured trainers only
colour when both the stream and the declared terminal type allow it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import IO, Any

COLOR_TERMINALS: tuple[str, ...] = (
    "xterm",
    "screen",
    "tmux",
    "vt100",
    "ansi",
    "linux",
    "rxvt",
    "alacritty",
    "kitty",
)
# TERM prefixes known to understand ANSI colour codes.


def supports_ansi_colors(stream: IO[Any] | None = None, environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``stream`` is a TTY and ``TERM`` names a colour terminal.

    Any failure to determine either fact counts as "no colour".

    Examples
    --------
    >>> import io
    >>> supports_ansi_colors(io.StringIO(), {"TERM": "xterm-256color"})
    False
    """

    env = os.environ if environ is None else environ
    try:
        if stream is None or not stream.isatty():
            return False
        term = env.get("TERM")
    except Exception:
        return False
    if not term or term == "dumb":
        return False
    return term.startswith(COLOR_TERMINALS)


__all__ = ["COLOR_TERMINALS", "supports_ansi_colors"]
