from __future__ import annotations

import io

import pytest

from lib_log_bark.adapters.detection.color import supports_ansi_colors


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


class _BrokenStream(io.StringIO):
    def isatty(self) -> bool:
        raise ValueError("closed")


@pytest.mark.parametrize("term", ["xterm", "xterm-256color", "screen", "tmux-256color", "vt100", "linux", "kitty"])
def test_tty_with_color_terminal_supports_colors(term: str) -> None:
    assert supports_ansi_colors(_Tty(), {"TERM": term}) is True


@pytest.mark.parametrize("environ", [{}, {"TERM": ""}, {"TERM": "dumb"}, {"TERM": "emacs"}])
def test_missing_or_unknown_terminal_disables_colors(environ: dict[str, str]) -> None:
    assert supports_ansi_colors(_Tty(), environ) is False


def test_non_tty_streams_disable_colors() -> None:
    assert supports_ansi_colors(io.StringIO(), {"TERM": "xterm"}) is False


def test_stream_errors_disable_colors() -> None:
    assert supports_ansi_colors(_BrokenStream(), {"TERM": "xterm"}) is False


def test_missing_stream_disables_colors() -> None:
    assert supports_ansi_colors(None, {"TERM": "xterm"}) is False
