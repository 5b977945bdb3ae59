"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_bark"
title = "Bark - trainer-based logging facade with caller-tag detection"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_bark"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_bark"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> captured: list[str] = []
    >>> print_info(writer=captured.append)
    >>> captured[0].startswith("Info for lib_log_bark:")
    True
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    writer("\n".join(lines) + "\n")


def summary_info() -> str:
    """Return the banner produced by :func:`print_info` as one string."""

    chunks: list[str] = []
    print_info(writer=chunks.append)
    return "".join(chunks)


__all__ = [
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "summary_info",
    "title",
    "version",
]
