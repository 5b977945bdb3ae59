"""Name extraction and exclusion rules shared by the caller-tag detectors.

Purpose
-------
Decide which stack entries count as "the calling application code" and turn
their qualified names into short tags.

Contents
--------
* :data:`FALLBACK_TAG` – sentinel returned when no caller can be identified.
* :func:`simple_name` / :func:`truncate_tag` – tag shaping helpers.
* :class:`TagFilter` – exclusion rules with the :data:`PYTHON_FILTER` and
  :data:`NATIVE_FILTER` presets.

System Role
-----------
Frames belonging to this package, its trainers, the interpreter, the
standard library, and test-runner machinery are skipped so the tag names the
first frame written by the application (or by a test class exercising it).
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

FALLBACK_TAG = "Bark"
"""Tag used when detection fails or finds no acceptable caller."""

TRUNCATION_MARKER = "*"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_RUNTIME_NAMESPACES: frozenset[str] = frozenset(sys.stdlib_module_names) | {
    "_pytest",
    "pytest",
    "pluggy",
    "nose",
    "nose2",
    "hypothesis",
    "coverage",
    "click",
    "rich",
    "typer",
    "IPython",
    "ipykernel",
    "lib_log_bark",
}
# Top-level packages whose frames never name the caller.


def simple_name(qualified: str) -> str:
    """Drop the namespace prefix and any nested-scope suffix of ``qualified``.

    Examples
    --------
    >>> simple_name("com.example.app.MainActivity")
    'MainActivity'
    >>> simple_name("com.example.app.MainActivity$Companion")
    'MainActivity'
    >>> simple_name("app.views.Outer.<locals>.helper")
    'Outer'
    >>> simple_name("")
    'Unknown'
    """

    head = qualified.split(".<locals>", 1)[0]
    head = head.rsplit(".", 1)[-1]
    head = head.split("$", 1)[0]
    return head.strip() or "Unknown"


def truncate_tag(tag: str, max_length: int | None) -> str:
    """Keep the tail of ``tag`` when it exceeds ``max_length``.

    The most specific part of a tag is its end, so truncation drops the head
    and marks the cut with :data:`TRUNCATION_MARKER`.

    Examples
    --------
    >>> truncate_tag("ShortTag", 23)
    'ShortTag'
    >>> truncate_tag("ABCDEFGHIJ", 5)
    '*GHIJ'
    """

    if max_length is None or len(tag) <= max_length:
        return tag
    if max_length <= 1:
        return TRUNCATION_MARKER[:max_length]
    return TRUNCATION_MARKER + tag[-(max_length - 1):]


def looks_like_test_class(name: str) -> bool:
    """Return ``True`` for names following test-class naming conventions."""

    return name.endswith(("Test", "Tests")) or (name.startswith("Test") and name[4:5].isupper())


@dataclass(frozen=True)
class TagFilter:
    """Exclusion rules applied to ``(namespace, name)`` candidates.

    Attributes
    ----------
    namespaces:
        Top-level namespaces (first dotted segment) that are always skipped.
    prefixes / suffixes / fragments:
        Identifier patterns marking framework, facade, trainer, reflection,
        proxy, or lambda-trampoline code. Test-class names are exempt.
    """

    namespaces: frozenset[str] = _RUNTIME_NAMESPACES
    prefixes: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ("Bark",)
    fragments: tuple[str, ...] = (
        "Trainer",
        "TagDetect",
        "TestDetect",
        "Runner",
        "Reflect",
        "Framework",
        "Callable",
        "Proxy",
        "Lambda",
        "<lambda>",
        "$$",
    )

    def accepts(self, namespace: str, name: str) -> bool:
        """Return ``True`` when ``name`` may be reported as the caller tag.

        Examples
        --------
        >>> PYTHON_FILTER.accepts("shop.checkout", "CartService")
        True
        >>> PYTHON_FILTER.accepts("shop.checkout", "CartTrainer")
        False
        >>> PYTHON_FILTER.accepts("tests.test_bark", "TestTrainerPolicy")
        True
        >>> PYTHON_FILTER.accepts("threading", "Thread")
        False
        """

        if not name or not name.strip():
            return False
        top_level = namespace.split(".", 1)[0]
        if top_level in self.namespaces:
            return False
        if looks_like_test_class(name) and _IDENTIFIER.fullmatch(name):
            return True
        if any(fragment in name for fragment in self.fragments):
            return False
        if not _IDENTIFIER.fullmatch(name):
            return False
        if self.prefixes and name.startswith(self.prefixes):
            return False
        return not name.endswith(self.suffixes)


PYTHON_FILTER = TagFilter()
"""Rules for Python frames."""

NATIVE_FILTER = TagFilter(
    prefixes=("NS", "UI", "CF", "CA", "CG", "Swift", "_", "XC"),
)
"""Rules for symbols from native stack walks (Foundation, UIKit, Swift, XCTest)."""


__all__ = [
    "FALLBACK_TAG",
    "NATIVE_FILTER",
    "PYTHON_FILTER",
    "TRUNCATION_MARKER",
    "TagFilter",
    "looks_like_test_class",
    "simple_name",
    "truncate_tag",
]
