"""Caller-tag detection from textual stack symbols.

Purpose
-------
Recover a caller tag where no per-frame class metadata exists and all that is
available is a list of symbol strings, as produced by native stack walks
(``backtrace_symbols``, crash reports, embedded interpreters).

Contents
--------
* :class:`ParsedSymbol` – namespace/name pair extracted from one symbol.
* :func:`parse_symbol` – ordered demangling strategies.
* :class:`SymbolTagDetector` – :class:`CallerTagPort` over a symbol provider.

System Role
-----------
Alternative to :class:`~lib_log_bark.adapters.detection.frames.FrameTagDetector`.
Symbols typically look like::

    1   MyApp    0x0000000100001234 MyApp.MyClass.myMethod() -> () + 123
    2   MyApp    0x0000000100001234 $s5MyApp7MyClassC8myMethodyyF + 123
    3   shared   0x0000000100001234 kfun:com.example.shared.Greeter#greet(){} + 12
    4   MyApp    0x0000000100001234 -[AppDelegate application:didFinish:] + 88
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import NamedTuple

from lib_log_bark.application.ports.detection import CallerTagPort

from .filters import FALLBACK_TAG, NATIVE_FILTER, TagFilter, truncate_tag

logger = logging.getLogger(__name__)

SymbolProvider = Callable[[], Iterable[str]]

_TYPE_DISCRIMINATORS = frozenset("CVOP")
# Swift mangling markers: class, struct (value), enum, protocol.

_QUALIFIED = re.compile(r"\b(?:kfun:)?((?:[a-z_][a-z0-9_]*\.)+)([A-Z][A-Za-z0-9_]*)[#.]")
_SWIFT_DOTTED = re.compile(r"\b([A-Z][A-Za-z0-9_]*)\.([A-Z][A-Za-z0-9_]*)\.[a-z_]")
_MANGLED = re.compile(r"\$s(\d+[A-Za-z_][A-Za-z0-9_]*)")
_LENGTH = re.compile(r"\d+")
_OBJC = re.compile(r"[-+]\[([A-Za-z][A-Za-z0-9_]*)(?:\([A-Za-z0-9_]*\))?\s")


class ParsedSymbol(NamedTuple):
    """Namespace and type-like identifier recovered from a symbol string."""

    namespace: str
    name: str


def _from_qualified(symbol: str) -> ParsedSymbol | None:
    match = _QUALIFIED.search(symbol)
    if match is None:
        return None
    return ParsedSymbol(match.group(1).rstrip("."), match.group(2))


def _from_swift_dotted(symbol: str) -> ParsedSymbol | None:
    match = _SWIFT_DOTTED.search(symbol)
    if match is None:
        return None
    return ParsedSymbol(match.group(1), match.group(2))


def _from_mangled(symbol: str) -> ParsedSymbol | None:
    """Decode length-prefixed segments and return the first type-like one.

    Examples
    --------
    >>> _from_mangled("$s5MyApp7MyClassC8myMethodyyF")
    ParsedSymbol(namespace='MyApp', name='MyClass')
    """

    match = _MANGLED.search(symbol)
    if match is None:
        return None
    body = match.group(1)
    segments: list[str] = []
    position = 0
    while (digits := _LENGTH.match(body, position)) is not None:
        length = int(digits.group(0))
        start = digits.end()
        segment = body[start:start + length]
        if len(segment) < length:
            break
        position = start + length
        marker = body[position:position + 1]
        if segments and segment[:1].isupper() and marker in _TYPE_DISCRIMINATORS:
            return ParsedSymbol(segments[0], segment)
        segments.append(segment)
    return None


def _from_objc(symbol: str) -> ParsedSymbol | None:
    match = _OBJC.search(symbol)
    if match is None:
        return None
    return ParsedSymbol("", match.group(1))


_STRATEGIES: tuple[Callable[[str], ParsedSymbol | None], ...] = (
    _from_qualified,
    _from_swift_dotted,
    _from_mangled,
    _from_objc,
)


def parse_symbol(symbol: str) -> ParsedSymbol | None:
    """Apply the demangling strategies in order; first plausible result wins.

    Examples
    --------
    >>> parse_symbol("3 shared 0x1 kfun:com.example.shared.Greeter#greet(){} + 12")
    ParsedSymbol(namespace='com.example.shared', name='Greeter')
    >>> parse_symbol("1 MyApp 0x1 MyApp.ProfileView.render() -> () + 4").name
    'ProfileView'
    >>> parse_symbol("4 MyApp 0x1 -[AppDelegate application:didFinish:] + 88").name
    'AppDelegate'
    >>> parse_symbol("0 libsystem 0x1 start + 1") is None
    True
    """

    for strategy in _STRATEGIES:
        parsed = strategy(symbol)
        if parsed is not None and parsed.name[:1].isupper():
            return parsed
    return None


def python_stack_symbols(skip: int = 1) -> list[str]:
    """Render the current Python stack as ``module.qualname`` symbol strings."""

    symbols: list[str] = []
    frame = sys._getframe(skip + 1)
    try:
        while frame is not None:
            code = frame.f_code
            module = frame.f_globals.get("__name__") or "__main__"
            symbols.append(f"{module}.{getattr(code, 'co_qualname', code.co_name)}")
            frame = frame.f_back
    finally:
        del frame
    return symbols


class SymbolTagDetector(CallerTagPort):
    """Detect the caller tag by demangling stack symbols.

    Parameters
    ----------
    provider:
        Callable returning symbols innermost first. Defaults to the current
        Python stack rendered by :func:`python_stack_symbols`.
    tag_filter:
        Exclusion rules; defaults to :data:`NATIVE_FILTER`.
    max_length:
        Optional tag length limit; longer tags keep their tail.
    enabled:
        When ``False`` :meth:`detect` returns ``""`` without walking the stack.
    """

    def __init__(
        self,
        provider: SymbolProvider | None = None,
        *,
        tag_filter: TagFilter = NATIVE_FILTER,
        max_length: int | None = None,
        enabled: bool = True,
    ) -> None:
        self._provider = provider if provider is not None else python_stack_symbols
        self._filter = tag_filter
        self._max_length = max_length
        self.enabled = enabled

    def detect(self) -> str:
        """Return the caller tag or :data:`FALLBACK_TAG`; never raises."""

        if not self.enabled:
            return ""
        try:
            name = self.first_caller(list(self._provider()))
        except Exception:
            logger.debug("symbol-based caller tag detection failed", exc_info=True)
            return FALLBACK_TAG
        if name is None:
            return FALLBACK_TAG
        return truncate_tag(name, self._max_length)

    def first_caller(self, symbols: Sequence[str]) -> str | None:
        """Return the first acceptable type name found in ``symbols``."""

        for symbol in symbols:
            parsed = parse_symbol(symbol)
            if parsed is not None and self._filter.accepts(parsed.namespace, parsed.name):
                return parsed.name
        return None


__all__ = [
    "ParsedSymbol",
    "SymbolProvider",
    "SymbolTagDetector",
    "parse_symbol",
    "python_stack_symbols",
]
