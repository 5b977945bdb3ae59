"""Call-stack and terminal introspection adapters."""

from __future__ import annotations

from .color import supports_ansi_colors
from .filters import FALLBACK_TAG, NATIVE_FILTER, PYTHON_FILTER, TagFilter, simple_name, truncate_tag
from .frames import FrameTagDetector
from .symbols import ParsedSymbol, SymbolTagDetector, parse_symbol
from .testing import StackTestDetector, is_running_tests

__all__ = [
    "FALLBACK_TAG",
    "FrameTagDetector",
    "NATIVE_FILTER",
    "PYTHON_FILTER",
    "ParsedSymbol",
    "StackTestDetector",
    "SymbolTagDetector",
    "TagFilter",
    "is_running_tests",
    "parse_symbol",
    "simple_name",
    "supports_ansi_colors",
    "truncate_tag",
]
