"""Detection of automated test runs by inspecting the call stack.

Trainers consult this to stay silent (system log trainers) or to become active
(console trainers) while tests run. The dispatcher itself never asks.
"""

from __future__ import annotations

import logging
import sys
from types import FrameType

from lib_log_bark.application.ports.detection import IsTestingPort

logger = logging.getLogger(__name__)

_FRAMEWORK_FRAGMENTS: tuple[str, ...] = (
    "pytest",
    "unittest",
    "pluggy",
    "nose",
    "hypothesis",
    "doctest",
    "xdist",
)
_TEST_FUNCTION_PREFIX = "test"


def _module_looks_like_test(module: str) -> bool:
    leaf = module.rsplit(".", 1)[-1]
    return leaf.startswith("test_") or leaf.endswith(("_test", "_tests")) or leaf in {"tests", "conftest"}


def _frame_is_test(frame: FrameType) -> bool:
    module = (frame.f_globals.get("__name__") or "").lower()
    if any(fragment in module for fragment in _FRAMEWORK_FRAGMENTS):
        return True
    if frame.f_code.co_name.startswith(_TEST_FUNCTION_PREFIX):
        return True
    return _module_looks_like_test(module)


class StackTestDetector(IsTestingPort):
    """Report whether any frame on the current stack belongs to a test run."""

    def is_testing(self) -> bool:
        frame: FrameType | None = None
        try:
            frame = sys._getframe(1)
            while frame is not None:
                if _frame_is_test(frame):
                    return True
                frame = frame.f_back
            return False
        except Exception:
            logger.debug("test environment detection failed", exc_info=True)
            return False
        finally:
            del frame


_DEFAULT_DETECTOR = StackTestDetector()


def is_running_tests() -> bool:
    """Return ``True`` when called from within an automated test run."""

    return _DEFAULT_DETECTOR.is_testing()


__all__ = ["StackTestDetector", "is_running_tests"]
