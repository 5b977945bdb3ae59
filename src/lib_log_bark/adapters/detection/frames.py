"""Caller-tag detection by walking Python frames.

Purpose
-------
Synthesize a log tag from the code that issued the log call, mimicking the
auto-tagging of Timber-style loggers, without requiring callers to declare a
``TAG`` constant.

Contents
--------
* :class:`FrameTagDetector` – :class:`CallerTagPort` implementation.
* :func:`frame_owner` – maps a frame to ``(namespace, owner)``.

System Role
-----------
Default detector installed by :class:`lib_log_bark.runtime.Bark`. Runs once
per log call while no global tag is set, so its cost lands on every such call.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import FrameType

from lib_log_bark.application.ports.detection import CallerTagPort

from .filters import FALLBACK_TAG, PYTHON_FILTER, TagFilter, simple_name, truncate_tag

logger = logging.getLogger(__name__)


def frame_owner(frame: FrameType) -> tuple[str, str]:
    """Return ``(namespace, owner)`` for ``frame``.

    ``owner`` is the outermost class enclosing the executing code, or the
    module's short name for module-level functions.
    """

    code = frame.f_code
    namespace = frame.f_globals.get("__name__") or ""
    if namespace == "__main__":
        namespace = Path(code.co_filename).stem
    qualname = getattr(code, "co_qualname", code.co_name)
    scope = qualname.split(".<locals>", 1)[0]
    parts = scope.split(".")
    if len(parts) > 1:
        return namespace, parts[0]
    return namespace, simple_name(namespace)


class FrameTagDetector(CallerTagPort):
    """Return the short name of the first application frame on the stack.

    Parameters
    ----------
    tag_filter:
        Exclusion rules; defaults to :data:`PYTHON_FILTER`.
    max_length:
        Optional tag length limit (e.g. 23 for Android-style consumers);
        longer tags keep their tail.
    enabled:
        When ``False`` :meth:`detect` returns ``""`` without touching the stack.
    """

    def __init__(
        self,
        *,
        tag_filter: TagFilter = PYTHON_FILTER,
        max_length: int | None = None,
        enabled: bool = True,
    ) -> None:
        self._filter = tag_filter
        self._max_length = max_length
        self.enabled = enabled

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def detect(self) -> str:
        """Return the caller tag or :data:`FALLBACK_TAG`; never raises."""

        if not self.enabled:
            return ""
        try:
            owner = self._find_owner(sys._getframe(1))
        except Exception:
            logger.debug("caller tag detection failed", exc_info=True)
            return FALLBACK_TAG
        if owner is None:
            return FALLBACK_TAG
        return truncate_tag(owner, self._max_length)

    def _find_owner(self, frame: FrameType | None) -> str | None:
        try:
            while frame is not None:
                namespace, owner = frame_owner(frame)
                if self._filter.accepts(namespace, owner):
                    return owner
                frame = frame.f_back
            return None
        finally:
            del frame


__all__ = ["FrameTagDetector", "frame_owner"]
