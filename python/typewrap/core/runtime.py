"""Validation context shared by signatures and their guards."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

_log = logging.getLogger("typewrap")


class Runtime:
    """Runtime validation context.

    Every signature is bound to a runtime; its guards read ``enabled`` on
    each call, so toggling affects guards that already exist.
    """

    def __init__(self, *, enabled: bool = True):
        self._lock = threading.Lock()
        self._enabled = bool(enabled)

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @enabled.setter
    def enabled(self, flag: bool) -> None:
        flag = bool(flag)
        with self._lock:
            changed = flag != self._enabled
            self._enabled = flag
        if changed:
            _log.info("typewrap validation %s", "enabled" if flag else "disabled")

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    @contextmanager
    def disabled(self) -> Iterator["Runtime"]:
        """Disable validation inside the block, then restore the previous state."""
        with self._lock:
            previous = self._enabled
        self.enabled = False
        try:
            yield self
        finally:
            self.enabled = previous

    def __repr__(self) -> str:
        return f"Runtime(enabled={self.enabled})"


# Global runtime instance
_runtime = Runtime()


def default_runtime() -> Runtime:
    """The process-wide runtime used when none is passed explicitly."""
    return _runtime


def set_validation_enabled(flag: bool) -> None:
    """Turn validation on or off for every signature on the default runtime."""
    _runtime.enabled = flag


def is_validation_enabled() -> bool:
    return _runtime.enabled


__all__ = [
    "Runtime",
    "default_runtime",
    "set_validation_enabled",
    "is_validation_enabled",
    "_runtime",
]
