"""Guard wrapper: checks every call of a function against its signature."""

import functools
import logging
import sys
from typing import Any, Callable, Optional

from ..core.signature import Signature
from ..errors import ArgumentTypeMismatch, ArityMismatch, ReturnTypeMismatch

_log = logging.getLogger("typewrap")


def _caller_location(depth: int = 2) -> Optional[str]:
    """``file:line`` of the code that called the guarded function."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return None
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


class GuardedFunction:
    """A target function paired with the signature it is checked against.

    The pair is what other signatures inspect: a guarded function matches a
    signature checker through its ``signature``, never through its code.
    Only positional arguments are accepted.
    """

    def __init__(self, signature: Signature, target: Callable[..., Any]):
        if not callable(target):
            raise TypeError(f"Cannot guard non-callable {target!r}")
        # update_wrapper copies the target's __dict__, so set our own fields after it
        functools.update_wrapper(self, target)
        self.__signature = signature
        self.__target = target
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("guarding %s with %r", self._name, signature)

    @property
    def signature(self) -> Signature:
        return self.__signature

    @property
    def target(self) -> Callable[..., Any]:
        return self.__target

    @property
    def _name(self) -> str:
        return getattr(self.__target, "__qualname__", None) or repr(self.__target)

    def __call__(self, *args: Any) -> Any:
        sig = self.__signature
        if not sig.runtime.enabled:
            return self.__target(*args)

        checkers = sig.args
        if len(args) != len(checkers):
            error = ArityMismatch(len(checkers), len(args), self._name, _caller_location())
            _log.debug("%s", error)
            raise error

        for index, (checker, arg) in enumerate(zip(checkers, args)):
            if not checker(arg):
                error = ArgumentTypeMismatch(
                    index, checker.describe(), arg, self._name, _caller_location()
                )
                _log.debug("%s", error)
                raise error

        result = self.__target(*args)

        ret = sig.return_checker
        if ret is not None and not ret(result):
            error = ReturnTypeMismatch(ret.describe(), result, self._name, _caller_location())
            _log.debug("%s", error)
            raise error

        return result

    def __repr__(self) -> str:
        return f"<GuardedFunction {self._name} {self.__signature!r}>"


def is_guarded(obj: Any) -> bool:
    """Return True if ``obj`` was produced by a signature guard."""
    return isinstance(obj, GuardedFunction)


def signature_of(obj: Any) -> Optional[Signature]:
    """Signature attached to a guarded function, or None for anything else."""
    if isinstance(obj, GuardedFunction):
        return obj.signature
    return None


__all__ = ["GuardedFunction", "is_guarded", "signature_of"]
