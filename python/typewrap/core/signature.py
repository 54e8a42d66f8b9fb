"""Function signatures and structural signature compatibility."""

import logging
import reprlib
from typing import Any, Callable, Optional, Sequence, Set, Tuple

from ..errors import ReturnTypeAlreadySet
from ..types.checkers import Checker, SignatureChecker
from .runtime import Runtime, default_runtime

_log = logging.getLogger("typewrap")


class Signature:
    """Ordered argument checkers plus an optional return checker.

    Built by :func:`typewrap.signature`. The argument list never changes;
    the return checker may be attached once with :meth:`returns`.
    Applying a signature to a function produces a guarded function:

        @signature("int", "int").returns("int")
        def add(a, b):
            return a + b
    """

    __slots__ = ("_args", "_return", "_runtime")

    def __init__(self, checkers: Sequence[Checker], runtime: Optional[Runtime] = None):
        self._args: Tuple[Checker, ...] = tuple(checkers)
        self._return: Optional[Checker] = None
        self._runtime = runtime if runtime is not None else default_runtime()

    @property
    def args(self) -> Tuple[Checker, ...]:
        return self._args

    @property
    def return_checker(self) -> Optional[Checker]:
        return self._return

    @property
    def runtime(self) -> Runtime:
        return self._runtime

    def returns(self, descriptor: Any) -> "Signature":
        """Declare the return type. May be called only once."""
        if self._return is not None:
            raise ReturnTypeAlreadySet(self._return.describe())
        # Import here to avoid circular dependency
        from .resolver import resolve
        self._return = resolve(descriptor)
        _log.debug("signature %r: return type set", self)
        return self

    def guard(self, func: Callable[..., Any]) -> Any:
        """Wrap ``func`` so every call is checked against this signature."""
        # Import here to avoid circular dependency
        from ..decorators.guard import GuardedFunction
        return GuardedFunction(self, func)

    __call__ = guard

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        params = ", ".join(c.describe() for c in self._args)
        if self._return is None:
            return f"({params})"
        return f"({params}) -> {self._return.describe()}"


def _same_checker(expected: Checker, actual: Checker, seen: Set[Tuple[int, int]]) -> bool:
    if expected.identity != actual.identity:
        return False
    if isinstance(expected, SignatureChecker) and isinstance(actual, SignatureChecker):
        return _compatible(expected.signature, actual.signature, seen)
    return True


def _compatible(expected: Signature, actual: Signature, seen: Set[Tuple[int, int]]) -> bool:
    if expected is actual:
        return True

    # A pair already under comparison is assumed compatible; self-referential
    # signatures would otherwise recurse forever.
    pair = (id(expected), id(actual))
    if pair in seen:
        return True
    seen.add(pair)

    if len(expected.args) != len(actual.args):
        return False

    for want, got in zip(expected.args, actual.args):
        if not _same_checker(want, got, seen):
            return False

    if expected.return_checker is None:
        return True
    if actual.return_checker is None:
        return False
    return _same_checker(expected.return_checker, actual.return_checker, seen)


def compatible(expected: Signature, actual: Signature) -> bool:
    """
    Check whether ``actual`` declares the shape ``expected`` asks for.

    Compares declared identities position by position, recursing into
    nested signatures. Predicates are never invoked. When ``expected``
    has no return checker any return declaration is accepted; otherwise
    ``actual`` must declare a matching one.
    """
    return _compatible(expected, actual, set())


__all__ = ["Signature", "compatible"]
