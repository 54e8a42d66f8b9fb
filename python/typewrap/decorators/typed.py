"""Decorator form of a textual signature."""

import sys
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from ..core.runtime import Runtime
from ..core.signature import Signature
from ..core.signature_parser import parse_signature

F = TypeVar('F', bound=Callable[..., Any])


def typed(annotation: Union[str, Signature], *, namespace: Optional[Mapping[str, Any]] = None,
          runtime: Optional[Runtime] = None) -> Callable[[F], Any]:
    """
    Decorator for guarding a function with a textual signature.

    Args:
        annotation: Signature like "(int, int) -> int", or a built Signature
        namespace: Names available to the signature; defaults to the
            globals and locals of the calling scope
        runtime: Validation context for the parsed signature

    Example:
        @typed("(int, int) -> int")
        def add(x, y):
            return x + y

        @typed("([Point], (Point) -> bool) -> [Point]")
        def keep(points, pred):
            return [p for p in points if pred(p)]
    """
    if isinstance(annotation, Signature):
        sig = annotation
    else:
        if namespace is None:
            frame = sys._getframe(1)
            namespace = {**frame.f_globals, **frame.f_locals}
        sig = parse_signature(annotation, namespace, runtime)

    def decorator(func: F) -> Any:
        return sig.guard(func)

    return decorator


__all__ = ["typed"]
