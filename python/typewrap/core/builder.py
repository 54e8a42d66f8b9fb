"""Public entry point for building signatures."""

import logging
from typing import Any, Optional

from .resolver import resolve
from .runtime import Runtime
from .signature import Signature

_log = logging.getLogger("typewrap")


def signature(*descriptors: Any, runtime: Optional[Runtime] = None) -> Signature:
    """
    Build a signature from argument type descriptors.

    Args:
        *descriptors: One descriptor per positional parameter, see
            :func:`typewrap.core.resolver.resolve`
        runtime: Validation context; defaults to the process-wide runtime

    Example:
        >>> add = signature("int", "int").returns("int")(lambda a, b: a + b)
        >>> add(2, 3)
        5
    """
    sig = Signature([resolve(d) for d in descriptors], runtime)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug("built signature %r", sig)
    return sig


__all__ = ["signature"]
