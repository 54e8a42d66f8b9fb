"""Registry of primitive type checkers."""

import math
from types import MappingProxyType
from typing import Any, Mapping

from ..errors import UnknownPrimitiveType
from ..types.checkers import PrimitiveChecker


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    # One numeric kind: an int is any number without a fractional part.
    if not _is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


PRIMITIVES: Mapping[str, PrimitiveChecker] = MappingProxyType({
    "int": PrimitiveChecker("int", _is_int),
    "double": PrimitiveChecker("double", _is_number),
    "string": PrimitiveChecker("string", _is_string),
    "bool": PrimitiveChecker("bool", _is_bool),
})


def lookup_primitive(name: str) -> PrimitiveChecker:
    """Return the primitive checker for ``name`` (case-insensitive)."""
    checker = PRIMITIVES.get(name.lower())
    if checker is None:
        raise UnknownPrimitiveType(name, PRIMITIVES.keys())
    return checker


__all__ = ["PRIMITIVES", "lookup_primitive"]
