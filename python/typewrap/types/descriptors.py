"""Explicit descriptor constructors for array and class types."""

from typing import Any

from ..errors import EmptyArrayDescriptor, InvalidClassDescriptor
from .checkers import ArrayChecker, ClassChecker


class ArrayOf:
    """Array of ``item``; the explicit form of the ``[item]`` shorthand.

    Example:
        >>> points = signature(ArrayOf(Point))
    """

    __slots__ = ("checker",)

    def __init__(self, item: Any):
        if item is None:
            raise EmptyArrayDescriptor()
        # Import here to avoid circular dependency
        from typewrap.core.resolver import resolve
        self.checker = ArrayChecker(resolve(item))

    def __repr__(self) -> str:
        return f"ArrayOf({self.checker.item.describe()})"


class ObjectType:
    """Instances of ``cls``; the explicit form of passing a class."""

    __slots__ = ("checker",)

    def __init__(self, cls: Any):
        if not isinstance(cls, type):
            raise InvalidClassDescriptor(cls)
        self.checker = ClassChecker(cls)

    def __repr__(self) -> str:
        return f"ObjectType({self.checker.describe()})"


def instance_of(value: Any) -> ObjectType:
    """
    Class descriptor taken from a sample value.

    Example:
        >>> origin = Point(0, 0)
        >>> move = signature(instance_of(origin), "double")
    """
    if value is None:
        raise InvalidClassDescriptor(value)
    return ObjectType(type(value))


__all__ = ["ArrayOf", "ObjectType", "instance_of"]
