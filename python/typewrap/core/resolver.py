"""Resolve user-supplied type descriptors into checkers."""

import warnings
from typing import Any

from ..errors import EmptyArrayDescriptor
from ..types.checkers import (
    ArrayChecker, Checker, ClassChecker, LiteralChecker, SignatureChecker,
)
from ..types.descriptors import ArrayOf, ObjectType
from .primitives import lookup_primitive


def resolve(descriptor: Any) -> Checker:
    """
    Convert a type descriptor into a checker.

    Descriptors are matched in this order:
        1. ``str``: primitive name, case-insensitive ("int", "double", "string", "bool")
        2. ``Signature``: guarded functions with a compatible signature
        3. ``[item]``: list of one element, an array of ``item``
        4. a class: instances of that class
        5. anything else: an existing checker, ``ArrayOf`` / ``ObjectType``,
           or a literal value matched by strict equality

    Example:
        >>> resolve("int").identity
        'int'
        >>> resolve([["string"]]).identity
        'array[array[string]]'
    """
    # Import here to avoid circular dependency
    from .signature import Signature

    if isinstance(descriptor, str):
        return lookup_primitive(descriptor)

    if isinstance(descriptor, Signature):
        return SignatureChecker(descriptor)

    if isinstance(descriptor, list):
        if not descriptor:
            raise EmptyArrayDescriptor()
        if len(descriptor) == 1:
            if descriptor[0] is None:
                raise EmptyArrayDescriptor()
            return ArrayChecker(resolve(descriptor[0]))
        warnings.warn(
            f"List descriptor with {len(descriptor)} elements is matched as a literal; "
            f"use [item] for an array type",
            stacklevel=3,
        )

    if isinstance(descriptor, type):
        return ClassChecker(descriptor)

    if isinstance(descriptor, Checker):
        return descriptor

    if isinstance(descriptor, (ArrayOf, ObjectType)):
        return descriptor.checker

    return LiteralChecker(descriptor)


__all__ = ["resolve"]
