"""Checker model and explicit type descriptors."""

from .checkers import (
    SIGNATURE_IDENTITY,
    Checker, PrimitiveChecker, ClassChecker, ArrayChecker, SignatureChecker, LiteralChecker,
)
from .descriptors import ArrayOf, ObjectType, instance_of

__all__ = [
    # Checkers
    "SIGNATURE_IDENTITY",
    "Checker",
    "PrimitiveChecker",
    "ClassChecker",
    "ArrayChecker",
    "SignatureChecker",
    "LiteralChecker",
    # Descriptors
    "ArrayOf",
    "ObjectType",
    "instance_of",
]
