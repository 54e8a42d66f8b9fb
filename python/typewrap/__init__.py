"""typewrap: runtime function-signature validation for Python."""

import logging

from typewrap.core import (
    Runtime,
    Signature,
    compatible,
    default_runtime,
    is_validation_enabled,
    parse_signature,
    resolve,
    set_validation_enabled,
    signature,
)
from typewrap.decorators import GuardedFunction, is_guarded, signature_of, typed
from typewrap.errors import (
    TypeWrapError,
    SignatureDefinitionError,
    UnknownPrimitiveType,
    EmptyArrayDescriptor,
    InvalidClassDescriptor,
    ReturnTypeAlreadySet,
    SignatureSyntaxError,
    TypeValidationError,
    ArityMismatch,
    ArgumentTypeMismatch,
    ReturnTypeMismatch,
)
from typewrap.types import (
    Checker, PrimitiveChecker, ClassChecker, ArrayChecker, SignatureChecker, LiteralChecker,
    ArrayOf, ObjectType, instance_of,
)

logging.getLogger("typewrap").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Builders and decorators
    "signature",
    "parse_signature",
    "typed",
    "Signature",
    "GuardedFunction",
    "compatible",
    "resolve",
    "is_guarded",
    "signature_of",
    # Runtime
    "Runtime",
    "default_runtime",
    "set_validation_enabled",
    "is_validation_enabled",
    # Checkers and descriptors
    "Checker",
    "PrimitiveChecker",
    "ClassChecker",
    "ArrayChecker",
    "SignatureChecker",
    "LiteralChecker",
    "ArrayOf",
    "ObjectType",
    "instance_of",
    # Errors
    "TypeWrapError",
    "SignatureDefinitionError",
    "UnknownPrimitiveType",
    "EmptyArrayDescriptor",
    "InvalidClassDescriptor",
    "ReturnTypeAlreadySet",
    "SignatureSyntaxError",
    "TypeValidationError",
    "ArityMismatch",
    "ArgumentTypeMismatch",
    "ReturnTypeMismatch",
]
