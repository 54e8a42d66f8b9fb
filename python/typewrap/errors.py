"""Exceptions raised while defining signatures and validating calls."""

from typing import Any, Iterable, Optional


class TypeWrapError(TypeError):
    """Base class for every typewrap error."""
    pass


class SignatureDefinitionError(TypeWrapError):
    """Raised when a signature cannot be built from its descriptors."""
    pass


class UnknownPrimitiveType(SignatureDefinitionError):
    """A text descriptor does not name a registered primitive."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.known = tuple(known)
        message = f"There is no primitive type matching {name!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class EmptyArrayDescriptor(SignatureDefinitionError):
    """Array shorthand was given without an item type."""

    def __init__(self):
        super().__init__("Cannot build an array type from an empty list: no item type given")


class InvalidClassDescriptor(SignatureDefinitionError):
    """A class descriptor does not refer to a class."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Expected a class, got {type(value).__name__} {value!r}")


class ReturnTypeAlreadySet(SignatureDefinitionError):
    """The return type of a signature may only be declared once."""

    def __init__(self, current: str):
        self.current = current
        super().__init__(f"Return type can only be set once (already {current})")


class SignatureSyntaxError(SignatureDefinitionError):
    """A textual signature could not be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid signature {text!r}: {reason}")


class TypeValidationError(TypeWrapError):
    """Raised when a guarded call violates its signature."""

    def __init__(self, message: str, function: Optional[str] = None, location: Optional[str] = None):
        self.function = function
        self.location = location
        if function:
            message = f"{function}: {message}"
        if location:
            message = f"{message} (called from {location})"
        super().__init__(message)


class ArityMismatch(TypeValidationError):
    """A guarded function was called with the wrong number of arguments."""

    def __init__(self, expected: int, actual: int, function: Optional[str] = None,
                 location: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"called with the wrong number of arguments: expected {expected}, got {actual}",
            function, location,
        )


class ArgumentTypeMismatch(TypeValidationError):
    """One positional argument failed its checker.

    ``index`` is zero-based; ``position`` is the one-based number used in
    the message.
    """

    def __init__(self, index: int, expected: str, value: Any, function: Optional[str] = None,
                 location: Optional[str] = None):
        self.index = index
        self.position = index + 1
        self.expected = expected
        self.value = value
        super().__init__(
            f"invalid type passed for argument {self.position}: "
            f"expected {expected}, got {type(value).__name__} {value!r}",
            function, location,
        )


class ReturnTypeMismatch(TypeValidationError):
    """The guarded function returned a value that failed the return checker."""

    def __init__(self, expected: str, value: Any, function: Optional[str] = None,
                 location: Optional[str] = None):
        self.expected = expected
        self.value = value
        super().__init__(
            f"returned a different type than expected: "
            f"expected {expected}, got {type(value).__name__} {value!r}",
            function, location,
        )


__all__ = [
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
