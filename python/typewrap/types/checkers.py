"""Checkers: value predicates tagged with a comparable type identity."""

from typing import Any, Callable

# Identity shared by every signature checker. Compatibility recurses into the
# bound signatures instead of comparing this string alone.
SIGNATURE_IDENTITY = "<signature>"


class Checker:
    """Predicate over a single value, carrying a type identity.

    Two checkers describe the same type when their identities are equal;
    comparing identities never runs the predicate.
    """

    kind = "checker"
    __slots__ = ("_identity",)

    def __init__(self, identity: str):
        self._identity = identity

    @property
    def identity(self) -> str:
        return self._identity

    def __call__(self, value: Any) -> bool:
        raise NotImplementedError

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        return self._identity

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class PrimitiveChecker(Checker):
    """Named scalar type from the primitive registry."""

    kind = "primitive"
    __slots__ = ("_predicate",)

    def __init__(self, name: str, predicate: Callable[[Any], bool]):
        super().__init__(name)
        self._predicate = predicate

    def __call__(self, value: Any) -> bool:
        return self._predicate(value)


class ClassChecker(Checker):
    """Instances of a class, subclasses included.

    The identity is the class name under a ``class:`` prefix, so the class
    ``int`` never compares equal to the primitive ``"int"``. Distinct classes
    sharing a name still share an identity.
    """

    kind = "class"
    __slots__ = ("cls",)

    def __init__(self, cls: type):
        super().__init__(f"class:{cls.__name__}")
        self.cls = cls

    def __call__(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def describe(self) -> str:
        return self.cls.__name__


class ArrayChecker(Checker):
    """List or tuple whose present items all satisfy the item checker.

    ``None`` items are absent slots and are skipped.
    """

    kind = "array"
    __slots__ = ("item",)

    def __init__(self, item: Checker):
        super().__init__(f"array[{item.identity}]")
        self.item = item

    def __call__(self, value: Any) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        item = self.item
        for element in value:
            if element is None:
                continue
            if not item(element):
                return False
        return True

    def describe(self) -> str:
        return f"array[{self.item.describe()}]"


class SignatureChecker(Checker):
    """Guarded functions declared with a signature compatible to ``signature``."""

    kind = "signature"
    __slots__ = ("signature",)

    def __init__(self, signature: Any):
        super().__init__(SIGNATURE_IDENTITY)
        self.signature = signature

    def __call__(self, value: Any) -> bool:
        # Import here to avoid circular dependency
        from typewrap.core.signature import compatible
        from typewrap.decorators.guard import signature_of

        actual = signature_of(value)
        if actual is None:
            return False
        return compatible(self.signature, actual)

    def describe(self) -> str:
        return repr(self.signature)


class LiteralChecker(Checker):
    """Exact value: same type and equal."""

    kind = "literal"
    __slots__ = ("value",)

    def __init__(self, value: Any):
        super().__init__(repr(value))
        self.value = value

    def __call__(self, value: Any) -> bool:
        return type(value) is type(self.value) and value == self.value


__all__ = [
    "SIGNATURE_IDENTITY",
    "Checker",
    "PrimitiveChecker",
    "ClassChecker",
    "ArrayChecker",
    "SignatureChecker",
    "LiteralChecker",
]
