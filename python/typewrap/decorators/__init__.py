"""Function guards and the decorator form of textual signatures."""

from .guard import GuardedFunction, is_guarded, signature_of
from .typed import typed

__all__ = ["GuardedFunction", "is_guarded", "signature_of", "typed"]
