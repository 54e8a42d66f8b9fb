"""Core signature model: primitives, resolution, signatures and runtime."""

from .runtime import Runtime, _runtime, default_runtime, set_validation_enabled, is_validation_enabled
from .primitives import PRIMITIVES, lookup_primitive
from .resolver import resolve
from .signature import Signature, compatible
from .builder import signature
from .signature_parser import parse_signature, SignatureParser

__all__ = [
    "Runtime",
    "_runtime",
    "default_runtime",
    "set_validation_enabled",
    "is_validation_enabled",
    "PRIMITIVES",
    "lookup_primitive",
    "resolve",
    "Signature",
    "compatible",
    "signature",
    "parse_signature",
    "SignatureParser",
]
