"""Parser for compact textual signatures such as ``"(int, [string]) -> bool"``."""

import ast
import re
from typing import Any, List, Mapping, Optional, Tuple

from ..errors import EmptyArrayDescriptor, SignatureSyntaxError, UnknownPrimitiveType
from ..types.checkers import LiteralChecker
from .builder import signature
from .primitives import PRIMITIVES
from .runtime import Runtime
from .signature import Signature

_TOKEN = re.compile(r"""
    \s*(?:
        (?P<arrow>->)
      | (?P<punct>[()\[\],])
      | (?P<string>'[^']*'|"[^"]*")
      | (?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
      | (?P<name>[A-Za-z_][\w.]*)
    )""", re.VERBOSE)

_CONSTANTS = {"True", "False", "None"}


class SignatureParser:
    """Parser for function type signatures.

    Grammar::

        signature := "(" [type ("," type)*] ")" ["->" type]
        type      := signature | "[" type "]" | name | literal

    Names are primitive names first (case-insensitive), then entries of
    ``namespace`` (dotted names follow attributes). Literals are Python
    numbers, quoted strings, ``True``, ``False`` and ``None``.
    """

    def __init__(self, namespace: Optional[Mapping[str, Any]] = None,
                 runtime: Optional[Runtime] = None):
        self.namespace = dict(namespace or {})
        self.runtime = runtime
        self._text = ""
        self._tokens: List[Tuple[str, str]] = []
        self._pos = 0

    def parse(self, text: str) -> Signature:
        """
        Parse a signature string.

        Formats:
            - "(int, int) -> int"
            - "([double]) -> double"
            - "((int) -> bool, [int]) -> [int]"
            - "(Point, 0)"
        """
        self._text = text
        self._tokens = self._tokenize(text)
        self._pos = 0

        sig = self._parse_signature()
        if self._pos != len(self._tokens):
            self._fail(f"unexpected {self._tokens[self._pos][1]!r}")
        return sig

    def _tokenize(self, text: str) -> List[Tuple[str, str]]:
        tokens = []
        pos = 0
        end = len(text.rstrip())
        while pos < end:
            match = _TOKEN.match(text, pos)
            if match is None or match.end() == pos:
                self._fail(f"unexpected character {text[pos]!r} at offset {pos}")
            tokens.append((match.lastgroup, match.group(match.lastgroup)))
            pos = match.end()
        return tokens

    def _fail(self, reason: str) -> None:
        raise SignatureSyntaxError(self._text, reason)

    def _peek(self) -> Optional[str]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos][1]
        return None

    def _next(self) -> Tuple[str, str]:
        if self._pos >= len(self._tokens):
            self._fail("unexpected end of signature")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, value: str) -> None:
        kind, got = self._next()
        if got != value:
            self._fail(f"expected {value!r}, got {got!r}")

    def _parse_signature(self) -> Signature:
        self._expect("(")
        params = []
        if self._peek() != ")":
            while True:
                params.append(self._parse_type())
                if self._peek() != ",":
                    break
                self._next()
        self._expect(")")

        sig = signature(*params, runtime=self.runtime)
        if self._peek() == "->":
            self._next()
            sig.returns(self._parse_type())
        return sig

    def _parse_type(self) -> Any:
        token = self._peek()
        if token == "(":
            return self._parse_signature()
        if token == "[":
            self._next()
            if self._peek() == "]":
                raise EmptyArrayDescriptor()
            item = self._parse_type()
            if isinstance(item, LiteralChecker) and item.value is None:
                raise EmptyArrayDescriptor()
            self._expect("]")
            return [item]

        kind, value = self._next()
        if kind in ("string", "number"):
            return LiteralChecker(ast.literal_eval(value))
        if kind == "name":
            return self._resolve_name(value)
        self._fail(f"unexpected {value!r}")

    def _resolve_name(self, name: str) -> Any:
        if name in _CONSTANTS:
            return LiteralChecker(ast.literal_eval(name))
        if name.lower() in PRIMITIVES:
            return name

        head, *rest = name.split(".")
        if head not in self.namespace:
            raise UnknownPrimitiveType(name, PRIMITIVES.keys())
        obj = self.namespace[head]
        for attr in rest:
            try:
                obj = getattr(obj, attr)
            except AttributeError:
                raise UnknownPrimitiveType(name, PRIMITIVES.keys()) from None
        return obj


def parse_signature(text: str, namespace: Optional[Mapping[str, Any]] = None,
                    runtime: Optional[Runtime] = None) -> Signature:
    """Parse a textual signature into a :class:`Signature`."""
    return SignatureParser(namespace, runtime).parse(text)


__all__ = ["SignatureParser", "parse_signature"]
