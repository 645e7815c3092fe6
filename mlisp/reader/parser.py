"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy tokenizing
- Emits mlisp values directly:

    - lists -> List
    - vectors [...] -> Vector
    - maps {...} -> HashMap (alternating keys and values)
    - integers -> Integer, `1.5` -> Float, `1/2` -> Rational
    - quote forms -> (quote x), (quasiquote x), (unquote x),
      (splice-unquote x), (deref x)
    - everything else, including "strings" and `;`, -> Symbol
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from mlisp import SExpression
from mlisp.errors import MLispOutOfRange, MLispSyntaxError
from mlisp.types.nil import Nil
from mlisp.types.numeric import Float, Integer, Rational, fits_int64
from mlisp.types.sequence import HashMap, List, Vector
from mlisp.types.symbol import Symbol

# Whitespace and commas separate tokens.
SEPARATORS_RE = re.compile(r"[\s,]*")

TOKEN_RE = re.compile(
    r"(?P<splice>~@)"  # ~@
    r"|(?P<special>[\[\]{}()'`~^@])"  # delimiters and reader markers
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>"(?:\\.|[^\\"])*)'  # string with no closing quote
    r"|(?P<separator>;)"  # row/statement separator
    r"|(?P<atom>[^\s\[\]{}('\"`,;)]+)",  # fallback: numbers and symbols
    re.DOTALL,
)

RATIONAL_RE = re.compile(r"([+-]?\d+)/(\d+)")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_RE = re.compile(r"[+-]?\d+")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

CLOSERS: dict[str, tuple[str, str]] = {
    "(": (")", "list"),
    "[": ("]", "vector"),
    "{": ("}", "map"),
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = SEPARATORS_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # Every character has a rule above; refuse to stall if one ever doesn't
            raise MLispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        kind = m.lastgroup
        if kind == "bad_string":
            raise MLispSyntaxError(f"Unbalanced string starting at {pos}: {m.group()}")
        yield kind, m.group(kind)
        pos = m.end()


def read_atom(token: str) -> SExpression:
    """Classify a bare token: rational, float, integer, else symbol."""
    if m := RATIONAL_RE.fullmatch(token):
        numerator, denominator = int(m.group(1)), int(m.group(2))
        if not (fits_int64(numerator) and fits_int64(denominator)):
            raise MLispOutOfRange(f"{token} too long")
        return Rational(numerator, denominator)
    if FLOAT_RE.fullmatch(token):
        value = float(token)
        if not math.isfinite(value):
            raise MLispOutOfRange(f"{token} too long")
        return Float(value)
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if not fits_int64(value):
            raise MLispOutOfRange(f"{token} too long")
        return Integer(value)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next form; None once the token stream is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("special", "splice"):
            if tok_val in CLOSERS:
                self.advance()
                return self._parse_collection(tok_val)
            if tok_val in QUOTE_FORMS:
                self.advance()
                expr = self.parse_expr()
                if expr is None:
                    raise MLispSyntaxError(f"Expected a form after {tok_val!r}")
                return List([QUOTE_FORMS[tok_val], expr])
            if tok_val in (")", "]", "}"):
                raise MLispSyntaxError(f"Unexpected {tok_val!r}")

        self.advance()
        if tok_type == "atom":
            return read_atom(tok_val)
        # strings, ';' and '^' are kept as symbols
        return Symbol(tok_val)

    def _parse_collection(self, opener: str) -> SExpression:
        closer, name = CLOSERS[opener]
        items = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise MLispSyntaxError(f"unclosed {name}: '{opener}' never closed")
            if tok_type == "special" and tok_val == closer:
                self.advance()
                break
            items.append(self.parse_expr())

        if opener == "(":
            return List(items)
        if opener == "[":
            return Vector(items)
        if len(items) % 2 != 0:
            raise MLispSyntaxError(f"map literal needs an even number of forms, got {len(items)}")
        return HashMap(zip(items[0::2], items[1::2]))

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read the first form in `source`; Nil when there is none."""
    expr = TokenStream(lex(source)).parse_expr()
    return Nil if expr is None else expr


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
