"""
  Mankai Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> float

There are no boolean literals: `true` and `false` are ordinary symbols bound
in the global environment.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable
from mankai import SExpression
from mankai.errors import MankaiLexError, MankaiSyntaxError
from mankai.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # opening quote with no closing quote
    r'|(?P<symbol>[^\s()";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            # Only trailing whitespace is left
            if source[pos:].isspace():
                break
            raise MankaiLexError(f"unexpected character {source[pos]!r}", pos)
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise MankaiLexError("unfinished string", m.start(kind))
        yield kind, m.group(kind)


def unescape(body: str) -> str:
    out: list[str] = []
    chars = iter(body)
    for c in chars:
        if c == "\\":
            nxt = next(chars, "")
            out.append(ESCAPES.get(nxt, nxt))
        else:
            out.append(c)
    return "".join(out)


def read_atom(text: str) -> SExpression:
    if NUMBER_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def parse_expr(self) -> SExpression:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return read_atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val[1:-1])

        if tok_type == "rparen":
            raise MankaiSyntaxError("expected atom or list, found ')'")

        # List
        items = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise MankaiSyntaxError("expected ')'")
            if next_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
