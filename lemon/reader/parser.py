"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Lemon values directly, there is no separate syntax tree:

    - lists (`(...)` or `[...]`) -> Python list
    - symbols -> Symbol
    - define / lambda / if -> Keyword
    - strings -> str
    - integers (including #b, #o, #d, #x radix forms) -> int
    - floats -> float
    - #t / #f -> bool
    - 'expr -> Quoted(expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lemon import SExpression
from lemon.errors import LemonParseError, LemonTokenizeError
from lemon.types.keyword import Keyword
from lemon.types.quoted import Quoted
from lemon.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote
    r"|(?P<lparen>[(\[])"  # ( or [
    r"|(?P<rparen>[)\]])"  # ) or ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\[\]\'";\\{},`|]+)'  # everything else up to a delimiter
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

RADIXES: dict[str, int] = {"b": 2, "o": 8, "d": 10, "x": 16}
RADIX_DIGITS: dict[int, str] = {
    2: "01",
    8: "01234567",
    10: "0123456789",
    16: "0123456789abcdefABCDEF",
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
}

# Characters the language reserves; they may only appear inside strings.
ILLEGAL_CHARS = set("\\{},`|")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace or an offending character remain
            while pos < n and source[pos].isspace():
                pos += 1
            if pos >= n:
                break
            if source[pos] == '"':
                raise LemonTokenizeError("Unclosed string")
            raise LemonTokenizeError(f"Unexpected character: {source[pos]}")

        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break

        if m.group("symbol") and pos < n and source[pos] in "'\"":
            # a quote or string glued onto the end of a symbol
            raise LemonTokenizeError(f"Unexpected character: {source[pos]}")


def unescape(literal: str) -> str:
    """Strip the quotes from a string token and resolve its escapes."""
    out: list[str] = []
    chars = iter(literal[1:-1])
    for ch in chars:
        if ch == "\\":
            escaped = next(chars)
            out.append(ESCAPES.get(escaped, escaped))
        else:
            out.append(ch)
    return "".join(out)


def parse_radix(text: str) -> int:
    """Parse #b1010 / #o17 / #d42 / #xff style integers."""
    radix = RADIXES.get(text[1:2])
    if radix is None:
        raise LemonParseError(f"Invalid syntax: {text}")
    digits = text[2:]
    if not digits or any(c not in RADIX_DIGITS[radix] for c in digits):
        raise LemonParseError(f"Invalid digit: {digits}")
    return int(digits, radix)


def atom(text: str) -> SExpression:
    """Convert a symbol token into the value it denotes."""
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    if text == "#t":
        return True
    if text == "#f":
        return False
    if text.startswith("#"):
        return parse_radix(text)
    keyword = Keyword.from_name(text)
    if keyword is not None:
        return keyword
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
        """Parse one expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return atom(tok_val)

        if tok_type == "string":
            self.advance()
            return unescape(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise LemonParseError("Unexpected EOF")
            return Quoted(expr)

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise LemonParseError("Missing token: )")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise LemonParseError("Invalid syntax: )")

        raise LemonParseError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read every expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
