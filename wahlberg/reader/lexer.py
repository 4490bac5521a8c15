"""
  Wahlberg lexer

- Streaming and lazy: `lex` is a generator, one token per lexical unit
- Never looks more than one character ahead
- Tokens are (kind, value) pairs:

    - integers          -> ("int", 42)
    - identifiers       -> ("identifier", "foo"), also the operators + - * /
    - `is`, `fn`, `nil` -> ("is", "is"), ("fn", "fn"), ("nil", "nil")
    - parentheses       -> ("lparen", "("), ("rparen", ")")
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from wahlberg.config import get_overflow_policy
from wahlberg.errors import WahlbergLexError
from wahlberg.types.int64 import to_i64

IS = "is"
FN = "fn"
NIL = "nil"
IDENTIFIER = "identifier"
INT = "int"
LPAREN = "lparen"
RPAREN = "rparen"


class Token(NamedTuple):
    kind: str
    value: int | str

    def __str__(self) -> str:
        if self.kind in (IDENTIFIER, INT):
            return f"{self.kind} {self.value!r}"
        return repr(self.value)


KEYWORDS: dict[str, Token] = {
    "is": Token(IS, "is"),
    "fn": Token(FN, "fn"),
    "nil": Token(NIL, "nil"),
}

PUNCTUATION: dict[str, Token] = {
    "(": Token(LPAREN, "("),
    ")": Token(RPAREN, ")"),
}

# Operators are one-character identifiers, so `(+ 1 2)` has `+` as its head
OPERATOR_CHARS = "+-*/"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _starts_identifier(c: str) -> bool:
    return c.isalpha() or c == "_"


def _continues_identifier(c: str) -> bool:
    return c.isalnum() or c == "_"


def lex(source: str, overflow: Optional[str] = None) -> Iterator[Token]:
    """Token generator for one snippet of Wahlberg code.

    Integer literals that do not fit in 64 bits follow the overflow policy,
    taken from the environment when `overflow` is not given.
    """
    if overflow is None:
        overflow = get_overflow_policy()

    pos = 0
    n = len(source)

    while True:
        while pos < n and source[pos].isspace():
            pos += 1
        if pos >= n:
            return

        current_char = source[pos]

        # ----------------------
        # Integer literals
        # ----------------------
        if _is_digit(current_char):
            acc = 0
            while pos < n and _is_digit(source[pos]):
                acc = 10 * acc + (ord(source[pos]) - ord("0"))
                pos += 1
            yield Token(INT, to_i64(acc, overflow))
            continue

        # ----------------------
        # Identifiers and keywords (maximal munch first, then keyword match)
        # ----------------------
        if _starts_identifier(current_char):
            start = pos
            pos += 1
            while pos < n and _continues_identifier(source[pos]):
                pos += 1
            text = source[start:pos]
            yield KEYWORDS.get(text) or Token(IDENTIFIER, text)
            continue

        if current_char in OPERATOR_CHARS:
            pos += 1
            yield Token(IDENTIFIER, current_char)
            continue

        if current_char in PUNCTUATION:
            pos += 1
            yield PUNCTUATION[current_char]
            continue

        raise WahlbergLexError(current_char, pos)
