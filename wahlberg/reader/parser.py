"""
  Wahlberg parser

Recursive descent over the token stream with a single token of lookahead:

    expr       := IDENT | INT | NIL | call
    call       := '(' IDENT expr* ')'
    definition := IDENT 'is' ( function | expr )
    function   := 'fn' '(' IDENT* ')' expr

Interpolation snippets hold exactly one `expr`, comment snippets exactly
one `definition`. Lexer errors pass through unchanged (WahlbergLexError is
itself a WahlbergParseError).
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from wahlberg import Expr
from wahlberg.errors import WahlbergParseError
from wahlberg.reader.lexer import (
    FN, IDENTIFIER, INT, IS, LPAREN, NIL, RPAREN, Token, lex,
)
from wahlberg.types.ast import Call, Definition, FunctionDefinition, ValueDefinition
from wahlberg.types.code import Code, source_of
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil

logger = logging.getLogger(__name__)


def unexpected(tok: Optional[Token]) -> WahlbergParseError:
    if tok is None:
        return WahlbergParseError("unexpected EOF")
    return WahlbergParseError(f"unexpected token {tok}")


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def done(self) -> bool:
        return self.peek() is None

    def expect(self, kind: str) -> Token:
        tok = self.advance()
        if tok is None or tok.kind != kind:
            raise unexpected(tok)
        return tok

    def parse_expr(self) -> Expr:
        tok = self.peek()
        if tok is None:
            raise unexpected(None)

        if tok.kind == IDENTIFIER:
            self.advance()
            return Ident(tok.value)

        if tok.kind == INT:
            self.advance()
            return tok.value

        if tok.kind == NIL:
            self.advance()
            return Nil

        if tok.kind == LPAREN:
            return self.parse_call()

        raise unexpected(tok)

    def parse_call(self) -> Call:
        self.expect(LPAREN)
        head = Ident(self.expect(IDENTIFIER).value)
        args: list[Expr] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise unexpected(None)
            if tok.kind == RPAREN:
                self.advance()
                break
            args.append(self.parse_expr())
        return Call(head, tuple(args))

    def parse_definition(self) -> Definition:
        name = Ident(self.expect(IDENTIFIER).value)
        self.expect(IS)
        tok = self.peek()
        if tok is not None and tok.kind == FN:
            return self.parse_function(name)
        return ValueDefinition(name, self.parse_expr())

    def parse_function(self, name: Ident) -> FunctionDefinition:
        self.expect(FN)
        self.expect(LPAREN)
        params: list[Ident] = []
        while True:
            tok = self.advance()
            if tok is None:
                raise unexpected(None)
            if tok.kind == RPAREN:
                break
            if tok.kind != IDENTIFIER:
                raise unexpected(tok)
            params.append(Ident(tok.value))
        body = self.parse_expr()
        return FunctionDefinition(name, tuple(params), body)

    def expect_end(self) -> None:
        tok = self.peek()
        if tok is not None:
            raise unexpected(tok)

    def top_level_expr(self) -> Expr:
        expr = self.parse_expr()
        self.expect_end()
        return expr

    def top_level_definition(self) -> Definition:
        definition = self.parse_definition()
        self.expect_end()
        return definition


def read_expr(code: Code | str, overflow: Optional[str] = None) -> Expr:
    """Parse an interpolation snippet into a single expression."""
    source = source_of(code)
    expr = TokenStream(lex(source, overflow)).top_level_expr()
    logger.debug("parsed expression %r -> %s", source, expr)
    return expr


def read_definition(code: Code | str, overflow: Optional[str] = None) -> Definition:
    """Parse a comment snippet into a single definition."""
    source = source_of(code)
    definition = TokenStream(lex(source, overflow)).top_level_definition()
    logger.debug("parsed definition %r -> %s", source, definition)
    return definition
