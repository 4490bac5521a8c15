"""Syntax tree nodes produced by the parser.

Atoms are plain Python values (int, Nil, Ident); only calls and the two
kinds of definition need their own node types. All nodes are immutable, so
a stored function body can be shared by every call without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Union

from wahlberg import Expr
from wahlberg.types.ident import Ident


@dataclass(frozen=True)
class Call:
    """`(head arg ...)`: application of a built-in or user function."""
    head: Ident
    args: tuple[Expr, ...] = ()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(str(self.head))
            for arg in self.args:
                buffer.write(" ")
                buffer.write(str(arg))
            buffer.write(")")
            return buffer.getvalue()


@dataclass(frozen=True)
class ValueDefinition:
    """`name is expr`"""
    name: Ident
    expr: Expr

    def __str__(self) -> str:
        return f"{self.name} is {self.expr}"


@dataclass(frozen=True)
class FunctionDefinition:
    """`name is fn(param ...) body`"""
    name: Ident
    params: tuple[Ident, ...]
    body: Expr

    def __str__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"{self.name} is fn({params}) {self.body}"


Definition = Union[ValueDefinition, FunctionDefinition]
