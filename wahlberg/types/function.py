"""User function representation and argument binding for Wahlberg."""

from __future__ import annotations

from io import StringIO
from itertools import zip_longest

from wahlberg import Expr, Value
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil


class Function:
    """A named function's formal parameters and body.

    There are no closures: the body sees only its own parameters.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: tuple[Ident, ...] | list[Ident], body: Expr):
        self.params: tuple[Ident, ...] = tuple(params)
        self.body: Expr = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Function {self}>"

    def __eq__(self, other) -> bool:
        return isinstance(other, Function) and self.params == other.params and self.body == other.body

    __hash__ = None

    def bind(self, args: list[Value]) -> dict[Ident, Value]:
        """
        Pair each parameter with its argument value.

        Missing trailing arguments bind to Nil and extra arguments are dropped.
        When a parameter name repeats, the later position wins.
        """
        bindings: dict[Ident, Value] = {}
        for param, value in zip_longest(self.params, args[:len(self.params)], fillvalue=Nil):
            bindings[param] = value
        return bindings
