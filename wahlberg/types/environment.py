"""Runtime environment for Wahlberg.

The Environment is a stack of scopes, each a mapping from Idents to values.
The bottom scope holds the persistent top-level bindings of a session; each
user function call pushes one scope for its parameters and pops it on return.

Lookups only consult the innermost scope. There is no chaining to outer
scopes, so a function body cannot see top-level bindings. This mirrors the
language as it has always behaved (and is most likely an accident of its
first implementation), so it is kept rather than fixed.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator

from wahlberg import Value
from wahlberg.errors import WahlbergInvalidIdent
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil


class Environment:
    """Stack of Ident -> value scopes; never empty."""

    __slots__ = ("scopes",)

    def __init__(self):
        self.scopes: list[dict[Ident, Value]] = [{}]

    @property
    def depth(self) -> int:
        return len(self.scopes)

    @property
    def vars(self) -> dict[Ident, Value]:
        """The innermost (current) scope."""
        return self.scopes[-1]

    def enter(self) -> None:
        self.scopes.append({})

    def exit(self) -> None:
        # the top-level scope is never popped
        if len(self.scopes) > 1:
            self.scopes.pop()

    def unwind(self) -> None:
        """Drop every scope above the top level."""
        del self.scopes[1:]

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Push a fresh scope for the duration of the block, popping it even on error."""
        self.enter()
        try:
            yield self
        finally:
            self.exit()

    def define(self, name: Ident, value: Value) -> None:
        """Bind `name` to `value` in the current scope, replacing any earlier binding.

        Raises WahlbergInvalidIdent if `name` is not an Ident.
        """
        if not isinstance(name, Ident):
            raise WahlbergInvalidIdent(f"Cannot define {name!r} as an identifier")
        self.scopes[-1][name] = value

    def update(self, mapping: dict[Ident, Value]) -> None:
        """Bulk-define a mapping of Ident -> value in the current scope."""
        for k, v in mapping.items():
            self.define(k, v)

    def lookup(self, name: Ident) -> Value:
        """Value bound to `name` in the current scope, or Nil when unbound."""
        return self.scopes[-1].get(name, Nil)

    def _write_vars(self, buffer: StringIO, scope: dict[Ident, Value]) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Current scope, with an indicator when outer scopes exist."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.scopes[-1])
            if len(self.scopes) > 1:
                buffer.write(" <- ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            for i, scope in enumerate(self.scopes):
                if i:
                    buffer.write(" <- ")
                self._write_vars(buffer, scope)
            buffer.write(">")
            return buffer.getvalue()
