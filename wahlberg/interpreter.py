from __future__ import annotations

import logging
from typing import Iterable, Literal

from wahlberg import Value
from wahlberg.config import check_overflow_policy, get_overflow_policy
from wahlberg.evaluation.evaluator import evaluate
from wahlberg.reader.parser import read_definition, read_expr
from wahlberg.types.ast import FunctionDefinition, ValueDefinition
from wahlberg.types.code import Code
from wahlberg.types.environment import Environment
from wahlberg.types.function import Function
from wahlberg.types.ident import Ident
from wahlberg.types.value import render

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One Wahlbergdown session.

    Snippets are fed in document order: comment snippets through
    `definition`, interpolation snippets through `expr` (or `interpolate`
    for the rendered text). Bindings and functions persist across calls.
    """

    # Class-level default; None means "read WAHLBERG_OVERFLOW from the environment"
    DefaultOverflow: Literal['error', 'wrap'] | None = None

    def __init__(
        self,
        prelude: Iterable[Code | str] | None = None,
        *,
        overflow: Literal['error', 'wrap'] | None = None,
    ):
        policy = overflow or self.DefaultOverflow
        self.overflow: str = check_overflow_policy(policy) if policy else get_overflow_policy()

        self.env: Environment = Environment()
        self.functions: dict[Ident, Function] = {}

        if prelude is not None:
            for code in prelude:
                self.definition(code)

    def definition(self, code: Code | str) -> None:
        """Parse a definition and bind it: evaluate a value definition now, store a function as is."""
        definition = read_definition(code, self.overflow)
        match definition:
            case ValueDefinition(name=name, expr=expr):
                value = self._evaluate(expr)
                self.env.define(name, value)
                logger.debug("bound %s = %r", name, value)
            case FunctionDefinition(name=name, params=params, body=body):
                self.functions[name] = Function(params, body)
                logger.debug("defined function %s", name)

    def expr(self, code: Code | str) -> Value:
        """Parse and evaluate an expression against the current session state."""
        expr = read_expr(code, self.overflow)
        return self._evaluate(expr)

    def _evaluate(self, expr) -> Value:
        try:
            return evaluate(expr, self.env, self.functions, self.overflow)
        finally:
            # drop call scopes left behind when evaluation was aborted
            self.env.unwind()

    def interpolate(self, code: Code | str) -> str:
        """Evaluate an expression and render it as document text."""
        return render(self.expr(code))
