"""Core tree-walking evaluator for Wahlberg.

Reduces an expression to a value. Calls are dispatched on the head Ident:
special forms (`if` and the arithmetic operators) first, anything else is a
user function whose arguments are evaluated eagerly, left to right, in the
caller's scope.
"""

from __future__ import annotations

from wahlberg import Expr, Value
from wahlberg.config import OVERFLOW_ERROR
from wahlberg.types.ast import Call
from wahlberg.types.environment import Environment
from wahlberg.types.function import Function
from wahlberg.types.ident import Ident
from wahlberg.types.nil import NilType
from wahlberg.evaluation.apply import apply
from wahlberg.evaluation.special_forms import SPECIAL_FORMS


def evaluate(
    expr: Expr,
    env: Environment,
    functions: dict[Ident, Function] | None = None,
    overflow: str = OVERFLOW_ERROR,
) -> Value:
    if functions is None:
        functions = {}

    match expr:
        case Call(head=head, args=args):
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(args, env, functions, evaluate, overflow)
            values = [evaluate(arg, env, functions, overflow) for arg in args]
            return apply(head, values, env, functions, evaluate, overflow)

        case Ident():
            return env.lookup(expr)

        case NilType() | int():
            return expr

    raise TypeError(f"Cannot evaluate {expr!r}")
