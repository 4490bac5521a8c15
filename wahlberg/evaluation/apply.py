"""Application of user-defined functions.

A call evaluates to nil when no function of that name exists. Otherwise the
already-evaluated arguments are bound to the parameters in a fresh scope, the
stored body is evaluated there, and the scope is popped again, also when the
body raises.
"""

from __future__ import annotations

import logging

from wahlberg import EvaluatorFn, Value
from wahlberg.types.environment import Environment
from wahlberg.types.function import Function
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil

logger = logging.getLogger(__name__)


def apply(
    name: Ident,
    args: list[Value],
    env: Environment,
    functions: dict[Ident, Function],
    evaluate_fn: EvaluatorFn,
    overflow: str,
) -> Value:
    fn = functions.get(name)
    if fn is None:
        logger.debug("call to undefined function %s evaluates to nil", name)
        return Nil

    with env.scope():
        env.update(fn.bind(args))
        return evaluate_fn(fn.body, env, functions, overflow)
