"""Arithmetic built-ins: + - * /

Each operator is a left fold over its arguments. Arguments are evaluated one
at a time; the first one that is not an int turns the whole call into nil
and the remaining arguments are never evaluated.

Every intermediate result goes through the 64-bit overflow policy.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from wahlberg import EvaluatorFn
from wahlberg import Expr, Value
from wahlberg.types.environment import Environment
from wahlberg.types.function import Function
from wahlberg.types.ident import Ident
from wahlberg.types.int64 import to_i64, truncating_div
from wahlberg.types.nil import Nil
from wahlberg.types.value import as_int

A = TypeVar("A")


def accumulate(
    args: tuple[Expr, ...],
    env: Environment,
    functions: dict[Ident, Function],
    evaluate_fn: EvaluatorFn,
    overflow: str,
    init: A,
    combine: Callable[[A, int], A],
    finish: Callable[[A], int],
) -> Value:
    acc = init
    for arg in args:
        n = as_int(evaluate_fn(arg, env, functions, overflow))
        if n is None:
            return Nil
        acc = combine(acc, n)
    return finish(acc)


def _identity(acc: int) -> int:
    return acc


def add_form(args, env, functions, evaluate_fn, overflow) -> Value:
    """(+ a b ...) => sum, 0 for no arguments."""
    return accumulate(
        args, env, functions, evaluate_fn, overflow,
        0, lambda acc, n: to_i64(acc + n, overflow), _identity,
    )


def mul_form(args, env, functions, evaluate_fn, overflow) -> Value:
    """(* a b ...) => product, 1 for no arguments."""
    return accumulate(
        args, env, functions, evaluate_fn, overflow,
        1, lambda acc, n: to_i64(acc * n, overflow), _identity,
    )


def sub_form(args, env, functions, evaluate_fn, overflow) -> Value:
    """(- a b ...) => a - b - ...; (- a) => a; (-) => 0."""
    def combine(acc: Optional[int], n: int) -> int:
        return n if acc is None else to_i64(acc - n, overflow)

    return accumulate(
        args, env, functions, evaluate_fn, overflow,
        None, combine, lambda acc: 0 if acc is None else acc,
    )


def div_form(args, env, functions, evaluate_fn, overflow) -> Value:
    """(/ a b ...) => a / b / ... rounding toward zero; (/ a) => a; (/) => 1."""
    def combine(acc: Optional[int], n: int) -> int:
        return n if acc is None else to_i64(truncating_div(acc, n), overflow)

    return accumulate(
        args, env, functions, evaluate_fn, overflow,
        None, combine, lambda acc: 1 if acc is None else acc,
    )
