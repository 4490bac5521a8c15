from wahlberg import EvaluatorFn
from wahlberg import Expr, Value
from wahlberg.types.environment import Environment
from wahlberg.types.function import Function
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil
from wahlberg.types.value import truthy


def if_form(
    args: tuple[Expr, ...],
    env: Environment,
    functions: dict[Ident, Function],
    evaluate_fn: EvaluatorFn,
    overflow: str,
) -> Value:
    """
    (if cond then else)
    Only the chosen branch is evaluated. Missing pieces evaluate to nil and
    anything past the else-branch is ignored.
    """
    cond = evaluate_fn(args[0], env, functions, overflow) if args else Nil

    branch = 1 if truthy(cond) else 2
    if len(args) > branch:
        return evaluate_fn(args[branch], env, functions, overflow)
    return Nil
