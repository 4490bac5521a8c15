# Core type aliases for Wahlberg's data model.
# Plain Python values represent both syntax and runtime values:
#   - integers are Python ints (kept in signed 64-bit range)
#   - nil is the Nil singleton from wahlberg.types.nil
#   - identifiers are Ident instances
#   - calls are Call nodes (head Ident + tuple of argument expressions)
#
# Naming guidance:
# - Expr:  use in reader/parser code to denote syntax trees.
# - Value: use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias: int | NilType
Value = Any
# Syntax tree alias: int | NilType | Ident | Call
Expr = Any

# Evaluator function type, handed to special forms so they can evaluate their arguments
EvaluatorFn = Callable[..., Value]
