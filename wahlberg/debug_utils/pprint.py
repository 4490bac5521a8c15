import json

from wahlberg import Expr
from wahlberg.types.ast import Call, Definition, FunctionDefinition, ValueDefinition
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil
from wahlberg.evaluation.special_forms import SPECIAL_FORMS

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_IDENT = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_LITERAL = "\033[92m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color_idents": False,
    "color_special_forms": False,
    "color_literals": False,
}


# ----------------- Single-line source -----------------
def format_expr(expr: Expr) -> str:
    """Canonical source text of an expression; reading it back gives an equal tree."""
    if isinstance(expr, Call):
        parts = [str(expr.head)] + [format_expr(arg) for arg in expr.args]
        return "(" + " ".join(parts) + ")"
    if expr is Nil:
        return "nil"
    return str(expr)


def format_definition(definition: Definition) -> str:
    if isinstance(definition, FunctionDefinition):
        params = " ".join(str(p) for p in definition.params)
        return f"{definition.name} is fn({params}) {format_expr(definition.body)}"
    if isinstance(definition, ValueDefinition):
        return f"{definition.name} is {format_expr(definition.expr)}"
    raise TypeError(f"Not a definition: {definition!r}")


# ----------------- Colorize utility -----------------
def colorize(obj, head: bool = False, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(obj, Ident):
        name = str(obj)
        if head and obj in SPECIAL_FORMS and options.get("color_special_forms", False):
            return f"{COLOR_SPECIAL_FORM}{name}{RESET}"
        if options.get("color_idents", False):
            return f"{COLOR_IDENT}{name}{RESET}"
        return name
    text = format_expr(obj)
    if options.get("color_literals", False):
        return f"{COLOR_LITERAL}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_expr(expr: Expr, indent: int = 0, options: dict = DEFAULT_OPTIONS) -> str:
    """
    Lay out an expression, breaking calls that do not fit in max_line_length
    onto one argument per line, aligned under the head.
    """
    if not isinstance(expr, Call):
        return colorize(expr, options=options)

    pad = "  " * (indent + 1)
    head = colorize(expr.head, head=True, options=options)
    parts = [pprint_expr(arg, indent + 1, options) for arg in expr.args]

    single_line = "(" + " ".join([head] + parts) + ")"
    if "\n" not in single_line and len(format_expr(expr)) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    lines = ["(" + head]
    for part in parts:
        lines.append(pad + part)
    lines[-1] += ")"
    return "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return DEFAULT_OPTIONS
    if not isinstance(user_opts, dict):
        return DEFAULT_OPTIONS
    return {**DEFAULT_OPTIONS, **user_opts}
