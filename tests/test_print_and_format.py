import pytest
from hypothesis import given, strategies as st

from wahlberg.debug_utils.pprint import (
    COLOR_SPECIAL_FORM, DEFAULT_OPTIONS, RESET,
    format_definition, format_expr, load_options_from_json, pprint_expr,
)
from wahlberg.reader.parser import read_definition, read_expr
from wahlberg.types.ast import Call
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ("nil", "nil"),
        ("42", "42"),
        ("x", "x"),
        ("( +  1   x )", "(+ 1 x)"),
        ("(f)", "(f)"),
        ("(if (g nil) 1 2)", "(if (g nil) 1 2)"),
    ]
)
def test_format_expr(source, expected):
    assert format_expr(read_expr(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("x   is (+ 1 1)", "x is (+ 1 1)"),
        ("double is fn(n) (+ n n)", "double is fn(n) (+ n n)"),
        ("k is fn ( ) nil", "k is fn() nil"),
    ]
)
def test_format_definition(source, expected):
    definition = read_definition(source)
    assert format_definition(definition) == expected
    assert str(definition) == expected


def test_call_str_matches_format():
    expr = Call(Ident("+"), (1, Nil, Call(Ident("f"), ())))
    assert str(expr) == format_expr(expr) == "(+ 1 nil (f))"


def test_pprint_short_stays_on_one_line():
    assert pprint_expr(read_expr("(+ 1 (* 2 3))")) == "(+ 1 (* 2 3))"


def test_pprint_breaks_long_calls():
    options = {**DEFAULT_OPTIONS, "max_line_length": 10}
    out = pprint_expr(read_expr("(+ 1000 2000 3000)"), options=options)
    assert out == "(+\n  1000\n  2000\n  3000)"


def test_pprint_colors_special_forms():
    options = {**DEFAULT_OPTIONS, "color_special_forms": True}
    out = pprint_expr(read_expr("(if 1 2 3)"), options=options)
    assert out == f"({COLOR_SPECIAL_FORM}if{RESET} 1 2 3)"


def test_load_options_from_json():
    opts = load_options_from_json('{"max_line_length": 40}')
    assert opts["max_line_length"] == 40
    assert opts["color_idents"] is False
    assert load_options_from_json("not json") == DEFAULT_OPTIONS
    assert load_options_from_json("[1, 2]") == DEFAULT_OPTIONS


# -------------------------------
# Hypothesis tests
# -------------------------------
names = st.from_regex(r"[a-z_][a-z0-9_]{0,5}", fullmatch=True).filter(lambda s: s not in ("is", "fn", "nil"))
atoms = st.one_of(st.integers(min_value=0, max_value=10**9), st.just(Nil), names.map(Ident))
trees = st.recursive(
    atoms,
    lambda children: st.builds(
        lambda head, args: Call(Ident(head), tuple(args)),
        st.one_of(names, st.sampled_from(["+", "-", "*", "/"])),
        st.lists(children, max_size=4),
    ),
    max_leaves=15,
)


@given(trees)
def test_format_then_read_is_identity(tree):
    assert read_expr(format_expr(tree)) == tree
