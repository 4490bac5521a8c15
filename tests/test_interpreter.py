import logging

import pytest
from hypothesis import given, strategies as st

from wahlberg.errors import WahlbergParseError, WahlbergZeroDivisionError, WahlbergConfigError
from wahlberg.interpreter import Interpreter
from wahlberg.types.code import Code
from wahlberg.types.ident import Ident
from wahlberg.types.nil import Nil
from wahlberg.types.value import render


def test_definition_returns_nothing(interp):
    assert interp.definition("x is 1") is None


def test_expr_does_not_bind(interp):
    interp.expr("(+ 1 2)")
    assert interp.env.vars == {}
    assert interp.functions == {}


def test_rebinding_is_last_write_wins(interp):
    interp.definition("x is (+ 1 1)")
    assert interp.expr("x") == 2
    interp.definition("x is 99")
    assert interp.expr("x") == 99


def test_definition_sees_earlier_bindings(interp):
    interp.definition("a is 3")
    interp.definition("b is (* a a)")
    interp.definition("a is 0")
    assert interp.expr("b") == 9


def test_self_reference_reads_previous_value(interp):
    interp.definition("n is 1")
    interp.definition("n is (+ n 1)")
    assert interp.expr("n") == 2


def test_failed_definition_binds_nothing(interp):
    with pytest.raises(WahlbergZeroDivisionError):
        interp.definition("x is (/ 1 0)")
    assert Ident("x") not in interp.env.vars


def test_parse_error_leaves_state_untouched(interp):
    interp.definition("x is 1")
    with pytest.raises(WahlbergParseError):
        interp.definition("x is (+ 2")
    with pytest.raises(WahlbergParseError):
        interp.expr("x x")
    assert interp.expr("x") == 1


def test_definition_snippet_is_not_an_expression(interp):
    with pytest.raises(WahlbergParseError):
        interp.expr("x is 1")
    with pytest.raises(WahlbergParseError):
        interp.definition("(+ 1 2)")


def test_interpreters_are_independent():
    a, b = Interpreter(), Interpreter()
    a.definition("x is 1")
    a.definition("f is fn() 2")
    assert b.expr("x") is Nil
    assert b.expr("(f)") is Nil
    assert a.expr("(+ x (f))") == 3


def test_prelude():
    interp = Interpreter(prelude=["x is 20", Code("add is fn(a b) (+ a b)")])
    assert interp.expr("(add x 22)") == 42


def test_prelude_errors_propagate():
    with pytest.raises(WahlbergParseError):
        Interpreter(prelude=["not a definition"])


@pytest.mark.parametrize(
    "source,expected",
    [("(+ 40 2)", "42"), ("nil", "nil"), ("(- 0 5)", "-5"), ("missing", "nil"), ("0", "0")],
)
def test_interpolate(interp, source, expected):
    assert interp.interpolate(Code(source)) == expected


def test_render():
    assert render(Nil) == "nil"
    assert render(123) == "123"
    assert render(-9) == "-9"


def test_overflow_keyword_overrides_environment(monkeypatch):
    monkeypatch.setenv("WAHLBERG_OVERFLOW", "error")
    assert Interpreter(overflow="wrap").overflow == "wrap"


def test_overflow_from_environment(monkeypatch):
    monkeypatch.setenv("WAHLBERG_OVERFLOW", "wrap")
    assert Interpreter().overflow == "wrap"


def test_overflow_class_default(monkeypatch):
    monkeypatch.setattr(Interpreter, "DefaultOverflow", "wrap")
    assert Interpreter().overflow == "wrap"


def test_unknown_overflow_policy():
    with pytest.raises(WahlbergConfigError):
        Interpreter(overflow="saturate")


def test_debug_logging(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="wahlberg"):
        interp.definition("x is 1")
        interp.definition("f is fn() 1")
        interp.expr("(g)")
    messages = [r.getMessage() for r in caplog.records]
    assert "bound x = 1" in messages
    assert "defined function f" in messages
    assert "call to undefined function g evaluates to nil" in messages


# -------------------------------
# Hypothesis tests
# -------------------------------
ops = st.sampled_from(["+", "-", "*", "/"])
leaves = st.one_of(st.integers(min_value=0, max_value=100).map(str), st.sampled_from(["x", "y", "nil", "nope"]))
exprs = st.recursive(
    leaves,
    lambda children: st.builds(
        lambda op, args: "(" + " ".join([op] + args) + ")", ops, st.lists(children, max_size=3)
    ),
    max_leaves=12,
)


@given(exprs)
def test_read_only_evaluation_is_idempotent(source):
    interp = Interpreter(prelude=["x is 7", "y is 3"], overflow="wrap")
    try:
        first = interp.expr(source)
    except WahlbergZeroDivisionError:
        return
    assert interp.expr(source) == first
    assert interp.env.vars == {Ident("x"): 7, Ident("y"): 3}
