import io

import pytest
from hypothesis import given, strategies as st

from flisp.errors import (
    ArityError, DivisionByZero, EmptyListError, FlispTypeError,
    SelfReferentialVariable, UndefinedVariable,
)
from flisp.evaluation.evaluator import evaluate
from flisp.interpreter import Interpreter
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, Literal, Operation, RuntimeLiteral
from flisp.types.token import TokenKind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(plus 1 2)", "3"),
        ("(minus 10 3 2)", "5"),
        ("(times 2 3 4)", "24"),
        ("(divide 12 3)", "4"),
        ("(divide 7 2)", "3.5"),
        ("(plus 1.5 1.5)", "3"),
        ("(plus 1 2.5)", "3.5"),
        ("(minus -10 -5)", "-5"),
        ("(plus (times 2 3) (minus 10 4))", "12"),
        ("2.5", "2.5"),
        ("true", "true"),
        ("null", "null"),
        ("(1 2 3)", "(1 2 3)"),
        ("()", "()"),
    ],
)
def test_scalars_and_arithmetic(run_source, source, expected):
    assert run_source(source) == [expected]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(equal 1 1)", "true"),
        ("(nonequal 1 2)", "true"),
        ("(less 2 1)", "false"),
        ("(lesseq 2 2)", "true"),
        ("(greater 2.5 2)", "true"),
        ("(greatereq 1 2)", "false"),
        ("(equal true true)", "true"),
        ("(nonequal true false)", "true"),
    ],
)
def test_comparisons(run_source, source, expected):
    assert run_source(source) == [expected]


@pytest.mark.parametrize("source", ["(less true false)", "(equal 1 true)"])
def test_comparison_type_errors(run_source, source):
    with pytest.raises(FlispTypeError):
        run_source(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and true false)", "false"),
        ("(or false true)", "true"),
        ("(xor true true)", "false"),
        ("(nand true true)", "false"),
        ("(nor false false)", "true"),
        ("(xnor false false)", "true"),
        ("(not false)", "true"),
        ("(not 0)", "true"),
        ("(and 1 2)", "true"),
        ("(or 0 0)", "false"),
    ],
)
def test_logical(run_source, source, expected):
    assert run_source(source) == [expected]


def test_and_does_not_evaluate_right_operand_when_left_is_false(run_source):
    assert run_source("(and false (divide 1 0))") == ["false"]
    assert run_source("(or true (divide 1 0))") == ["true"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(isint 3)", "true"),
        ("(isint true)", "false"),
        ("(isreal 3.0)", "true"),
        ("(isreal 3)", "false"),
        ("(isbool false)", "true"),
        ("(isnull null)", "true"),
        ("(isnull 0)", "false"),
        ("(islist (1 2))", "true"),
        ("(islist 1)", "false"),
        ("(isatom 1)", "true"),
        ("(isatom (1))", "false"),
    ],
)
def test_predicates(run_source, source, expected):
    assert run_source(source) == [expected]


def test_isatom_on_a_name_does_not_evaluate_it(run_source):
    assert run_source("(setq xs (1 2)) (isatom xs) (islist xs)") == ["true", "true"]


def test_lists(run_source):
    lines = run_source(
        "(setq x '(1 2 3))\n"
        "(head x)\n"
        "(tail x)\n"
        "(cons 0 x)\n"
        "x"
    )
    assert lines == ["1", "(2 3)", "(0 1 2 3)", "(1 2 3)"]


@pytest.mark.parametrize("source", ["(head ())", "(tail ())"])
def test_empty_list_errors(run_source, source):
    with pytest.raises(EmptyListError):
        run_source(source)


@pytest.mark.parametrize("source", ["(cons 1 2)", "(head 5)", "(cons 1 null)"])
def test_list_type_errors(run_source, source):
    with pytest.raises(FlispTypeError):
        run_source(source)


def test_arithmetic_on_non_numbers(run_source):
    with pytest.raises(FlispTypeError):
        run_source("(plus 1 (1 2))")


def test_comparison_needs_two_operands(run_source):
    with pytest.raises(ArityError):
        run_source("(less 1 2 3)")


def test_setq_and_rebinding(run_source):
    assert run_source("(setq x 1) (setq x (plus x 1)) x") == ["2"]


def test_setq_is_silent(run_source, echo):
    assert run_source("(setq x 5)") == []
    assert echo.getvalue() == ""


def test_echo_writes_lines(run_source, echo):
    run_source("(plus 1 1)\n(setq a 3)\n(times a a)")
    assert echo.getvalue() == "2\n9\n"


def test_lookup_of_unbound_name():
    with pytest.raises(UndefinedVariable):
        evaluate(Atom("nope"), Environment())


def test_atom_bound_to_itself():
    env = Environment()
    env.define("x", Atom("x"))
    with pytest.raises(SelfReferentialVariable):
        evaluate(Atom("x"), env)


def test_runtime_literal_binding():
    env = Environment()
    env.define("x", RuntimeLiteral([1, 2]))
    assert evaluate(Atom("x"), env) == [1, 2]


def test_evaluate_operation_directly():
    node = Operation("times", [Literal("6", TokenKind.INTEGER), Literal("7", TokenKind.INTEGER)])
    assert evaluate(node, Environment()) == 42


def test_definitions_persist_across_eval_calls(interp):
    interp.eval("(setq base 10)")
    interp.eval("(func add (a) (plus a base))")
    assert interp.eval("(add 5)") == ["15"]


@given(st.integers())
def test_plus_zero_is_identity(n):
    assert Interpreter(echo=io.StringIO()).eval(f"(plus {n} 0)") == [str(n)]


@given(st.integers())
def test_divide_by_zero(n):
    with pytest.raises(DivisionByZero):
        Interpreter(echo=io.StringIO()).eval(f"(divide {n} 0)")
