import pytest

from flisp.errors import UndefinedFunction
from flisp.evaluation.special_forms.quote_forms import to_data
from flisp.types.nodes import Atom, List, Literal, Quote
from flisp.types.null import Null
from flisp.types.token import TokenKind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'x", "x"),
        ("(quote x)", "x"),
        ("'(a b c)", "(a b c)"),
        ("'(1 (2 3) true null)", "(1 (2 3) true null)"),
        ("''x", "x"),
        ("'(plus 1 2)", "(plus 1 2)"),
        ("'()", "()"),
    ],
)
def test_quote_returns_data(run_source, source, expected):
    assert run_source(source) == [expected]


def test_to_data():
    node = List([Atom("a"), Literal("1.5", TokenKind.REAL), Quote(Literal("null", TokenKind.NULL))])
    assert to_data(node) == ["a", 1.5, Null]


def test_quoted_binding_is_not_evaluated(run_source):
    assert run_source("(setq code '(plus 1 2))\ncode") == ["(plus 1 2)"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eval (quote (plus 1 2)))", ["3"]),
        ("(eval '(times 2 (plus 1 2)))", ["6"]),
        ("(eval 5)", ["5"]),
        ("(setq y 7)\n(eval 'y)", ["7"]),
        ("(setq code '(times 6 7))\n(eval code)", ["42"]),
        ("(eval (cons 'plus '(1 2)))", ["3"]),
        ("(eval '(head (1 2 3)))", ["1"]),
        ("(eval '(tail (1 2 3)))", ["(2 3)"]),
        ("(eval '(cons 0 (1 2)))", ["(0 1 2)"]),
        ("(eval '(cond (less 1 2) 10 20))", ["10"]),
        ("(eval '(not true))", ["false"]),
        ("(eval '(isint 3))", ["true"]),
        ("(eval '(and true false))", ["false"]),
        ("(eval '(eval '(plus 1 2)))", ["3"]),
        ("(eval '(1 2 3))", ["(1 2 3)"]),
    ],
)
def test_eval(run_source, source, expected):
    assert run_source(source) == expected


def test_eval_calls_bound_functions(run_source):
    source = """
    (setq double (lambda (x) (times x 2)))
    (func add (a b) (plus a b))
    (eval '(double 21))
    (eval '(add 1 (double 2)))
    """
    assert run_source(source) == ["42", "5"]


def test_eval_setq_binds_in_current_frame(run_source):
    assert run_source("(eval '(setq z 9))\n(eval 'z)") == ["9"]


def test_eval_of_function_value(run_source):
    assert run_source("(setq f (lambda (x) x))\n(eval f)") == ["<lambda (x)>"]


def test_eval_unknown_head(run_source):
    with pytest.raises(UndefinedFunction):
        run_source("(eval '(nosuch 1))")
