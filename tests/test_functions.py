import pytest

from flisp.errors import ArityError, FlispTypeError, ResourceExhausted, UndefinedFunction
from flisp.evaluation.evaluator import evaluate
from flisp.types.environment import Environment
from flisp.types.nodes import Call, FunctionCall, Literal
from flisp.types.token import TokenKind


def test_named_function(run_source):
    assert run_source("(func f (a b) (plus a b))\n(f 2 3)") == ["5"]


def test_recursive_factorial(run_source):
    source = """
    (func fact (n)
        (cond (equal n 0)
              1
              (times n (fact (minus n 1)))))
    (fact 0)
    (fact 5)
    (fact 10)
    """
    assert run_source(source) == ["1", "120", "3628800"]


def test_mutual_use_of_earlier_functions(run_source):
    source = """
    (func square (x) (times x x))
    (func sum_sq (a b) (plus (square a) (square b)))
    (sum_sq 3 4)
    """
    assert run_source(source) == ["25"]


def test_return_stops_the_body(run_source):
    assert run_source("(func g (x) (return (plus x 1)) 99)\n(g 1)") == ["2"]


def test_return_from_nested_prog(run_source):
    source = "(func g (x) (prog () (return (times x 10)) 0) 99)\n(g 4)"
    assert run_source(source) == ["40"]


def test_lambda_bound_with_setq(run_source):
    assert run_source("(setq sq (lambda (x) (times x x)))\n(sq 4)") == ["16"]


def test_lambda_is_a_value(run_source):
    assert run_source("(setq sq (lambda (x) x))\nsq") == ["<lambda (x)>"]


def test_immediately_invoked_lambda(run_source):
    assert run_source("((lambda (x y) (minus x y)) 10 4)") == ["6"]


def test_lambda_arity_is_checked_at_run_time(run_source):
    with pytest.raises(ArityError) as info:
        run_source("(setq sq (lambda (x) (times x x)))\n(sq 1 2)")
    assert "expected 1, got 2" in str(info.value)


def test_arguments_are_passed_by_name(run_source):
    source = "(setq k 1)\n(func twice (e) (plus e e))\n(twice (plus k 1))"
    assert run_source(source) == ["4"]


def test_call_arguments_are_passed_by_value(run_source):
    assert run_source("(setq id (lambda (v) v))\n(id (plus 1 2))") == ["3"]


def test_free_variables_resolve_at_the_call_site(run_source):
    source = """
    (setq y 1)
    (func gety () y)
    (func wrap (y) (gety))
    (gety)
    (wrap 42)
    """
    assert run_source(source) == ["1", "42"]


def test_function_passed_as_argument(run_source):
    source = """
    (setq inc (lambda (x) (plus x 1)))
    (func call_with (fn v) ((cond true fn fn) v))
    (func apply_to (fn v) (eval (cons fn (cons v ()))))
    (call_with inc 5)
    (apply_to inc 6)
    """
    assert run_source(source) == ["6", "7"]


def test_function_call_of_unbound_name():
    with pytest.raises(UndefinedFunction):
        evaluate(FunctionCall("nope", []), Environment())


def test_call_of_a_non_function():
    with pytest.raises(FlispTypeError):
        evaluate(Call(Literal("1", TokenKind.INTEGER), []), Environment())


def test_runaway_recursion(run_source):
    with pytest.raises(ResourceExhausted):
        run_source("(func spin (n) (spin (plus n 1)))\n(spin 0)")
