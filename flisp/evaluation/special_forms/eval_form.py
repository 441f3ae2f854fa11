"""The (eval x) form: running data as code.

The argument is evaluated first, then the result is interpreted again:

- a syntax node (a function value, a stored quote) is evaluated once more;
- a string is the name of a variable and is looked up;
- a list is a program: its head names a primitive from LIST_FORMS or a bound
  function, and the remaining elements are resolved recursively before they
  are passed on;
- anything else is already a value.

A list whose head is neither a name nor a function is plain data; it comes
back with its elements resolved.
"""

from __future__ import annotations

from typing import Callable

from flisp import EvaluatorFn, LispValue
from flisp.errors import ArityError, FlispTypeError, UndefinedFunction
from flisp.evaluation.apply import apply, by_value, require_callable
from flisp.evaluation.operators import arithmetic, compare, logical, to_boolean
from flisp.evaluation.special_forms.list_forms import cons_onto, take_head, take_tail
from flisp.evaluation.special_forms.predicate_forms import classify
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, Eval, Func, Lambda, Node, RuntimeLiteral
from flisp.types.token import ARITHMETIC_OPS, COMPARISON_OPS, LOGICAL_OPS, PREDICATES

ListForm = Callable[[list, Environment, EvaluatorFn], LispValue]


def eval_value(value: LispValue, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if isinstance(value, Node):
        return evaluate_fn(value, env)
    if isinstance(value, str):
        return evaluate_fn(Atom(value), env)
    if isinstance(value, list):
        return eval_list(value, env, evaluate_fn)
    return value


def eval_list(items: list, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if not items:
        return []
    head, rest = items[0], items[1:]

    if isinstance(head, str):
        form = LIST_FORMS.get(head)
        if form is not None:
            return form(rest, env, evaluate_fn)
        if not env.defined(head):
            raise UndefinedFunction(f"Undefined function {head}")
        head = evaluate_fn(Atom(head), env)
        fn = require_callable(head, items[0])
    elif isinstance(head, (Func, Lambda)):
        fn = head
    else:
        return [eval_value(item, env, evaluate_fn) for item in items]

    args = [eval_value(arg, env, evaluate_fn) for arg in rest]
    return apply(fn, by_value(args), env, evaluate_fn)


def eval_form(node: Eval, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return eval_value(evaluate_fn(node.expr, env), env, evaluate_fn)


# --- Primitives available to evaluated data ---

def _expect(name: str, args: list, count: int) -> None:
    if len(args) != count:
        raise ArityError(f"{name} expects {count} argument(s), got {len(args)}")


def _resolved(args: list, env: Environment, evaluate_fn: EvaluatorFn) -> list:
    return [eval_value(arg, env, evaluate_fn) for arg in args]


def _arithmetic_form(op: str) -> ListForm:
    def form(args, env, evaluate_fn):
        return arithmetic(op, _resolved(args, env, evaluate_fn))
    return form


def _comparison_form(op: str) -> ListForm:
    def form(args, env, evaluate_fn):
        _expect(op, args, 2)
        left, right = _resolved(args, env, evaluate_fn)
        return compare(op, left, right)
    return form


def _logical_form(op: str) -> ListForm:
    def form(args, env, evaluate_fn):
        _expect(op, args, 2)
        left, right = _resolved(args, env, evaluate_fn)
        return logical(op, to_boolean(left, "left"), to_boolean(right, "right"))
    return form


def _predicate_form(kind: str) -> ListForm:
    def form(args, env, evaluate_fn):
        _expect(kind, args, 1)
        return classify(kind, eval_value(args[0], env, evaluate_fn))
    return form


def _not(args, env, evaluate_fn):
    _expect("not", args, 1)
    return not to_boolean(eval_value(args[0], env, evaluate_fn))


def _head(args, env, evaluate_fn):
    _expect("head", args, 1)
    return take_head(eval_value(args[0], env, evaluate_fn))


def _tail(args, env, evaluate_fn):
    _expect("tail", args, 1)
    return take_tail(eval_value(args[0], env, evaluate_fn))


def _cons(args, env, evaluate_fn):
    _expect("cons", args, 2)
    item, lst = _resolved(args, env, evaluate_fn)
    return cons_onto(item, lst)


def _quote(args, env, evaluate_fn):
    _expect("quote", args, 1)
    return args[0]


def _eval(args, env, evaluate_fn):
    _expect("eval", args, 1)
    return eval_value(eval_value(args[0], env, evaluate_fn), env, evaluate_fn)


def _cond(args, env, evaluate_fn):
    if len(args) not in (2, 3):
        raise ArityError(f"cond expects 2 or 3 arguments, got {len(args)}")
    condition = eval_value(args[0], env, evaluate_fn)
    if not isinstance(condition, bool):
        raise FlispTypeError(f"Cond condition is not boolean: {condition!r}")
    if condition:
        return eval_value(args[1], env, evaluate_fn)
    return eval_value(args[2], env, evaluate_fn) if len(args) == 3 else None


def _setq(args, env, evaluate_fn):
    _expect("setq", args, 2)
    name = args[0]
    if not isinstance(name, str):
        raise FlispTypeError(f"setq expects a name, got {name!r}")
    value = eval_value(args[1], env, evaluate_fn)
    env.define(name, value if isinstance(value, Node) else RuntimeLiteral(value))
    return None


LIST_FORMS: dict[str, ListForm] = {
    **{op: _arithmetic_form(op) for op in ARITHMETIC_OPS},
    **{op: _comparison_form(op) for op in COMPARISON_OPS},
    **{op: _logical_form(op) for op in LOGICAL_OPS},
    **{kind: _predicate_form(kind) for kind in PREDICATES},
    "not": _not,
    "head": _head,
    "tail": _tail,
    "cons": _cons,
    "quote": _quote,
    "eval": _eval,
    "cond": _cond,
    "setq": _setq,
}
