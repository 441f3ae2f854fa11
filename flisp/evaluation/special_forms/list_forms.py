"""List primitives: head, tail, cons and list construction.

Lists are host Python lists and are never mutated in place; tail and cons
always build a new list.
"""

from __future__ import annotations

from flisp import EvaluatorFn, LispValue
from flisp.errors import EmptyListError, FlispTypeError
from flisp.types.environment import Environment
from flisp.types.nodes import Cons, Head, List, Tail


def _require_list(value: LispValue, what: str) -> list:
    if not isinstance(value, list):
        raise FlispTypeError(f"{what} expects a list, got {value!r}")
    return value


def take_head(value: LispValue) -> LispValue:
    items = _require_list(value, "head")
    if not items:
        raise EmptyListError("head of an empty list")
    return items[0]


def take_tail(value: LispValue) -> list:
    items = _require_list(value, "tail")
    if not items:
        raise EmptyListError("tail of an empty list")
    return items[1:]


def cons_onto(item: LispValue, value: LispValue) -> list:
    return [item, *_require_list(value, "cons")]


def head_form(node: Head, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return take_head(evaluate_fn(node.lst, env))


def tail_form(node: Tail, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return take_tail(evaluate_fn(node.lst, env))


def cons_form(node: Cons, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    item = evaluate_fn(node.item, env)
    return cons_onto(item, evaluate_fn(node.lst, env))


def list_form(node: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return [evaluate_fn(elem, env) for elem in node.elems]
