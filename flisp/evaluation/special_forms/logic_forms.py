"""Logical connectives and negation.

Operands are coerced with `to_boolean`. `and` and `or` stop after the left
operand when it decides the result, so `(and false X)` never evaluates X.
"""

from __future__ import annotations

from flisp import EvaluatorFn, LispValue
from flisp.errors import ArityError
from flisp.evaluation.operators import logical, to_boolean
from flisp.types.environment import Environment
from flisp.types.nodes import Logical, Not


def logical_form(node: Logical, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(node.operands) != 2:
        raise ArityError(f"{node.op} expects 2 operands, got {len(node.operands)}")

    left = to_boolean(evaluate_fn(node.left, env), "left")
    if node.op == "and" and not left:
        return False
    if node.op == "or" and left:
        return True
    right = to_boolean(evaluate_fn(node.right, env), "right")
    return logical(node.op, left, right)


def not_form(node: Not, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return not to_boolean(evaluate_fn(node.arg, env))
