from flisp import EvaluatorFn, LispValue
from flisp.errors import ArityError
from flisp.evaluation.operators import compare
from flisp.types.environment import Environment
from flisp.types.nodes import Comparison


def comparison_form(node: Comparison, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(node.operands) != 2:
        raise ArityError(f"{node.op} expects 2 operands, got {len(node.operands)}")
    left = evaluate_fn(node.left, env)
    right = evaluate_fn(node.right, env)
    return compare(node.op, left, right)
