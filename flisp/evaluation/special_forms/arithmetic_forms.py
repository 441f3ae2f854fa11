from flisp import EvaluatorFn, LispValue
from flisp.evaluation.operators import arithmetic
from flisp.types.environment import Environment
from flisp.types.nodes import Operation


def operation_form(node: Operation, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Left fold of the evaluated operands: (minus 10 3 2) is 5."""
    values = [evaluate_fn(operand, env) for operand in node.operands]
    return arithmetic(node.op, values)
