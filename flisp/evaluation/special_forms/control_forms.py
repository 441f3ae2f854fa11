from flisp import EvaluatorFn, LispValue
from flisp.types.control import BREAK, ReturnValue, is_signal
from flisp.types.environment import Environment
from flisp.types.nodes import Break, Return


def break_form(node: Break, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return BREAK


def return_form(node: Return, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    value = evaluate_fn(node.expr, env)
    if is_signal(value):
        return value
    return ReturnValue(value)
