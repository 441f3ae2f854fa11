from flisp import EvaluatorFn, LispValue
from flisp.evaluation.apply import apply, by_name
from flisp.types.environment import Environment
from flisp.types.nodes import Func, Lambda


def func_form(node: Func, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """A function definition registers itself under its name and produces no value."""
    env.define(node.name, node)
    return None


def lambda_form(node: Lambda, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """A lambda is a value; written with trailing arguments it is applied at once."""
    if node.bound_args is None:
        return node
    return apply(node, by_name(node.bound_args, env), env, evaluate_fn)
