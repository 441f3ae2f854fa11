from flisp import EvaluatorFn, LispValue
from flisp.types.control import is_signal
from flisp.types.environment import Environment
from flisp.types.nodes import Node, Quote, RuntimeLiteral, Setq


def set_form(node: Setq, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Bind a name in the current frame.

    A quoted right-hand side is stored as syntax and stays unevaluated. Any
    other right-hand side is evaluated once: syntax results (functions) are
    stored as they are, host values are wrapped in a RuntimeLiteral.
    """
    rhs = node.expr
    if isinstance(rhs, Quote):
        stored: Node = rhs
    else:
        value = evaluate_fn(rhs, env)
        if is_signal(value):
            return value
        stored = value if isinstance(value, Node) else RuntimeLiteral(value)
    env.define(node.name, stored)
    return None
