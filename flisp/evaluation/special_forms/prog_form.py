from flisp import EvaluatorFn, LispValue
from flisp.types.control import is_signal
from flisp.types.environment import Environment
from flisp.types.nodes import Node, Program


def run_block(stmts: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate statements in order; a break or return signal stops the block and propagates."""
    result: LispValue = None
    for stmt in stmts:
        result = evaluate_fn(stmt, env)
        if is_signal(result):
            return result
    return result


def prog_form(node: Program, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # a nested block shares the enclosing frame; its variables are only scoped at parse time
    return run_block(node.stmts, env, evaluate_fn)
