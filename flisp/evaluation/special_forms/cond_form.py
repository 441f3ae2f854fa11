from flisp import EvaluatorFn, LispValue
from flisp.errors import FlispTypeError
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, Cond
from flisp.types.token import ARITHMETIC_OPS


def cond_form(node: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate (cond test then [else]).

    The test must evaluate to a boolean. A branch that is a bare arithmetic
    operator name evaluates to that name as a string. With no else branch a
    false test produces no value.
    """
    condition = evaluate_fn(node.cond, env)
    if not isinstance(condition, bool):
        raise FlispTypeError(f"Cond condition is not boolean: {condition!r}")

    branch = node.then if condition else node.else_
    if branch is None:
        return None
    if isinstance(branch, Atom) and branch.name in ARITHMETIC_OPS:
        return branch.name
    return evaluate_fn(branch, env)
