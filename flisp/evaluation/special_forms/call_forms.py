from flisp import EvaluatorFn, LispValue
from flisp.errors import UndefinedFunction, UndefinedVariable
from flisp.evaluation.apply import apply, by_name, by_value, require_callable
from flisp.types.control import is_signal
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, Call, FunctionCall


def function_call_form(node: FunctionCall, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Direct call of a named function; arguments are passed unevaluated."""
    try:
        fn = evaluate_fn(Atom(node.name), env)
    except UndefinedVariable:
        raise UndefinedFunction(f"Undefined function {node.name}") from None
    fn = require_callable(fn, node.name)
    return apply(fn, by_name(node.args, env), env, evaluate_fn)


def call_form(node: Call, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Call of a computed callee; arguments are evaluated first."""
    callee = node.callee
    name = callee.name if isinstance(callee, Atom) else "callee"
    try:
        fn = evaluate_fn(callee, env)
    except UndefinedVariable:
        if isinstance(callee, Atom):
            raise UndefinedFunction(f"Undefined function {name}") from None
        raise
    fn = require_callable(fn, name)

    values = []
    for arg in node.args:
        value = evaluate_fn(arg, env)
        if is_signal(value):
            return value
        values.append(value)
    return apply(fn, by_value(values), env, evaluate_fn)
