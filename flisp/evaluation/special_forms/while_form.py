"""The (while cond body...) loop.

The condition must evaluate to a boolean. A break signal from any body
statement ends the loop with no value; a return signal ends it and is passed
upward unresolved so the enclosing call can unwrap it.
"""

from __future__ import annotations

from flisp import EvaluatorFn, LispValue
from flisp.errors import FlispTypeError
from flisp.types.control import BREAK, ReturnValue
from flisp.types.environment import Environment
from flisp.types.nodes import While


def while_form(node: While, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    while True:
        condition = evaluate_fn(node.cond, env)
        if not isinstance(condition, bool):
            raise FlispTypeError(f"While condition is not boolean: {condition!r}")
        if not condition:
            return None

        for stmt in node.body:
            result = evaluate_fn(stmt, env)
            if result is BREAK:
                return None
            if isinstance(result, ReturnValue):
                return result
