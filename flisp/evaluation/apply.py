"""Application engine for flisp.

This module centralizes function application for the interpreter:
- FunctionCall binds unevaluated argument expressions (by name), each
  remembering the caller's frame.
- Call binds eagerly evaluated arguments (by value) wrapped in RuntimeLiteral.
- A lambda written with trailing arguments is applied immediately, by name.

Every application creates one frame whose parent is the caller's current frame,
so free variables in a body resolve against the call site (dynamic scoping).
"""

from __future__ import annotations

import logging

from flisp import LispValue, EvaluatorFn
from flisp.errors import ArityError, FlispTypeError
from flisp.evaluation.special_forms.prog_form import run_block
from flisp.types.control import ReturnValue
from flisp.types.environment import Environment
from flisp.types.nodes import Deferred, Func, Lambda, Node, RuntimeLiteral

logger = logging.getLogger(__name__)


def callable_name(fn: Func | Lambda) -> str:
    return fn.name if isinstance(fn, Func) else "lambda"


def require_callable(value: LispValue, name: str) -> Func | Lambda:
    if not isinstance(value, (Func, Lambda)):
        raise FlispTypeError(f"{name} is not a function or lambda")
    return value


def by_name(args: list[Node], env: Environment) -> list[Node]:
    return [Deferred(arg, env) for arg in args]


def by_value(values: list[LispValue]) -> list[Node]:
    return [RuntimeLiteral(value) for value in values]


def apply(
    fn: Func | Lambda,
    bindings: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `bindings` to the parameters of `fn` and evaluate its body.

    Parameters:
    - fn: the Func or Lambda node being applied.
    - bindings: one node per parameter (Deferred or RuntimeLiteral).
    - env: the caller's current frame; the new frame's parent.
    - evaluate_fn: evaluator used for the body.

    A ReturnValue produced by the body is unwrapped; any other result,
    including a break signal, is passed back unchanged.
    """
    params = fn.params
    if len(bindings) != len(params):
        qualifier = "few" if len(bindings) < len(params) else "many"
        raise ArityError(
            f"Too {qualifier} arguments for {callable_name(fn)}: "
            f"expected {len(params)}, got {len(bindings)}"
        )

    frame = Environment(outer=env)
    for param, binding in zip(params, bindings):
        frame.define(param, binding)
    logger.debug("Applying %s with %d argument(s)", callable_name(fn), len(bindings))

    if isinstance(fn, Func):
        result = run_block(fn.body.stmts, frame, evaluate_fn) if fn.body is not None else None
    else:
        result = evaluate_fn(fn.body, frame)

    if isinstance(result, ReturnValue):
        return result.value
    return result
