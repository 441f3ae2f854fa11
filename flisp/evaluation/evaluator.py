"""Core evaluator for the flisp interpreter.

Literals, atoms and the interpreter-only binding nodes are handled here; every
other node kind is dispatched through the SPECIAL_FORMS registry, whose handlers
receive this evaluator so they can recurse.
"""

from __future__ import annotations

from flisp import LispValue
from flisp.errors import SelfReferentialVariable, UndefinedVariable, UnknownOperator
from flisp.evaluation.operators import literal_value
from flisp.evaluation.special_forms import SPECIAL_FORMS
from flisp.types.environment import Environment
from flisp.types.nodes import (
    Atom, Deferred, Func, Lambda, Literal, Node, RuntimeLiteral,
)


def lookup_atom(name: str, env: Environment) -> LispValue:
    """Resolve a variable reference.

    Functions are first-class values and come back unevaluated; anything else
    bound to the name is evaluated on every lookup.

    Statements always bind computed values, so a name bound to its own atom can
    only come from embedding code that defines the environment directly; that
    binding is rejected instead of recursing.
    """
    bound = env.lookup(name)
    match bound:
        case None:
            raise UndefinedVariable(f"Variable {name} has no value")
        case Atom(name=other) if other == name:
            raise SelfReferentialVariable(f"Variable {name} is bound to itself")
        case RuntimeLiteral(value=value):
            return value
        case Func() | Lambda():
            return bound
    return evaluate(bound, env)


def evaluate(node: Node, env: Environment) -> LispValue:
    """
    Evaluate `node` in `env`.
    May return a control signal (BREAK or a ReturnValue) for break/return.
    """
    match node:
        case Literal(text=text, kind=kind):
            return literal_value(text, kind)
        case Atom(name=name):
            return lookup_atom(name, env)
        case RuntimeLiteral(value=value):
            return value
        case Deferred(expr=expr, env=captured):
            return evaluate(expr, captured)

    handler = SPECIAL_FORMS.get(type(node))
    if handler is None:
        raise UnknownOperator(f"Cannot evaluate {node!r}")
    return handler(node, env, evaluate)
