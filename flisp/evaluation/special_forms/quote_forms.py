from flisp import EvaluatorFn, LispValue
from flisp.errors import UnknownOperator
from flisp.evaluation.operators import literal_value
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, List, Literal, Node, Quote


def to_data(node: Node) -> LispValue:
    """Convert quoted syntax into host data without evaluating anything."""
    match node:
        case Literal(text=text, kind=kind):
            return literal_value(text, kind)
        case Atom(name=name):
            return name
        case List(elems=elems):
            return [to_data(elem) for elem in elems]
        case Quote(expr=expr):
            return to_data(expr)
    raise UnknownOperator(f"Cannot quote {node!r}")


def quote_form(node: Quote, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return to_data(node.expr)
