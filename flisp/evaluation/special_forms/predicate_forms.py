from flisp import EvaluatorFn, LispValue
from flisp.errors import UnknownOperator
from flisp.evaluation.operators import is_number
from flisp.types.environment import Environment
from flisp.types.nodes import Atom, Predicate
from flisp.types.null import Null


def classify(kind: str, value: LispValue) -> bool:
    """Answer a type predicate about an evaluated value."""
    match kind:
        case "isint":
            return is_number(value) and isinstance(value, int)
        case "isreal":
            return isinstance(value, float)
        case "isbool":
            return isinstance(value, bool)
        case "isnull":
            return value is Null
        case "islist":
            return isinstance(value, list)
        case "isatom":
            return not isinstance(value, list)
    raise UnknownOperator(f"Unknown predicate {kind}")


def predicate_form(node: Predicate, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # a bare name is an atom whatever it is bound to, and is not evaluated
    if node.kind == "isatom" and isinstance(node.arg, Atom):
        return True
    return classify(node.kind, evaluate_fn(node.arg, env))
