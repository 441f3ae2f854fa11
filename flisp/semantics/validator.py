"""Operand-shape validation for flisp programs.

Each expression is classified by syntax alone as list-shaped, scalar-shaped or
unknown (its shape depends on run-time values). Only definite mismatches are
reported; unknown shapes always pass.
"""

from __future__ import annotations

from enum import Enum

from flisp.errors import SemanticError
from flisp.types.nodes import (
    Comparison, Cond, Cons, Head, List, Literal, Logical, Node, Not, Operation,
    Predicate, Quote, Tail, While, children,
)


class Shape(Enum):
    LIST = "list"
    SCALAR = "scalar"
    UNKNOWN = "unknown"


def shape_of(node: Node) -> Shape:
    match node:
        case List() | Cons() | Tail():
            return Shape.LIST
        case Quote(expr=List()):
            return Shape.LIST
        case Quote(expr=Literal()):
            return Shape.SCALAR
        case Literal() | Operation() | Comparison() | Logical() | Not() | Predicate():
            return Shape.SCALAR
    return Shape.UNKNOWN


def _path(path: list[int]) -> str:
    return "/" + "/".join(str(i) for i in path) if path else "/"


def _check_operands(operands: list[Node], what: str, path: list[int]) -> None:
    if len(operands) != 2:
        raise SemanticError(
            f"{what} expects exactly 2 operands, got {len(operands)}", _path(path)
        )
    for i, operand in enumerate(operands):
        if shape_of(operand) is Shape.LIST:
            raise SemanticError(
                f"{what} operand must not be a list", _path(path + [i])
            )


def _check_node(node: Node, path: list[int]) -> None:
    match node:
        case Operation(op=op, operands=operands):
            _check_operands(operands, f"Operation {op}", path)
        case Logical(op=op, operands=operands):
            _check_operands(operands, f"Logical operator {op}", path)
        case Comparison(op=op, operands=operands):
            _check_operands(operands, f"Comparison {op}", path)
        case Head(lst=lst) | Tail(lst=lst):
            if shape_of(lst) is Shape.SCALAR:
                name = type(node).__name__.lower()
                raise SemanticError(f"{name} expects a list operand", _path(path + [0]))
        case Cons(lst=lst):
            if shape_of(lst) is Shape.SCALAR:
                raise SemanticError("cons expects a list as its second operand", _path(path + [1]))
        case While(cond=cond) | Cond(cond=cond):
            if shape_of(cond) is Shape.LIST:
                name = type(node).__name__.lower()
                raise SemanticError(f"{name} condition must not be a list", _path(path + [0]))


def validate(ast: Node) -> None:
    """Walk `ast` depth-first; raise SemanticError at the first violation."""
    stack: list[tuple[Node, list[int]]] = [(ast, [])]
    while stack:
        node, path = stack.pop()
        _check_node(node, path)
        kids = list(children(node))
        # reversed so siblings are checked left to right
        for i in range(len(kids) - 1, -1, -1):
            stack.append((kids[i], path + [i]))
