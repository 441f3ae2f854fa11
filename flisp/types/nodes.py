"""AST node variants for flisp.

The node set is closed: every stage matches on these classes. Two variants,
RuntimeLiteral and Deferred, are produced only by the interpreter so that
computed values and unevaluated arguments can be stored as bindings; the
environment never holds a raw host value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, TYPE_CHECKING

from flisp import LispValue
from flisp.types.token import TokenKind

if TYPE_CHECKING:
    from flisp.types.environment import Environment


class Node:
    """Base class of every AST node."""

    __slots__ = ()


@dataclass
class Program(Node):
    stmts: list[Node] = field(default_factory=list)


@dataclass
class Literal(Node):
    text: str
    kind: TokenKind


@dataclass
class Atom(Node):
    name: str


@dataclass
class Setq(Node):
    name: str
    expr: Node


@dataclass
class Func(Node):
    name: str
    params: list[str]
    body: Optional[Program] = None


@dataclass
class Lambda(Node):
    params: list[str]
    body: Node
    bound_args: Optional[list[Node]] = None


@dataclass
class FunctionCall(Node):
    name: str
    args: list[Node]


@dataclass
class Call(Node):
    callee: Node
    args: list[Node]


@dataclass
class Operation(Node):
    op: str
    operands: list[Node]


@dataclass
class Comparison(Node):
    op: str
    operands: list[Node]

    @property
    def left(self) -> Node:
        return self.operands[0]

    @property
    def right(self) -> Node:
        return self.operands[1]


@dataclass
class Logical(Node):
    op: str
    operands: list[Node]

    @property
    def left(self) -> Node:
        return self.operands[0]

    @property
    def right(self) -> Node:
        return self.operands[1]


@dataclass
class Not(Node):
    arg: Node


@dataclass
class Predicate(Node):
    kind: str
    arg: Node


@dataclass
class Cond(Node):
    cond: Node
    then: Node
    else_: Optional[Node] = None


@dataclass
class While(Node):
    cond: Node
    body: list[Node]


@dataclass
class Return(Node):
    expr: Node


@dataclass
class Break(Node):
    pass


@dataclass
class Head(Node):
    lst: Node


@dataclass
class Tail(Node):
    lst: Node


@dataclass
class Cons(Node):
    item: Node
    lst: Node


@dataclass
class List(Node):
    elems: list[Node]


@dataclass
class Quote(Node):
    expr: Node


@dataclass
class Eval(Node):
    expr: Node


# --- Interpreter-only nodes ---

@dataclass
class RuntimeLiteral(Node):
    """An already computed host value re-stored as a binding."""
    value: LispValue


@dataclass(eq=False)
class Deferred(Node):
    """An argument expression bound by name, evaluated in the frame that passed it."""
    expr: Node
    env: Environment = field(repr=False)


def children(node: Node) -> Iterator[Node]:
    """Yield the sub-trees of `node` in evaluation order.

    Quoted data has no children: it is never validated or rewritten.
    """
    match node:
        case Program(stmts=stmts):
            yield from stmts
        case Setq(expr=expr) | Return(expr=expr) | Eval(expr=expr):
            yield expr
        case Func(body=body):
            if body is not None:
                yield body
        case Lambda(body=body, bound_args=bound_args):
            yield body
            yield from bound_args or []
        case FunctionCall(args=args):
            yield from args
        case Call(callee=callee, args=args):
            yield callee
            yield from args
        case Operation(operands=operands) | Comparison(operands=operands) | Logical(operands=operands):
            yield from operands
        case Not(arg=arg) | Predicate(arg=arg):
            yield arg
        case Cond(cond=cond, then=then, else_=else_):
            yield cond
            yield then
            if else_ is not None:
                yield else_
        case While(cond=cond, body=body):
            yield cond
            yield from body
        case Head(lst=lst) | Tail(lst=lst):
            yield lst
        case Cons(item=item, lst=lst):
            yield item
            yield lst
        case List(elems=elems):
            yield from elems
