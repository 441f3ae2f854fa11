from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from flisp.evaluation.operators import arithmetic, compare, logical
from flisp.types.nodes import (
    Atom, Call, Comparison, Cond, Cons, Eval, Func, FunctionCall, Head, Lambda, List,
    Literal, Logical, Node, Not, Operation, Predicate, Program, Return, Setq,
    Tail, While,
)
from flisp.types.token import ARITHMETIC_OPS, TokenKind

logger = logging.getLogger(__name__)

Rewrite = Callable[[Node], Optional[Node]]


# --- Literal helpers ---

def _number(node: Node) -> int | float | None:
    if isinstance(node, Literal):
        if node.kind is TokenKind.INTEGER:
            return int(node.text)
        if node.kind is TokenKind.REAL:
            return float(node.text)
    return None


def _boolean(node: Node) -> bool | None:
    if isinstance(node, Literal) and node.kind is TokenKind.BOOLEAN:
        return node.text == "true"
    return None


def _bool_literal(value: bool) -> Literal:
    return Literal("true" if value else "false", TokenKind.BOOLEAN)


def _number_literal(value: int | float) -> Literal | None:
    if isinstance(value, int):
        return Literal(str(value), TokenKind.INTEGER)
    if not math.isfinite(value):
        return None
    return Literal(repr(value), TokenKind.REAL)


# --- Tree rebuilding ---

def _rebuild(node: Node, rewrite: Rewrite) -> Node:
    """Return a copy of `node` whose children went through `rewrite`.

    A child rewritten to None is dropped from a while body. In a block it is
    dropped unless it is the last statement, whose value is the block's
    result; there, and anywhere else, the child is kept unchanged.
    """

    def sub(child: Node) -> Node:
        result = rewrite(child)
        return child if result is None else result

    def stmts(items: list[Node]) -> list[Node]:
        return [r for r in map(rewrite, items) if r is not None]

    def block(items: list[Node]) -> list[Node]:
        if not items:
            return []
        return stmts(items[:-1]) + [sub(items[-1])]

    match node:
        case Program(stmts=items):
            return Program(block(items))
        case Setq(name=name, expr=expr):
            return Setq(name, sub(expr))
        case Func(name=name, params=params, body=body):
            return Func(name, params, sub(body) if body is not None else None)
        case Lambda(params=params, body=body, bound_args=bound_args):
            args = [sub(a) for a in bound_args] if bound_args is not None else None
            return Lambda(params, sub(body), args)
        case FunctionCall(name=name, args=args):
            return FunctionCall(name, [sub(a) for a in args])
        case Call(callee=callee, args=args):
            return Call(sub(callee), [sub(a) for a in args])
        case Operation(op=op, operands=operands):
            return Operation(op, [sub(o) for o in operands])
        case Comparison(op=op, operands=operands):
            return Comparison(op, [sub(o) for o in operands])
        case Logical(op=op, operands=operands):
            return Logical(op, [sub(o) for o in operands])
        case Not(arg=arg):
            return Not(sub(arg))
        case Predicate(kind=kind, arg=arg):
            return Predicate(kind, sub(arg))
        case Cond(cond=cond, then=then, else_=else_):
            return Cond(sub(cond), sub(then), sub(else_) if else_ is not None else None)
        case While(cond=cond, body=body):
            return While(sub(cond), stmts(body))
        case Return(expr=expr):
            return Return(sub(expr))
        case Head(lst=lst):
            return Head(sub(lst))
        case Tail(lst=lst):
            return Tail(sub(lst))
        case Cons(item=item, lst=lst):
            return Cons(sub(item), sub(lst))
        case List(elems=elems):
            return List([sub(e) for e in elems])
        case Eval(expr=expr):
            return Eval(sub(expr))
    # literals, atoms, break and quoted data have nothing to rewrite
    return node


# --- Individual optimization passes ---

def _fold_node(node: Node) -> Node | None:
    match node:
        case Not(arg=arg):
            b = _boolean(arg)
            if b is not None:
                return _bool_literal(not b)

        case Operation(op=op, operands=operands) if operands:
            values = [_number(o) for o in operands]
            if any(v is None for v in values):
                return None
            # division by a literal zero is left for the interpreter to report
            if op == "divide" and any(v == 0 for v in values[1:]):
                return None
            return _number_literal(arithmetic(op, values))

        case Logical(op=op, operands=[left, right]):
            lb, rb = _boolean(left), _boolean(right)
            if op == "and" and lb is False:
                return _bool_literal(False)
            if op == "or" and lb is True:
                return _bool_literal(True)
            if lb is not None and rb is not None:
                return _bool_literal(logical(op, lb, rb))

        case Comparison(op=op, operands=[left, right]):
            ln, rn = _number(left), _number(right)
            if ln is not None and rn is not None:
                return _bool_literal(compare(op, ln, rn))
            lb, rb = _boolean(left), _boolean(right)
            if lb is not None and rb is not None and op in ("equal", "nonequal"):
                return _bool_literal(compare(op, lb, rb))
    return None


def constant_fold(node: Node) -> Node:
    """Post-order: replace fully literal Not/Operation/Logical/Comparison nodes."""
    node = _rebuild(node, constant_fold)
    folded = _fold_node(node)
    if folded is not None:
        logger.debug("Folded %s into %s", node, folded)
        return folded
    return node


def simplify_conditionals(node: Node) -> Node | None:
    """Post-order: replace a cond with a literal condition by the taken branch.

    A false condition without an else branch yields None, which removes the
    cond where its value is never used.
    """
    node = _rebuild(node, simplify_conditionals)
    if isinstance(node, Cond):
        # an operator-name branch only means something inside a cond
        if any(isinstance(b, Atom) and b.name in ARITHMETIC_OPS for b in (node.then, node.else_)):
            return node
        taken = _boolean(node.cond)
        if taken is True:
            logger.debug("Simplified %s to its then-branch", node)
            return node.then
        if taken is False:
            logger.debug("Simplified %s to its else-branch", node)
            return node.else_
    return node


# --- Top-level optimizer entry point ---

def optimize(ast: Node) -> Node:
    """
    Constant folding followed by conditional simplification.
    Always succeeds; the input tree is not modified.
    """
    root = constant_fold(ast)
    if isinstance(root, Program):
        # top-level statements without a value are never echoed
        return Program([s for s in map(simplify_conditionals, root.stmts) if s is not None])
    simplified = simplify_conditionals(root)
    return root if simplified is None else simplified
