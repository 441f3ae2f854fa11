from __future__ import annotations

from io import StringIO
from typing import Iterable

from flisp import LispValue
from flisp.types.nodes import (
    Atom, Comparison, Func, FunctionCall, Lambda, List, Literal, Logical, Node,
    Operation, Predicate, Quote, Setq, children,
)
from flisp.types.null import Null
from flisp.types.token import Token

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NODE = "\033[90m"
COLOR_ATOM = "\033[94m"
COLOR_LITERAL = "\033[93m"
COLOR_FUNCTION = "\033[92m"
COLOR_QUOTE = "\033[96m"

INDENT = "  "


# ----------------- Values -----------------
def render_value(value: LispValue) -> str:
    """Render an evaluated value the way the echo channel shows it."""
    match value:
        case bool():
            return "true" if value else "false"
        case list():
            return "(" + " ".join(render_value(v) for v in value) + ")"
        case Func(name=name):
            return f"<func {name}>"
        case Lambda(params=params):
            return f"<lambda ({' '.join(params)})>"
    if value is Null:
        return "null"
    return str(value)


# ----------------- Tokens -----------------
def format_tokens(tokens: Iterable[Token]) -> str:
    """One line per source line, e.g. `1: LPAREN(() PLUS(plus) INTEGER(1)`."""
    lines: dict[int, list[str]] = {}
    for token in tokens:
        lines.setdefault(token.line, []).append(str(token))
    return "\n".join(f"{line}: {' '.join(entries)}" for line, entries in lines.items())


# ----------------- AST -----------------
def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def quoted_text(node: Node) -> str:
    """Source-like text of quoted data."""
    match node:
        case Literal(text=text):
            return text
        case Atom(name=name):
            return name
        case List(elems=elems):
            return "(" + " ".join(quoted_text(e) for e in elems) + ")"
        case Quote(expr=expr):
            return "'" + quoted_text(expr)
    return repr(node)


def _label(node: Node, color: bool) -> str:
    kind = _paint(type(node).__name__, COLOR_NODE, color)
    match node:
        case Literal(text=text, kind=token_kind):
            return f"{kind} {_paint(text, COLOR_LITERAL, color)} ({token_kind.name})"
        case Atom(name=name):
            return f"{kind} {_paint(name, COLOR_ATOM, color)}"
        case Setq(name=name):
            return f"{kind} {_paint(name, COLOR_ATOM, color)}"
        case Func(name=name, params=params):
            return f"{kind} {_paint(name, COLOR_FUNCTION, color)} ({' '.join(params)})"
        case Lambda(params=params, bound_args=bound_args):
            suffix = f" applied to {len(bound_args)}" if bound_args is not None else ""
            return f"{kind} ({' '.join(params)}){suffix}"
        case FunctionCall(name=name):
            return f"{kind} {_paint(name, COLOR_FUNCTION, color)}"
        case Operation(op=op) | Comparison(op=op) | Logical(op=op):
            return f"{kind} {op}"
        case Predicate(kind=predicate):
            return f"{kind} {predicate}"
        case Quote(expr=expr):
            return f"{kind} {_paint(quoted_text(expr), COLOR_QUOTE, color)}"
    return kind


def _write_tree(node: Node, buffer: StringIO, depth: int, color: bool) -> None:
    buffer.write(INDENT * depth + _label(node, color) + "\n")
    for child in children(node):
        _write_tree(child, buffer, depth + 1, color)


def pprint_ast(node: Node, color: bool = False) -> str:
    """Indented tree view of an AST, one node per line."""
    with StringIO() as buffer:
        _write_tree(node, buffer, 0, color)
        return buffer.getvalue().rstrip("\n")
