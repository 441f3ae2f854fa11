"""Primitive operator semantics shared by the evaluator and the constant folder."""

from __future__ import annotations

from functools import reduce

from flisp import LispValue
from flisp.errors import (
    ArityError, DivisionByZero, FlispTypeError, UnknownOperator,
)
from flisp.types.null import Null
from flisp.types.token import TokenKind


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize(value: int | float) -> int | float:
    """Render exact results as integers."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _divide(a: int | float, b: int | float) -> int | float:
    if b == 0:
        raise DivisionByZero("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


_ARITHMETIC = {
    "plus": lambda a, b: a + b,
    "minus": lambda a, b: a - b,
    "times": lambda a, b: a * b,
    "divide": _divide,
}


def arithmetic(op: str, operands: list[LispValue]) -> int | float:
    """Fold `operands` left to right with `op`."""
    fn = _ARITHMETIC.get(op)
    if fn is None:
        raise UnknownOperator(f"Unknown operator {op}")
    if not operands:
        raise ArityError(f"{op} requires at least 1 operand")
    for operand in operands:
        if not is_number(operand):
            raise FlispTypeError(f"{op} expects numbers, got {operand!r}")
    return normalize(reduce(fn, operands))


_RELATIONS = {
    "equal": lambda a, b: a == b,
    "nonequal": lambda a, b: a != b,
    "less": lambda a, b: a < b,
    "lesseq": lambda a, b: a <= b,
    "greater": lambda a, b: a > b,
    "greatereq": lambda a, b: a >= b,
}


def compare(op: str, left: LispValue, right: LispValue) -> bool:
    """Booleans support equal/nonequal only; numbers support all six relations."""
    fn = _RELATIONS.get(op)
    if fn is None:
        raise UnknownOperator(f"Unknown comparison operator {op}")
    if isinstance(left, bool) and isinstance(right, bool):
        if op not in ("equal", "nonequal"):
            raise FlispTypeError(f"{op} is not defined for booleans")
        return fn(left, right)
    if is_number(left) and is_number(right):
        return fn(left, right)
    raise FlispTypeError(f"Cannot compare {left!r} and {right!r} with {op}")


def to_boolean(value: LispValue, side: str = "") -> bool:
    """Permissive boolean coercion used by the logical operators."""
    if isinstance(value, bool):
        return value
    if value in ("true", "false"):
        return value == "true"
    if is_number(value):
        return value != 0
    where = f"{side} operand" if side else "operand"
    raise FlispTypeError(f"Logical {where} is not boolean: {value!r}")


_CONNECTIVES = {
    "and": lambda l, r: l and r,
    "or": lambda l, r: l or r,
    "xor": lambda l, r: l != r,
    "nand": lambda l, r: not (l and r),
    "nor": lambda l, r: not (l or r),
    "xnor": lambda l, r: l == r,
}


def logical(op: str, left: bool, right: bool) -> bool:
    fn = _CONNECTIVES.get(op)
    if fn is None:
        raise UnknownOperator(f"Unknown logical operator {op}")
    return fn(left, right)


def literal_value(text: str, kind: TokenKind) -> LispValue:
    """Host value of a literal token: booleans, null, integers or reals."""
    if text == "true":
        return True
    if text == "false":
        return False
    if text == "null":
        return Null
    if kind is TokenKind.REAL or "." in text:
        return float(text)
    return int(text)
