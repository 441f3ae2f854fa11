"""Token model for the flisp lexer.

Keyword kinds are resolved from identifier text through a static table, so the
scanner never needs to know which words are reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


_INTEGER_RE = re.compile(r"^-?\d+$")
_REAL_RE = re.compile(r"^-?\d+\.\d+$")


class TokenKind(Enum):
    # Structural
    LPAREN = "lparen"
    RPAREN = "rparen"
    QUOTE = "quote"
    NEWLINE = "newline"

    # Special forms
    SETQ = "setq"
    FUNC = "func"
    LAMBDA = "lambda"
    PROG = "prog"
    COND = "cond"
    WHILE = "while"
    RETURN = "return"
    BREAK = "break"

    # Arithmetic
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"

    # List operations
    HEAD = "head"
    TAIL = "tail"
    CONS = "cons"

    # Comparisons
    EQUAL = "equal"
    NONEQUAL = "nonequal"
    LESS = "less"
    LESSEQ = "lesseq"
    GREATER = "greater"
    GREATEREQ = "greatereq"

    # Predicates
    ISINT = "isint"
    ISREAL = "isreal"
    ISBOOL = "isbool"
    ISNULL = "isnull"
    ISATOM = "isatom"
    ISLIST = "islist"

    # Logical
    AND = "and"
    OR = "or"
    XOR = "xor"
    NAND = "nand"
    NOR = "nor"
    XNOR = "xnor"
    NOT = "not"

    # Evaluator
    EVAL = "eval"

    # Literals
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    NULL = "null"

    # General identifiers
    ATOM = "atom"

    @classmethod
    def from_string(cls, text: str) -> TokenKind:
        """Classify `text`: keyword table first, then integer, then real, else atom."""
        kind = KEYWORDS.get(text)
        if kind is not None:
            return kind
        if _INTEGER_RE.match(text):
            return cls.INTEGER
        if _REAL_RE.match(text):
            return cls.REAL
        return cls.ATOM


KEYWORDS: dict[str, TokenKind] = {
    # special forms
    "quote": TokenKind.QUOTE,
    "'": TokenKind.QUOTE,
    "setq": TokenKind.SETQ,
    "func": TokenKind.FUNC,
    "lambda": TokenKind.LAMBDA,
    "prog": TokenKind.PROG,
    "cond": TokenKind.COND,
    "while": TokenKind.WHILE,
    "return": TokenKind.RETURN,
    "break": TokenKind.BREAK,
    # arithmetic
    "plus": TokenKind.PLUS,
    "minus": TokenKind.MINUS,
    "times": TokenKind.TIMES,
    "divide": TokenKind.DIVIDE,
    # list operations
    "head": TokenKind.HEAD,
    "tail": TokenKind.TAIL,
    "cons": TokenKind.CONS,
    # comparisons
    "equal": TokenKind.EQUAL,
    "nonequal": TokenKind.NONEQUAL,
    "less": TokenKind.LESS,
    "lesseq": TokenKind.LESSEQ,
    "greater": TokenKind.GREATER,
    "greatereq": TokenKind.GREATEREQ,
    # predicates
    "isint": TokenKind.ISINT,
    "isreal": TokenKind.ISREAL,
    "isbool": TokenKind.ISBOOL,
    "isnull": TokenKind.ISNULL,
    "isatom": TokenKind.ISATOM,
    "islist": TokenKind.ISLIST,
    # logical
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "xor": TokenKind.XOR,
    "nand": TokenKind.NAND,
    "nor": TokenKind.NOR,
    "xnor": TokenKind.XNOR,
    "not": TokenKind.NOT,
    # evaluator
    "eval": TokenKind.EVAL,
    # literals
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
    # parentheses
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

ARITHMETIC_OPS = frozenset({"plus", "minus", "times", "divide"})
COMPARISON_OPS = frozenset({"equal", "nonequal", "less", "lesseq", "greater", "greatereq"})
LOGICAL_OPS = frozenset({"and", "or", "xor", "nand", "nor", "xnor"})
PREDICATES = frozenset({"isint", "isreal", "isbool", "isnull", "isatom", "islist"})
LITERAL_KINDS = frozenset({TokenKind.INTEGER, TokenKind.REAL, TokenKind.BOOLEAN, TokenKind.NULL})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text})"
