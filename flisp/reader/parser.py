"""
  flisp Parser

Recursive descent over the token list with one token of lookahead.

Two symbol tables are threaded through parsing:

- the local scope: a stack of Environment frames, one per `func`, `lambda`
  and `prog` block. A bare atom must be declared somewhere on the current
  chain or parsing fails; this is a parse-time check, not a run-time one.
- the global scope: every `func` (and every `setq` bound to a `lambda`) by
  name. Call sites use it to choose between a direct FunctionCall, which must
  match the declared arity exactly, and a dynamic Call.

Any error aborts the whole input; there is no statement-level recovery.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from flisp.errors import ParseError
from flisp.types.environment import Environment
from flisp.types.nodes import (
    Atom, Break, Call, Comparison, Cond, Cons, Eval, Func, FunctionCall, Head,
    Lambda, List, Literal, Logical, Node, Not, Operation, Predicate, Program,
    Quote, Return, Setq, Tail, While,
)
from flisp.types.token import (
    ARITHMETIC_OPS, COMPARISON_OPS, LITERAL_KINDS, LOGICAL_OPS, PREDICATES,
    Token, TokenKind,
)

logger = logging.getLogger(__name__)


class Parser:
    def __init__(
        self,
        tokens: list[Token],
        scope: Optional[Environment] = None,
        global_scope: Optional[Environment] = None,
    ):
        self.tokens: list[Token] = [t for t in tokens if t.kind is not TokenKind.NEWLINE]
        self.index = 0
        self.scope = scope if scope is not None else Environment()
        self.global_scope = global_scope if global_scope is not None else Environment()
        # open parentheses around the current position
        self.depth = 0

        self.forms: dict[str, Callable[[], Node]] = {
            "setq": self._parse_setq,
            "func": self._parse_func,
            "lambda": self._parse_lambda,
            "prog": self._parse_prog,
            "cond": self._parse_cond,
            "while": self._parse_while,
            "return": self._parse_return,
            "break": self._parse_break,
            "head": self._parse_head,
            "tail": self._parse_tail,
            "cons": self._parse_cons,
            "not": self._parse_not,
            "eval": self._parse_eval,
            "quote": self._parse_quote,
        }
        for op in ARITHMETIC_OPS:
            self.forms[op] = self._parse_operation
        for op in COMPARISON_OPS:
            self.forms[op] = self._parse_comparison
        for op in LOGICAL_OPS:
            self.forms[op] = self._parse_logical
        for op in PREDICATES:
            self.forms[op] = self._parse_predicate

    # ----------------------
    # Token stream helpers
    # ----------------------
    def is_at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def _last_line(self) -> Optional[int]:
        return self.tokens[-1].line if self.tokens else None

    def peek(self) -> Token:
        if self.is_at_end():
            raise ParseError("Unexpected end of input", self._last_line())
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.peek()
        self.index += 1
        return token

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.tokens[self.index].kind is kind

    def consume(self, kind: TokenKind) -> Token:
        if self.is_at_end():
            raise ParseError(
                f"Unexpected end of input, expected {kind.name}", self._last_line()
            )
        token = self.tokens[self.index]
        if token.kind is not kind:
            raise ParseError(
                f"Expected {kind.name} but found {token.text!r}", token.line
            )
        self.index += 1
        return token

    def _until_rparen(self, parse_item: Callable[[], Node], what: str, line: int) -> list[Node]:
        """Parse items up to (and including) the closing parenthesis."""
        items: list[Node] = []
        while not self.is_at_end() and not self.check(TokenKind.RPAREN):
            items.append(parse_item())
        if self.is_at_end():
            raise ParseError(f"Missing ')' in {what}", line)
        self._close()
        return items

    def _open(self) -> Token:
        token = self.consume(TokenKind.LPAREN)
        self.depth += 1
        return token

    def _close(self) -> Token:
        token = self.consume(TokenKind.RPAREN)
        self.depth -= 1
        return token

    @contextmanager
    def _local_scope(self) -> Iterator[Environment]:
        """Push a child of the current local scope for the duration of a block."""
        enclosing = self.scope
        self.scope = Environment(outer=enclosing)
        try:
            yield self.scope
        finally:
            self.scope = enclosing

    # ----------------------
    # Entry point
    # ----------------------
    def parse(self) -> Program:
        stmts: list[Node] = []
        while not self.is_at_end():
            stmts.append(self.parse_node())
        logger.debug("Parsed %d top-level statements", len(stmts))
        return Program(stmts)

    def parse_node(self) -> Node:
        token = self.peek()
        kind = token.kind

        if kind is TokenKind.LPAREN:
            return self._parse_parenthesized()

        if kind is TokenKind.QUOTE and token.text == "'":
            self.advance()
            return Quote(self._parse_quoted())

        if kind in LITERAL_KINDS:
            self.advance()
            return Literal(token.text, kind)

        if kind is TokenKind.ATOM:
            self.advance()
            if not self.scope.defined(token.text):
                raise ParseError(f"Undefined variable {token.text}", token.line)
            return Atom(token.text)

        if token.text in ARITHMETIC_OPS:
            # a bare operator name, e.g. a cond branch selecting an operator
            self.advance()
            return Atom(token.text)

        raise ParseError(f"Unexpected token {token.text!r}", token.line)

    def _parse_parenthesized(self) -> Node:
        self._open()
        head = self.peek()

        if head.kind in LITERAL_KINDS or head.kind is TokenKind.RPAREN:
            return self._parse_literal_list(head.line)

        if head.kind is TokenKind.LPAREN:
            inner = self._parse_parenthesized()
            if self.check(TokenKind.RPAREN):
                self._close()
                return inner
            args = self._until_rparen(self.parse_node, "call", head.line)
            return Call(inner, args)

        form = self.forms.get(head.text)
        if form is not None:
            return form()

        if head.kind is TokenKind.ATOM:
            declared = self.global_scope.vars.get(head.text)
            if isinstance(declared, Func):
                return self._parse_function_call(declared)
            if isinstance(declared, Lambda) and self.scope.defined(head.text):
                self.advance()
                args = self._until_rparen(self.parse_node, f"call to {head.text}", head.line)
                return Call(Atom(head.text), args)

        return self._parse_literal_list(head.line)

    def _parse_literal_list(self, line: int) -> Node:
        return List(self._until_rparen(self.parse_node, "list", line))

    # ----------------------
    # Quoted data
    # ----------------------
    def _parse_quoted(self) -> Node:
        if self.check(TokenKind.LPAREN):
            line = self._open().line
            return List(self._until_rparen(self._parse_quoted, "quoted list", line))

        token = self.advance()
        if token.kind in LITERAL_KINDS:
            return Literal(token.text, token.kind)
        if token.kind is TokenKind.QUOTE:
            return Quote(self._parse_quoted())
        if token.kind is TokenKind.RPAREN:
            raise ParseError("Invalid token in quoted form: ')'", token.line)
        # atoms and keywords alike are plain names inside quoted data
        return Atom(token.text)

    def _parse_quote(self) -> Node:
        self.advance()
        data = self._parse_quoted()
        self._close()
        return Quote(data)

    # ----------------------
    # Special forms
    # ----------------------
    def _parse_setq(self) -> Node:
        self.advance()
        name = self.consume(TokenKind.ATOM).text
        value = self.parse_node()
        self._close()
        self.scope.define(name, value)
        if isinstance(value, Lambda) and value.bound_args is None:
            self.global_scope.define(name, value)
        elif isinstance(self.global_scope.vars.get(name), Lambda):
            # rebound to something that is no longer callable
            del self.global_scope.vars[name]
        return Setq(name, value)

    def _parse_func(self) -> Node:
        line = self.advance().line
        with self._local_scope() as scope:
            name = self.consume(TokenKind.ATOM).text

            # registered before the body so the function can call itself
            placeholder = Func(name, [])
            self.global_scope.define(name, placeholder)
            scope.define(name, placeholder)

            self._open()
            while not self.is_at_end() and not self.check(TokenKind.RPAREN):
                param = self.consume(TokenKind.ATOM).text
                placeholder.params.append(param)
                scope.define(param, None)
            if self.is_at_end():
                raise ParseError(f"Missing ')' in parameter list for function {name}", line)
            self._close()

            body = self._until_rparen(self.parse_node, f"body of function {name}", line)

        fn = Func(name, list(placeholder.params), Program(body))
        self.global_scope.define(name, fn)
        self.scope.define(name, fn)
        return fn

    def _parse_lambda(self) -> Node:
        line = self.advance().line
        with self._local_scope() as scope:
            params: list[str] = []
            self._open()
            while not self.is_at_end() and not self.check(TokenKind.RPAREN):
                param = self.consume(TokenKind.ATOM).text
                params.append(param)
                scope.define(param, None)
            if self.is_at_end():
                raise ParseError("Missing ')' in lambda parameter list", line)
            self._close()

            body = self.parse_node()
            self._close()

        node = Lambda(params, body)
        # remaining forms inside the enclosing parentheses invoke the lambda
        if self.depth > 0 and not self.is_at_end() and not self.check(TokenKind.RPAREN):
            args: list[Node] = []
            while not self.is_at_end() and not self.check(TokenKind.RPAREN):
                args.append(self.parse_node())
            if self.is_at_end():
                raise ParseError("Missing ')' in lambda call", line)
            node.bound_args = args
        return node

    def _parse_prog(self) -> Node:
        line = self.advance().line
        with self._local_scope() as scope:
            self._open()
            while not self.is_at_end() and not self.check(TokenKind.RPAREN):
                scope.define(self.consume(TokenKind.ATOM).text, None)
            if self.is_at_end():
                raise ParseError("Missing ')' in prog variable list", line)
            self._close()
            stmts = self._until_rparen(self.parse_node, "prog body", line)
        return Program(stmts)

    def _parse_cond(self) -> Node:
        self.advance()
        condition = self.parse_node()
        then = self.parse_node()
        else_ = None
        if not self.check(TokenKind.RPAREN):
            else_ = self.parse_node()
        self._close()
        return Cond(condition, then, else_)

    def _parse_while(self) -> Node:
        line = self.advance().line
        condition = self.parse_node()
        body = self._until_rparen(self.parse_node, "while body", line)
        return While(condition, body)

    def _parse_return(self) -> Node:
        self.advance()
        value = self.parse_node()
        self._close()
        return Return(value)

    def _parse_break(self) -> Node:
        self.advance()
        self._close()
        return Break()

    def _parse_operation(self) -> Node:
        token = self.advance()
        operands = self._until_rparen(self.parse_node, f"operation {token.text}", token.line)
        for operand in operands:
            if isinstance(operand, Literal) and operand.kind is TokenKind.BOOLEAN:
                raise ParseError(f"Impossible operation {token.text} on a boolean", token.line)
        return Operation(token.text, operands)

    def _parse_comparison(self) -> Node:
        token = self.advance()
        return Comparison(token.text, self._until_rparen(self.parse_node, token.text, token.line))

    def _parse_logical(self) -> Node:
        token = self.advance()
        return Logical(token.text, self._until_rparen(self.parse_node, token.text, token.line))

    def _parse_unary(self) -> Node:
        self.advance()
        arg = self.parse_node()
        self._close()
        return arg

    def _parse_head(self) -> Node:
        return Head(self._parse_unary())

    def _parse_tail(self) -> Node:
        return Tail(self._parse_unary())

    def _parse_not(self) -> Node:
        return Not(self._parse_unary())

    def _parse_eval(self) -> Node:
        return Eval(self._parse_unary())

    def _parse_predicate(self) -> Node:
        kind = self.peek().text
        return Predicate(kind, self._parse_unary())

    def _parse_cons(self) -> Node:
        self.advance()
        item = self.parse_node()
        lst = self.parse_node()
        self._close()
        return Cons(item, lst)

    def _parse_function_call(self, fn: Func) -> Node:
        token = self.advance()
        args = self._until_rparen(self.parse_node, f"function call {fn.name}", token.line)
        if len(args) != len(fn.params):
            raise ParseError(
                f"Incorrect number of parameters for function {fn.name}: "
                f"expected {len(fn.params)}, got {len(args)}",
                token.line,
            )
        return FunctionCall(fn.name, args)


def parse(
    tokens: list[Token],
    scope: Optional[Environment] = None,
    global_scope: Optional[Environment] = None,
) -> Program:
    """Parse a token list into a Program; raises ParseError on the first problem.

    Passing the scopes of an earlier parse lets a later input refer to the
    names and functions it declared.
    """
    return Parser(tokens, scope, global_scope).parse()
