from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from flisp.config import get_echo_stream, get_recursion_limit
from flisp.debug_utils.pprint import render_value
from flisp.errors import ResourceExhausted
from flisp.evaluation.evaluator import evaluate
from flisp.reader.lexer import tokenize
from flisp.reader.parser import parse
from flisp.semantics.optimizer import optimize as optimize_ast
from flisp.semantics.validator import validate as validate_ast
from flisp.types.control import is_signal
from flisp.types.environment import Environment
from flisp.types.nodes import Break, Func, Program, Return, Setq, While

logger = logging.getLogger(__name__)

# statements whose results are never echoed
SILENT_NODES = (Setq, Func, While, Break, Return)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit for the duration of a run."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Runs flisp programs against one global environment.
    Definitions made by one call to `eval` or `run` stay visible to the next.
    """

    def __init__(
        self,
        echo: Optional[TextIO] = None,
        optimize: bool = False,
        validate: bool = False,
        recursion_limit: Optional[int] = None,
    ):
        self.env = Environment()
        # parse-time declarations, kept so later inputs can refer to them
        self.scope = Environment()
        self.global_scope = Environment()

        self.echo = echo
        self.optimize = optimize
        self.validate = validate
        self.recursion_limit = recursion_limit

    @contextmanager
    def _guarded(self) -> Iterator[None]:
        """Run under the configured recursion limit, reporting runaway recursion as ResourceExhausted."""
        with recursion_limit(self.recursion_limit or get_recursion_limit()):
            try:
                yield
            except RecursionError as exc:
                raise ResourceExhausted("Maximum recursion depth exceeded") from exc

    def eval(self, code: str) -> list[str]:
        """Lex, parse and run `code`; returns the rendered echo lines."""
        with self._guarded():
            ast = parse(tokenize(code), self.scope, self.global_scope)
            if self.validate:
                validate_ast(ast)
            if self.optimize:
                ast = optimize_ast(ast)
            return self.run(ast)

    def run(self, ast: Program) -> list[str]:
        """Evaluate top-level statements in order, echoing their results.

        A top-level break or return stops the program. Runaway recursion is
        reported as ResourceExhausted.
        """
        stream = self.echo if self.echo is not None else get_echo_stream()
        lines: list[str] = []

        with self._guarded():
            for stmt in ast.stmts:
                result = evaluate(stmt, self.env)
                if is_signal(result):
                    break
                if result is None or isinstance(stmt, SILENT_NODES):
                    continue

                line = render_value(result)
                logger.debug("Echo: %s", line)
                lines.append(line)
                if stream is not None:
                    stream.write(line + "\n")
        return lines


def run(ast: Program, echo: Optional[TextIO] = None) -> list[str]:
    """Evaluate a parsed program in a fresh global environment."""
    return Interpreter(echo=echo).run(ast)
