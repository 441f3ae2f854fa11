# Core type aliases for flisp's data model.
# Runtime values are plain Python objects (int, float, bool, list, str) plus the
# Null singleton; functions travel as their Func/Lambda syntax nodes.
#
# Naming guidance:
# - LispValue: use in evaluator/runtime code to denote evaluated host values.
# - EvaluatorFn: the evaluator callable handed to special-form handlers.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type: (node, env) -> LispValue
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Pipeline entry points. Imported last: the stage modules import the aliases above.
from flisp.reader.lexer import tokenize  # noqa: E402
from flisp.reader.parser import parse  # noqa: E402
from flisp.semantics.validator import validate  # noqa: E402
from flisp.semantics.optimizer import optimize  # noqa: E402
from flisp.interpreter import Interpreter, run  # noqa: E402

__all__ = [
    "LispValue",
    "EvaluatorFn",
    "tokenize",
    "parse",
    "validate",
    "optimize",
    "run",
    "Interpreter",
]
