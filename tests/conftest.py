import io

import pytest

from flisp.interpreter import Interpreter
from flisp.reader.lexer import tokenize
from flisp.reader.parser import parse


@pytest.fixture
def echo():
    """In-memory echo channel."""
    return io.StringIO()


@pytest.fixture
def interp(echo):
    """Interpreter with a fresh global environment, echoing into `echo`."""
    return Interpreter(echo=echo)


@pytest.fixture
def run_source(interp):
    """Run source text and return the rendered echo lines."""
    def _run(source: str) -> list[str]:
        return interp.eval(source)
    return _run


@pytest.fixture
def parse_source():
    def _parse(source: str):
        return parse(tokenize(source))
    return _parse
