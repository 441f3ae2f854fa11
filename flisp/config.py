from __future__ import annotations
import os
import sys
from typing import TextIO

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_ECHO = "stderr"

_ECHO_STREAMS = ("stderr", "stdout", "none")


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_recursion_limit() -> int:
    return int_from_env('FLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_echo_stream() -> TextIO | None:
    """Resolve the default echo side channel; None disables echoing."""
    name = os.environ.get('FLISP_ECHO', _DEFAULT_ECHO).strip().lower()
    if name not in _ECHO_STREAMS:
        name = _DEFAULT_ECHO
    if name == "none":
        return None
    # looked up at call time so pytest's capsys replacement is honoured
    return sys.stdout if name == "stdout" else sys.stderr
