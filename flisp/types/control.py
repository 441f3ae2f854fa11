"""Control-flow signals returned (never raised) by `break` and `return`.

Blocks, loops and call forms check evaluation results for these markers and
react to them; everything else passes them through unchanged.
"""

from __future__ import annotations

from flisp import LispValue


class BreakSignal:
    __slots__ = ()

    def __repr__(self):
        return "<break>"


BREAK = BreakSignal()


class ReturnValue:
    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self):
        return f"<return {self.value!r}>"


def is_signal(value: LispValue) -> bool:
    return value is BREAK or isinstance(value, ReturnValue)
