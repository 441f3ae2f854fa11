"""Environment frames for flisp.

An Environment maps names to AST nodes and links to an `outer` frame. The same
type serves the parser (which only cares whether a name is declared) and the
interpreter (which stores bindings). Frames are written only by the evaluation
that created them; lookups walk outward.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from flisp.errors import UndefinedVariable
from flisp.types.nodes import Node


class Environment:
    """Hierarchical mapping from names to AST nodes."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Optional[Node]] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Optional[Node]) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        The parser declares parameters with a None value: the name exists but
        has no node yet.
        """
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def defined(self, name: str) -> bool:
        return self.find(name) is not None

    def lookup(self, name: str) -> Optional[Node]:
        """Look up the node bound to `name`.

        Raises UndefinedVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedVariable(f"Undefined variable {name}")
        return env.vars[name]

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
