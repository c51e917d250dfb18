"""Runtime environment for Mankai.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups walk outward to the root; new
bindings always land in the innermost frame, so a binding made inside a
function call shadows, and never overwrites, one made further out.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mankai import LispValue
from mankai.errors import MankaiTypeError, MankaiUnboundSymbol
from mankai.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Mankai values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises MankaiTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MankaiTypeError(f"cannot bind {name!r}: expected a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises MankaiUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise MankaiUnboundSymbol(f"unbound symbol '{name}'")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
