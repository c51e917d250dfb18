"""User-defined function (closure) representation for Mankai."""

from __future__ import annotations

from io import StringIO

from mankai import SExpression, LispValue
from mankai.errors import MankaiArityError
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol

ANONYMOUS = "anonymous function"


class UserFunction:
    """A closure built by defun! or lambda!: formals, body and captured env.

    The captured environment is held by reference, so bindings later added
    to it are visible from the body.
    """

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Environment,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env
        self.name: str | None = name

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else ANONYMOUS

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"(λ {self.display_name} (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write("))")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a fresh child of the captured env.

        Raises MankaiArityError unless the counts match exactly.
        """
        if len(args) != len(self.formals):
            raise MankaiArityError(self.display_name, len(self.formals), len(args))
        new_env = Environment(outer=self.env)
        for formal, value in zip(self.formals, args):
            new_env.define(formal, value)
        return new_env
