"""Interpreter-provided callables.

Both kinds are ordinary values: they live in the environment under a name,
can be rebound to other names, and keep their behaviour when they are.
"""

from __future__ import annotations

from typing import Callable

from mankai import LispValue, SExpression


class NativeFunction:
    """A primitive called with already-evaluated arguments: fn(args)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<native function {self.name}>"


class SpecialForm:
    """A form called with raw operand syntax: fn(tail, env, evaluate_fn).

    The handler decides which operands to evaluate, and in what order.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, tail: list[SExpression], env, evaluate_fn) -> LispValue:
        return self.fn(tail, env, evaluate_fn)

    def __repr__(self) -> str:
        return f"<special form {self.name}>"
