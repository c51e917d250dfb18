from __future__ import annotations
import sys


class Symbol:
    """An identifier node in a syntax tree.

    Kept apart from str so that a string literal evaluates to itself while a
    symbol resolves through the environment.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
