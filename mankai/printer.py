"""Canonical textual rendering of Mankai values.

This is what the `to-string` native returns and what the REPL prints.
"""

from __future__ import annotations

import math

from mankai import LispValue
from mankai.types.callables import NativeFunction, SpecialForm
from mankai.types.user_function import UserFunction


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int() | float():
            return format_number(value)
        case str():
            return value
        case list():
            return "(" + " ".join(to_string(v) for v in value) + ")"
        case NativeFunction():
            return "<native function>"
        case SpecialForm():
            return "<special form>"
        case UserFunction():
            return "<user-defined function>"
    return str(value)
