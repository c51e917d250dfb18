from __future__ import annotations

import math
from typing import Any

from mankai.errors import MankaiArityError, MankaiTypeError
from mankai.printer import to_string as render
from mankai.types.callables import NativeFunction, SpecialForm
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol
from mankai.evaluation.special_forms import SPECIAL_FORMS

# -------------------------------
# Argument checks
# -------------------------------
def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def check_exact(name: str, args: list[Any], n: int) -> None:
    if len(args) != n:
        raise MankaiArityError(name, n, len(args))

def check_at_least(name: str, args: list[Any], n: int) -> None:
    if len(args) < n:
        raise MankaiArityError(name, n, len(args), at_least=True)

def check_numbers(name: str, args: list[Any]) -> None:
    for i, value in enumerate(args, start=1):
        if not is_number(value):
            raise MankaiTypeError(f"argument {i} of '{name}' is not a number: {render(value)}")

def check_booleans(name: str, args: list[Any]) -> None:
    for i, value in enumerate(args, start=1):
        if not isinstance(value, bool):
            raise MankaiTypeError(f"argument {i} of '{name}' is not a boolean: {render(value)}")

def check_non_empty_list(name: str, value: Any) -> None:
    if not isinstance(value, list) or not value:
        raise MankaiTypeError(f"'{name}' requires a non-empty list, got {render(value)}")

# -------------------------------
# Arithmetic
# -------------------------------
def float_div(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields inf, -inf or nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

def add(args: list[Any]) -> Any:
    check_at_least("+", args, 1)
    check_numbers("+", args)
    result = args[0]
    for x in args[1:]:
        result += x
    return result

def sub(args: list[Any]) -> Any:
    check_at_least("-", args, 1)
    check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result

def mul(args: list[Any]) -> Any:
    check_at_least("*", args, 1)
    check_numbers("*", args)
    result = args[0]
    for x in args[1:]:
        result *= x
    return result

def div(args: list[Any]) -> Any:
    check_at_least("/", args, 1)
    check_numbers("/", args)
    if len(args) == 1:
        return float_div(1.0, args[0])
    result = float(args[0])
    for x in args[1:]:
        result = float_div(result, x)
    return result

# -------------------------------
# Comparison and boolean logic
# -------------------------------
def is_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    # Callables and mismatched kinds never compare equal
    return False

def equals(args: list[Any]) -> bool:
    check_at_least("=", args, 2)
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])

def lt(args: list[Any]) -> bool:
    check_at_least("<", args, 2)
    check_numbers("<", args)
    return all(a < b for a, b in zip(args, args[1:]))

def gt(args: list[Any]) -> bool:
    check_at_least(">", args, 2)
    check_numbers(">", args)
    return all(a > b for a, b in zip(args, args[1:]))

def logical_and(args: list[Any]) -> bool:
    check_at_least("and", args, 1)
    check_booleans("and", args)
    return all(args)

def logical_or(args: list[Any]) -> bool:
    check_at_least("or", args, 1)
    check_booleans("or", args)
    return any(args)

def logical_not(args: list[Any]) -> bool:
    check_exact("not", args, 1)
    check_booleans("not", args)
    return not args[0]

# -------------------------------
# Type predicates
# -------------------------------
def is_bool(args: list[Any]) -> bool:
    check_exact("bool?", args, 1)
    return isinstance(args[0], bool)

def is_list(args: list[Any]) -> bool:
    check_exact("list?", args, 1)
    return isinstance(args[0], list)

def is_number_pred(args: list[Any]) -> bool:
    check_exact("number?", args, 1)
    return is_number(args[0])

def is_string(args: list[Any]) -> bool:
    check_exact("string?", args, 1)
    return isinstance(args[0], str)

# -------------------------------
# List operations
# -------------------------------
def car(args: list[Any]) -> Any:
    check_exact("car", args, 1)
    check_non_empty_list("car", args[0])
    return args[0][0]

def cdr(args: list[Any]) -> list[Any]:
    check_exact("cdr", args, 1)
    check_non_empty_list("cdr", args[0])
    return args[0][1:]

def cons(args: list[Any]) -> list[Any]:
    check_at_least("cons", args, 2)
    head, *rest = args
    if not isinstance(head, list):
        raise MankaiTypeError(f"first argument of 'cons' must be a list, got {render(head)}")
    return head + rest

def list_builtin(args: list[Any]) -> list[Any]:
    return list(args)

# -------------------------------
# Strings
# -------------------------------
def string_concat(args: list[Any]) -> str:
    check_at_least("string-concat", args, 1)
    for i, value in enumerate(args, start=1):
        if not isinstance(value, str):
            raise MankaiTypeError(f"argument {i} of 'string-concat' is not a string: {render(value)}")
    return "".join(args)

def to_string(args: list[Any]) -> str:
    check_exact("to-string", args, 1)
    return render(args[0])

# -------------------------------
# Registration
# -------------------------------
NATIVE_FUNCTIONS = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '<': lt,
    '>': gt,
    'and': logical_and,
    'or': logical_or,
    'not': logical_not,
    'bool?': is_bool,
    'list?': is_list,
    'number?': is_number_pred,
    'string?': is_string,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'list': list_builtin,
    'string-concat': string_concat,
    'to-string': to_string,
}

CONSTANTS = {
    'true': True,
    'false': False,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): SpecialForm(name, fn) for name, fn in SPECIAL_FORMS.items()})
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in NATIVE_FUNCTIONS.items()})
    env.update({Symbol(name): value for name, value in CONSTANTS.items()})


def new_global_environment() -> Environment:
    """A root environment with every special form, native and constant bound."""
    env = Environment()
    register(env)
    return env
