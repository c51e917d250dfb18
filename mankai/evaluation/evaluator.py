"""Core evaluator for the Mankai interpreter.

A plain recursive tree walker. Dispatch on a form keys off the value its head
evaluates to, so special forms and natives keep working under any alias.
There is no tail-call elimination: runaway recursion surfaces as Python's
RecursionError and is not converted into a Mankai error.
"""

from __future__ import annotations

from mankai import SExpression, LispValue
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol
from mankai.types.callables import SpecialForm
from mankai.evaluation.apply import apply


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce one syntax tree node to a value under `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        case [head, *tail_args]:
            fn = evaluate(head, env)

            # Special forms receive the raw operand syntax.
            if isinstance(fn, SpecialForm):
                return fn(tail_args, env, evaluate)

            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

    # --- Atoms return as-is ---
    return expr
