"""Application engine for Mankai.

Centralizes function application so the evaluator and any future caller share
one definition of how natives and user functions consume evaluated arguments.
"""

from mankai import LispValue, EvaluatorFn
from mankai.errors import MankaiNotCallable
from mankai.printer import to_string
from mankai.types.callables import NativeFunction
from mankai.types.user_function import UserFunction


def apply_user_function(
    fn: UserFunction, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a closure: check arity, bind formals, evaluate the body.

    The body runs in a fresh environment whose parent is the environment the
    closure was created in, never the caller's.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(fn: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a native or user-defined function to evaluated arguments.

    Anything else in head position raises MankaiNotCallable.
    """
    if isinstance(fn, UserFunction):
        return apply_user_function(fn, args, evaluate_fn)
    elif isinstance(fn, NativeFunction):
        return fn(args)
    else:
        raise MankaiNotCallable(f"'{to_string(fn)}' is not callable")
