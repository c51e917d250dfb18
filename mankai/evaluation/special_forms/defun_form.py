from mankai import EvaluatorFn
from mankai import SExpression, LispValue
from mankai.errors import MankaiArityError, MankaiTypeError
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol
from mankai.types.user_function import UserFunction
from mankai.evaluation.special_forms.lambda_form import parse_formals


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun! fname (params) body)
    Binds fname in the current frame before returning the function, so the
    body can call itself by name.
    """
    if len(tail) != 3:
        raise MankaiArityError("defun!", 3, len(tail))

    fname, params, body = tail
    if not isinstance(fname, Symbol):
        raise MankaiTypeError(f"expected function name as first argument to 'defun!', got {fname!r}")
    fn = UserFunction(parse_formals("defun!", params), body, env, name=str(fname))
    env.define(fname, fn)
    return fn
