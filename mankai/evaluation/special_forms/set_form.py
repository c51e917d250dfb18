from mankai import EvaluatorFn
from mankai import SExpression, LispValue
from mankai.errors import MankaiArityError, MankaiTypeError
from mankai.types.symbol import Symbol
from mankai.types.environment import Environment


def bind_form(
    form_name: str,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (form_name name value)
    The name is taken literally; the binding always goes into the current frame.
    """
    if len(tail) != 2:
        raise MankaiArityError(form_name, 2, len(tail))
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MankaiTypeError(f"expected identifier as first argument to '{form_name}', got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.define(var_sym, value)

    return value


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! name value)"""
    return bind_form("set!", tail, env, evaluate_fn)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(define! name value), a synonym of set!"""
    return bind_form("define!", tail, env, evaluate_fn)
