from mankai import EvaluatorFn
from mankai import SExpression, LispValue
from mankai.errors import MankaiArityError, MankaiTypeError
from mankai.types.environment import Environment
from mankai.types.symbol import Symbol
from mankai.types.user_function import UserFunction


def parse_formals(form_name: str, params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a (possibly empty) list of Symbols."""
    if not isinstance(params, list):
        raise MankaiTypeError(f"'{form_name}' expects a parameter list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MankaiTypeError(f"'{form_name}' parameter names must be symbols, got {p!r}")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda! (params) body): an anonymous closure over the current env."""
    if len(tail) != 2:
        raise MankaiArityError("lambda!", 2, len(tail))

    params, body = tail
    return UserFunction(parse_formals("lambda!", params), body, env)
