from mankai import EvaluatorFn
from mankai import SExpression, LispValue
from mankai.errors import MankaiArityError, MankaiTypeError
from mankai.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise MankaiArityError("if!", 3, len(tail))

    cond = evaluate_fn(tail[0], env)
    # No truthiness: only a Boolean may select a branch
    if not isinstance(cond, bool):
        raise MankaiTypeError("condition must be boolean")

    if cond:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
