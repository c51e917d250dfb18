from __future__ import annotations

import logging

from mankai import LispValue, SExpression
from mankai.builtins import new_global_environment
from mankai.evaluation.evaluator import evaluate
from mankai.reader.parser import read
from mankai.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Mankai source against one session environment.
    Bindings persist across calls to eval().
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else new_global_environment()

    def eval_forms(self, exprs: list[SExpression]) -> LispValue:
        """Evaluate already-read expressions in order; return the last value."""
        result: LispValue = []
        for expr in exprs:
            logger.debug("evaluating %r", expr)
            result = evaluate(expr, self.env)
        return result

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order; return the last value.

        The whole of `code` is read before anything is evaluated, so a syntax
        error leaves the session untouched. Empty input evaluates to the empty
        list. Errors propagate unchanged.
        """
        return self.eval_forms(read(code))
