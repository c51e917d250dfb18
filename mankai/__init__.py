# Core type aliases for Mankai's data model.
# Values are plain Python objects: float for Number, str for String, bool for
# Boolean and list for List. Callables are the small wrapper classes in
# mankai.types. Syntax trees use the same types, with Symbol for identifiers.
#
# Naming guidance:
# - SExpression: syntactic forms produced by the reader.
# - LispValue:  evaluated runtime values.

from typing import Any, Callable

LispValue = Any
SExpression = Any

# Evaluator function type, passed into special forms and user functions
EvaluatorFn = Callable[..., LispValue]

from mankai.evaluation.evaluator import evaluate  # noqa: E402
from mankai.builtins import new_global_environment  # noqa: E402

__all__ = ["LispValue", "SExpression", "EvaluatorFn", "evaluate", "new_global_environment"]
