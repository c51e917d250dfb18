"""Registry of special forms for the Mankai evaluator.

Maps canonical names to handlers that implement non-standard evaluation
rules. The global environment binds each handler, wrapped in a SpecialForm,
under its name; the evaluator recognises them by value, not by name.
"""

from mankai.evaluation.special_forms.set_form import set_form, define_form
from mankai.evaluation.special_forms.defun_form import defun_form
from mankai.evaluation.special_forms.lambda_form import lambda_form
from mankai.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "set!": set_form,
    "define!": define_form,
    "defun!": defun_form,
    "lambda!": lambda_form,
    "if!": if_form,
}
