"""Special forms: functions that receive their arguments unevaluated.

Each handler is a Primitive flagged SPECIAL; the evaluator passes it the raw
argument list and, when REENTRANT, itself, so the form decides what to
evaluate and when.
"""

from conslisp.types.binding import Binding
from conslisp.evaluation.special_forms.quote_form import quote_form
from conslisp.evaluation.special_forms.if_form import if_form
from conslisp.evaluation.special_forms.defun_form import defun_form
from conslisp.evaluation.special_forms.setq_form import setq_form
from conslisp.evaluation.special_forms.cond_form import cond_form
from conslisp.evaluation.special_forms.expect_form import expect_form

SPECIAL_FORMS = [
    quote_form,
    if_form,
    defun_form,
    setq_form,
    cond_form,
    expect_form,
]

BINDINGS = [Binding.of(form) for form in SPECIAL_FORMS]
