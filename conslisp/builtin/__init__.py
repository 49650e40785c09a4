"""Primitive library.

Every module here exposes BINDINGS, a list of Binding objects. PROVIDERS is
the default set loaded into an Environment's core frame at startup.
"""

from conslisp.builtin import arithmetic, collections, equality, lang, logic, predicates
from conslisp.evaluation import special_forms

PROVIDERS = (
    lang.BINDINGS,
    special_forms.BINDINGS,
    arithmetic.BINDINGS,
    equality.BINDINGS,
    collections.BINDINGS,
    predicates.BINDINGS,
    logic.BINDINGS,
)
