from conslisp.errors import EvaluationError
from conslisp.types.atom import Atom
from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression, is_true


@primitive("COND", flags=FunctionFlags.SPECIAL | FunctionFlags.REENTRANT)
def cond_form(args: List, env, evaluator) -> SExpression:
    """(COND (test expr...)...): the value of the first clause whose test holds.

    A clause with no expressions yields its test value. When no clause
    matches the result is NIL.
    """
    for clause in args:
        if not isinstance(clause, List) or clause.is_empty():
            raise EvaluationError(f"COND clause must be a non-empty list: received {clause}")
        value = evaluator.evaluate(clause.car())
        if is_true(value):
            for expr in clause.cdr():
                value = evaluator.evaluate(expr)
            return value
    return Atom.NIL
