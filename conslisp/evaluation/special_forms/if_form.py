from conslisp.errors import WrongArgumentCountError
from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression, is_true


@primitive("IF", flags=FunctionFlags.SPECIAL | FunctionFlags.REENTRANT)
def if_form(args: List, env, evaluator) -> SExpression:
    count = args.length()
    if count < 2 or count > 3:
        raise WrongArgumentCountError("IF expects two or three arguments")

    test, then, *otherwise = args
    # Only the chosen branch is evaluated
    if is_true(evaluator.evaluate(test)):
        return evaluator.evaluate(then)
    if otherwise:
        return evaluator.evaluate(otherwise[0])
    return List.create()
