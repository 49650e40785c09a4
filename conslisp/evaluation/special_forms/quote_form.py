from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression


@primitive("QUOTE", flags=FunctionFlags.SPECIAL)
def quote_form(args: List) -> SExpression:
    """(QUOTE x) returns x unevaluated; `'x` reads as the same form."""
    return args.car()
