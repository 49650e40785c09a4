from conslisp.errors import WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression, is_equal


@primitive("EXPECT", flags=FunctionFlags.SPECIAL | FunctionFlags.REENTRANT)
def expect_form(args: List, env, evaluator) -> SExpression:
    """(EXPECT actual expected) for in-language tests: T when EQUAL, else F.

    A mismatch is reported as a warning on the environment's diagnostics.
    """
    if args.length() != 2:
        raise WrongArgumentCountError("EXPECT expects an expression and an expected value")
    actual = evaluator.evaluate(args.car())
    expected = evaluator.evaluate(args.cadr())
    if is_equal(actual, expected):
        return Atom.T
    env.diagnostics.warning(f"Expected {expected}, got {actual}")
    return Atom.F
