from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression


@primitive(
    "SETQ",
    flags=FunctionFlags.SPECIAL | FunctionFlags.REENTRANT | FunctionFlags.DEFINING,
)
def setq_form(args: List, env, evaluator) -> SExpression:
    """(SETQ name value) binds name in the user frame to the evaluated value."""
    if args.length() != 2:
        raise WrongArgumentCountError("SETQ expects a symbol and a value")
    name = args.car()
    if not isinstance(name, Atom) or name.is_number():
        raise EvaluationError(f"First argument to SETQ must be a symbol: received {name}")
    value = evaluator.evaluate(args.cadr())
    env.add_user_binding(Binding(str(name), value))
    return value
