from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import FunctionFlags, primitive
from conslisp.types.sexpression import SExpression
from conslisp.types.user_function import UserFunction


@primitive("DEFUN", flags=FunctionFlags.SPECIAL | FunctionFlags.DEFINING)
def defun_form(args: List, env) -> SExpression:
    """(DEFUN name (params...) body) defines a user function and returns its name."""
    if args.length() != 3:
        raise WrongArgumentCountError("DEFUN expects a name, a parameter list and a body")
    name, formals, body = args
    if not isinstance(name, Atom):
        raise EvaluationError(f"Function name must be an atom: received {name}")
    env.add_user_binding(Binding.of(UserFunction(str(name), formals, body)))
    return name
