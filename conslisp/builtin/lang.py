"""List primitives: CAR, CDR and CONS."""

from __future__ import annotations

from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import primitive
from conslisp.types.sexpression import SExpression


def single_list(name: str, args: List) -> List:
    """The one list argument of `name`, or the error explaining why there isn't one."""
    count = args.length()
    if count != 1:
        raise WrongArgumentCountError(f"{name} expects one argument: got {count}")
    arg = args.car()
    if not isinstance(arg, List):
        raise EvaluationError(f"Argument to {name} must be a list")
    return arg


@primitive("CAR")
def car(args: List) -> SExpression:
    return single_list("CAR", args).car()


@primitive("CDR")
def cdr(args: List) -> SExpression:
    return single_list("CDR", args).cdr()


@primitive("CONS")
def cons(args: List) -> SExpression:
    """Fold the arguments into a new list.

    Atoms become elements. The first list argument becomes an element
    itself when nothing precedes it, and every later list is spliced in, so
    `(CONS 1 '(2 3))` is `(1 2 3)` and `(CONS '(A) '(B))` is `((A) B)`.
    Empty lists contribute nothing.
    """
    if args.is_empty():
        raise WrongArgumentCountError("CONS expects at least one argument")
    result = List.create()
    for arg in args:
        if isinstance(arg, Atom):
            result.add(arg)
        elif arg.is_empty():
            continue
        elif result.is_empty():
            result.add(arg)
        else:
            # Copy so the bound value the argument came from is left intact
            result.append(arg.copy())
    return result


BINDINGS = [Binding.of(fn) for fn in (car, cdr, cons)]
