from __future__ import annotations

from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import primitive
from conslisp.types.sexpression import SExpression


def _single(name: str, args: List) -> SExpression:
    count = args.length()
    if count != 1:
        raise WrongArgumentCountError(f"{name} expects one argument: got {count}")
    return args.car()


def _number(name: str, args: List) -> int:
    arg = _single(name, args)
    if not isinstance(arg, Atom) or not arg.is_number():
        raise EvaluationError(f"Argument to {name} must be a number: received {arg}")
    return arg.to_int()


@primitive("ATOM")
def atom(args: List) -> Atom:
    """T for an atom, and for the empty list, which is also the atom NIL."""
    arg = _single("ATOM", args)
    return Atom.create(isinstance(arg, Atom) or arg.is_empty())


@primitive("INTEGERP")
def integerp(args: List) -> Atom:
    arg = _single("INTEGERP", args)
    return Atom.create(isinstance(arg, Atom) and arg.is_number())


@primitive("MINUSP")
def minusp(args: List) -> Atom:
    return Atom.create(_number("MINUSP", args) < 0)


@primitive("PLUSP")
def plusp(args: List) -> Atom:
    return Atom.create(_number("PLUSP", args) > 0)


@primitive("ZEROP")
def zerop(args: List) -> Atom:
    return Atom.create(_number("ZEROP", args) == 0)


BINDINGS = [Binding.of(fn) for fn in (atom, integerp, minusp, plusp, zerop)]
