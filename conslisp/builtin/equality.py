from __future__ import annotations

from conslisp.errors import WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import primitive
from conslisp.types.sexpression import SExpression, is_equal


def is_eql(lhs: SExpression, rhs: SExpression) -> bool:
    """Identity of atoms; lists are only EQL when both are empty."""
    if isinstance(lhs, Atom) and isinstance(rhs, Atom):
        return lhs.eql(rhs)
    if isinstance(lhs, List) and isinstance(rhs, List):
        return lhs.is_empty() and rhs.is_empty()
    return False


def _compare(name: str, args: List, test) -> Atom:
    if args.length() < 2:
        raise WrongArgumentCountError(f"{name} expects at least two arguments")
    first, *others = args
    return Atom.create(all(test(first, other) for other in others))


@primitive("EQL", "EQ")
def eql(args: List) -> Atom:
    return _compare("EQL", args, is_eql)


@primitive("EQUAL")
def equal(args: List) -> Atom:
    """Structural equality: lists compare element by element."""
    return _compare("EQUAL", args, is_equal)


BINDINGS = [Binding.of(eql), Binding.of(equal)]
