"""S-expressions: the values evaluation produces, an Atom or a List."""

from __future__ import annotations

from typing import Union

from conslisp.types.atom import Atom
from conslisp.types.cell import Cell, Ref
from conslisp.types.cons_list import List
from conslisp.types.nil import NilType

SExpression = Union[Atom, List]


def from_ref(ref: Ref) -> SExpression:
    """Read a Ref as a value: NIL (or a nil cell) is the atom NIL, a Cell a List."""
    match ref:
        case NilType():
            return Atom.NIL
        case Atom():
            return ref
        case Cell() if ref.is_nil():
            return Atom.NIL
        case Cell() if ref.is_storage():
            return ref.to_atom()
        case Cell():
            return List.create(ref)
    raise TypeError(f"Not a Ref: {ref!r}")


def is_true(sexp: SExpression) -> bool:
    """Truthiness: a non-empty list, or an atom whose boolean coercion holds."""
    if isinstance(sexp, List):
        return not sexp.is_empty()
    return sexp.to_bool()


def is_equal(lhs: SExpression, rhs: SExpression) -> bool:
    """EQUAL: identical atoms, or lists of equal length with equal elements."""
    if isinstance(lhs, Atom) and isinstance(rhs, Atom):
        return lhs.eql(rhs)
    if not (isinstance(lhs, List) and isinstance(rhs, List)):
        return False
    if lhs.is_empty() and rhs.is_empty():
        return True
    if lhs.length() != rhs.length():
        return False
    return all(is_equal(a, b) for a, b in zip(lhs, rhs))
