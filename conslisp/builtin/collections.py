"""List construction and inspection: APPEND, ASSOC, LENGTH, LIST, SIZE."""

from __future__ import annotations

from conslisp.builtin.lang import single_list
from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import primitive
from conslisp.types.sexpression import SExpression, is_equal


@primitive("APPEND")
def append(args: List) -> SExpression:
    """Concatenate list arguments one level deep.

    A single atom argument is returned as is; an atom first argument
    followed by anything else is an error.
    """
    values = list(args)
    if not values:
        return List.create()
    if isinstance(values[0], Atom):
        if len(values) == 1:
            return values[0]
        raise EvaluationError(f"First argument to APPEND must be a list: received {values[0]}")
    result = List.create()
    for value in values:
        if isinstance(value, List):
            for element in value:
                result.add(element)
        else:
            result.add(value)
    return result


@primitive("ASSOC")
def assoc(args: List) -> SExpression:
    """(ASSOC key alist): the first element of alist whose car is EQUAL to key."""
    if args.length() < 2:
        raise WrongArgumentCountError("ASSOC expects a key and an association list")
    key = args.car()
    alist = args.cadr()
    if not isinstance(alist, List):
        raise EvaluationError(f"Second argument to ASSOC must be a list: received {alist}")
    for entry in alist:
        if not isinstance(entry, List) or entry.is_empty():
            raise EvaluationError(f"ASSOC expects a list of non-empty lists: found {entry}")
        if is_equal(key, entry.car()):
            return entry
    return Atom.NIL


@primitive("LENGTH")
def length(args: List) -> Atom:
    """Number of top-level elements."""
    return Atom.create(single_list("LENGTH", args).length())


@primitive("LIST")
def list_(args: List) -> List:
    return args


@primitive("SIZE")
def size(args: List) -> Atom:
    """Number of atoms in the list and all of its sublists."""
    return Atom.create(single_list("SIZE", args).size())


BINDINGS = [Binding.of(fn) for fn in (append, assoc, length, list_, size)]
