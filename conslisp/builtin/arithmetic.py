"""Integer arithmetic and ordering.

Division truncates toward zero and the remainder takes the sign of the
dividend, so `(QUOTIENT -7 2)` is -3 and `(REMAINDER -7 2)` is -1.
"""

from __future__ import annotations

import math
import operator
from functools import reduce

from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import primitive


def _integers(name: str, args: List) -> list[int]:
    if args.is_empty():
        raise WrongArgumentCountError(f"{name} expects at least one argument")
    values = []
    for arg in args:
        if not isinstance(arg, Atom):
            raise EvaluationError(f"Arguments to {name} must be numbers: received {arg}")
        values.append(arg.to_int())
    return values


def _quotient(a: int, b: int) -> int:
    if b == 0:
        raise EvaluationError("Arithmetic exception: / by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _remainder(a: int, b: int) -> int:
    if b == 0:
        raise EvaluationError("Arithmetic exception: / by zero")
    return a - b * _quotient(a, b)


@primitive("PLUS", "+")
def plus(args: List) -> Atom:
    return Atom.create(sum(_integers("PLUS", args)))


@primitive("MINUS", "-")
def minus(args: List) -> Atom:
    """With one argument, its negation; otherwise the first minus the rest."""
    values = _integers("MINUS", args)
    if len(values) == 1:
        return Atom.create(-values[0])
    return Atom.create(reduce(operator.sub, values))


@primitive("TIMES", "*")
def times(args: List) -> Atom:
    return Atom.create(math.prod(_integers("TIMES", args)))


@primitive("QUOTIENT", "/")
def quotient(args: List) -> Atom:
    return Atom.create(reduce(_quotient, _integers("QUOTIENT", args)))


@primitive("REMAINDER", "%")
def remainder(args: List) -> Atom:
    return Atom.create(reduce(_remainder, _integers("REMAINDER", args)))


@primitive("<", "LESSP")
def less_than(args: List) -> Atom:
    values = _integers("<", args)
    return Atom.create(all(a < b for a, b in zip(values, values[1:])))


@primitive(">", "GREATERP")
def greater_than(args: List) -> Atom:
    values = _integers(">", args)
    return Atom.create(all(a > b for a, b in zip(values, values[1:])))


BINDINGS = [
    Binding.of(fn)
    for fn in (plus, minus, times, quotient, remainder, less_than, greater_than)
]
