"""Cons cells.

A Cell is a (first, rest) pair and the only aggregate storage unit. When
`rest` is present the cell is a list node: `first` holds the node's value
(an Atom, or the root Cell of a sublist) and `rest` holds the next Cell or
NIL_REF. A storage-only cell has no rest at all; it boxes a single atom and
is never part of a list.

`first` is never None: emptiness is the NIL_REF sentinel. A cell whose first
slot is NIL_REF is a "nil cell", which reads both as the atom NIL and as the
empty list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from conslisp.errors import TypeConversionError
from conslisp.types.atom import Atom
from conslisp.types.nil import NIL_REF, NilType

if TYPE_CHECKING:
    from conslisp.types.cons_list import List

# Every slot of the cons graph holds one of these.
Ref = Union[Atom, "Cell", NilType]


class Cell:
    __slots__ = ("_first", "_rest", "_storage")

    def __init__(self, first: Ref, rest: Ref | None = NIL_REF, storage: bool = False):
        if first is None:
            raise ValueError("Cell.first must be a Ref, not None")
        if storage:
            rest = None
        elif rest is None:
            raise ValueError("A list cell needs a rest Ref")
        self._first: Ref = first
        self._rest: Ref | None = rest
        self._storage = storage

    # --- Factories ---
    @staticmethod
    def create(value: Any = NIL_REF) -> Cell:
        """A list node (value . NIL). Python str/int/bool values become atoms."""
        return Cell(_as_ref(value), NIL_REF)

    @staticmethod
    def create_storage(value: Any) -> Cell:
        """A storage-only cell holding one atom (or NIL)."""
        ref = _as_ref(value)
        if isinstance(ref, Cell):
            raise TypeConversionError("Storage cells hold atoms, not lists")
        return Cell(ref, storage=True)

    @staticmethod
    def create_as_list(cell: Cell) -> Cell:
        """A list node whose value is the sublist rooted at `cell`: (cell . NIL)."""
        return Cell(cell, NIL_REF)

    # --- Slots ---
    @property
    def first(self) -> Ref:
        return self._first

    @first.setter
    def first(self, ref: Ref) -> None:
        if ref is None:
            raise ValueError("Cell.first must be a Ref, not None")
        self._first = ref

    @property
    def rest(self) -> Ref | None:
        return self._rest

    @rest.setter
    def rest(self, ref: Ref) -> None:
        if ref is None:
            raise ValueError("Cell.rest must be a Ref, not None")
        if self._storage:
            raise TypeConversionError("Storage-only cell has no rest")
        self._rest = ref

    # --- Classification ---
    def is_storage(self) -> bool:
        return self._storage

    def is_nil(self) -> bool:
        return self._first is NIL_REF

    def is_atom(self) -> bool:
        return self.is_nil() or (self._storage and isinstance(self._first, Atom))

    def is_list(self) -> bool:
        return self.is_nil() or isinstance(self._first, Cell)

    def to_atom(self) -> Atom:
        return Atom.from_ref(self._first)

    def to_list(self) -> List:
        from conslisp.types.cons_list import List
        return List.create(self._first)

    def __str__(self) -> str:
        return f"({self._first} . {self._rest})"

    def __repr__(self) -> str:
        return f"Cell{self}"


def _as_ref(value: Any) -> Ref:
    if value is NIL_REF or isinstance(value, (Atom, Cell)):
        return value
    return Atom.create(value)
