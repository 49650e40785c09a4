"""List: a light handle on a chain of list Cells.

A List keeps the chain's root cell plus a cached pointer to its last cell so
that `add` and `append` are O(1). The tail pointer is found lazily, because
most Lists are short-lived views created by car/cdr over an existing chain.

The empty list is a List whose root is a nil cell. By the NIL duality a
chain whose first slot holds NIL_REF reads as empty as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from conslisp.errors import TypeConversionError
from conslisp.types.atom import Atom
from conslisp.types.cell import Cell, Ref
from conslisp.types.nil import NIL_REF, NilType

if TYPE_CHECKING:
    from conslisp.types.sexpression import SExpression


class List:
    __slots__ = ("_root", "_end")

    def __init__(self, root: Cell):
        self._root: Cell = root
        self._end: Cell | None = None

    @staticmethod
    def create(ref: Ref | None = None) -> List:
        """Wrap `ref` as a List: None, NIL_REF or a nil cell give the empty list."""
        if ref is None or ref is NIL_REF:
            return List(Cell.create())
        if isinstance(ref, Cell):
            if ref.is_storage() and not ref.is_nil():
                raise TypeConversionError("Cannot create List from a storage cell")
            return List(ref) if not ref.is_storage() else List(Cell.create())
        raise TypeConversionError("Cannot create List from Atom")

    @property
    def root(self) -> Cell:
        return self._root

    def _tail(self) -> Cell:
        if self._end is None:
            cell = self._root
            while isinstance(cell.rest, Cell):
                cell = cell.rest
            self._end = cell
        return self._end

    # --- Building ---
    def add(self, item: SExpression) -> List:
        """Append one element: an atom as a plain node, a list as a sublist node."""
        if isinstance(item, List):
            cell = Cell.create_as_list(item.root)
        elif isinstance(item, Atom):
            cell = Cell.create(item)
        else:
            raise TypeConversionError(f"Can't add {item!r} to a List")
        if self.is_empty():
            self._root = cell
        else:
            self._tail().rest = cell
        self._end = cell
        return self

    def append(self, other: List) -> List:
        """Splice `other`'s elements onto the end of this list.

        The donor's cells are shared, not copied: after this call both lists
        end in the same cells, and a later add() on this list writes into the
        donor's last cell. Pass `other.copy()` when the donor must stay intact.
        """
        if other.is_empty():
            return self
        if self.is_empty():
            self._root = other.root
        else:
            self._tail().rest = other.root
        self._end = other._tail()
        return self

    def copy(self) -> List:
        """A new chain of top-level cells; element values (and sublists) are shared."""
        result = List.create()
        if self.is_empty():
            return result
        ref = self._root
        while isinstance(ref, Cell):
            cell = Cell(ref.first, NIL_REF)
            if result.is_empty():
                result._root = cell
            else:
                result._tail().rest = cell
            result._end = cell
            ref = ref.rest
        return result

    # --- Access ---
    def is_empty(self) -> bool:
        return self._root.is_nil()

    def is_nil(self) -> bool:
        return self.is_empty()

    def is_atom(self) -> bool:
        return False

    def is_list(self) -> bool:
        return True

    def to_atom(self) -> Atom:
        raise TypeConversionError("Can't convert List to Atom")

    def to_list(self) -> List:
        return self

    def car(self) -> SExpression:
        return _element(self._root.first)

    def cdr(self) -> List:
        ref = self._root.rest
        if isinstance(ref, Cell):
            return List(ref)
        return List.create()

    def cadr(self) -> SExpression:
        return self.cdr().car()

    def endp(self) -> bool:
        return not isinstance(self._root.rest, Cell)

    def __iter__(self) -> Iterator[SExpression]:
        if self.is_empty():
            return
        ref = self._root
        while isinstance(ref, Cell):
            yield _element(ref.first)
            ref = ref.rest

    def length(self) -> int:
        """Number of top-level elements."""
        if self.is_empty():
            return 0
        count = 0
        ref = self._root
        while isinstance(ref, Cell):
            count += 1
            ref = ref.rest
        return count

    def size(self) -> int:
        """Number of atoms reachable through this list and all of its sublists."""
        count = 0
        for element in self:
            count += element.size() if isinstance(element, List) else 1
        return count

    def dotted(self) -> str:
        return str(self._root)

    def __str__(self) -> str:
        from conslisp.types.ptree import PTree
        return PTree(self._root).unparse()

    def __repr__(self) -> str:
        return f"List{self}"


def _element(ref: Ref) -> SExpression:
    match ref:
        case NilType():
            return List.create()
        case Atom():
            return ref
        case Cell():
            return List.create(ref)
    raise TypeConversionError(f"Don't know how to read element {ref!r}")
