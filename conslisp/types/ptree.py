from __future__ import annotations

from io import StringIO

from conslisp.types.cell import Cell, Ref


class PTree:
    """A parse tree: the Cell chain built by the parser for one form."""

    __slots__ = ("_root", "_end")

    def __init__(self, root: Cell | None = None):
        self._root: Cell = root if root is not None else Cell.create()
        # Last cell of the chain, where add() and add_list() attach. None until
        # something is added to a tree created empty.
        self._end: Cell | None = None if root is None else _last(root)

    @property
    def root(self) -> Cell:
        return self._root

    def is_empty(self) -> bool:
        return self._root.is_nil()

    def add(self, cell: Cell) -> None:
        """Extend the chain with `cell`; an empty tree adopts it as root."""
        if self._end is None:
            self._root = cell
        else:
            self._end.rest = cell
        self._end = cell

    def add_list(self, cell: Cell) -> None:
        """Extend the chain with a sublist node whose value is the list rooted at `cell`."""
        self.add(Cell.create_as_list(cell))

    def splice(self, cell: Cell) -> None:
        """Make the chain rooted at `cell` the rest of this one, as in `(A . (B C))`."""
        if cell.is_nil():
            return
        if self._end is None:
            raise ValueError("Cannot splice a tail onto an empty tree")
        self._end.rest = cell
        self._end = _last(cell)

    def unparse(self) -> str:
        """Rebuild canonical LISP text, e.g. `( + ( * 2 4 ) 3 )`."""
        if self._root.is_nil():
            return "NIL"
        if self._root.is_storage():
            return str(self._root.first)
        with StringIO() as buffer:
            buffer.write("(")
            ref: Ref = self._root
            while isinstance(ref, Cell):
                buffer.write(" ")
                buffer.write(_unparse_slot(ref.first))
                ref = ref.rest
            buffer.write(" )")
            return buffer.getvalue()

    def __str__(self) -> str:
        """Dotted-pair notation of the whole chain, e.g. `(+ . (1 . NIL))`."""
        return str(self._root)

    def __repr__(self) -> str:
        return f"<PTree {self.unparse()}>"


def _unparse_slot(ref: Ref) -> str:
    if isinstance(ref, Cell):
        return PTree(ref).unparse()
    return str(ref)


def _last(cell: Cell) -> Cell:
    if cell.is_storage():
        return cell
    while isinstance(cell.rest, Cell):
        cell = cell.rest
    return cell
