from conslisp.types.atom import Atom
from conslisp.types.binding import Binding

# T and F read as plain literals; binding them makes them evaluate to the
# canonical boolean atoms.
BINDINGS = [
    Binding("T", Atom.T),
    Binding("F", Atom.F),
]
