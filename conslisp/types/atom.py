"""Atoms: the indivisible values of the cons graph.

An Atom is a tagged, immutable value. Conversions between variants are a
strict partial function:

    from \\ to   int          bool             str
    NUMBER       identity     nonzero -> T     decimal digits
    BOOLEAN      T -1, F 0    identity         "T" / "F"
    STRING       fails        non-empty -> T   identity
    SYMBOL       fails        fails            fails
    NIL          fails        F                "NIL"

Anything outside the table raises TypeConversionError. The singletons
Atom.NIL, Atom.T and Atom.F are reused everywhere.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from conslisp.errors import TypeConversionError
from conslisp.types.nil import NIL_REF

if TYPE_CHECKING:
    from conslisp.types.cons_list import List


class AtomType(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    NIL = "nil"


class Atom:
    __slots__ = ("type", "value")

    # Canonical instances, assigned below the class body.
    NIL: Atom
    T: Atom
    F: Atom

    def __init__(self, type: AtomType, value: Any):
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Atom is immutable")

    # --- Factories ---
    @staticmethod
    def create(value: Any) -> Atom:
        """Build an atom from a Python value: bool, int or str."""
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return Atom.T if value else Atom.F
        if isinstance(value, int):
            return Atom(AtomType.NUMBER, value)
        if isinstance(value, str):
            return Atom(AtomType.STRING, value)
        raise TypeConversionError(f"Can't create an atom from {value!r}")

    @staticmethod
    def symbol(name: str) -> Atom:
        return Atom(AtomType.SYMBOL, name)

    @staticmethod
    def from_ref(ref) -> Atom:
        if ref is NIL_REF:
            return Atom.NIL
        if isinstance(ref, Atom):
            return ref
        raise TypeConversionError(f"Ref is not an atom: {ref}")

    # --- Classification ---
    def is_symbol(self) -> bool:
        # NIL doubles as the "false" symbol in boolean contexts
        return self.type in (AtomType.SYMBOL, AtomType.NIL)

    def is_literal(self) -> bool:
        return self.type is not AtomType.SYMBOL

    def is_number(self) -> bool:
        return self.type is AtomType.NUMBER

    def is_nil(self) -> bool:
        return self.type is AtomType.NIL

    def is_atom(self) -> bool:
        return True

    def is_list(self) -> bool:
        return False

    # --- Conversions ---
    def to_int(self) -> int:
        match self.type:
            case AtomType.NUMBER:
                return self.value
            case AtomType.BOOLEAN:
                return -1 if self.value else 0
            case AtomType.STRING:
                raise TypeConversionError("Can't convert string literal to number")
            case AtomType.SYMBOL:
                raise TypeConversionError("Can't convert symbol to number")
        raise TypeConversionError(f"Can't convert {self.type.value} to number")

    def to_bool(self) -> bool:
        match self.type:
            case AtomType.NIL:
                return False
            case AtomType.NUMBER:
                return self.value != 0
            case AtomType.BOOLEAN:
                return self.value
            case AtomType.STRING:
                return self.value != ""
        raise TypeConversionError("Can't convert symbol to Boolean")

    def to_str(self) -> str:
        if self.type is AtomType.SYMBOL:
            raise TypeConversionError("Can't convert symbol to string literal")
        return str(self)

    def to_atom(self) -> Atom:
        return self

    def to_list(self) -> List:
        raise TypeConversionError("Can't convert Atom to List")

    # --- Equality ---
    def eql(self, other: Atom) -> bool:
        """Same variant and same payload; no coercion (0 and F differ)."""
        return self.type is other.type and self.value == other.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Atom) and self.eql(other)

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __str__(self) -> str:
        if self.type is AtomType.NIL:
            return "NIL"
        if self.type is AtomType.BOOLEAN:
            return "T" if self.value else "F"
        return str(self.value)

    def __repr__(self) -> str:
        return f"Atom({self.type.name}, {str(self)!r})"


Atom.NIL = Atom(AtomType.NIL, None)
Atom.T = Atom(AtomType.BOOLEAN, True)
Atom.F = Atom(AtomType.BOOLEAN, False)
