from __future__ import annotations

from typing import Iterable, Union

from conslisp.types.atom import Atom
from conslisp.types.cons_list import List
from conslisp.types.function import Function

# What a name can be bound to: a function, or an evaluated value.
Bindable = Union[Function, Atom, List]

# A provider is any iterable of bindings; each builtin module exposes one as BINDINGS.
BindingProvider = Iterable["Binding"]


class Binding:
    __slots__ = ("name", "bindable", "synonyms")

    def __init__(self, name: str, bindable: Bindable, synonyms: Iterable[str] = ()):
        self.name = name
        self.bindable = bindable
        self.synonyms: tuple[str, ...] = tuple(synonyms)

    @staticmethod
    def of(fn: Function) -> Binding:
        """Bind a function under its own name and synonyms."""
        return Binding(fn.name, fn, fn.synonyms)

    def names(self) -> tuple[str, ...]:
        return (self.name, *self.synonyms)

    def __repr__(self) -> str:
        return f"Binding({self.name!r}, {self.bindable!r})"
