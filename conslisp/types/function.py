"""Callable values of the language.

Every function carries flags that tell the evaluator how to call it:

    SPECIAL    arguments are passed unevaluated, as a raw List
    REENTRANT  the function also receives the Evaluator, so it can evaluate
               sub-forms itself (IF, COND, user functions)
    DEFINING   the function also receives the Environment, so it can add
               bindings (DEFUN, SETQ)

Flags combine: IF is SPECIAL | REENTRANT, DEFUN is SPECIAL | DEFINING.
"""

from __future__ import annotations

from enum import Flag
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from conslisp.evaluation.evaluator import Evaluator
    from conslisp.types.cons_list import List
    from conslisp.types.environment import Environment
    from conslisp.types.sexpression import SExpression


class FunctionFlags(Flag):
    NONE = 0
    SPECIAL = 1
    REENTRANT = 2
    DEFINING = 4


class Function:
    """Base class for anything that can sit in operator position."""

    def __init__(
        self,
        name: str,
        flags: FunctionFlags = FunctionFlags.NONE,
        synonyms: Iterable[str] = (),
    ):
        self.name = name
        self.flags = flags
        self.synonyms: tuple[str, ...] = tuple(synonyms)

    @property
    def is_special(self) -> bool:
        return bool(self.flags & FunctionFlags.SPECIAL)

    @property
    def is_reentrant(self) -> bool:
        return bool(self.flags & FunctionFlags.REENTRANT)

    @property
    def is_defining(self) -> bool:
        return bool(self.flags & FunctionFlags.DEFINING)

    def apply(
        self,
        args: List,
        env: Environment | None = None,
        evaluator: Evaluator | None = None,
    ) -> SExpression:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Primitive(Function):
    """A function implemented in Python.

    The wrapped callable's signature follows the flags: `fn(args, env,
    evaluator)` when reentrant, `fn(args, env)` when defining, `fn(args)`
    otherwise.
    """

    def __init__(
        self,
        name: str,
        fn: Callable[..., SExpression],
        flags: FunctionFlags = FunctionFlags.NONE,
        synonyms: Iterable[str] = (),
    ):
        super().__init__(name, flags, synonyms)
        self.fn = fn
        self.__doc__ = fn.__doc__

    def apply(self, args, env=None, evaluator=None):
        if self.is_reentrant:
            return self.fn(args, env, evaluator)
        if self.is_defining:
            return self.fn(args, env)
        return self.fn(args)


def primitive(name: str, *synonyms: str, flags: FunctionFlags = FunctionFlags.NONE):
    """Decorator turning a plain function into a named Primitive."""

    def decorator(fn: Callable[..., SExpression]) -> Primitive:
        return Primitive(name, fn, flags, synonyms)

    return decorator
