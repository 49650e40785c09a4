"""Recursive evaluator over the cons-cell graph.

A form is a Cell. Evaluating it follows four rules, in order:

1. A nil cell evaluates to the empty list.
2. If the first slot holds a Cell, that nested form is evaluated in its
   place (the remaining slots are ignored).
3. A number is self-evaluating.
4. Otherwise the atom's text names a function: its arguments are evaluated
   (unless it is special) and it is invoked in a fresh dynamic scope. With
   no function of that name the atom is a symbol: a bound value, else the
   literal itself, else an UndefinedSymbolError.

Arguments are evaluated left to right in the caller's scope. An atom in an
argument position is resolved as a value and never invoked.
"""

from __future__ import annotations

import logging

from conslisp.config import get_max_depth
from conslisp.errors import RecursionDepthError, UndefinedSymbolError
from conslisp.types.atom import Atom
from conslisp.types.cell import Cell, Ref
from conslisp.types.cons_list import List
from conslisp.types.environment import Environment
from conslisp.types.function import Function
from conslisp.types.nil import NilType
from conslisp.types.ptree import PTree
from conslisp.types.sexpression import SExpression

logger = logging.getLogger(__name__)


class Evaluator:
    def __init__(self, env: Environment | None = None, max_depth: int | None = None):
        self.env = env if env is not None else Environment()
        self.max_depth = max_depth if max_depth is not None else get_max_depth()
        self._depth = 0

    @property
    def depth(self) -> int:
        """Current form nesting; zero between top-level evaluations."""
        return self._depth

    def evaluate(self, expr: Cell | List | Atom | PTree | NilType) -> SExpression:
        match expr:
            case PTree():
                return self._evaluate_form(expr.root)
            case Cell():
                return self._evaluate_form(expr)
            case List():
                return self._evaluate_form(expr.root)
            case Atom():
                return self._resolve_atom(expr)
            case NilType():
                return List.create()
        raise TypeError(f"Cannot evaluate {expr!r}")

    def _evaluate_form(self, cell: Cell) -> SExpression:
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                raise RecursionDepthError(
                    f"Maximum evaluation depth of {self.max_depth} exceeded"
                )
            if cell.is_nil():
                return List.create()
            head = cell.first
            if isinstance(head, Cell):
                return self._evaluate_form(head)
            if head.is_number():
                return head
            bound = self.env.get_binding(str(head))
            if isinstance(bound, Function):
                return self._invoke(bound, cell.rest)
            return self._resolve_atom(head)
        except RecursionError as e:
            raise RecursionDepthError("Evaluation nested too deeply for the host stack") from e
        finally:
            self._depth -= 1

    def _invoke(self, fn: Function, rest: Ref | None) -> SExpression:
        if fn.is_special:
            args = List.create(rest) if isinstance(rest, Cell) else List.create()
        else:
            args = self._evaluate_args(rest)
        logger.debug("Invoking %s with %s", fn.name, args)
        with self.env.scope():
            if fn.is_reentrant:
                return fn.apply(args, self.env, self)
            if fn.is_defining:
                return fn.apply(args, self.env)
            return fn.apply(args)

    def _evaluate_args(self, rest: Ref | None) -> List:
        args = List.create()
        ref = rest
        while isinstance(ref, Cell):
            args.add(self._evaluate_element(ref.first))
            ref = ref.rest
        return args

    def _evaluate_element(self, ref: Ref) -> SExpression:
        match ref:
            case Cell():
                return self._evaluate_form(ref)
            case Atom():
                return self._resolve_atom(ref)
        return List.create()

    def _resolve_atom(self, atom: Atom) -> SExpression:
        if atom.is_number():
            return atom
        bound = self.env.get_binding(str(atom))
        if bound is not None and not isinstance(bound, Function):
            return bound
        if atom.is_literal():
            return atom
        raise UndefinedSymbolError(f"Unknown symbol: {atom}")
