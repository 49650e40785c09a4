from __future__ import annotations

from typing import TYPE_CHECKING

from conslisp.errors import EvaluationError, WrongArgumentCountError
from conslisp.reader.grammar import is_legal_name
from conslisp.types.atom import Atom
from conslisp.types.binding import Binding
from conslisp.types.cons_list import List
from conslisp.types.function import Function, FunctionFlags

if TYPE_CHECKING:
    from conslisp.evaluation.evaluator import Evaluator
    from conslisp.types.environment import Environment
    from conslisp.types.sexpression import SExpression


class UserFunction(Function):
    """A function defined with DEFUN.

    Calling it binds each formal parameter to its argument in the scope the
    evaluator opened for the call, then evaluates the body there. Lookups
    from the body fall through to the caller's scopes (dynamic scoping).
    """

    def __init__(self, name: str, formals: SExpression, body: SExpression):
        if not is_legal_name(name):
            raise EvaluationError(f"'{name}' is not a legal function name")
        if not isinstance(formals, List):
            raise EvaluationError("Formal parameters to a function must be a list")
        params: list[str] = []
        for formal in formals:
            text = str(formal)
            if not isinstance(formal, Atom) or not is_legal_name(text):
                raise EvaluationError(f"'{formal}' is not a legal parameter name")
            if text.lower() in (p.lower() for p in params):
                raise EvaluationError(f"Duplicate parameter name: {text}")
            params.append(text)
        super().__init__(name, FunctionFlags.REENTRANT)
        self.params: tuple[str, ...] = tuple(params)
        self.body = body

    def apply(
        self,
        args: List,
        env: Environment | None = None,
        evaluator: Evaluator | None = None,
    ) -> SExpression:
        if env is None and evaluator is not None:
            env = evaluator.env
        if env is None or evaluator is None:
            raise EvaluationError(f"{self.name} needs an environment and an evaluator")
        count = args.length()
        if count != len(self.params):
            raise WrongArgumentCountError(
                f"Expected {len(self.params)} arguments: got {count}"
            )
        for param, value in zip(self.params, args):
            env.add_binding(Binding(param, value))
        return evaluator.evaluate(self.body)

    def __repr__(self) -> str:
        return f"<UserFunction {self.name} ({' '.join(self.params)})>"
