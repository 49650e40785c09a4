"""Layered bindings for the evaluator.

Frames are plain dicts keyed by lower-cased name:

    frame 0      core: primitives, filled from binding providers then sealed
    frame 1      user: DEFUN and SETQ results
    frame 2..n   dynamic scopes, one per function invocation

Lookup walks innermost to frame 0 and the first match wins. Core names can
never be rebound, neither by the user frame nor by a dynamic scope, so a
core lookup always returns the primitive.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterable, Iterator

from conslisp.diagnostics import Diagnostics
from conslisp.errors import EvaluationError
from conslisp.types.binding import Bindable, Binding, BindingProvider

CORE_FRAME = 0
USER_FRAME = 1


class Environment:
    __slots__ = ("frames", "diagnostics", "_sealed")

    def __init__(
        self,
        providers: Iterable[BindingProvider] | None = None,
        diagnostics: Diagnostics | None = None,
    ):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.frames: list[dict[str, Bindable]] = [{}]
        self._sealed = False
        if providers is None:
            from conslisp.builtin import PROVIDERS as providers
        for provider in providers:
            for binding in provider:
                self.register(binding)
        self._sealed = True
        self.frames.append({})

    # --- Core and user frames ---
    def register(self, binding: Binding) -> None:
        """Add a core binding. Only valid while the environment is being built."""
        if self._sealed:
            raise EvaluationError("Core bindings can only be registered at startup")
        core = self.frames[CORE_FRAME]
        for name in binding.names():
            key = name.lower()
            if key in core:
                self.diagnostics.warning(f"Binding for '{name}' overwritten")
            core[key] = binding.bindable

    def add_user_binding(self, binding: Binding) -> None:
        core = self.frames[CORE_FRAME]
        for name in binding.names():
            if name.lower() in core:
                raise EvaluationError(f"Binding '{name}' already defined")
        user = self.frames[USER_FRAME]
        for name in binding.names():
            user[name.lower()] = binding.bindable

    def is_defined(self, name: str) -> bool:
        return self.get_binding(name) is not None

    def is_core_binding(self, name: str) -> bool:
        return name.lower() in self.frames[CORE_FRAME]

    # --- Dynamic scopes ---
    @property
    def scope_count(self) -> int:
        return len(self.frames) - 2

    def start_scope(self) -> None:
        self.frames.append({})

    def end_scope(self) -> None:
        if self.scope_count == 0:
            raise EvaluationError("Scope index underflow")
        self.frames.pop()

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Open a dynamic scope for the duration of the block, closing it on any exit."""
        self.start_scope()
        try:
            yield self
        finally:
            self.end_scope()

    def add_binding(self, binding: Binding) -> None:
        """Bind a name in the innermost dynamic scope."""
        if self.scope_count == 0:
            raise EvaluationError(f"No active scope to add binding '{binding.name}' to")
        for name in binding.names():
            key = name.lower()
            if key in self.frames[CORE_FRAME] or key in self.frames[USER_FRAME]:
                raise EvaluationError(f"Binding '{name}' already defined")
        frame = self.frames[-1]
        for name in binding.names():
            frame[name.lower()] = binding.bindable

    def get_binding(self, name: str) -> Bindable | None:
        key = name.lower()
        for frame in reversed(self.frames):
            if key in frame:
                return frame[key]
        return None

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<Environment core={len(self.frames[CORE_FRAME])}")
            buffer.write(f" user={len(self.frames[USER_FRAME])}")
            buffer.write(f" scopes={self.scope_count}>")
            return buffer.getvalue()
