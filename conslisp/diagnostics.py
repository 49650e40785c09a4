"""Diagnostics sink for the interpreter core.

The core never writes to stdout or stderr. Anything worth telling a user
that is not an error of the current form (a core binding overwritten during
bootstrap, a failed EXPECT) is handed to a Diagnostics instance, which keeps
the message and forwards it to the `conslisp` logger. Front ends read the
recorded messages or attach their own logging handlers.
"""

from __future__ import annotations

import logging


class Diagnostics:
    """Records warnings and errors and forwards them to `logging`."""

    __slots__ = ("warnings", "errors", "logger")

    def __init__(self, logger: logging.Logger | None = None):
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.logger = logger if logger is not None else logging.getLogger("conslisp")

    def warning(self, message: str) -> None:
        self.warnings.append(message)
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.logger.error(message)

    def clear(self) -> None:
        self.warnings.clear()
        self.errors.clear()

    def __len__(self) -> int:
        return len(self.warnings) + len(self.errors)

    def __repr__(self) -> str:
        return f"<Diagnostics warnings={len(self.warnings)} errors={len(self.errors)}>"
