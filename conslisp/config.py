from __future__ import annotations
import os


# Defaults
_DEFAULT_MAX_DEPTH = 200


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Deepest form nesting the evaluator accepts (CONSLISP_MAX_DEPTH)."""
    return int_from_env('CONSLISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)
