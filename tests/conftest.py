import pytest

from conslisp.diagnostics import Diagnostics
from conslisp.evaluation.evaluator import Evaluator
from conslisp.interpreter import Interpreter
from conslisp.reader.parser import parse
from conslisp.types.environment import Environment


@pytest.fixture
def diagnostics():
    return Diagnostics()


@pytest.fixture
def env(diagnostics):
    """Fresh environment with the builtin providers loaded."""
    return Environment(diagnostics=diagnostics)


@pytest.fixture
def evaluator(env):
    return Evaluator(env)


@pytest.fixture
def interp(diagnostics):
    return Interpreter(diagnostics=diagnostics)


@pytest.fixture
def run(evaluator):
    """Evaluate one complete form against the shared evaluator."""
    def _run(source):
        return evaluator.evaluate(parse(source))
    return _run
