import pytest

from lemon.builtin.env_builtin import make_global_env
from lemon.interpreter import Interpreter
from lemon.reader.parser import parse
from lemon.evaluation.evaluator import evaluate_program


@pytest.fixture
def env():
    """Fresh top-level environment with builtins loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate source text against the `env` fixture and return the last value."""
    def _run(source: str):
        return evaluate_program(parse(source), env)
    return _run
