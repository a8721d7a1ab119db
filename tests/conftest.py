import pytest

from sdscheme import scheme
from sdscheme.builtin.env_builtin import make_global_environment
from sdscheme.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter (global environment with builtins) for each test."""
    return Interpreter()


@pytest.fixture
def env():
    return make_global_environment()


@pytest.fixture
def shared():
    """The process-wide interpreter behind sdscheme.scheme, reset around each test."""
    scheme.reset()
    yield scheme
    scheme.reset()
