import pytest

from mankai import new_global_environment
from mankai.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with special forms and natives loaded."""
    return new_global_environment()


@pytest.fixture
def interp(env):
    """Interpreter session sharing the `env` fixture."""
    return Interpreter(env)
