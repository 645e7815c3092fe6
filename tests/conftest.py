import numpy as np
import pytest

from mlisp.builtin import build_namespace, build_root_environment
from mlisp.interpreter import Interpreter

# Every fixture builds its own namespace around a seeded generator, so
# randmat/randmatf draw the same numbers on every run and no state leaks
# between tests.


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def env(rng):
    """Fresh root environment with builtins loaded."""
    return build_root_environment(build_namespace(rng))


@pytest.fixture
def interp(rng):
    return Interpreter(build_namespace(rng))


@pytest.fixture
def run(interp):
    """Evaluate source text in a shared session and return the last value."""
    return interp.eval
