import pytest

from wahlberg.interpreter import Interpreter
from wahlberg.types.environment import Environment

# Every test starts from the default configuration: a WAHLBERG_OVERFLOW set in
# the developer's shell must not leak into the results. Tests that exercise
# configuration set it explicitly with monkeypatch.


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    monkeypatch.delenv("WAHLBERG_OVERFLOW", raising=False)


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh environment holding only the empty top-level scope."""
    return Environment()
