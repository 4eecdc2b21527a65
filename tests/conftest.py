import pytest

from slang.evaluation.evaluator import evaluate
from slang.interpreter import Interpreter
from slang.reader.parser import parse
from slang.types.frame import FrameStack


@pytest.fixture
def stack():
    return FrameStack()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def ev(stack):
    """Parse and evaluate one expression against a fresh frame stack."""
    def _ev(source):
        return evaluate(parse(source), stack)
    return _ev
