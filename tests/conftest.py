import pytest

from artlang.evaluation.evaluator import root_environment, run
from artlang.reader.parser import parse
from artlang.surface import RecordingSurface
from artlang.types.result import Ok


@pytest.fixture
def surface():
    """Fresh 300x300 recording surface for each test."""
    return RecordingSurface(width=300, height=300)


@pytest.fixture
def env(surface):
    """Root environment seeded with width/height, drawing onto `surface`."""
    return root_environment(surface)


@pytest.fixture
def run_source(surface):
    """Parse and run source text, returning the per-expression results."""
    def _run(source, width=None, height=None):
        parsed = parse(source)
        assert isinstance(parsed, Ok), f"parse failed: {parsed.value}"
        return run(parsed.value, surface, width, height)
    return _run


@pytest.fixture
def eval_one(run_source):
    """Run a single top-level expression and return its Result."""
    def _eval(source):
        results = run_source(source)
        assert len(results) == 1
        return results[0]
    return _eval
