# tests/conftest.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the truth tree tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common premise sets and a scripted console for session tests
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import tableau
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def modus_tollens_premises():
    """Premises of a valid argument with its conclusion negated.

    Returns:
        List[str]: ``P -> Q``, ``~Q`` and ``~~P``; every branch closes
    """
    return ["(if P Q)", "(not Q)", "(not (not P))"]


@pytest.fixture
def consistent_premises():
    """Premises with a model (P true, Q false).

    Returns:
        List[str]: Premises whose tree stays open
    """
    return ["(or P Q)", "(not Q)"]


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console_factory():
    """Build a ScriptedConsole from a list of answers."""
    return ScriptedConsole
