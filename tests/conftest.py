"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizzer.store import QuizStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class ScriptedPresenter:
    """
    Presenter that answers prompts from a fixed script.

    Records every prompt label and every line shown. Raises EOFError once
    the script runs out, like a closed stdin.
    """

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts: list[str] = []
        self.defaults: list[str] = []
        self.lines: list[str] = []
        self.errors: list[str] = []
        self.banners: list[str] = []
        self._prompting = False

    async def prompt_for_text(self, label: str, default: str = "") -> str:
        assert not self._prompting, "prompt issued while another is pending"
        self._prompting = True
        try:
            self.prompts.append(label)
            self.defaults.append(default)
            if not self.answers:
                raise EOFError
            answer = self.answers.pop(0)
            return answer(label) if callable(answer) else answer
        finally:
            self._prompting = False

    def display_line(self, text: str) -> None:
        self.lines.append(text)

    def display_error(self, text: str) -> None:
        self.errors.append(text)

    def display_banner(self, text: str, style: str = "cyan") -> None:
        self.banners.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def presenter():
    return ScriptedPresenter()


@pytest.fixture
def sample_store():
    """Two-quiz store used throughout the examples."""
    return QuizStore([("2+2?", "4"), ("capital of France?", "Paris")])


@pytest.fixture
def capitals_store():
    return QuizStore.with_defaults()


@pytest.fixture
def rng():
    return random.Random(1234)
