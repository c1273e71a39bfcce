"""Pytest configuration and fixtures for buddybot tests."""

import tempfile
from pathlib import Path
from typing import Iterator

import pytest

from buddybot.analyzer import DocumentAnalyzer
from buddybot.config import Config
from buddybot.emotion import EmotionSelector


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_source() -> str:
    """Small module with no errors or warnings."""
    return '''def greet(name):
    return "Hello, " + name


class Calculator:
    def add(self, a, b):
        return a + b
'''


@pytest.fixture
def sample_python_file(temp_dir: Path, clean_source: str) -> Path:
    """Create a sample Python file for testing."""
    file_path = temp_dir / "sample.py"
    file_path.write_text(clean_source)
    return file_path


@pytest.fixture
def broken_python_file(temp_dir: Path) -> Path:
    file_path = temp_dir / "broken.py"
    file_path.write_text("def foo(\n    print(1)\n")
    return file_path


@pytest.fixture
def emotions() -> list:
    """Collects (emotion, reason) pairs sent to the listener."""
    return []


@pytest.fixture
def analyzer(emotions: list) -> DocumentAnalyzer:
    selector = EmotionSelector(lambda emotion, reason: emotions.append((emotion, reason)))
    return DocumentAnalyzer(selector=selector)


@pytest.fixture
def sample_config(temp_dir: Path) -> Config:
    """Create a sample Config object for testing."""
    return Config(
        project_root=temp_dir,
        config_dict={
            "max_line_length": 80,
            "complexity_threshold": 5,
            "reveal_on_update": False,
            "hydration_interval_minutes": 45,
            "rules": {"TODO-NOTE": "OFF"},
        },
    )


@pytest.fixture
def pyproject_toml(temp_dir: Path) -> Path:
    """Create a sample pyproject.toml file."""
    config_path = temp_dir / "pyproject.toml"
    config_path.write_text(
        """[tool.buddybot]
max_line_length = 100
reveal_on_update = false

[tool.buddybot.rules]
TRAILING-WHITESPACE = "OFF"
LINE-TOO-LONG = "BLOCK"
"""
    )
    return config_path
