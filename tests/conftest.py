"""Pytest configuration and shared fixtures for nanDeck parser tests."""

import sys
import os
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent))

from nandeck_parser import parse, parse_with_diagnostics

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_addoption(parser):
    parser.addoption(
        "--samples-dir",
        action="store",
        default=os.environ.get("NANDECK_SAMPLES_DIR", ""),
        help="Path to nanDeck sample scripts directory",
    )


@pytest.fixture
def parse_snippet():
    """Parse script text and return the command list."""
    def _parse(text):
        return parse(text)
    return _parse


@pytest.fixture
def parse_snippet_with_warnings():
    """Parse script text and return (commands, warnings)."""
    def _parse(text):
        return parse_with_diagnostics(text)
    return _parse


@pytest.fixture
def full_example_text():
    """Text of the full card-template fixture script."""
    return (FIXTURES_DIR / "full_example.nde").read_text(encoding='utf-8')


@pytest.fixture
def samples_dir(request):
    """Path to the nanDeck samples directory."""
    return request.config.getoption("--samples-dir")


@pytest.fixture
def sample_files(samples_dir):
    """List of all sample file paths."""
    if not samples_dir or not Path(samples_dir).is_dir():
        pytest.skip(f"Samples dir not found: {samples_dir!r}")
    files = []
    for dirpath, _, filenames in os.walk(samples_dir):
        for fn in sorted(filenames):
            files.append(Path(dirpath) / fn)
    return files
