"""Shared test utility functions for nanDeck parser tests."""

import sys
from pathlib import Path
from collections import Counter

sys.path.insert(0, str(Path(__file__).parent.parent))

from nandeck_parser import parse, parse_with_diagnostics
from nandeck_parser.commands import Command


def parse_one(text: str) -> Command:
    """Parse text, assert exactly 1 command, return it."""
    commands = parse(text)
    assert len(commands) == 1, \
        f"Expected 1 command, got {len(commands)}: {[type(c).__name__ for c in commands]}"
    return commands[0]


def assert_command(command, expected_type, **field_checks):
    """Assert command type and optionally check field values."""
    assert isinstance(command, expected_type), \
        f"Expected {expected_type.__name__}, got {type(command).__name__}"
    for field, expected in field_checks.items():
        actual = getattr(command, field, None)
        assert actual == expected, \
            f"{field}: expected {expected!r}, got {actual!r}"


def count_command_types(commands) -> Counter:
    """Count commands by class name."""
    return Counter(type(c).__name__ for c in commands)


def collect_warnings(text: str) -> list:
    """Parse text and return only the warnings list."""
    _, warnings = parse_with_diagnostics(text)
    return warnings
