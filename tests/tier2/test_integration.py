"""Tier 2 integration tests: end-to-end parsing of whole scripts."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tests.helpers import count_command_types
from nandeck_parser import parse, parse_with_diagnostics, validate_deck
from nandeck_parser.commands import *

SAMPLES_DIR = os.environ.get("NANDECK_SAMPLES_DIR", "")


def _collect_samples():
    """Collect all sample files for parametrize."""
    files = []
    if not SAMPLES_DIR or not Path(SAMPLES_DIR).is_dir():
        return files
    for dirpath, _, filenames in os.walk(SAMPLES_DIR):
        for fn in sorted(filenames):
            files.append(Path(dirpath) / fn)
    return files


_ALL_SAMPLES = _collect_samples()
_SAMPLE_IDS = [f.name for f in _ALL_SAMPLES]


class TestScenarios:
    def test_unit(self):
        assert parse("UNIT= MM") == [Unit(MeasureUnit.MM)]

    def test_page(self):
        assert parse("PAGE=207,297, PORTRAIT") == [
            Page(width=207, height=297, orientation=Orientation.PORTRAIT)]

    def test_link(self):
        assert parse('LINK= "1SJdr!cards"') == [Link(file="1SJdr", sheet="cards")]

    def test_empty_document(self):
        assert parse("") == []
        assert parse("\n   \n") == []

    def test_only_comments(self):
        assert parse(";one\n; two\n;Имя") == []

    def test_indented_script(self):
        text = """
            UNIT= MM
            ;comment
            ENDVISUAL
        """
        assert parse(text) == [Unit(MeasureUnit.MM), EndVisual()]


class TestFullExample:
    def test_command_count(self, full_example_text):
        assert len(parse(full_example_text)) == 16

    def test_order(self, full_example_text):
        commands = parse(full_example_text)
        assert [type(c) for c in commands[:7]] == [
            LinkMulti, Link, Unit, Page, Border, Visual, Image]
        assert all(isinstance(c, TextFont) for c in commands[7:15])
        assert isinstance(commands[15], EndVisual)

    def test_type_counts(self, full_example_text):
        counts = count_command_types(parse(full_example_text))
        assert counts["TextFont"] == 8
        assert counts["Image"] == 1

    def test_header_values(self, full_example_text):
        commands = parse(full_example_text)
        assert commands[0] == LinkMulti('"Quantity"')
        assert commands[1] == Link(
            file="1SJdrYEP70GkcQ9vzmA7J-k4THJnsiQdGIxvZtUSJcwE", sheet="cards")
        assert commands[4] == Border(BorderType.RECTANGLE, Color("#000000"), 1)
        assert commands[5] == Visual(10, 10)

    def test_text_fields(self, full_example_text):
        commands = parse(full_example_text)
        names = [c.field_name for c in commands if isinstance(c, TextFont)]
        assert names == ["NAME", "LVL", "DAMAGE", "X", "HEALTH",
                         "BLOCK", "TRIGGER", "SPELL"]
        assert commands[7].color == Color("#cc9900")
        assert all(c.color == DEFAULT_TEXT_COLOR for c in commands[8:15])
        spell = commands[14]
        assert spell.top == Percentage(-12)
        assert spell.vertical_align is VerticalAlign.WW_BOTTOM

    def test_no_warnings(self, full_example_text):
        _, warnings = parse_with_diagnostics(full_example_text)
        assert warnings == []

    def test_is_valid(self, full_example_text):
        assert validate_deck(full_example_text)


@pytest.mark.skipif(not _ALL_SAMPLES, reason="No sample files found")
class TestSampleParsing:
    """Basic parsing assertions for every sample file."""

    @pytest.mark.parametrize("sample_path", _ALL_SAMPLES, ids=_SAMPLE_IDS)
    def test_parses_without_exception(self, sample_path):
        text = sample_path.read_text(encoding='utf-8', errors='replace')
        commands, _ = parse_with_diagnostics(text)
        assert commands is not None

    @pytest.mark.parametrize("sample_path", _ALL_SAMPLES, ids=_SAMPLE_IDS)
    def test_has_commands(self, sample_path):
        text = sample_path.read_text(encoding='utf-8', errors='replace')
        assert len(parse(text)) > 0
