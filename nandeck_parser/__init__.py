"""nandeck_parser - a line-oriented parser for nanDeck card layout scripts."""

from .lexer import Lexer
from .parser import Parser
from .parser_base import (
    NanDeckParseError, UnknownDirectiveError, UnknownEnumValueError,
    MalformedNumberError, MissingFieldError, MalformedLineError,
)
from .visitor import collect_visual_blocks
from . import commands as cmd


def parse(text):
    """Parse script text and return the list of commands in line order.

    Raises a ``NanDeckParseError`` subclass on the first malformed line.
    """
    return parse_with_diagnostics(text)[0]


def parse_with_diagnostics(text):
    """Parse script text and return ``(commands, warnings)``.

    Warnings report input the parser accepted but partly ignored, such as
    extra payload fields or text after a second ``=``.
    """
    lexer = Lexer(text)
    parser = Parser(lexer.tokens())
    commands = parser.parse()
    return commands, parser.warnings


class ValidationResult:
    """Result of script validation, containing validity status and diagnostics."""

    __slots__ = ('valid', 'errors', 'warnings', 'commands')

    def __init__(self, valid, errors=None, warnings=None, commands=None):
        self.valid = valid
        self.errors = errors or []
        self.warnings = warnings or []
        self.commands = commands or []

    def __bool__(self):
        return self.valid

    def __repr__(self):
        if self.valid:
            return "ValidationResult(valid=True)"
        return f"ValidationResult(valid=False, errors={self.errors!r})"


def validate_deck(text):
    """Validate whether *text* is a well-formed layout script.

    Beyond parsing, every VISUAL must be closed by an ENDVISUAL before the
    next VISUAL starts.  ``parse`` itself does not check this.
    """
    errors = []

    # 1. Empty / whitespace-only content is not a script.
    if not text or not text.strip():
        errors.append("Script is empty or contains only whitespace")
        return ValidationResult(False, errors)

    # 2. Parsing.
    try:
        commands, warnings = parse_with_diagnostics(text)
    except NanDeckParseError as exc:
        errors.append(f"Parse error: {exc}")
        return ValidationResult(False, errors)

    if not commands:
        errors.append("Script contains no commands")
        return ValidationResult(False, errors, warnings)

    # 3. Visual block structure.
    errors.extend(collect_visual_blocks(commands).problems)
    if errors:
        return ValidationResult(False, errors, warnings, commands)

    return ValidationResult(True, warnings=warnings, commands=commands)


def is_valid_deck(text):
    """Return ``True`` if *text* is a valid layout script, ``False`` otherwise."""
    return validate_deck(text).valid
