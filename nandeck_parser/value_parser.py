"""Value parsers: turn a single payload field into a typed value.

Every parser trims its own input.  *directive* and *field* only feed the
error raised on failure.
"""

import re

from . import commands as cmd
from .parser_base import (
    MalformedLineError, MalformedNumberError, UnknownEnumValueError,
)

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

INT32 = (-2 ** 31, 2 ** 31 - 1)
UINT32 = (0, 2 ** 32 - 1)
UINT8 = (0, 2 ** 8 - 1)

LINK_SHEET_SEPARATOR = '!'


def parse_integer(token, directive='', field='', bounds=INT32):
    """Parse a decimal integer and check it against *bounds* (inclusive)."""
    text = token.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise MalformedNumberError(directive, field, token)
    value = int(text)
    low, high = bounds
    if not low <= value <= high:
        raise MalformedNumberError(directive, field, token)
    return value


def parse_numeric(token, directive='', field=''):
    """``'25%'`` -> ``Percentage(25)``, ``'25'`` -> ``Absolute(25)``."""
    text = token.strip()
    if text.endswith('%'):
        return cmd.Percentage(parse_integer(text[:-1], directive, field))
    return cmd.Absolute(parse_integer(text, directive, field))


def parse_bracket_name(token):
    text = token.strip()
    if text.startswith('['):
        text = text[1:]
    if text.endswith(']'):
        text = text[:-1]
    return text


def parse_quoted_path(token):
    return token.strip().strip('"')


def parse_enum(token, enum_cls, directive='', field=''):
    """Exact, case-sensitive match of the token against *enum_cls* keywords."""
    text = token.strip()
    try:
        return enum_cls(text)
    except ValueError:
        raise UnknownEnumValueError(directive, field, text) from None


def parse_color(token):
    return cmd.Color(token.strip().lower())


def parse_effect(token):
    return cmd.Effect(token.strip().lower())


def parse_link(token):
    """Split a link reference into ``(file, sheet)``.

    ``"file!sheet"`` gives ``('file', 'sheet')`` and ``"file"`` gives
    ``('file', None)``.  More than one ``!`` is rejected.
    """
    text = token.strip()
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    parts = text.split(LINK_SHEET_SEPARATOR)
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    raise MalformedLineError(token)
