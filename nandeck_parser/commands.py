"""Command classes for parsed nanDeck layout scripts.

Every command is an immutable value object.  A parsed script is a plain
list of commands in source line order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ---- Enumerated keywords ----

class MeasureUnit(Enum):
    MM = 'MM'
    SM = 'SM'
    DM = 'DM'


class Orientation(Enum):
    PORTRAIT = 'PORTRAIT'
    ALBUM = 'ALBUM'


class BorderType(Enum):
    RECTANGLE = 'RECTANGLE'
    ROUNDED = 'ROUNDED'


class HorizontalAlign(Enum):
    LEFT = 'LEFT'
    CENTER = 'CENTER'
    RIGHT = 'RIGHT'


class VerticalAlign(Enum):
    TOP = 'TOP'
    CENTER = 'CENTER'
    BOTTOM = 'BOTTOM'
    # Word-wrap anchors, TEXTFONT only
    WW_TOP = 'WWTOP'
    WW_CENTER = 'WWCENTER'
    WW_BOTTOM = 'WWBOTTOM'

    @property
    def is_word_wrap(self):
        return self in (VerticalAlign.WW_TOP, VerticalAlign.WW_CENTER,
                        VerticalAlign.WW_BOTTOM)


# ---- Values ----

@dataclass(frozen=True)
class Numeric:
    """Signed integer coordinate, either absolute or percent of container."""
    value: int


@dataclass(frozen=True)
class Absolute(Numeric):
    pass


@dataclass(frozen=True)
class Percentage(Numeric):
    pass


@dataclass(frozen=True)
class Color:
    value: str


@dataclass(frozen=True)
class Effect:
    value: str


DEFAULT_TEXT_COLOR = Color('black')


# ---- Commands ----

class Command:
    """Base class for all commands."""

    def accept(self, visitor):
        """Double-dispatch: calls visitor.visit_<CommandType>(self)."""
        method_name = 'visit_' + type(self).__name__
        method = getattr(visitor, method_name, visitor.generic_visit)
        return method(self)


@dataclass(frozen=True)
class LinkMulti(Command):
    key: str


@dataclass(frozen=True)
class Link(Command):
    file: str
    sheet: Optional[str] = None


@dataclass(frozen=True)
class Unit(Command):
    unit: MeasureUnit


@dataclass(frozen=True)
class Page(Command):
    width: int
    height: int
    orientation: Orientation


@dataclass(frozen=True)
class Border(Command):
    type: BorderType
    color: Color
    size: int


@dataclass(frozen=True)
class Visual(Command):
    horizontal_step: int
    vertical_step: int


@dataclass(frozen=True)
class Image(Command):
    source_path: str
    field_name: str
    left: Numeric
    top: Numeric
    width: Numeric
    height: Numeric


@dataclass(frozen=True)
class TextFont(Command):
    source_path: str
    field_name: str
    left: Numeric
    top: Numeric
    width: Numeric
    height: Numeric
    horizontal_align: HorizontalAlign
    vertical_align: VerticalAlign
    rotation: int
    alpha: int
    font_name: str
    font_size: int
    effect: Effect
    color: Color = DEFAULT_TEXT_COLOR


@dataclass(frozen=True)
class EndVisual(Command):
    pass
