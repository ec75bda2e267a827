"""Directive parsing mixin for the nanDeck parser."""

from . import commands as cmd
from .parser_base import MalformedLineError, UnknownDirectiveError
from .value_parser import (
    UINT8, UINT32,
    parse_bracket_name, parse_color, parse_effect, parse_enum, parse_integer,
    parse_link, parse_numeric, parse_quoted_path,
)


class DirectiveMixin:
    """Mixin providing one parse method per directive keyword."""

    _DIRECTIVE_DISPATCH = {
        'LINKMULTI': '_parse_linkmulti',
        'LINK': '_parse_link',
        'UNIT': '_parse_unit',
        'PAGE': '_parse_page',
        'BORDER': '_parse_border',
        'VISUAL': '_parse_visual',
        'IMAGE': '_parse_image',
        'TEXTFONT': '_parse_textfont',
        'ENDVISUAL': '_parse_endvisual',
    }

    def _parse_directive(self, tok):
        method = self._DIRECTIVE_DISPATCH.get(tok.keyword)
        if method is None:
            raise UnknownDirectiveError(tok.keyword)
        return getattr(self, method)(tok)

    # ------------------------------------------------------------------
    # Data source
    # ------------------------------------------------------------------
    def _parse_linkmulti(self, tok):
        key, = self._split_fields(tok)
        return cmd.LinkMulti(key=key)

    def _parse_link(self, tok):
        value, = self._split_fields(tok)
        try:
            file, sheet = parse_link(value)
        except MalformedLineError:
            raise MalformedLineError(tok.text) from None
        return cmd.Link(file=file, sheet=sheet)

    # ------------------------------------------------------------------
    # Page setup
    # ------------------------------------------------------------------
    def _parse_unit(self, tok):
        value, = self._split_fields(tok)
        return cmd.Unit(unit=parse_enum(value, cmd.MeasureUnit, tok.keyword, 'unit'))

    def _parse_page(self, tok):
        f = self._split_fields(tok)
        d = tok.keyword
        return cmd.Page(
            width=parse_integer(f[0], d, 'width', UINT32),
            height=parse_integer(f[1], d, 'height', UINT32),
            orientation=parse_enum(f[2], cmd.Orientation, d, 'orientation'),
        )

    def _parse_border(self, tok):
        f = self._split_fields(tok)
        d = tok.keyword
        return cmd.Border(
            type=parse_enum(f[0], cmd.BorderType, d, 'type'),
            color=parse_color(f[1]),
            size=parse_integer(f[2], d, 'size', UINT8),
        )

    # ------------------------------------------------------------------
    # Visual blocks
    # ------------------------------------------------------------------
    def _parse_visual(self, tok):
        f = self._split_fields(tok)
        d = tok.keyword
        # f[0] is a reserved slot
        return cmd.Visual(
            horizontal_step=parse_integer(f[1], d, 'horizontal_step', UINT32),
            vertical_step=parse_integer(f[2], d, 'vertical_step', UINT32),
        )

    def _parse_endvisual(self, tok):
        return cmd.EndVisual()

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------
    def _parse_geometry(self, f, d):
        """Shared leading fields of IMAGE and TEXTFONT."""
        return dict(
            source_path=parse_quoted_path(f[0]),
            field_name=parse_bracket_name(f[1]),
            left=parse_numeric(f[2], d, 'left'),
            top=parse_numeric(f[3], d, 'top'),
            width=parse_numeric(f[4], d, 'width'),
            height=parse_numeric(f[5], d, 'height'),
        )

    def _parse_image(self, tok):
        f = self._split_fields(tok)
        return cmd.Image(**self._parse_geometry(f, tok.keyword))

    def _parse_textfont(self, tok):
        f = self._split_fields(tok)
        d = tok.keyword
        color = parse_color(f[13]) if len(f) > 13 else cmd.DEFAULT_TEXT_COLOR
        return cmd.TextFont(
            **self._parse_geometry(f, d),
            horizontal_align=parse_enum(f[6], cmd.HorizontalAlign, d, 'horizontal_align'),
            vertical_align=parse_enum(f[7], cmd.VerticalAlign, d, 'vertical_align'),
            rotation=parse_integer(f[8], d, 'rotation'),
            alpha=parse_integer(f[9], d, 'alpha', UINT32),
            font_name=f[10].strip(),
            font_size=parse_integer(f[11], d, 'font_size', UINT8),
            effect=parse_effect(f[12]),
            color=color,
        )
