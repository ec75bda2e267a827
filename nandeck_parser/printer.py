"""Command printer: converts commands back to nanDeck script text.

Used for round-trip testing: parse -> print -> re-parse -> compare.
Not intended to reproduce original formatting exactly, only equal commands.
"""

from . import commands as cmd


def format_numeric(value):
    if isinstance(value, cmd.Percentage):
        return f"{value.value}%"
    return str(value.value)


class DeckPrinter:
    """Emit nanDeck script text from commands."""

    def emit(self, node):
        """Dispatch to the appropriate emit method.

        A list of commands is emitted one line per command.
        """
        if isinstance(node, (list, tuple)):
            return '\n'.join(self.emit(c) for c in node)
        method = '_emit_' + type(node).__name__
        fn = getattr(self, method, None)
        if fn:
            return fn(node)
        return f"; unknown {type(node).__name__}"

    # ---- Data source ----

    def _emit_LinkMulti(self, node):
        return f"LINKMULTI={node.key}"

    def _emit_Link(self, node):
        if node.sheet is None:
            return f'LINK="{node.file}"'
        return f'LINK="{node.file}!{node.sheet}"'

    # ---- Page setup ----

    def _emit_Unit(self, node):
        return f"UNIT={node.unit.value}"

    def _emit_Page(self, node):
        return f"PAGE={node.width},{node.height},{node.orientation.value}"

    def _emit_Border(self, node):
        return f"BORDER={node.type.value},{node.color.value},{node.size}"

    # ---- Visual blocks ----

    def _emit_Visual(self, node):
        return f"VISUAL=,{node.horizontal_step},{node.vertical_step}"

    def _emit_EndVisual(self, node):
        return "ENDVISUAL"

    # ---- Elements ----

    def _geometry(self, node):
        return [
            f'"{node.source_path}"',
            f"[{node.field_name}]",
            format_numeric(node.left),
            format_numeric(node.top),
            format_numeric(node.width),
            format_numeric(node.height),
        ]

    def _emit_Image(self, node):
        return "IMAGE=" + ','.join(self._geometry(node))

    def _emit_TextFont(self, node):
        parts = self._geometry(node) + [
            node.horizontal_align.value,
            node.vertical_align.value,
            str(node.rotation),
            str(node.alpha),
            node.font_name,
            str(node.font_size),
            node.effect.value,
            node.color.value,
        ]
        return "TEXTFONT=" + ','.join(parts)
