"""Visitor pattern for parsed nanDeck commands.

Provides ``CommandVisitor`` with a ``visit_<Command>`` method for every
command class.  The default implementation of each method calls
``generic_visit``, which does nothing; commands have no children.
"""


class CommandVisitor:
    """Base visitor with double-dispatch via ``Command.accept(visitor)``.

    Subclass and override ``visit_XXX`` methods for the command types you
    care about.  Unhandled commands fall through to ``generic_visit``.
    """

    def generic_visit(self, command):
        return None

    def visit_LinkMulti(self, command):
        return self.generic_visit(command)

    def visit_Link(self, command):
        return self.generic_visit(command)

    def visit_Unit(self, command):
        return self.generic_visit(command)

    def visit_Page(self, command):
        return self.generic_visit(command)

    def visit_Border(self, command):
        return self.generic_visit(command)

    def visit_Visual(self, command):
        return self.generic_visit(command)

    def visit_Image(self, command):
        return self.generic_visit(command)

    def visit_TextFont(self, command):
        return self.generic_visit(command)

    def visit_EndVisual(self, command):
        return self.generic_visit(command)


def walk(commands, visitor):
    """Visit *commands* in order and return *visitor*."""
    for command in commands:
        command.accept(visitor)
    return visitor


class VisualBlock:
    """One VISUAL ... ENDVISUAL region and the commands inside it."""

    __slots__ = ('visual', 'elements', 'closed')

    def __init__(self, visual, elements=None, closed=False):
        self.visual = visual
        self.elements = elements or []
        self.closed = closed

    def __repr__(self):
        return (f"VisualBlock({self.visual!r}, {len(self.elements)} elements, "
                f"closed={self.closed})")


class VisualBlockCollector(CommandVisitor):
    """Group commands into visual blocks.

    Commands outside any block are kept in ``preamble``.  Structural
    problems (nested VISUAL, orphan ENDVISUAL, unclosed block) are recorded
    in ``problems`` instead of raised.
    """

    def __init__(self):
        self.preamble = []
        self.blocks = []
        self.problems = []
        self._open = None
        self._open_index = 0
        self._index = 0

    def finish(self):
        if self._open is not None:
            self.problems.append(
                f"VISUAL at command {self._open_index} is never closed")
            self._open = None
        return self.blocks

    def generic_visit(self, command):
        if self._open is not None:
            self._open.elements.append(command)
        else:
            self.preamble.append(command)
        self._index += 1

    def visit_Visual(self, command):
        if self._open is not None:
            self.problems.append(
                f"VISUAL at command {self._index} opened inside the block "
                f"started at command {self._open_index}")
        self._open = VisualBlock(command)
        self._open_index = self._index
        self.blocks.append(self._open)
        self._index += 1

    def visit_EndVisual(self, command):
        if self._open is None:
            self.problems.append(
                f"ENDVISUAL at command {self._index} has no matching VISUAL")
        else:
            self._open.closed = True
            self._open = None
        self._index += 1


def collect_visual_blocks(commands):
    """Return a finished ``VisualBlockCollector`` over *commands*."""
    collector = walk(commands, VisualBlockCollector())
    collector.finish()
    return collector
