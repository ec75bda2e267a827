"""Line dispatcher and document parser for nanDeck layout scripts."""

import logging

from .directive_parser import DirectiveMixin
from .keywords import _NO_PAYLOAD
from .parser_base import MalformedLineError, ParserBase, UnknownDirectiveError

logger = logging.getLogger(__name__)


class Parser(DirectiveMixin, ParserBase):
    """Single-pass parser over the line tokens of one script.

    The first malformed line aborts the parse; there is no recovery.
    """

    def parse(self):
        commands = []
        while not self._at_end():
            commands.append(self._parse_line(self._advance()))
        logger.debug("Parsed %d commands (%d warnings)",
                     len(commands), len(self.warnings))
        return commands

    def _parse_line(self, tok):
        if tok.payload is None:
            if tok.is_blank:
                raise UnknownDirectiveError(tok.keyword)
            if tok.keyword not in _NO_PAYLOAD:
                raise MalformedLineError(tok.text)
        if tok.dropped:
            self._warn(tok, f"{tok.keyword}: text after second '=' discarded "
                            f"({'='.join(tok.dropped)!r})")
        return self._parse_directive(tok)
