"""Lexer for nanDeck layout scripts. Splits raw text into line tokens."""

import logging

from .tokens import LineToken

logger = logging.getLogger(__name__)

COMMENT_PREFIX = ';'


class Lexer:
    """Line tokenizer for nanDeck script text."""

    def __init__(self, text: str):
        self.text = text
        self._tokens = []
        self._comments = 0
        self._tokenize()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def tokens(self):
        return self._tokens

    # ------------------------------------------------------------------
    # Main tokenize loop
    # ------------------------------------------------------------------
    def _tokenize(self):
        body = self.text.strip()
        if not body:
            return

        # Line numbers refer to the untrimmed source.
        first_line = self.text[:len(self.text) - len(self.text.lstrip())].count('\n') + 1

        for offset, raw in enumerate(body.split('\n')):
            line = raw.strip()
            if line.startswith(COMMENT_PREFIX):
                self._comments += 1
                continue
            self._tokens.append(self._scan_line(line, first_line + offset))

        logger.debug("Tokenized %d directive lines, skipped %d comments",
                     len(self._tokens), self._comments)

    def _scan_line(self, line, number):
        # Everything after the second '=' segment is discarded.
        segments = line.split('=')
        keyword = segments[0].strip()
        if len(segments) == 1:
            return LineToken(keyword, None, [], line, number)
        return LineToken(keyword, segments[1].strip(), segments[2:], line, number)
