"""Line token produced by the nanDeck script lexer."""


class LineToken:
    """One retained script line split into directive keyword and payload.

    ``payload`` is ``None`` when the line has no ``=`` at all.  ``dropped``
    holds any ``=``-separated segments past the payload; they are kept only
    so the parser can warn about them.
    """

    __slots__ = ('keyword', 'payload', 'dropped', 'text', 'line')

    def __init__(self, keyword: str, payload, dropped, text: str, line: int):
        self.keyword = keyword
        self.payload = payload
        self.dropped = dropped
        self.text = text
        self.line = line

    @property
    def is_blank(self):
        return not self.text

    def __repr__(self):
        return f"LineToken({self.keyword!r}, {self.payload!r}, L{self.line})"
