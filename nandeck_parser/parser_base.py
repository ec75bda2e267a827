"""Base class for the nanDeck parser: error types, token stream and field helpers."""

from .keywords import _FIELD_COUNTS, _RAW_PAYLOAD


class NanDeckParseError(Exception):
    """Base class for every error raised while parsing a script."""


class UnknownDirectiveError(NanDeckParseError):
    def __init__(self, keyword):
        self.keyword = keyword
        super().__init__(f"Unknown directive {keyword!r}")


class UnknownEnumValueError(NanDeckParseError):
    def __init__(self, directive, field, value):
        self.directive = directive
        self.field = field
        self.value = value
        super().__init__(f"{directive}: unknown {field} value {value!r}")


class MalformedNumberError(NanDeckParseError):
    def __init__(self, directive, field, text):
        self.directive = directive
        self.field = field
        self.text = text
        super().__init__(f"{directive}: malformed number {text!r} in {field}")


class MissingFieldError(NanDeckParseError):
    def __init__(self, directive, expected_count, actual_count):
        self.directive = directive
        self.expected_count = expected_count
        self.actual_count = actual_count
        super().__init__(
            f"{directive}: expected {expected_count} fields, got {actual_count}")


class MalformedLineError(NanDeckParseError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Malformed line {text!r}")


class ParserBase:
    """Token stream management and shared field utilities for the parser."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.length = len(tokens)
        self.warnings = []

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------
    def _cur(self):
        if self.pos < self.length:
            return self.tokens[self.pos]
        return None

    def _advance(self):
        tok = self._cur()
        if self.pos < self.length:
            self.pos += 1
        return tok

    def _at_end(self):
        return self.pos >= self.length

    def _warn(self, tok, msg):
        self.warnings.append(f"L{tok.line}: {msg}")

    # ------------------------------------------------------------------
    # Payload fields
    # ------------------------------------------------------------------
    def _split_fields(self, tok):
        """Split the token payload into positional fields and check arity.

        Fields are returned untrimmed; each value parser trims its own.
        """
        directive = tok.keyword
        payload = tok.payload or ''
        if directive in _RAW_PAYLOAD:
            fields = [payload]
        else:
            fields = payload.split(',')
        required, maximum = _FIELD_COUNTS[directive]
        if len(fields) < required:
            raise MissingFieldError(directive, required, len(fields))
        if len(fields) > maximum:
            self._warn(tok, f"{directive}: ignored {len(fields) - maximum} "
                            f"extra field(s)")
        return fields
