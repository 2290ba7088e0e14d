"""
sflfont.errors - exceptions raised when reading descriptors

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class SflError(Exception):
    """Base class for errors raised by sflfont."""


class SourceUnavailable(SflError):
    """Descriptor source cannot be opened, read or decoded."""

    def __init__(self, name, reason=''):
        self.name = name
        self.reason = reason
        message = f"Unable to read descriptor '{name}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class ParseError(SflError):
    """Incorrect file format."""

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f'{message} (line {line_number})'
        super().__init__(message)


# name used for malformed font files elsewhere
FileFormatError = ParseError


class TooFewLines(ParseError):
    """Descriptor is too short to hold a header."""

    def __init__(self, line_count, minimum):
        self.line_count = line_count
        self.minimum = minimum
        super().__init__(
            f'Too few lines to initialise font: found {line_count}, '
            f'need at least {minimum}.'
        )


class MalformedHeader(ParseError):
    """Size and line height line does not hold exactly two values."""

    def __init__(self, text, token_count, line_number=2):
        self.text = text
        self.token_count = token_count
        super().__init__(
            "Expected two values formatted as 'size line-height', "
            f'found {token_count}: {text!r}',
            line_number
        )


class InvalidNumber(ParseError):
    """Token is not an unsigned 32-bit decimal integer."""

    def __init__(self, text, field, line_number):
        self.text = text
        self.field = field
        super().__init__(
            f'Error parsing {field}: {text!r} is not a valid number',
            line_number
        )


class CharacterCountMismatch(ParseError):
    """Fewer glyph lines present than declared."""

    def __init__(self, actual, expected, line_number=4):
        self.actual = actual
        self.expected = expected
        super().__init__(
            'Character count does not match number of character lines: '
            f'is {actual}, should be {expected}',
            line_number
        )


class MalformedGlyphLine(ParseError):
    """Glyph line has too few values."""

    def __init__(self, text, token_count, line_number):
        self.text = text
        self.token_count = token_count
        super().__init__(
            f'Too few values in character definition: found {token_count}, '
            f'need 8: {text!r}',
            line_number
        )
