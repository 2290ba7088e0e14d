"""
sflfont.sfl - plain-text .sfl bitmap font descriptor

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .constants import HEADER_LINES, MIN_LINES, GLYPH_FIELDS, MAX_VALUE
from .errors import (
    TooFewLines, MalformedHeader, InvalidNumber,
    CharacterCountMismatch, MalformedGlyphLine,
)
from .metrics import GlyphMetrics, FontDescriptor
from .streams import open_source, get_bytesio


# descriptor layout, one item per line:
#
# >  <font name>
# >  <size> <line-height>
# >  <image file name>
# >  <character count N>
# >  <id> <x> <y> <width> <height> <xoffset> <yoffset> <xadvance>   (N lines)

_NUMBER = re.compile('[+]?[0-9]+')
_NEWLINE = re.compile('\r\n|\r|\n')


##############################################################################
# top-level calls

def parse(source, *, strict_spacing:bool=False):
    """
    Read font descriptor from .sfl file.

    source: path, binary stream or text stream
    strict_spacing: values must be separated by exactly one space (default: False; any whitespace)
    """
    return FontDescriptorParser(strict_spacing=strict_spacing).parse(source)


def load(source, *, strict_spacing:bool=False):
    """
    Read font descriptor from .sfl file.

    source: path, binary stream or text stream
    strict_spacing: values must be separated by exactly one space (default: False; any whitespace)
    """
    return parse(source, strict_spacing=strict_spacing)


def loads(data, *, strict_spacing:bool=False):
    """
    Read font descriptor from .sfl data in memory.

    data: str or bytes holding the descriptor
    strict_spacing: values must be separated by exactly one space (default: False; any whitespace)
    """
    parser = FontDescriptorParser(strict_spacing=strict_spacing)
    if isinstance(data, (bytes, bytearray)):
        return parser.parse(get_bytesio(bytes(data)))
    return parser.parse_text(data)


##############################################################################
# parser

class FontDescriptorParser:
    """Convert .sfl descriptor text into a FontDescriptor."""

    def __init__(self, strict_spacing:bool=False):
        self.strict_spacing = strict_spacing

    def parse(self, source):
        """Read and parse a descriptor from path or stream."""
        with open_source(source) as stream:
            logging.debug("Reading sfl descriptor '%s'", stream.name)
            text = stream.read_text()
        return self.parse_text(text)

    def parse_text(self, text):
        """Parse descriptor text."""
        # text streams and strings may still hold a byte order mark
        return self.parse_lines(split_lines(text.removeprefix('\ufeff')))

    def parse_lines(self, lines):
        """Parse descriptor from a sequence of lines without terminators."""
        lines = list(lines)
        if len(lines) < MIN_LINES:
            raise TooFewLines(len(lines), MIN_LINES)
        font_name = lines[0]
        size, line_height = self._read_header(lines[1])
        # line 3 names the atlas image, which is not retained
        count = self._to_int(self._strip(lines[3]), 'character count', 4)
        glyph_lines = _strip_trailing_blanks(lines[HEADER_LINES:])
        if len(glyph_lines) < count:
            raise CharacterCountMismatch(actual=len(glyph_lines), expected=count)
        if len(glyph_lines) > count:
            logging.debug(
                'Ignoring %d lines after last character definition.',
                len(glyph_lines) - count
            )
        glyphs = {}
        for line_number, line in enumerate(
                glyph_lines[:count], start=HEADER_LINES+1
            ):
            glyph = self._read_glyph(line, line_number)
            if glyph.id in glyphs:
                logging.warning(
                    'Character id %d redefined at line %d; '
                    'replacing earlier definition.', glyph.id, line_number
                )
            glyphs[glyph.id] = glyph
        return FontDescriptor(font_name, size, line_height, glyphs)

    def _read_header(self, line):
        """Read size and line height, in that order."""
        tokens = self._split(line)
        if len(tokens) != 2:
            raise MalformedHeader(line, len(tokens))
        size = self._to_int(tokens[0], 'size', 2)
        line_height = self._to_int(tokens[1], 'line height', 2)
        return size, line_height

    def _read_glyph(self, line, line_number):
        """Read character definition line."""
        tokens = self._split(line)
        if len(tokens) < len(GLYPH_FIELDS):
            raise MalformedGlyphLine(line, len(tokens), line_number)
        if len(tokens) > len(GLYPH_FIELDS):
            logging.debug(
                'Ignoring %d extra values at line %d.',
                len(tokens) - len(GLYPH_FIELDS), line_number
            )
        return GlyphMetrics(*(
            self._to_int(_token, _field, line_number)
            for _token, _field in zip(tokens, GLYPH_FIELDS)
        ))

    def _split(self, line):
        """Split line into value tokens."""
        if self.strict_spacing:
            return line.split(' ')
        return line.split()

    def _strip(self, text):
        """Remove surrounding whitespace, unless spacing is strict."""
        if self.strict_spacing:
            return text
        return text.strip()

    @staticmethod
    def _to_int(text, field, line_number):
        """Convert token to unsigned 32-bit int."""
        if not _NUMBER.fullmatch(text):
            raise InvalidNumber(text, field, line_number)
        digits = text.lstrip('+').lstrip('0') or '0'
        # don't convert overlong tokens, int() refuses huge digit strings
        if len(digits) > len(str(MAX_VALUE)) or int(digits) > MAX_VALUE:
            raise InvalidNumber(text, field, line_number)
        return int(digits)


##############################################################################
# line handling

def split_lines(text):
    """Split text on any newline convention."""
    lines = _NEWLINE.split(text)
    # a final line terminator does not start a new line
    if not lines[-1]:
        lines.pop()
    return lines


def _strip_trailing_blanks(lines):
    """Drop blank lines at the end."""
    end = len(lines)
    while end and not lines[end-1].strip():
        end -= 1
    return lines[:end]
