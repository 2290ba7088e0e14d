"""
sflfont.metrics - font descriptor and glyph metrics

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys
from collections import namedtuple
from types import MappingProxyType

from .constants import GLYPH_FIELDS


class GlyphMetrics(namedtuple('GlyphMetrics', GLYPH_FIELDS)):
    """Atlas position, cell size, offsets and advance of one glyph."""

    __slots__ = ()

    @property
    def char(self):
        """Character for this glyph's code; None if not a Unicode code point."""
        if self.id > sys.maxunicode:
            return None
        return chr(self.id)


class FontDescriptor:
    """Font name, size, line height and glyph metrics table."""

    def __init__(self, font_name='', size=0, line_height=0, glyphs=()):
        """
        Create immutable font descriptor.

        font_name: name of the font
        size: nominal point size
        line_height: vertical advance between lines of text
        glyphs: mapping of id to GlyphMetrics, or iterable of GlyphMetrics
        """
        if not hasattr(glyphs, 'values'):
            # later records replace earlier ones with the same id
            glyphs = {_g.id: _g for _g in glyphs}
        self._font_name = font_name
        self._size = size
        self._line_height = line_height
        self._glyphs = MappingProxyType(dict(glyphs))

    @property
    def font_name(self):
        return self._font_name

    @property
    def size(self):
        return self._size

    @property
    def line_height(self):
        return self._line_height

    @property
    def glyphs(self):
        """Read-only mapping of glyph id to GlyphMetrics."""
        return self._glyphs

    def get_glyph(self, key):
        """
        Get glyph metrics by character code or character.

        key: int code or single-character str
        """
        if isinstance(key, str):
            if len(key) != 1:
                raise KeyError(key)
            key = ord(key)
        return self._glyphs[key]

    def __eq__(self, other):
        if not isinstance(other, FontDescriptor):
            return NotImplemented
        return (
            self._font_name == other._font_name
            and self._size == other._size
            and self._line_height == other._line_height
            and dict(self._glyphs) == dict(other._glyphs)
        )

    def __repr__(self):
        """Representation."""
        return (
            f'<{type(self).__name__} font_name={self._font_name!r} '
            f'size={self._size} line_height={self._line_height} '
            f'glyphs={len(self._glyphs)}>'
        )
