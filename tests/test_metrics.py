"""
sflfont test suite
font model tests
"""

import unittest

from sflfont import FontDescriptor, GlyphMetrics
from .base import BaseTester


class TestMetrics(BaseTester):
    """Test FontDescriptor and GlyphMetrics."""

    glyphs = (
        GlyphMetrics(65, 0, 0, 10, 12, 1, 1, 11),
        GlyphMetrics(66, 10, 0, 9, 12, 0, 1, 10),
    )

    def test_glyph_char(self):
        """Test character for glyph id."""
        self.assertEqual(self.glyphs[0].char, 'A')

    def test_glyph_char_out_of_range(self):
        """Test ids beyond the Unicode range have no character."""
        self.assertIsNone(GlyphMetrics(0xffffffff, 0, 0, 0, 0, 0, 0, 0).char)
        self.assertEqual(GlyphMetrics(0x10ffff, 0, 0, 0, 0, 0, 0, 0).char, '\U0010ffff')

    def test_glyph_immutable(self):
        """Test glyph metrics can't be changed."""
        with self.assertRaises(AttributeError):
            self.glyphs[0].x = 5

    def test_descriptor_immutable(self):
        """Test descriptor and its glyph table can't be changed."""
        font = FontDescriptor('Arial', 32, 40, self.glyphs)
        with self.assertRaises(AttributeError):
            font.size = 10
        with self.assertRaises(TypeError):
            font.glyphs[67] = self.glyphs[0]

    def test_from_sequence(self):
        """Test later glyphs replace earlier ones with the same id."""
        replacement = GlyphMetrics(65, 1, 1, 1, 1, 1, 1, 1)
        font = FontDescriptor('Arial', 32, 40, (*self.glyphs, replacement))
        self.assertEqual(len(font.glyphs), 2)
        self.assertEqual(font.glyphs[65], replacement)

    def test_from_mapping(self):
        """Test construction from a mapping."""
        mapping = {_g.id: _g for _g in self.glyphs}
        font = FontDescriptor('Arial', 32, 40, mapping)
        self.assertEqual(font, FontDescriptor('Arial', 32, 40, self.glyphs))
        # the descriptor does not share the caller's dict
        mapping.clear()
        self.assertEqual(len(font.glyphs), 2)

    def test_get_glyph(self):
        """Test glyph lookup by code and by character."""
        font = FontDescriptor('Arial', 32, 40, self.glyphs)
        self.assertEqual(font.get_glyph(66), self.glyphs[1])
        self.assertEqual(font.get_glyph('B'), self.glyphs[1])
        with self.assertRaises(KeyError):
            font.get_glyph('C')
        with self.assertRaises(KeyError):
            font.get_glyph('AB')

    def test_equality(self):
        """Test field-wise equality."""
        font = FontDescriptor('Arial', 32, 40, self.glyphs)
        self.assertEqual(font, FontDescriptor('Arial', 32, 40, self.glyphs))
        self.assertNotEqual(font, FontDescriptor('Arial', 40, 32, self.glyphs))
        self.assertNotEqual(font, FontDescriptor('Arial', 32, 40, self.glyphs[:1]))
        self.assertNotEqual(font, 'Arial')

    def test_repr(self):
        """Test representation."""
        font = FontDescriptor('Arial', 32, 40, self.glyphs)
        self.assertEqual(
            repr(font),
            "<FontDescriptor font_name='Arial' size=32 line_height=40 glyphs=2>"
        )


if __name__ == '__main__':
    unittest.main()
