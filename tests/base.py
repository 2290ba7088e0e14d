"""
sflfont test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path


def make_sfl(
        name='Arial', header='32 40', image='arial.png', count=None,
        glyphs=(), end='\n'
    ):
    """Build descriptor text; count defaults to the number of glyph lines."""
    if count is None:
        count = len(glyphs)
    lines = [name, header, image, str(count), *glyphs]
    return end.join(lines) + end


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    font_path = Path(__file__).parent / 'fonts'

    glyph_A = '65 0 0 10 12 1 1 11'
    glyph_B = '66 10 0 9 12 0 1 10'
    glyph_space = '32 19 0 1 1 0 0 8'

    arial_sfl = make_sfl(glyphs=(glyph_A, glyph_B))

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()

    def write_sfl(self, text, name='test.sfl'):
        """Write descriptor text to a temporary file."""
        path = self.temp_path / name
        path.write_bytes(text.encode('utf-8'))
        return path
