"""
sflfont.constants - package constants

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'

# number of header lines before the glyph table
HEADER_LINES = 4
# a descriptor needs the header plus at least one more line
MIN_LINES = HEADER_LINES + 1

# glyph record fields, in file order
GLYPH_FIELDS = (
    'id', 'x', 'y', 'width', 'height', 'xoffset', 'yoffset', 'xadvance'
)

# all numeric fields are unsigned 32-bit
MAX_VALUE = 0xffffffff
