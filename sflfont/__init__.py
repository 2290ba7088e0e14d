"""
sflfont - read plain-text .sfl bitmap font descriptors

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .metrics import FontDescriptor, GlyphMetrics
from .sfl import FontDescriptorParser, parse, load, loads
from .errors import (
    SflError, SourceUnavailable, ParseError, FileFormatError,
    TooFewLines, MalformedHeader, InvalidNumber,
    CharacterCountMismatch, MalformedGlyphLine,
)
