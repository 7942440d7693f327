"""
line-stacker: stack Unicode box-drawing characters

Work out which glyph results from drawing two line-drawing characters
in the same terminal cell.

Quick Start:
    >>> import line_stacker
    >>> line_stacker.stack('┌', '┴')
    '┼'
    >>> line_stacker.bits_to_char(0b1011)
    '┴'
    >>> line_stacker.char_to_bits('┼')
    15

Bit format: for each of the four directions, clockwise starting from
up (least to most significant), 1 means a line segment is present.

Features:
    - Mask <-> glyph conversion for the light box-drawing set
    - Stacking of any number of glyphs by OR-ing their masks
    - Direction flags for building masks by name
    - Pluggable line styles (light built in)
"""

__version__ = "0.1.0"

# Codec
from line_stacker.codec.stacker import (
    bits_to_char,
    char_to_bits,
    directions_of,
    glyph_for,
    is_line_char,
    stack,
    stack_all,
)

# Core types
from line_stacker.core.constants import BLANK
from line_stacker.core.direction import Direction
from line_stacker.core.style import LIGHT, LineStyle, get_style, register_style

# Errors
from line_stacker.errors import InvalidMask, LineStackerError, UnsupportedGlyph

__all__ = [
    # Version
    "__version__",
    # Codec
    "bits_to_char",
    "char_to_bits",
    "stack",
    "stack_all",
    "is_line_char",
    "directions_of",
    "glyph_for",
    # Core types
    "BLANK",
    "Direction",
    "LIGHT",
    "LineStyle",
    "get_style",
    "register_style",
    # Errors
    "LineStackerError",
    "UnsupportedGlyph",
    "InvalidMask",
]
