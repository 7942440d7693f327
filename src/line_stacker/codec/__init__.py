"""Encoding/decoding between directional masks and glyphs."""

from line_stacker.codec.stacker import (
    bits_to_char,
    char_to_bits,
    directions_of,
    glyph_for,
    is_line_char,
    stack,
    stack_all,
)

__all__ = [
    "bits_to_char",
    "char_to_bits",
    "directions_of",
    "glyph_for",
    "is_line_char",
    "stack",
    "stack_all",
]
