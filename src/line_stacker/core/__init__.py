"""Core data structures: directions, line styles and glyph tables."""

from line_stacker.core.constants import BLANK, LIGHT_CHARS
from line_stacker.core.direction import Direction, mask_of, split
from line_stacker.core.style import (
    LIGHT,
    LineStyle,
    get_style,
    list_styles,
    register_style,
)

__all__ = [
    "BLANK",
    "LIGHT_CHARS",
    "Direction",
    "mask_of",
    "split",
    "LIGHT",
    "LineStyle",
    "get_style",
    "list_styles",
    "register_style",
]
