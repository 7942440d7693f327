"""
Stack box-drawing characters on top of each other.

Each glyph is read as a 4-bit set of arms. Starting from the least
significant bit the bits are up, right, down, left. Drawing two glyphs
in the same cell is the bitwise OR of their sets:

    >>> stack('┌', '┴')
    '┼'
    >>> bits_to_char(0b1011)
    '┴'
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Optional, Union

from line_stacker.core.direction import Direction, check_mask, mask_of
from line_stacker.core.style import LineStyle, get_style
from line_stacker.errors import UnsupportedGlyph

log = logging.getLogger(__name__)

StyleArg = Union[LineStyle, str, None]


def bits_to_char(mask: int, style: StyleArg = None) -> str:
    """
    Convert a directional mask to its glyph.

    Args:
        mask: Integer in [0, 15]; bit 0 up, bit 1 right, bit 2 down, bit 3 left
        style: LineStyle or registered style name (default light)

    Returns:
        The glyph. Mask 0 gives the style's blank.

    Raises:
        InvalidMask: if mask is not an integer in [0, 15]
    """
    return get_style(style).glyph(check_mask(mask))


def char_to_bits(glyph: str, style: StyleArg = None) -> int:
    """
    Convert a glyph to its directional mask.

    Args:
        glyph: A single character
        style: LineStyle or registered style name (default light)

    Returns:
        Integer in [0, 15]. The style's blank gives 0.

    Raises:
        UnsupportedGlyph: if glyph is not part of the style
    """
    line_style = get_style(style)
    mask = line_style.mask(glyph) if isinstance(glyph, str) else None
    if mask is None:
        raise UnsupportedGlyph(glyph, line_style.name)
    return mask


def stack(a: str, b: str, style: StyleArg = None) -> Optional[str]:
    """
    Stack two glyphs and return the combined glyph.

    Returns None if either glyph is unsupported. Order doesn't matter.
    """
    line_style = get_style(style)
    try:
        mask = char_to_bits(a, line_style) | char_to_bits(b, line_style)
    except UnsupportedGlyph as e:
        log.debug("Cannot stack %r on %r: %s", b, a, e)
        return None
    return line_style.glyph(mask)


def stack_all(*glyphs: str, style: StyleArg = None) -> Optional[str]:
    """Stack any number of glyphs; no glyphs gives the blank."""
    line_style = get_style(style)
    return reduce(
        lambda acc, glyph: None if acc is None else stack(acc, glyph, line_style),
        glyphs,
        line_style.blank,
    )


def is_line_char(glyph: str, style: StyleArg = None) -> bool:
    """Check if a character can be stacked in the given style."""
    return isinstance(glyph, str) and get_style(style).mask(glyph) is not None


def directions_of(glyph: str, style: StyleArg = None) -> Direction:
    """Get the arms of a glyph as Direction flags."""
    return Direction(char_to_bits(glyph, style))


def glyph_for(*directions: Direction | int, style: StyleArg = None) -> str:
    """Get the glyph with exactly the given arms."""
    return bits_to_char(mask_of(*directions), style)
