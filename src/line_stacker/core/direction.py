"""Direction flags - the four arms of a box-drawing glyph."""

from __future__ import annotations

from enum import IntFlag

from line_stacker.core.constants import MASK_MAX
from line_stacker.errors import InvalidMask


class Direction(IntFlag):
    """
    Cardinal directions as mask bits, clockwise from up.

    A Direction is a plain int, so any combination can be passed
    wherever a directional mask is expected.
    """
    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 4
    LEFT = 8
    ALL = 15

    @property
    def opposite(self) -> Direction:
        """Mirror every arm: up <-> down, right <-> left."""
        result = Direction.NONE
        for arm in split(self):
            result |= _OPPOSITES[arm]
        return result


# Single-bit members in bit order
CLOCKWISE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def check_mask(mask: object) -> int:
    """Return mask as an int, raising InvalidMask outside [0, 15]."""
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise InvalidMask(mask)
    if not 0 <= mask <= MASK_MAX:
        raise InvalidMask(mask)
    return int(mask)


def mask_of(*directions: Direction | int) -> int:
    """Combine directions into a single mask."""
    mask = 0
    for direction in directions:
        mask |= check_mask(direction)
    return mask


def split(mask: int) -> list[Direction]:
    """List the single directions set in a mask, clockwise from up."""
    mask = check_mask(mask)
    return [arm for arm in CLOCKWISE if mask & arm]
