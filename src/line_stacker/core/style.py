"""Line styles - named mask-to-glyph tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from line_stacker.core.constants import LIGHT_CHARS, MASK_MAX
from line_stacker.core.direction import check_mask

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineStyle:
    """
    A line style: one glyph for each of the 16 directional masks.

    Entry ``chars[mask]`` is the glyph drawn when the arms in ``mask``
    are present; entry 0 is the style's blank. Every glyph must be
    distinct so the table can be read in both directions.

    Example:
        >>> LIGHT.glyph(0b1011)
        '┴'
        >>> LIGHT.mask('┼')
        15
    """
    name: str
    chars: tuple[str, ...]
    _masks: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the table and build the reverse mapping."""
        chars = tuple(self.chars)
        if len(chars) != MASK_MAX + 1:
            raise ValueError(
                f"Line style {self.name!r} needs {MASK_MAX + 1} glyphs, got {len(chars)}"
            )
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(
                    f"Line style {self.name!r} glyphs must be single characters, got {char!r}"
                )
        if len(set(chars)) != len(chars):
            raise ValueError(f"Line style {self.name!r} has duplicate glyphs")

        object.__setattr__(self, "chars", chars)
        object.__setattr__(
            self, "_masks", {char: mask for mask, char in enumerate(chars)}
        )

    @property
    def blank(self) -> str:
        """Glyph for the empty mask."""
        return self.chars[0]

    @property
    def glyphs(self) -> frozenset[str]:
        """Every glyph in the style, blank included."""
        return frozenset(self.chars)

    def glyph(self, mask: int) -> str:
        """Look up the glyph for a mask, raising InvalidMask outside [0, 15]."""
        return self.chars[check_mask(mask)]

    def mask(self, glyph: str) -> Optional[int]:
        """Look up the mask for a glyph, or None if it isn't in this style."""
        return self._masks.get(glyph)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for configuration files."""
        return {"name": self.name, "chars": list(self.chars)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LineStyle:
        """Deserialize from dictionary."""
        return cls(name=data["name"], chars=tuple(data["chars"]))


LIGHT = LineStyle(name="light", chars=LIGHT_CHARS)

DEFAULT_STYLE = LIGHT.name

# Registry of available styles
STYLES: dict[str, LineStyle] = {
    LIGHT.name: LIGHT,
}


def register_style(style: LineStyle, replace: bool = False) -> LineStyle:
    """Add a line style to the registry so it can be looked up by name."""
    if style.name in STYLES and not replace:
        raise ValueError(f"Line style already registered: {style.name}")
    STYLES[style.name] = style
    log.debug("Registered line style %r", style.name)
    return style


def get_style(style: Union[LineStyle, str, None] = None) -> LineStyle:
    """Resolve a style name (or None for the default) to a LineStyle."""
    if style is None:
        return STYLES[DEFAULT_STYLE]
    if isinstance(style, LineStyle):
        return style
    try:
        return STYLES[style]
    except KeyError:
        available = ", ".join(sorted(STYLES))
        raise ValueError(
            f"Unknown line style: {style!r} (available: {available})"
        ) from None


def list_styles() -> list[str]:
    """Get list of available style names."""
    return sorted(STYLES)
