"""Exceptions raised by the codec."""


class LineStackerError(ValueError):
    """Base class for codec errors."""


class UnsupportedGlyph(LineStackerError):
    """A character is not a glyph of the line style in use."""

    def __init__(self, glyph: object, style_name: str = "light") -> None:
        self.glyph = glyph
        self.style_name = style_name
        super().__init__(
            f"Unsupported glyph for {style_name!r} style: {glyph!r}"
        )


class InvalidMask(LineStackerError):
    """A directional mask is not an integer in [0, 15]."""

    def __init__(self, mask: object) -> None:
        self.mask = mask
        super().__init__(
            f"Bit set must be between 0 and 15 inclusive but got {mask!r}"
        )
