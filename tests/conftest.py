"""Shared fixtures for codec tests."""

from typing import Iterator

import pytest

from line_stacker.core.constants import LIGHT_CHARS
from line_stacker.core.style import STYLES


# Light glyphs with their masks, blank excluded
LINE_GLYPHS = [(mask, char) for mask, char in enumerate(LIGHT_CHARS) if mask]

UNSUPPORTED = [
    "X",      # letter
    "+",      # ASCII junction
    "━",      # heavy horizontal
    "═",      # double horizontal
    "╭",      # rounded corner
    "┄",      # dashed
    "",       # empty string
    "──",     # two characters
]


@pytest.fixture
def line_glyphs() -> list[str]:
    """All non-blank light glyphs."""
    return [char for _, char in LINE_GLYPHS]


@pytest.fixture(params=UNSUPPORTED, ids=repr)
def unsupported_glyph(request: pytest.FixtureRequest) -> str:
    """One character that the light style can't stack."""
    return request.param


@pytest.fixture(params=LINE_GLYPHS, ids=lambda pair: f"{pair[0]:04b}")
def mask_and_glyph(request: pytest.FixtureRequest) -> tuple[int, str]:
    """One (mask, glyph) entry of the light table, blank excluded."""
    return request.param


@pytest.fixture(autouse=True)
def restore_styles() -> Iterator[None]:
    """Undo any style registrations made by a test."""
    saved = dict(STYLES)
    yield
    STYLES.clear()
    STYLES.update(saved)
