"""Shared constants for box-drawing glyphs."""

# Blank cell (mask 0). Callers decide how it renders.
BLANK = " "

# Light box-drawing glyphs indexed by directional mask.
# Bits, least significant first: up, right, down, left.
# Source: https://en.wikipedia.org/wiki/Box-drawing_characters
LIGHT_CHARS: tuple[str, ...] = (
    BLANK,      # 0000
    '╵',   # 0001 light up
    '╶',   # 0010 light right
    '└',   # 0011 light up and right
    '╷',   # 0100 light down
    '│',   # 0101 light vertical
    '┌',   # 0110 light down and right
    '├',   # 0111 light vertical and right
    '╴',   # 1000 light left
    '┘',   # 1001 light up and left
    '─',   # 1010 light horizontal
    '┴',   # 1011 light up and horizontal
    '┐',   # 1100 light down and left
    '┤',   # 1101 light vertical and left
    '┬',   # 1110 light down and horizontal
    '┼',   # 1111 light vertical and horizontal
)

# Named light glyphs
LIGHT_NAMES = {
    "vertical": "│",       # mask 0101
    "horizontal": "─",     # mask 1010
    "top_left": "┌",       # mask 0110
    "top_right": "┐",      # mask 1100
    "bottom_left": "└",    # mask 0011
    "bottom_right": "┘",   # mask 1001
    "tee_right": "├",      # mask 0111
    "tee_left": "┤",       # mask 1101
    "tee_down": "┬",       # mask 1110
    "tee_up": "┴",         # mask 1011
    "cross": "┼",          # mask 1111
}

MASK_BITS = 4
MASK_MAX = (1 << MASK_BITS) - 1
