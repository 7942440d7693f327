"""Command-line tool for inspecting the codec (requires the ``cli`` extra)."""
