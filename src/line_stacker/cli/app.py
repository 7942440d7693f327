"""Typer CLI application."""

import json
import logging
from typing import Annotated, NoReturn

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from line_stacker.codec.stacker import (
    bits_to_char,
    char_to_bits,
    directions_of,
    stack_all,
)
from line_stacker.core.constants import MASK_MAX
from line_stacker.core.direction import split
from line_stacker.core.style import DEFAULT_STYLE, get_style, list_styles


def _direction_names(mask: int) -> list[str]:
    return [arm.name.lower() for arm in split(mask)]


def enable_debug_logging() -> logging.Logger:
    """Send the package's DEBUG records to stderr through rich."""
    logger = logging.getLogger("line_stacker")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True)))
    return logger


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install line-stacker[cli]")

    app = typer.Typer(
        name="line-stacker",
        help="Stack Unicode box-drawing characters on top of each other.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    StyleOption = Annotated[
        str,
        typer.Option("--style", "-s", help=f"Line style ({', '.join(list_styles())})"),
    ]

    def fail(message: str) -> NoReturn:
        console.print(f"[red]{escape(message)}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Stack Unicode box-drawing characters on top of each other."""
        if verbose:
            enable_debug_logging()

    @app.command("stack")
    def stack_cmd(
        glyphs: Annotated[list[str], typer.Argument(help="Two or more line-drawing characters")],
        style: StyleOption = DEFAULT_STYLE,
    ) -> None:
        """Stack line-drawing characters and print the result."""
        if len(glyphs) < 2:
            fail("Need at least two glyphs to stack")
        try:
            line_style = get_style(style)
        except ValueError as e:
            fail(str(e))

        result = stack_all(*glyphs, style=line_style)
        if result is None:
            unsupported = [g for g in glyphs if g not in line_style.glyphs]
            fail(f"Cannot stack unsupported glyph(s): {', '.join(map(repr, unsupported))}")
        print(result)

    @app.command("bits")
    def bits_cmd(
        mask: Annotated[str, typer.Argument(help="Mask as 11, 0b1011 or 0xb")],
        style: StyleOption = DEFAULT_STYLE,
    ) -> None:
        """Print the glyph for a directional mask."""
        try:
            value = int(mask, 0)
        except ValueError:
            fail(f"Not an integer: {mask!r}")
        try:
            print(bits_to_char(value, style))
        except ValueError as e:
            fail(str(e))

    @app.command("char")
    def char_cmd(
        glyph: Annotated[str, typer.Argument(help="A line-drawing character")],
        style: StyleOption = DEFAULT_STYLE,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the directional mask of a glyph."""
        try:
            mask = char_to_bits(glyph, style)
        except ValueError as e:
            fail(str(e))

        names = _direction_names(mask)
        if json_output:
            data = {
                "glyph": glyph,
                "mask": mask,
                "binary": f"{mask:04b}",
                "directions": names,
            }
            print(json.dumps(data, ensure_ascii=False))
        else:
            console.print(f"[bold]Mask:[/]       {mask} (0b{mask:04b})")
            console.print(f"[bold]Directions:[/] {', '.join(names) or '(none)'}")
            console.print(f"[bold]Flags:[/]      {directions_of(glyph, style)!r}")

    @app.command("table")
    def table_cmd(
        style: StyleOption = DEFAULT_STYLE,
    ) -> None:
        """Print every mask with its glyph."""
        try:
            line_style = get_style(style)
        except ValueError as e:
            fail(str(e))

        table = Table(title=f"{line_style.name} line style")
        table.add_column("Mask", justify="right")
        table.add_column("Bits")
        table.add_column("Directions")
        table.add_column("Glyph", justify="center")
        table.add_column("Code point")
        for mask in range(MASK_MAX + 1):
            glyph = line_style.glyph(mask)
            table.add_row(
                str(mask),
                f"{mask:04b}",
                ", ".join(_direction_names(mask)) or "(none)",
                glyph,
                f"U+{ord(glyph):04X}",
            )
        console.print(table)

    return app
