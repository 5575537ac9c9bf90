# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Swatchcut CLI - extract a role palette from an image.

    swatchcut extract cover.jpg
    swatchcut extract cover.jpg --format css --max-colors 24
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from swatchcut.errors import UnsupportedImageError
from swatchcut.measure.extract import DEFAULT_CALCULATE_NUMBER_COLORS, extract
from swatchcut.runtime.serializers import (
    SerializerFormat,
    to_css_variables,
    to_json,
    to_markdown,
)
from swatchcut.schema import Palette, Role

app = typer.Typer(
    name="swatchcut",
    help="Extract vibrant and muted theme colors from an image.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True, style="bold red")


class OutputFormat(str, Enum):
    """Palette output format."""
    table = "table"
    json = "json"
    css = "css"
    markdown = "markdown"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _palette_table(palette: Palette) -> Table:
    table = Table(box=box.ROUNDED, title="Palette")
    table.add_column("Role", style="bold")
    table.add_column("Swatch")
    table.add_column("Hex")
    table.add_column("Population", justify="right")
    table.add_column("HSL")

    for role in Role:
        swatch = palette.swatch(role)
        if swatch is None:
            table.add_row(role.value, "", "[dim]—[/]", "", "")
            continue

        h, s, l = swatch.hsl
        population = str(swatch.population) if swatch.population else "[dim]synthesized[/]"
        table.add_row(
            role.value,
            Text("      ", style=f"on {swatch.hex}"),
            swatch.hex,
            population,
            f"{h * 360:.0f}°, {s:.2f}, {l:.2f}",
        )
    return table


@app.command("extract")
def extract_command(
    image: Path = typer.Argument(..., help="JPEG or PNG image to analyse."),
    max_colors: int = typer.Option(
        DEFAULT_CALCULATE_NUMBER_COLORS, "--max-colors", "-n", min=1,
        help="Swatch budget for the quantizer.",
    ),
    max_pixels: int = typer.Option(
        0, "--max-pixels", min=0,
        help="Downsample larger images to this many pixels (0 = off).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.table, "--format", "-f", help="Output format.",
    ),
    prefix: str = typer.Option("swatch", help="Custom property prefix for CSS output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details."),
) -> None:
    """Extract a role palette from IMAGE."""
    _configure_logging(verbose)

    if not image.exists():
        error_console.print(f"Input file not found: {image}")
        raise typer.Exit(1)

    try:
        palette = extract(image, max_colors=max_colors, max_pixels=max_pixels)
    except UnsupportedImageError as e:
        error_console.print(str(e))
        raise typer.Exit(1)

    if output_format == OutputFormat.json:
        typer.echo(to_json(palette, format=SerializerFormat.JSON_PRETTY, include_text_colors=True))
    elif output_format == OutputFormat.css:
        typer.echo(to_css_variables(palette, prefix=prefix))
    elif output_format == OutputFormat.markdown:
        typer.echo(to_markdown(palette))
    else:
        console.print(_palette_table(palette))


@app.command("version")
def version_command() -> None:
    """Show version and exit."""
    from swatchcut import __version__

    typer.echo(f"swatchcut {__version__}")


def main(argv: Optional[list[str]] = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main()
