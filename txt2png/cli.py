# this_file: txt2png/cli.py
"""
txt2png command line interface.

Render a short string into a PNG, one character per fixed-width slot:

    txt2png --text JOJO --fontfile ./LiberationMono-Regular.ttf --size 125 \\
        --whiteonblack --out out.png --slotwidth 250 --height 200
"""

import logging
import sys

import click

from . import __version__
from .base import RenderOptions, Txt2PngError
from .constants import (
    DEFAULT_DPI,
    DEFAULT_FONT_FILE,
    DEFAULT_FONT_SIZE,
    DEFAULT_HINTING,
    DEFAULT_OUTPUT,
    DEFAULT_TEXT,
    RENDER_HEIGHT,
    SLOT_WIDTH,
)
from .pipeline import render_to_file


@click.command(name="txt2png")
@click.version_option(version=__version__, prog_name="txt2png")
@click.option("--dpi", type=click.FloatRange(min=0, min_open=True), default=DEFAULT_DPI, show_default=True, help="Screen resolution in dots per inch")
@click.option("--fontfile", type=click.Path(dir_okay=False), default=DEFAULT_FONT_FILE, show_default=True, help="Filename of the TrueType/OpenType font")
@click.option("--hinting", type=click.Choice(["none", "full"]), default=DEFAULT_HINTING, show_default=True, help="Rasterizer hinting mode")
@click.option("--size", type=click.FloatRange(min=0, min_open=True), default=DEFAULT_FONT_SIZE, show_default=True, help="Font size in points")
@click.option("--whiteonblack", is_flag=True, help="White text on a black background")
@click.option("--text", default=DEFAULT_TEXT, show_default=True, help="Text to render")
@click.option("--out", type=click.Path(dir_okay=False), default=DEFAULT_OUTPUT, show_default=True, help="Output PNG filename")
@click.option("--slotwidth", type=click.IntRange(min=1), default=SLOT_WIDTH, show_default=True, help="Width of each character slot in pixels")
@click.option("--height", type=click.IntRange(min=1), default=RENDER_HEIGHT, show_default=True, help="Height of the image in pixels")
@click.option("--guidelines", is_flag=True, help="Draw vertical guidelines between character slots")
@click.option("--verbose", is_flag=True, help="Print informational messages to the console")
def cli(
    dpi: float,
    fontfile: str,
    hinting: str,
    size: float,
    whiteonblack: bool,
    text: str,
    out: str,
    slotwidth: int,
    height: int,
    guidelines: bool,
    verbose: bool,
):
    """Convert text to a PNG image, one character per slot"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    options = RenderOptions(
        dpi=dpi,
        size=size,
        hinting=hinting,
        white_on_black=whiteonblack,
        slot_width=slotwidth,
        height=height,
        guidelines=guidelines,
        text=text,
    )

    try:
        if verbose:
            click.echo(f'Loading fontfile "{fontfile}"')

        result = render_to_file(fontfile, out, options)

        if verbose:
            for placement in result.placements:
                if placement.width is not None:
                    click.echo(f"Char: {placement.char!r}, Width: {placement.width}px")
            click.echo(f"Successfully wrote {out}")

    except Txt2PngError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Main CLI entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
