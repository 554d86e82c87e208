# this_file: txt2png/pipeline.py
"""
Single-pass pipeline: load font, build canvas, render text, write image.

Every call allocates its own canvas, so repeated calls never share pixels.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import freetype
import numpy as np

from .base import RenderOptions
from .canvas import build_canvas
from .fontloader import load_font
from .freetypepy import GlyphRasterizer
from .layout import GlyphPlacement, render_text
from .writer import save_image


@dataclass
class RenderResult:
    image: np.ndarray
    placements: list[GlyphPlacement]


def render_canvas(face: freetype.Face, options: RenderOptions) -> RenderResult:
    """
    Render options.text with an already loaded face.

    The face is rescaled to options.size and options.dpi and keeps that size
    afterwards.
    """
    options.validate()
    palette = options.palette

    img = build_canvas(
        options.codepoints,
        options.slot_width,
        options.height,
        palette.background,
        palette.guideline,
        options.guidelines,
    )
    rasterizer = GlyphRasterizer(
        face,
        size=options.size,
        dpi=options.dpi,
        hinting=options.hinting,
    )
    placements = render_text(
        img,
        rasterizer,
        options.text,
        options.slot_width,
        options.height,
        palette.foreground,
    )
    return RenderResult(image=img, placements=placements)


def render_to_file(
    font_path: Path | str,
    out_path: Path | str,
    options: RenderOptions,
) -> RenderResult:
    """
    Run the whole pipeline and write a PNG.

    Raises:
        Txt2PngError: Any fatal error from loading, validation or writing
    """
    options.validate()
    face = load_font(font_path)
    result = render_canvas(face, options)
    save_image(out_path, result.image)
    return result
