# this_file: txt2png/layout.py
"""
Slot layout: every character is centered in its own fixed-width slot.

Centering uses the advance width, not the ink bounding box, so glyphs with
large side bearings can look slightly off-center. No kerning is applied and
each slot is laid out independently of its neighbours.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .base import RGBA, GlyphError
from .constants import BASELINE_DENOMINATOR, BASELINE_NUMERATOR, SUBPIXEL_SCALE
from .freetypepy import GlyphRasterizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphPlacement:
    """Where a character went, or why it did not."""

    index: int
    char: str
    width: int | None
    x: int | None
    y: int
    drawn: bool


def glyph_pixel_width(advance: int) -> int:
    """Convert a 26.6 advance to whole pixels, truncating."""
    return advance // SUBPIXEL_SCALE


def slot_x(index: int, slot_width: int, glyph_width: int) -> int:
    """Left pen position that centers a glyph of glyph_width in slot index."""
    return index * slot_width + (slot_width // 2 - glyph_width // 2)


def baseline_y(image_height: int) -> int:
    """Fixed baseline two-thirds of the way down the canvas."""
    return image_height * BASELINE_NUMERATOR // BASELINE_DENOMINATOR


def render_text(
    img: np.ndarray,
    rasterizer: GlyphRasterizer,
    text: str,
    slot_width: int,
    image_height: int,
    foreground: RGBA,
) -> list[GlyphPlacement]:
    """
    Draw each character of text centered in its slot, left to right.

    A character the font cannot measure or draw is logged and its slot is
    left blank; the rest of the text is still rendered.

    Returns:
        One placement record per character, in input order
    """
    y = baseline_y(image_height)
    placements = []

    for i, char in enumerate(text):
        try:
            advance = rasterizer.advance(char)
        except GlyphError as exc:
            logger.warning("Failed to get glyph advance: %s", exc)
            placements.append(GlyphPlacement(i, char, None, None, y, drawn=False))
            continue

        width = glyph_pixel_width(advance)
        x = slot_x(i, slot_width, width)

        try:
            rasterizer.draw(img, char, x, y, foreground)
        except GlyphError as exc:
            logger.warning("Error drawing glyph: %s", exc)
            placements.append(GlyphPlacement(i, char, width, x, y, drawn=False))
            continue

        placements.append(GlyphPlacement(i, char, width, x, y, drawn=True))

    return placements
