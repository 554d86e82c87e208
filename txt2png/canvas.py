# this_file: txt2png/canvas.py
"""
Allocate the RGBA pixel buffer that glyphs are composited onto.
"""

from __future__ import annotations

import numpy as np

from .base import RGBA


def canvas_width(text_length: int, slot_width: int) -> int:
    """One slot per code point; a single slot when the text is empty."""
    if text_length > 0:
        return text_length * slot_width
    return slot_width


def build_canvas(
    text_length: int,
    slot_width: int,
    image_height: int,
    background: RGBA,
    guideline_color: RGBA,
    show_guidelines: bool = False,
) -> np.ndarray:
    """
    Create a background-filled canvas of shape (height, width, 4).

    Args:
        text_length: Number of code points in the text
        slot_width: Width of each character slot in pixels
        image_height: Canvas height in pixels
        background: Fill color
        guideline_color: Color of the slot boundary strokes
        show_guidelines: Draw a 1px column at the left edge of every slot

    Returns:
        uint8 numpy array
    """
    width = canvas_width(text_length, slot_width)
    img = np.empty((image_height, width, 4), dtype=np.uint8)
    img[:, :] = background

    # Vertical guidelines
    if show_guidelines:
        for i in range(text_length):
            img[:, i * slot_width] = guideline_color

    return img
