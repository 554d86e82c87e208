# this_file: txt2png/base.py
"""
Shared data model and error taxonomy for the rendering pipeline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .constants import (
    BLACK,
    DARK_GUIDELINE,
    DEFAULT_DPI,
    DEFAULT_FONT_SIZE,
    DEFAULT_TEXT,
    LIGHT_GUIDELINE,
    RENDER_HEIGHT,
    SLOT_WIDTH,
    WHITE,
)

RGBA = tuple[int, int, int, int]


class Txt2PngError(RuntimeError):
    """Base class for every error raised by txt2png."""


class InvalidOptionsError(Txt2PngError):
    """Raised when render options violate their invariants."""


class FontReadError(Txt2PngError):
    """Raised when the font file cannot be opened or read."""


class FontParseError(Txt2PngError):
    """Raised when font bytes are not a recognized font format."""


class OutputCreateError(Txt2PngError):
    """Raised when the output file cannot be created."""


class EncodeError(Txt2PngError):
    """Raised when the canvas cannot be encoded as an image."""


class FlushError(Txt2PngError):
    """Raised when encoded bytes cannot be committed to the output file."""


class GlyphError(Txt2PngError):
    """
    Per-character failure. The renderer logs these and leaves the slot blank.
    """

    def __init__(self, char: str, message: str):
        super().__init__(message)
        self.char = char


class GlyphMissingError(GlyphError):
    """Raised when the font has no glyph for a code point."""


class GlyphRasterError(GlyphError):
    """Raised when the rasterizer fails on an individual glyph."""


class Hinting(str, Enum):
    """Rasterizer grid-fitting mode."""

    NONE = "none"
    FULL = "full"


@dataclass(frozen=True)
class Palette:
    foreground: RGBA
    background: RGBA
    guideline: RGBA


BLACK_ON_WHITE = Palette(foreground=BLACK, background=WHITE, guideline=LIGHT_GUIDELINE)
WHITE_ON_BLACK = Palette(foreground=WHITE, background=BLACK, guideline=DARK_GUIDELINE)


def get_palette(white_on_black: bool) -> Palette:
    """Return the color scheme selected by the invert flag."""
    return WHITE_ON_BLACK if white_on_black else BLACK_ON_WHITE


@dataclass(frozen=True)
class RenderOptions:
    """
    Immutable configuration captured once at startup.

    Args:
        dpi: Resolution used for font metrics
        size: Font size in points
        hinting: Grid-fitting mode
        white_on_black: Invert the palette
        slot_width: Width of each character slot in pixels
        height: Image height in pixels
        guidelines: Draw a vertical stroke at every slot boundary
        text: Text to render, one slot per code point
    """

    dpi: float = DEFAULT_DPI
    size: float = DEFAULT_FONT_SIZE
    hinting: Hinting = Hinting.NONE
    white_on_black: bool = False
    slot_width: int = SLOT_WIDTH
    height: int = RENDER_HEIGHT
    guidelines: bool = False
    text: str = DEFAULT_TEXT

    def __post_init__(self):
        # Accept plain strings such as "full" from callers
        try:
            hinting = Hinting(self.hinting)
        except ValueError as exc:
            raise InvalidOptionsError(f"Unknown hinting mode: {self.hinting}") from exc
        object.__setattr__(self, "hinting", hinting)

    @property
    def palette(self) -> Palette:
        return get_palette(self.white_on_black)

    @property
    def codepoints(self) -> int:
        return len(self.text)

    def validate(self) -> RenderOptions:
        """
        Check numeric invariants and return self.

        Raises:
            InvalidOptionsError: If a dimension or metric is out of range
        """
        if not (self.dpi > 0 and math.isfinite(self.dpi)):
            raise InvalidOptionsError(f"dpi must be a positive finite number, got {self.dpi}")
        if not (self.size > 0 and math.isfinite(self.size)):
            raise InvalidOptionsError(f"size must be a positive finite number, got {self.size}")
        if self.slot_width < 1:
            raise InvalidOptionsError(f"slot width must be at least 1, got {self.slot_width}")
        if self.height < 1:
            raise InvalidOptionsError(f"height must be at least 1, got {self.height}")
        return self
