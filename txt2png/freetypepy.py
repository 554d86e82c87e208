# this_file: txt2png/freetypepy.py
"""
Glyph measurement and rasterisation backed by FreeType.
"""

from __future__ import annotations

import freetype
import numpy as np
from freetype.ft_errors import FT_Exception

from .base import RGBA, GlyphMissingError, GlyphRasterError, Hinting, InvalidOptionsError
from .constants import POINTS_PER_INCH, SUBPIXEL_SCALE

# Embedded bitmap strikes are ignored so every glyph comes from its outline
_LOAD_FLAGS = {
    Hinting.NONE: freetype.FT_LOAD_NO_HINTING | freetype.FT_LOAD_NO_BITMAP,
    Hinting.FULL: freetype.FT_LOAD_DEFAULT | freetype.FT_LOAD_NO_BITMAP,
}


def codepoint_label(char: str) -> str:
    """Format a character as e.g. U+0041 'A' for diagnostics."""
    return f"U+{ord(char):04X} {char!r}"


class GlyphRasterizer:
    """
    Measures and draws single characters of one face at a fixed size.

    The face's character size is set on construction, so the face belongs
    to this rasterizer while it is in use. Build one rasterizer per render.

    Raises:
        InvalidOptionsError: If FreeType cannot scale the face to size/dpi
    """

    engine = "freetype"

    def __init__(
        self,
        face: freetype.Face,
        *,
        size: float,
        dpi: float,
        hinting: Hinting | str = Hinting.NONE,
    ):
        self.face = face
        self.size = float(size)
        self.dpi = float(dpi)
        self.hinting = Hinting(hinting)
        self.load_flags = _LOAD_FLAGS[self.hinting]

        # Scale by dpi ourselves so fractional resolutions are not truncated
        try:
            char_size = int(round(self.size * self.dpi / POINTS_PER_INCH * SUBPIXEL_SCALE))
            self.face.set_char_size(char_size, char_size, 72, 72)
        except (OverflowError, ValueError, FT_Exception) as exc:
            raise InvalidOptionsError(
                f"Unsupported font size {self.size}pt at {self.dpi} dpi: {exc}"
            ) from exc

    def _load(self, char: str, flags: int) -> freetype.GlyphSlot:
        if self.face.get_char_index(char) == 0:
            raise GlyphMissingError(char, f"No glyph for {codepoint_label(char)}")
        try:
            self.face.load_char(char, flags)
        except FT_Exception as exc:
            raise GlyphRasterError(
                char, f"Failed to load glyph {codepoint_label(char)}: {exc}"
            ) from exc
        return self.face.glyph

    def advance(self, char: str) -> int:
        """
        Horizontal advance of a character in 26.6 fixed-point units.

        Raises:
            GlyphMissingError: If the face has no glyph for the character
            GlyphRasterError: If FreeType cannot load the glyph
        """
        return self._load(char, self.load_flags).advance.x

    def draw(self, img: np.ndarray, char: str, x: int, y: int, color: RGBA) -> None:
        """
        Render a character with its pen origin at (x, y) and blend it into img.

        Raises:
            GlyphMissingError: If the face has no glyph for the character
            GlyphRasterError: If FreeType cannot render the glyph
        """
        slot = self._load(char, self.load_flags | freetype.FT_LOAD_RENDER)

        bitmap = slot.bitmap
        if not (bitmap.width > 0 and bitmap.rows > 0):
            # Glyphs without ink, e.g. space
            return
        if bitmap.pixel_mode != freetype.FT_PIXEL_MODE_GRAY:
            raise GlyphRasterError(
                char,
                f"Unsupported pixel mode {bitmap.pixel_mode} for {codepoint_label(char)}",
            )

        coverage = np.array(bitmap.buffer, dtype=np.uint8).reshape(bitmap.rows, bitmap.pitch)
        coverage = coverage[:, : bitmap.width]

        composite_glyph(img, coverage, x + slot.bitmap_left, y - slot.bitmap_top, color)


def composite_glyph(img: np.ndarray, coverage: np.ndarray, x: int, y: int, color: RGBA) -> None:
    """
    Blend color into img through an 8-bit coverage mask placed at (x, y).

    Parts of the mask outside the canvas are clipped.
    """
    gh, gw = coverage.shape
    ih, iw = img.shape[:2]

    x1 = max(0, x)
    y1 = max(0, y)
    x2 = min(iw, x + gw)
    y2 = min(ih, y + gh)

    if x2 <= x1 or y2 <= y1:
        return

    gx1 = max(0, -x)
    gy1 = max(0, -y)
    gx2 = gx1 + (x2 - x1)
    gy2 = gy1 + (y2 - y1)

    alpha = coverage[gy1:gy2, gx1:gx2].astype(np.float32)[..., np.newaxis] / 255.0
    if not alpha.any():
        return

    src = np.asarray(color, dtype=np.float32)
    img_slice = img[y1:y2, x1:x2].astype(np.float32)
    img[y1:y2, x1:x2] = np.rint(img_slice * (1 - alpha) + src * alpha).astype(np.uint8)
