# this_file: txt2png/fontloader.py
"""
Load a TrueType/OpenType font file into a FreeType face.
"""

from __future__ import annotations

import io
from pathlib import Path

import freetype
from freetype.ft_errors import FT_Exception

from .base import FontParseError, FontReadError


def load_font(path: Path | str) -> freetype.Face:
    """
    Read font bytes from disk and parse them.

    Args:
        path: Path to a .ttf/.otf file

    Returns:
        Parsed FreeType face

    Raises:
        FontReadError: If the file cannot be opened or read
        FontParseError: If the bytes are not a recognized font format
    """
    path = Path(path)
    try:
        fontdata = path.read_bytes()
    except OSError as exc:
        raise FontReadError(f"Error reading font file {path}: {exc}") from exc

    try:
        return freetype.Face(io.BytesIO(fontdata))
    except FT_Exception as exc:
        raise FontParseError(f"Error parsing font {path}: {exc}") from exc
