# this_file: txt2png/writer.py
"""
Lossless PNG output for finished canvases.
"""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image

from .base import EncodeError, FlushError, OutputCreateError


def encode_png(img: np.ndarray) -> bytes:
    """
    Encode an RGBA canvas to PNG bytes in memory.

    Raises:
        EncodeError: If the array is not an RGBA uint8 canvas or Pillow fails
    """
    if img.ndim != 3 or img.shape[2] != 4 or img.dtype != np.uint8:
        raise EncodeError(f"Expected an RGBA uint8 canvas, got {img.dtype} {img.shape}")

    bio = io.BytesIO()
    try:
        Image.fromarray(img).save(bio, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Error encoding PNG: {exc}") from exc
    return bio.getvalue()


def save_image(path: Path | str, img: np.ndarray) -> Path:
    """
    Write a canvas to path as PNG, truncating any existing file.

    The file is created before encoding, so an EncodeError leaves an empty
    file behind at path.

    Raises:
        OutputCreateError: If the file cannot be created
        EncodeError: If the canvas cannot be encoded
        FlushError: If the encoded bytes cannot be written out
    """
    path = Path(path)
    try:
        out = open(path, "wb")
    except OSError as exc:
        raise OutputCreateError(f"Error creating output file {path}: {exc}") from exc

    with out:
        data = encode_png(img)
        try:
            out.write(data)
            out.flush()
        except OSError as exc:
            raise FlushError(f"Error flushing {path}: {exc}") from exc

    return path
