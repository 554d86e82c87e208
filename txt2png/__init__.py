"""
txt2png - render a short string into a PNG, one character per slot.

Each character is measured with FreeType, centered in its own fixed-width
slot on an RGBA canvas and the result is written as a lossless PNG. Useful
for character-width reference sheets and test images.

## Quick Start

```python
from txt2png import RenderOptions, render_to_file

render_to_file("font.ttf", "out.png", RenderOptions(text="AB", slot_width=100, height=50))
```
"""

__version__ = "0.1.0"

from .base import (
    EncodeError,
    FlushError,
    FontParseError,
    FontReadError,
    GlyphError,
    GlyphMissingError,
    GlyphRasterError,
    Hinting,
    InvalidOptionsError,
    OutputCreateError,
    Palette,
    RenderOptions,
    Txt2PngError,
    get_palette,
)
from .canvas import build_canvas, canvas_width
from .fontloader import load_font
from .freetypepy import GlyphRasterizer
from .layout import GlyphPlacement, render_text
from .pipeline import RenderResult, render_canvas, render_to_file
from .writer import encode_png, save_image

__all__ = [
    "EncodeError",
    "FlushError",
    "FontParseError",
    "FontReadError",
    "GlyphError",
    "GlyphMissingError",
    "GlyphRasterError",
    "GlyphPlacement",
    "GlyphRasterizer",
    "Hinting",
    "InvalidOptionsError",
    "OutputCreateError",
    "Palette",
    "RenderOptions",
    "RenderResult",
    "Txt2PngError",
    "build_canvas",
    "canvas_width",
    "encode_png",
    "get_palette",
    "load_font",
    "render_canvas",
    "render_text",
    "render_to_file",
    "save_image",
    "__version__",
]
