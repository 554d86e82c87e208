# this_file: tests/conftest.py

"""Shared fixtures: a tiny generated TrueType font with box-shaped glyphs."""

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from txt2png import load_font

UNITS_PER_EM = 1000

# name: (codepoint, advance, ink box (xMin, yMin, xMax, yMax) or None)
GLYPHS = {
    ".notdef": (None, 500, (50, 0, 450, 700)),
    "space": (0x20, 500, None),
    "A": (0x41, 600, (100, 0, 500, 700)),
    "B": (0x42, 300, (0, 0, 300, 700)),
}


def _box_glyph(box):
    pen = TTGlyphPen(None)
    if box is not None:
        x0, y0, x1, y1 = box
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_test_font(path):
    """Write a font where 'A' is a 400x700 box and 'B' a 300x700 box."""
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(list(GLYPHS))
    fb.setupCharacterMap({cp: name for name, (cp, _, _) in GLYPHS.items() if cp is not None})

    glyphs = {name: _box_glyph(box) for name, (_, _, box) in GLYPHS.items()}
    fb.setupGlyf(glyphs)

    glyph_table = fb.font["glyf"]
    metrics = {
        name: (advance, getattr(glyph_table[name], "xMin", 0))
        for name, (_, advance, _) in GLYPHS.items()
    }
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Slot Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def font_path(tmp_path_factory):
    """Path to the generated test font."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "SlotTest-Regular.ttf")


@pytest.fixture
def face(font_path):
    """A freshly loaded face, so char size changes never leak between tests."""
    return load_font(font_path)
