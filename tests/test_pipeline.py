# this_file: tests/test_pipeline.py

"""End-to-end tests of the render pipeline."""

import numpy as np
import pytest
from PIL import Image

from txt2png import (
    FontReadError,
    InvalidOptionsError,
    RenderOptions,
    get_palette,
    render_canvas,
    render_to_file,
)


def _read(path):
    with Image.open(path) as im:
        return np.asarray(im.convert("RGBA"))


class TestRenderToFile:
    """Test the whole load, render and write pass."""

    def test_two_glyphs(self, font_path, tmp_path):
        """'AB' in 100px slots gives a 200x50 image with centered glyphs."""
        options = RenderOptions(text="AB", slot_width=100, height=50, size=40)
        out = tmp_path / "ab.png"
        result = render_to_file(font_path, out, options)

        pixels = _read(out)
        assert pixels.shape == (50, 200, 4)
        assert np.array_equal(pixels, result.image)

        # 40pt: 'A' is 24px wide with ink 4..19, 'B' 12px wide with ink 0..11
        a, b = result.placements
        assert (a.width, a.x, a.y) == (24, 38, 33)
        assert (b.width, b.x, b.y) == (12, 144, 33)

        white = (255, 255, 255, 255)
        black = (0, 0, 0, 255)
        ink = (pixels != white).any(axis=2)
        cols = np.nonzero(ink.any(axis=0))[0]
        assert list(cols) == list(range(42, 58)) + list(range(144, 156))
        assert (pixels[10:33, 42:58] == black).all()
        assert (pixels[10:33, 144:156] == black).all()

    def test_empty_text(self, font_path, tmp_path):
        """Empty text writes a single blank slot."""
        options = RenderOptions(text="", slot_width=64, height=32)
        out = tmp_path / "empty.png"
        render_to_file(font_path, out, options)

        pixels = _read(out)
        assert pixels.shape == (32, 64, 4)
        assert (pixels == (255, 255, 255, 255)).all()

    def test_white_on_black_with_guidelines(self, font_path, tmp_path):
        """Inverted palette and guidelines end up in the file."""
        palette = get_palette(True)
        options = RenderOptions(
            text="BB", slot_width=60, height=60, size=20, white_on_black=True, guidelines=True
        )
        out = tmp_path / "inv.png"
        render_to_file(font_path, out, options)

        pixels = _read(out)
        assert (pixels[:, 0] == palette.guideline).all()
        assert (pixels[:, 60] == palette.guideline).all()
        assert (pixels[0, 1:60] == palette.background).all()
        assert (pixels == palette.foreground).all(axis=2).any()

    def test_byte_identical_runs(self, font_path, tmp_path):
        """Identical inputs produce identical files."""
        options = RenderOptions(text="ABBA", slot_width=50, height=80, size=30, hinting="full")
        first = tmp_path / "1.png"
        second = tmp_path / "2.png"
        render_to_file(font_path, first, options)
        render_to_file(font_path, second, options)
        assert first.read_bytes() == second.read_bytes()

    def test_missing_font_writes_nothing(self, tmp_path):
        """A fatal font error leaves no output file."""
        out = tmp_path / "out.png"
        with pytest.raises(FontReadError):
            render_to_file(tmp_path / "nope.ttf", out, RenderOptions())
        assert not out.exists()

    def test_invalid_options(self, font_path, tmp_path):
        """Degenerate dimensions are rejected before any I/O."""
        out = tmp_path / "out.png"
        with pytest.raises(InvalidOptionsError):
            render_to_file(font_path, out, RenderOptions(slot_width=0))
        assert not out.exists()


class TestRenderCanvas:
    """Each call owns its canvas."""

    def test_fresh_canvas_per_call(self, face):
        """Rendering twice never shares or accumulates pixels."""
        options = RenderOptions(text="A", slot_width=80, height=80, size=40)
        first = render_canvas(face, options)
        second = render_canvas(face, options)
        assert first.image is not second.image
        assert np.array_equal(first.image, second.image)

    def test_each_render_sets_its_own_size(self, face):
        """A shared face is rescaled per render, never reusing a previous size."""
        large = render_canvas(face, RenderOptions(text="A", slot_width=80, height=80, size=40))
        small = render_canvas(face, RenderOptions(text="A", slot_width=80, height=80, size=20))
        again = render_canvas(face, RenderOptions(text="A", slot_width=80, height=80, size=40))

        assert [r.placements[0].width for r in (large, small, again)] == [24, 12, 24]
        assert np.array_equal(large.image, again.image)
