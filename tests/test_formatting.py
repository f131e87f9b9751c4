"""Tests for color readouts and the pixel probe."""

import numpy as np
import pytest

from colormagic import ColorModel, PixelBuffer, RGBColor, format_color, probe_pixel


@pytest.fixture
def probe_buffer():
    """3x2 buffer: red, green, blue / black, white, gray."""
    pixels = np.array(
        [
            [[255, 0, 0, 255], [0, 255, 0, 255], [0, 0, 255, 255]],
            [[0, 0, 0, 255], [255, 255, 255, 0], [128, 128, 128, 10]],
        ],
        dtype=np.uint8,
    )
    return PixelBuffer.from_array(pixels)


class TestFormatColor:
    """Test per-model string formats."""

    def test_rgb(self):
        """RGB has no units."""
        assert format_color(RGBColor(12, 200, 99), "RGB") == "RGB(12, 200, 99)"

    def test_hsv(self):
        """HSV carries degree and percent signs."""
        assert format_color(RGBColor(255, 0, 0), "HSV") == "HSV(0°, 100%, 100%)"
        assert format_color(RGBColor(0, 0, 255), "HSV") == "HSV(240°, 100%, 100%)"

    def test_cmyk(self):
        """CMYK channels are percentages."""
        assert format_color(RGBColor(255, 0, 0), "CMYK") == "CMYK(0%, 100%, 100%, 0%)"
        assert format_color(RGBColor(0, 0, 0), "CMYK") == "CMYK(0%, 0%, 0%, 100%)"

    def test_lab(self):
        """LAB is unitless."""
        assert format_color(RGBColor(255, 255, 255), "LAB") == "LAB(100, 0, 0)"
        assert format_color(RGBColor(0, 0, 0), "LAB") == "LAB(0, 0, 0)"

    def test_yuv(self):
        """YUV chroma is centered on 128."""
        assert format_color(RGBColor(0, 0, 0), "YUV") == "YUV(0, 128, 128)"

    def test_accepts_tuple_and_enum(self):
        """Plain tuples and ColorModel members are accepted."""
        assert format_color((255, 0, 0), ColorModel.HSV) == "HSV(0°, 100%, 100%)"

    def test_unknown_model_falls_back_to_rgb(self):
        """Unrecognized models render as RGB."""
        assert format_color(RGBColor(1, 2, 3), "HSL") == "RGB(1, 2, 3)"


class TestProbePixel:
    """Test reading a pixel under the pointer."""

    def test_in_bounds(self, probe_buffer):
        """Pixels are addressed by column then row."""
        assert probe_pixel(probe_buffer, 0, 0, "RGB") == "RGB(255, 0, 0)"
        assert probe_pixel(probe_buffer, 2, 0, "RGB") == "RGB(0, 0, 255)"
        assert probe_pixel(probe_buffer, 1, 1, "RGB") == "RGB(255, 255, 255)"

    def test_alpha_ignored(self, probe_buffer):
        """Transparent pixels still report their color."""
        assert probe_pixel(probe_buffer, 2, 1, "RGB") == "RGB(128, 128, 128)"

    def test_reports_in_model(self, probe_buffer):
        """The readout uses the requested model."""
        assert probe_pixel(probe_buffer, 0, 0, "CMYK") == "CMYK(0%, 100%, 100%, 0%)"
        assert probe_pixel(probe_buffer, 1, 0, "HSV") == "HSV(120°, 100%, 100%)"

    def test_fractional_positions_floor(self, probe_buffer):
        """Fractional coordinates are floored."""
        assert probe_pixel(probe_buffer, 1.9, 0.2, "RGB") == "RGB(0, 255, 0)"

    @pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -0.5), (100, 100)])
    def test_out_of_bounds(self, probe_buffer, x, y):
        """Positions outside the buffer give None."""
        assert probe_pixel(probe_buffer, x, y, "RGB") is None

    @pytest.mark.parametrize(
        "x, y",
        [(float("nan"), 0), (0, float("nan")), (float("inf"), 0), (0, float("-inf"))],
    )
    def test_non_finite_positions(self, probe_buffer, x, y):
        """NaN and infinite positions give None instead of raising."""
        assert probe_pixel(probe_buffer, x, y, "RGB") is None

    def test_empty_buffer(self):
        """An empty buffer has nothing to probe."""
        empty = PixelBuffer(np.empty(0, dtype=np.uint8), 0, 0)
        assert probe_pixel(empty, 0, 0, "RGB") is None
