"""Tests for transform_image and the display remaps."""

import logging

import numpy as np
import pytest

from colormagic import (
    ColorAdjustment,
    ColorModel,
    PixelBuffer,
    RGBColor,
    rgb_to_yuv,
    transform_color,
    transform_image,
    visualize_color,
)


@pytest.fixture
def sample_buffer():
    """Random 16x12 RGBA buffer with varied alpha."""
    rng = np.random.default_rng(42)
    pixels = rng.integers(0, 256, size=(12, 16, 4), dtype=np.uint8)
    return PixelBuffer.from_array(pixels)


class TestVisualizeColor:
    """Test the per-model display remaps."""

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (12, 200, 99)])
    def test_rgb_untouched(self, rgb):
        """RGB is displayed as-is."""
        assert visualize_color(RGBColor(*rgb), "RGB") == RGBColor(*rgb)

    def test_hsv_saturated_red(self):
        """Saturated channels are boosted and capped at 255."""
        assert visualize_color(RGBColor(255, 0, 0), "HSV") == RGBColor(255, 0, 0)

    def test_hsv_gray_boosts_blue(self):
        """Grays only gain on blue, by (1 + v/200)."""
        # v = 25% -> blue gain 1.125
        assert visualize_color(RGBColor(64, 64, 64), "HSV") == RGBColor(64, 64, 72)
        # v = 78% -> blue gain 1.39, capped
        assert visualize_color(RGBColor(200, 200, 200), "HSV") == RGBColor(200, 200, 255)

    def test_cmyk(self):
        """Ink and key darken their channels."""
        assert visualize_color(RGBColor(255, 255, 255), "CMYK") == RGBColor(255, 255, 255)
        assert visualize_color(RGBColor(0, 0, 0), "CMYK") == RGBColor(0, 0, 0)
        assert visualize_color(RGBColor(255, 0, 0), "CMYK") == RGBColor(255, 0, 0)

    def test_lab(self):
        """L scales to the red channel, a/b are offset by 128."""
        assert visualize_color(RGBColor(255, 255, 255), "LAB") == RGBColor(255, 128, 128)
        assert visualize_color(RGBColor(0, 0, 0), "LAB") == RGBColor(0, 128, 128)

    def test_yuv(self):
        """YUV channels are shown directly."""
        for rgb in (RGBColor(0, 0, 0), RGBColor(90, 30, 200), RGBColor(255, 0, 0)):
            yuv = rgb_to_yuv(rgb)
            expected = tuple(min(255, max(0, c)) for c in yuv)
            assert visualize_color(rgb, "YUV").as_tuple() == expected

    def test_unknown_model(self):
        """Unknown models are rejected."""
        with pytest.raises(ValueError):
            visualize_color(RGBColor(0, 0, 0), "HSL")


class TestTransformImage:
    """Test buffer transformation guarantees."""

    @pytest.mark.parametrize("model", list(ColorModel))
    def test_dimensions_preserved(self, sample_buffer, model):
        """Output has the same size and length as the input."""
        result = transform_image(sample_buffer, model)
        assert result.size == sample_buffer.size
        assert len(result) == len(sample_buffer)

    @pytest.mark.parametrize("model", list(ColorModel))
    def test_alpha_untouched(self, sample_buffer, model):
        """Alpha bytes are copied through."""
        adjustment = ColorAdjustment(model, {model.channels[0]: 40})
        result = transform_image(sample_buffer, model, adjustment)
        np.testing.assert_array_equal(result.alpha, sample_buffer.alpha)

    @pytest.mark.parametrize("model", list(ColorModel))
    def test_input_not_modified(self, sample_buffer, model):
        """The input buffer is never written."""
        before = sample_buffer.data.copy()
        adjustment = ColorAdjustment(model, {channel: 25 for channel in model.channels})
        result = transform_image(sample_buffer, model, adjustment)
        np.testing.assert_array_equal(sample_buffer.data, before)
        assert result.data is not sample_buffer.data

    @pytest.mark.parametrize("model", list(ColorModel))
    def test_zero_adjustment_equals_none(self, sample_buffer, model):
        """A zero adjustment renders exactly like no adjustment."""
        assert transform_image(sample_buffer, model, ColorAdjustment.zero(model)) == transform_image(
            sample_buffer, model
        )

    def test_rgb_without_adjustment_is_identity(self, sample_buffer):
        """RGB with no adjustment reproduces the input."""
        assert transform_image(sample_buffer, "RGB") == sample_buffer

    def test_hue_wraps(self, sample_buffer):
        """Hue +370 renders like +10."""
        assert transform_image(sample_buffer, "HSV", ColorAdjustment("HSV", h=370)) == transform_image(
            sample_buffer, "HSV", ColorAdjustment("HSV", h=10)
        )

    def test_matches_per_pixel_reference(self, sample_buffer):
        """Every pixel equals transform_color."""
        adjustment = ColorAdjustment("LAB", l=12, a=-20, b=30)
        result = transform_image(sample_buffer, "LAB", adjustment)
        for y in range(sample_buffer.height):
            for x in range(sample_buffer.width):
                expected = transform_color(sample_buffer.pixel(x, y), "LAB", adjustment)
                assert result.pixel(x, y) == expected

    def test_rgb_adjustment(self):
        """RGB deltas shift and clamp each pixel."""
        src = PixelBuffer.filled(2, 2, (250, 100, 0), alpha=128)
        result = transform_image(src, "RGB", ColorAdjustment("RGB", r=10, g=-30, b=-5))
        assert result == PixelBuffer.filled(2, 2, (255, 70, 0), alpha=128)

    def test_mismatched_adjustment_ignored(self, sample_buffer, caplog):
        """An adjustment for another model has no effect."""
        with caplog.at_level(logging.DEBUG, logger="colormagic.transform.api"):
            result = transform_image(sample_buffer, "HSV", ColorAdjustment("RGB", r=50))
        assert result == transform_image(sample_buffer, "HSV")
        assert "Ignoring RGB adjustment" in caplog.text

    def test_model_name_case_insensitive(self, sample_buffer):
        """Model names are parsed case-insensitively."""
        assert transform_image(sample_buffer, "cmyk") == transform_image(sample_buffer, ColorModel.CMYK)

    def test_unknown_model(self, sample_buffer):
        """Unknown models raise ValueError."""
        with pytest.raises(ValueError, match="Valid options"):
            transform_image(sample_buffer, "HSL")

    def test_wrong_buffer_type(self):
        """Raw arrays must be wrapped in a PixelBuffer."""
        with pytest.raises(TypeError, match="PixelBuffer"):
            transform_image(np.zeros(16, dtype=np.uint8), "RGB")

    def test_wrong_adjustment_type(self, sample_buffer):
        """Adjustments must be ColorAdjustment instances."""
        with pytest.raises(TypeError, match="ColorAdjustment"):
            transform_image(sample_buffer, "RGB", {"r": 10})

    def test_empty_buffer(self):
        """A 0x0 buffer transforms to a 0x0 buffer."""
        empty = PixelBuffer(np.empty(0, dtype=np.uint8), 0, 0)
        result = transform_image(empty, "LAB", ColorAdjustment("LAB", l=5))
        assert result.size == (0, 0)
        assert len(result) == 0

    def test_logs_info(self, sample_buffer, caplog):
        """Completed passes are logged at INFO."""
        with caplog.at_level(logging.INFO, logger="colormagic.transform.api"):
            transform_image(sample_buffer, "YUV")
        assert "[transform_image] Rendered 192 pixels as YUV" in caplog.text
