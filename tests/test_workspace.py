"""Tests for the Workspace render state."""

import io

import numpy as np
import pytest
from PIL import Image

from colormagic import (
    ColorAdjustment,
    ColorModel,
    PixelBuffer,
    UnreadableImageError,
    Workspace,
    format_color,
    transform_image,
)


@pytest.fixture
def small_image():
    """Random 6x4 RGBA buffer."""
    rng = np.random.default_rng(11)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(4, 6, 4), dtype=np.uint8))


@pytest.fixture
def workspace(small_image):
    """Workspace holding the small image at native size."""
    return Workspace(max_size=None).set_image(small_image)


class TestWorkspaceState:
    """Test model, adjustment and view state."""

    def test_defaults(self):
        """A new workspace shows the original in RGB."""
        ws = Workspace()
        assert ws.model is ColorModel.RGB
        assert ws.show_original is True
        assert ws.adjustment == ColorAdjustment.zero("RGB")
        assert not ws.has_adjustment
        assert ws.image is None
        assert ws.render() is None
        assert ws.probe(0, 0) is None

    def test_select_model_resets_adjustment(self, workspace):
        """Switching models discards the adjustment."""
        workspace.select_model("HSV").set_channel("h", 40)
        assert workspace.has_adjustment

        workspace.select_model("LAB")
        assert workspace.model is ColorModel.LAB
        assert workspace.adjustment == ColorAdjustment.zero("LAB")

    def test_select_unknown_model(self, workspace):
        """Unknown model names raise ValueError and keep the state."""
        with pytest.raises(ValueError):
            workspace.select_model("HSL")
        assert workspace.model is ColorModel.RGB

    def test_set_channel_keeps_others(self, workspace):
        """Slider moves replace one channel at a time."""
        workspace.select_model("CMYK").set_channel("c", 10).set_channel("k", -5).set_channel("c", 20)
        assert workspace.adjustment == ColorAdjustment("CMYK", c=20, k=-5)

    def test_set_channel_unknown(self, workspace):
        """Channels of other models are rejected."""
        with pytest.raises(ValueError, match="not valid for RGB"):
            workspace.set_channel("h", 10)

    def test_set_adjustment_mismatch(self, workspace):
        """Adjustments must match the selected model."""
        with pytest.raises(ValueError, match="select_model"):
            workspace.set_adjustment(ColorAdjustment("YUV", y=10))

    def test_set_adjustment_type(self, workspace):
        """Only ColorAdjustment instances are accepted."""
        with pytest.raises(TypeError, match="adjustment must be ColorAdjustment"):
            workspace.set_adjustment({"r": 10})

    def test_set_image_type(self):
        """Only PixelBuffer instances are accepted."""
        with pytest.raises(TypeError, match="buffer must be PixelBuffer"):
            Workspace().set_image(np.zeros((2, 2, 4), dtype=np.uint8))

    def test_toggle_view(self, workspace):
        """toggle_view flips show_original."""
        workspace.toggle_view()
        assert workspace.show_original is False
        workspace.toggle_view()
        assert workspace.show_original is True

    def test_clear(self, workspace):
        """clear() drops the image but keeps the model."""
        workspace.select_model("YUV").clear()
        assert workspace.image is None
        assert workspace.render() is None
        assert workspace.model is ColorModel.YUV

    def test_repr(self, workspace):
        """Test repr summarizes the state."""
        assert repr(workspace) == "Workspace(RGB, ColorAdjustment(model='RGB', r=0, g=0, b=0), original, 6x4)"


class TestWorkspaceRender:
    """Test which surface is displayed."""

    def test_original_when_unadjusted(self, workspace, small_image):
        """show_original with no adjustment displays the source."""
        workspace.select_model("HSV")
        assert not workspace.shows_transformed
        assert workspace.render() == small_image

    def test_adjustment_forces_transformed(self, workspace, small_image):
        """Any non-zero adjustment displays the transformed image."""
        workspace.select_model("HSV").set_channel("s", -30)
        assert workspace.show_original
        assert workspace.shows_transformed
        assert workspace.render() == transform_image(
            small_image, "HSV", ColorAdjustment("HSV", s=-30)
        )

    def test_toggle_shows_remap(self, workspace, small_image):
        """Turning show_original off displays the unadjusted remap."""
        workspace.select_model("LAB").toggle_view()
        assert workspace.render() == transform_image(small_image, "LAB")

    def test_zero_adjustment_shows_original(self, workspace, small_image):
        """Setting a slider back to zero returns to the original."""
        workspace.select_model("YUV").set_channel("u", 15).set_channel("u", 0)
        assert workspace.render() == small_image

    def test_render_cached(self, workspace):
        """Repeated renders reuse the surface until state changes."""
        workspace.select_model("CMYK").toggle_view()
        first = workspace.render()
        assert workspace.render() is first

        workspace.set_channel("k", 10)
        assert workspace.render() is not first

    def test_source_not_modified(self, workspace, small_image):
        """Rendering never writes the source buffer."""
        before = small_image.data.copy()
        workspace.select_model("HSV").set_channel("h", 90).render()
        np.testing.assert_array_equal(small_image.data, before)


class TestWorkspaceProbe:
    """Test probing the rendered surface."""

    def test_probe_reads_rendered_surface(self, workspace):
        """Probes sample the displayed pixels in the selected model."""
        workspace.select_model("HSV").set_channel("h", 120)
        surface = workspace.render()
        assert workspace.probe(2, 3) == format_color(surface.pixel(2, 3), "HSV")

    def test_probe_original(self, workspace, small_image):
        """With the original displayed, probes read the source."""
        workspace.select_model("CMYK")
        assert workspace.probe(5, 0) == format_color(small_image.pixel(5, 0), "CMYK")

    def test_probe_out_of_bounds(self, workspace):
        """Positions outside the image give None."""
        assert workspace.probe(6, 0) is None
        assert workspace.probe(-1, 2) is None

    def test_probe_display_scales(self, workspace):
        """Display coordinates are scaled to surface pixels and floored."""
        surface = workspace.render()
        # 6x4 surface shown at 60x40: 10 display pixels per image pixel
        assert workspace.probe_display(35.9, 19.0, (60, 40)) == format_color(surface.pixel(3, 1), "RGB")
        assert workspace.probe_display(60, 0, (60, 40)) is None

    def test_probe_display_degenerate(self, workspace):
        """Empty display sizes give None."""
        assert workspace.probe_display(0, 0, (0, 40)) is None

    @pytest.mark.parametrize(
        "x, y, display_size",
        [
            (float("nan"), 0, (60, 40)),
            (0, float("inf"), (60, 40)),
            (10, 10, (float("nan"), 40)),
        ],
    )
    def test_probe_display_non_finite(self, workspace, x, y, display_size):
        """Non-finite pointer positions or display sizes give None."""
        assert workspace.probe_display(x, y, display_size) is None


class TestWorkspaceLoading:
    """Test loading and fitting images."""

    def test_fits_into_default_bounds(self):
        """Loaded images are fitted into 400x300."""
        ws = Workspace().set_image(PixelBuffer.filled(800, 200, (5, 5, 5)))
        assert ws.image.size == (400, 100)

    def test_small_images_scaled_up(self):
        """Small images are enlarged to the bounds."""
        ws = Workspace().set_image(PixelBuffer.filled(40, 30, (5, 5, 5)))
        assert ws.image.size == (400, 300)

    def test_native_size(self, small_image):
        """max_size=None keeps the native size."""
        assert Workspace(max_size=None).set_image(small_image).image.size == (6, 4)

    def test_load_bytes(self):
        """load() decodes encoded images."""
        stream = io.BytesIO()
        Image.new("RGB", (8, 6), (250, 0, 0)).save(stream, format="PNG")
        ws = Workspace(max_size=None).load(stream.getvalue())
        assert ws.image.size == (8, 6)
        assert ws.probe(7, 5) == "RGB(250, 0, 0)"

    def test_load_fits(self):
        """Decoded images are fitted like set_image()."""
        stream = io.BytesIO()
        Image.new("RGB", (8, 6), (250, 0, 0)).save(stream, format="PNG")
        ws = Workspace(max_size=(16, 16)).load(stream.getvalue())
        assert ws.image.size == (16, 12)

    def test_load_failure_keeps_state(self, small_image):
        """A failed load leaves the previous image in place."""
        ws = Workspace(max_size=None).set_image(small_image)
        with pytest.raises(UnreadableImageError):
            ws.load(b"garbage")
        assert ws.image == small_image
