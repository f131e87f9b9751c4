"""Tests for PixelBuffer."""

import numpy as np
import pytest
from PIL import Image

from colormagic import PixelBuffer, RGBColor


class TestPixelBufferConstruction:
    """Test buffer creation and validation."""

    def test_flat_array(self):
        """A flat uint8 array of the right length is accepted."""
        buffer = PixelBuffer(np.arange(24, dtype=np.uint8), 3, 2)
        assert buffer.size == (3, 2)
        assert buffer.pixel_count == 6
        assert len(buffer) == 24

    def test_bytes(self):
        """Raw bytes are wrapped as uint8."""
        buffer = PixelBuffer(bytes([1, 2, 3, 4] * 2), 2, 1)
        assert buffer.data.dtype == np.uint8
        assert buffer.pixel(1, 0) == RGBColor(1, 2, 3)

    def test_wrong_length(self):
        """Length must match width * height * 4."""
        with pytest.raises(ValueError, match="must equal width \\* height \\* 4"):
            PixelBuffer(np.zeros(10, dtype=np.uint8), 2, 2)

    def test_negative_dimensions(self):
        """Dimensions cannot be negative."""
        with pytest.raises(ValueError, match="non-negative"):
            PixelBuffer(np.zeros(0, dtype=np.uint8), -1, 0)

    def test_out_of_range_values(self):
        """Non-byte values are rejected."""
        with pytest.raises(ValueError, match="\\[0, 255\\]"):
            PixelBuffer(np.array([0, 0, 0, 300]), 1, 1)

    def test_integer_values_converted(self):
        """In-range integers of another dtype become uint8."""
        buffer = PixelBuffer(np.array([10, 20, 30, 255], dtype=np.int64), 1, 1)
        assert buffer.data.dtype == np.uint8

    def test_from_array_rgb(self):
        """RGB arrays get an opaque alpha channel."""
        pixels = np.full((2, 3, 3), 7, dtype=np.uint8)
        buffer = PixelBuffer.from_array(pixels)
        assert buffer.size == (3, 2)
        assert np.all(buffer.alpha == 255)

    def test_from_array_copies(self):
        """The buffer does not alias the source array."""
        pixels = np.zeros((1, 1, 4), dtype=np.uint8)
        buffer = PixelBuffer.from_array(pixels)
        pixels[0, 0, 0] = 99
        assert buffer.pixel(0, 0) == RGBColor(0, 0, 0)

    def test_from_array_bad_shape(self):
        """Only HxWx3 and HxWx4 arrays are accepted."""
        with pytest.raises(ValueError, match="Expected an"):
            PixelBuffer.from_array(np.zeros((4, 4), dtype=np.uint8))

    def test_filled(self):
        """filled() paints a solid color."""
        buffer = PixelBuffer.filled(4, 3, (10, 20, 30), alpha=40)
        assert buffer.size == (4, 3)
        assert buffer.pixel(3, 2) == RGBColor(10, 20, 30)
        assert np.all(buffer.alpha == 40)

    def test_filled_alpha_range(self):
        """Alpha must be a byte."""
        with pytest.raises(ValueError, match="alpha"):
            PixelBuffer.filled(1, 1, (0, 0, 0), alpha=300)

    def test_image_roundtrip(self):
        """Pillow images convert to and from buffers."""
        image = Image.new("RGB", (5, 4), (1, 2, 3))
        buffer = PixelBuffer.from_image(image)
        assert buffer.size == (5, 4)
        assert buffer.pixel(4, 3) == RGBColor(1, 2, 3)
        assert np.all(buffer.alpha == 255)

        back = buffer.to_image()
        assert back.mode == "RGBA"
        assert back.size == (5, 4)
        assert back.getpixel((0, 0)) == (1, 2, 3, 255)


class TestPixelBufferAccess:
    """Test pixel access, copies and equality."""

    def test_pixel_row_major(self):
        """Pixels are stored row-major."""
        pixels = np.zeros((2, 2, 4), dtype=np.uint8)
        pixels[1, 0] = (9, 8, 7, 255)
        buffer = PixelBuffer.from_array(pixels)
        assert buffer.pixel(0, 1) == RGBColor(9, 8, 7)
        assert buffer.data[8:12].tolist() == [9, 8, 7, 255]

    def test_pixel_out_of_bounds(self):
        """Outside positions give None."""
        buffer = PixelBuffer.filled(2, 2, (0, 0, 0))
        assert buffer.pixel(2, 0) is None
        assert buffer.pixel(0, -1) is None
        assert not buffer.contains(-1, 0)
        assert buffer.contains(1, 1)

    def test_to_array(self):
        """to_array() returns an independent HxWx4 copy."""
        buffer = PixelBuffer.filled(3, 2, (1, 1, 1))
        array = buffer.to_array()
        assert array.shape == (2, 3, 4)
        array[...] = 0
        assert buffer.pixel(0, 0) == RGBColor(1, 1, 1)

    def test_copy_and_equality(self):
        """Copies are equal but independent."""
        buffer = PixelBuffer.filled(2, 2, (5, 6, 7))
        clone = buffer.copy()
        assert clone == buffer
        assert clone.data is not buffer.data

        clone.data[0] = 0
        assert clone != buffer

    def test_equality_considers_dimensions(self):
        """Same bytes with different dimensions are not equal."""
        data = np.zeros(16, dtype=np.uint8)
        assert PixelBuffer(data, 4, 1) != PixelBuffer(data, 2, 2)

    def test_unhashable(self):
        """Buffers are mutable containers and not hashable."""
        with pytest.raises(TypeError):
            hash(PixelBuffer.filled(1, 1, (0, 0, 0)))

    def test_frozen_fields(self):
        """Dimensions cannot be reassigned."""
        buffer = PixelBuffer.filled(1, 1, (0, 0, 0))
        with pytest.raises(AttributeError):
            buffer.width = 2

    def test_repr(self):
        """Test repr."""
        assert repr(PixelBuffer.filled(3, 2, (0, 0, 0))) == "PixelBuffer(3x2, 24 bytes)"
