"""
RGBA pixel buffer.

The unit of data exchanged with the surrounding UI: a flat uint8 array of
interleaved R, G, B, A quadruples plus width/height metadata, laid out
row-major like a canvas ImageData.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from colormagic.color.models import RGBColor
from colormagic.constants import ALPHA_INDEX, RGBA_CHANNELS
from colormagic.validators import validate_range


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Flat 8-bit RGBA pixel data with dimensions.

    Attributes:
        data: uint8 array of length width * height * 4 (R, G, B, A per pixel)
        width: Image width in pixels
        height: Image height in pixels

    Example:
        >>> pixels = np.zeros((2, 3, 4), dtype=np.uint8)
        >>> buffer = PixelBuffer.from_array(pixels)
        >>> buffer.width, buffer.height, len(buffer)
        (3, 2, 24)
    """

    data: NDArray[np.uint8]
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate and normalize the buffer after creation."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"width and height must be non-negative, got {self.width}x{self.height}"
            )

        if isinstance(self.data, (bytes, bytearray, memoryview)):
            data = np.frombuffer(self.data, dtype=np.uint8)
        else:
            data = np.asarray(self.data)
        if data.dtype != np.uint8:
            if data.size and (data.min() < 0 or data.max() > 255):
                raise ValueError("Pixel data must hold byte values in [0, 255]")
            data = data.astype(np.uint8)
        data = np.ascontiguousarray(data.reshape(-1))

        expected = self.width * self.height * RGBA_CHANNELS
        if data.shape[0] != expected:
            raise ValueError(
                f"data length ({data.shape[0]}) must equal width * height * 4 ({expected}) "
                f"for a {self.width}x{self.height} RGBA buffer"
            )
        object.__setattr__(self, "data", data)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def from_array(cls, pixels: NDArray) -> PixelBuffer:
        """
        Build a buffer from an (H, W, 3) or (H, W, 4) array.

        RGB input gets an opaque alpha channel.

        Raises:
            ValueError: If the array is not HxWx3 or HxWx4
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}")

        height, width = pixels.shape[:2]
        if pixels.shape[2] == 3:
            alpha = np.full((height, width, 1), 255, dtype=pixels.dtype)
            pixels = np.concatenate([pixels, alpha], axis=2)

        return cls(data=pixels.copy(), width=width, height=height)

    @classmethod
    @validate_range(0, 255, "alpha", param_index=4)
    def filled(cls, width: int, height: int, rgb: RGBColor | tuple[int, int, int], alpha: int = 255) -> PixelBuffer:
        """Buffer of a single solid color."""
        r, g, b = rgb
        pixels = np.empty((height, width, RGBA_CHANNELS), dtype=np.uint8)
        pixels[...] = (r, g, b, alpha)
        return cls(data=pixels, width=width, height=height)

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        """Build a buffer from a Pillow image (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(data=np.asarray(image, dtype=np.uint8).copy(), width=width, height=height)

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def size(self) -> tuple[int, int]:
        """Size as (width, height) - common image convention."""
        return (self.width, self.height)

    @property
    def pixel_count(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @property
    def alpha(self) -> NDArray[np.uint8]:
        """View of the alpha bytes (every 4th byte)."""
        return self.data[ALPHA_INDEX::RGBA_CHANNELS]

    def __len__(self) -> int:
        """Length of the flat byte buffer."""
        return self.data.shape[0]

    # ========================================================================
    # Access
    # ========================================================================

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) addresses a pixel of this buffer."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> RGBColor | None:
        """
        RGB of the pixel at column x, row y.

        Returns:
            The pixel color, or None if (x, y) is outside the buffer
        """
        if not self.contains(x, y):
            return None
        offset = (y * self.width + x) * RGBA_CHANNELS
        r, g, b = self.data[offset : offset + 3]
        return RGBColor(int(r), int(g), int(b))

    def to_array(self) -> NDArray[np.uint8]:
        """Copy of the pixels as an (H, W, 4) array."""
        return self.data.reshape(self.height, self.width, RGBA_CHANNELS).copy()

    def to_image(self) -> Image.Image:
        """Convert to a Pillow RGBA image."""
        return Image.fromarray(self.to_array())

    def copy(self) -> PixelBuffer:
        """Independent copy of this buffer."""
        return PixelBuffer(data=self.data.copy(), width=self.width, height=self.height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height}, {len(self)} bytes)"
