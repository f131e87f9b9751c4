"""
Image file loading and saving.

Decodes any Pillow-supported image into an RGBA PixelBuffer and writes
buffers back out. Decode failures surface as UnreadableImageError before any
transformation runs.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from colormagic.buffer import PixelBuffer
from colormagic.constants import WORKSPACE_MAX_SIZE

logger = logging.getLogger(__name__)


class UnreadableImageError(ValueError):
    """Raised when an image source cannot be decoded."""


def load_image(source: str | Path | bytes | bytearray | BinaryIO) -> PixelBuffer:
    """
    Decode an image into an RGBA buffer.

    Args:
        source: File path, raw encoded bytes, or a binary file object

    Returns:
        PixelBuffer with the decoded pixels (opaque alpha for RGB images)

    Raises:
        FileNotFoundError: If a path does not exist
        UnreadableImageError: If the data is not a decodable image

    Example:
        >>> buffer = load_image("photo.png")
        >>> buffer.size
        (640, 480)
    """
    if isinstance(source, (bytes, bytearray)):
        stream: str | Path | BinaryIO = io.BytesIO(source)
        label = f"<{len(source)} bytes>"
    else:
        stream = source
        label = str(source) if isinstance(source, (str, Path)) else repr(source)

    try:
        with Image.open(stream) as image:
            image.load()
            buffer = PixelBuffer.from_image(image)
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise UnreadableImageError(f"Failed to decode image {label}: {e}") from e

    logger.info("[load_image] Loaded %s (%dx%d)", label, buffer.width, buffer.height)
    return buffer


def save_image(buffer: PixelBuffer, path: str | Path, format: str | None = None) -> Path:
    """
    Write a buffer to an image file.

    The format is inferred from the file extension unless given. Formats
    that reject RGBA (e.g. JPEG, PCX) receive the RGB channels only.

    Args:
        buffer: Pixels to write
        path: Destination file
        format: Optional Pillow format name (e.g. "PNG")

    Returns:
        The destination path

    Raises:
        ValueError: If the format cannot be determined
        OSError: If the file cannot be written
    """
    path = Path(path)
    image = buffer.to_image()

    fmt = format or Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise ValueError(
            f"Cannot determine image format for '{path}'. "
            f"Use a known extension (.png, .jpg, ...) or pass format explicitly."
        )
    try:
        image.save(path, format=fmt)
    except (OSError, ValueError) as exc:
        # Pillow refuses RGBA for formats without alpha (JPEG, PCX, EPS, ...)
        logger.debug("[save_image] %s rejected RGBA (%s), writing RGB", fmt, exc)
        image.convert("RGB").save(path, format=fmt)
    logger.info("[save_image] Wrote %s (%dx%d, %s)", path, buffer.width, buffer.height, fmt)
    return path


def resize_to_fit(buffer: PixelBuffer, max_size: tuple[int, int] = WORKSPACE_MAX_SIZE) -> PixelBuffer:
    """
    Scale a buffer to fit max_size while keeping its aspect ratio.

    Small images are scaled up, large ones down, so the longer relative side
    touches the bound. Target dimensions are truncated to whole pixels.

    Args:
        buffer: Source pixels
        max_size: (width, height) bound

    Returns:
        Resized PixelBuffer (a copy if the size already matches)

    Raises:
        ValueError: If max_size is not a positive (width, height) tuple
    """
    if len(max_size) != 2 or min(max_size) <= 0:
        raise ValueError(f"max_size must be a positive (width, height) tuple, got {max_size}")
    if buffer.pixel_count == 0:
        return buffer.copy()

    max_width, max_height = max_size
    ratio = min(max_width / buffer.width, max_height / buffer.height)
    size = (max(1, int(buffer.width * ratio)), max(1, int(buffer.height * ratio)))
    if size == buffer.size:
        return buffer.copy()

    resized = buffer.to_image().resize(size, Image.Resampling.LANCZOS)
    logger.debug("[resize_to_fit] %dx%d -> %dx%d", buffer.width, buffer.height, *size)
    return PixelBuffer.from_image(resized)
