"""
Buffer transformation for color model visualization.

CPU-optimized using NumPy and Numba.

Functions:
- transform_image(): Adjust and remap an RGBA buffer for a color model
                     Runs the fused Numba kernel, never touches the input
- visualize_color(): Display remap of a single color (pure Python)
- transform_color(): Adjustment + remap of a single color (pure Python)

The visualization remaps are presentation heuristics that make each model's
channels visible as an RGB image; they are not color-science conversions.
"""

from __future__ import annotations

import logging

import numpy as np

from colormagic.adjustments import ColorAdjustment, adjust_color
from colormagic.buffer import PixelBuffer
from colormagic.color.conversions import clamp, rgb_to_cmyk, rgb_to_hsv, rgb_to_lab, rgb_to_yuv
from colormagic.color.models import ColorModel, RGBColor, as_rgb
from colormagic.constants import (
    HSV_BOOST_DIVISOR,
    LAB_AB_BYTE_OFFSET,
    MODEL_CODES,
    PERCENT_TO_BYTE,
    RGB_MAX,
)

# Import Numba kernels at module level - Numba is required
from colormagic.transform.kernels import transform_rgba_numba

logger = logging.getLogger(__name__)

# Kernel delta vector length (CMYK has the most channels)
_MAX_CHANNELS = 4


# ============================================================================
# Single-Color Reference
# ============================================================================


def _store_byte(x: float) -> int:
    """Value as an 8-bit clamped store keeps it: clamp, then round half to even."""
    return int(round(clamp(x, 0, RGB_MAX)))


def _remap(rgb: RGBColor, model: ColorModel) -> tuple[float, float, float]:
    """Raw display remap for one color (before byte storage)."""
    r, g, b = rgb

    if model is ColorModel.HSV:
        hsv = rgb_to_hsv(rgb)
        boost = 1.0 + hsv.s / HSV_BOOST_DIVISOR
        return (
            min(255.0, r * boost),
            min(255.0, g * boost),
            min(255.0, b * (1.0 + hsv.v / HSV_BOOST_DIVISOR)),
        )

    if model is ColorModel.CMYK:
        cmyk = rgb_to_cmyk(rgb)
        key = cmyk.k * PERCENT_TO_BYTE
        return (
            max(0.0, 255.0 - (cmyk.c * PERCENT_TO_BYTE + key)),
            max(0.0, 255.0 - (cmyk.m * PERCENT_TO_BYTE + key)),
            max(0.0, 255.0 - (cmyk.y * PERCENT_TO_BYTE + key)),
        )

    if model is ColorModel.LAB:
        lab = rgb_to_lab(rgb)
        return (
            clamp(lab.l * PERCENT_TO_BYTE, 0, RGB_MAX),
            clamp(lab.a + LAB_AB_BYTE_OFFSET, 0, RGB_MAX),
            clamp(lab.b + LAB_AB_BYTE_OFFSET, 0, RGB_MAX),
        )

    if model is ColorModel.YUV:
        yuv = rgb_to_yuv(rgb)
        return yuv.y, yuv.u, yuv.v

    return r, g, b


def visualize_color(rgb: RGBColor, model: ColorModel | str) -> RGBColor:
    """
    Remap a color for display in the given model.

    - RGB: unchanged
    - HSV: red and green gain (1 + s/200), blue gains (1 + v/200), capped at 255
    - CMYK: 255 - (ink + key) * 2.55 per channel (c -> R, m -> G, y -> B)
    - LAB: R = L * 2.55, G = a + 128, B = b + 128
    - YUV: R, G, B = y, u, v

    Args:
        rgb: Source color (RGBColor or an (r, g, b) sequence)
        model: Active model tag or name

    Returns:
        Display color

    Raises:
        ValueError: If the model name is unknown

    Example:
        >>> visualize_color(RGBColor(255, 255, 255), "CMYK")
        RGBColor(r=255, g=255, b=255)
    """
    model = ColorModel.parse(model)
    return RGBColor(*(_store_byte(x) for x in _remap(as_rgb(rgb), model)))


def transform_color(
    rgb: RGBColor,
    model: ColorModel | str,
    adjustment: ColorAdjustment | None = None,
) -> RGBColor:
    """
    Transform a single color exactly as transform_image transforms a pixel.

    Args:
        rgb: Source color
        model: Active model tag or name
        adjustment: Optional adjustment; ignored unless tagged with the active model

    Returns:
        Display color
    """
    model = ColorModel.parse(model)
    rgb = as_rgb(rgb)
    if _active_adjustment(model, adjustment) is not None:
        rgb = adjust_color(rgb, adjustment)
    return visualize_color(rgb, model)


# ============================================================================
# Buffer Transformation (Numba)
# ============================================================================


def _active_adjustment(
    model: ColorModel, adjustment: ColorAdjustment | None
) -> ColorAdjustment | None:
    """Return the adjustment if it applies to the active model and shifts anything."""
    if adjustment is None:
        return None
    if not isinstance(adjustment, ColorAdjustment):
        raise TypeError(
            f"adjustment must be ColorAdjustment or None, got {type(adjustment).__name__}"
        )
    if adjustment.model is not model:
        logger.debug(
            "[transform_image] Ignoring %s adjustment while %s is active",
            adjustment.model.value,
            model.value,
        )
        return None
    if adjustment.is_zero():
        return None
    return adjustment


def _delta_vector(adjustment: ColorAdjustment | None) -> np.ndarray:
    """Adjustment deltas as a fixed-length float64 vector for the kernel."""
    deltas = np.zeros(_MAX_CHANNELS, dtype=np.float64)
    if adjustment is not None:
        vector = adjustment.as_vector()
        deltas[: len(vector)] = vector
    return deltas


def transform_image(
    buffer: PixelBuffer,
    model: ColorModel | str,
    adjustment: ColorAdjustment | None = None,
) -> PixelBuffer:
    """
    Produce the display buffer for a model, optionally adjusted.

    Per pixel: extract RGB (alpha passes through), apply the adjustment when
    it is non-zero and tagged with the active model, then remap for display
    (see visualize_color). The input buffer is never modified.

    Args:
        buffer: Source RGBA buffer
        model: Active model tag or name
        adjustment: Optional per-channel deltas

    Returns:
        New PixelBuffer with the same dimensions

    Raises:
        ValueError: If the model name is unknown
        TypeError: If buffer or adjustment has the wrong type

    Example:
        >>> src = PixelBuffer.filled(4, 4, (200, 40, 40))
        >>> out = transform_image(src, "HSV", ColorAdjustment("HSV", h=120))
        >>> out.size
        (4, 4)
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError(f"buffer must be PixelBuffer, got {type(buffer).__name__}")

    model = ColorModel.parse(model)
    active = _active_adjustment(model, adjustment)

    out = np.empty_like(buffer.data)
    transform_rgba_numba(
        buffer.data,
        MODEL_CODES[model.value],
        _delta_vector(active),
        active is not None,
        out,
    )

    logger.info(
        "[transform_image] Rendered %d pixels as %s (%s)",
        buffer.pixel_count,
        model.value,
        "adjusted" if active is not None else "unadjusted",
    )
    return PixelBuffer(data=out, width=buffer.width, height=buffer.height)
