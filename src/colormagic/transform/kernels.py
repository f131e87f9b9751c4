"""
Numba-compiled kernels for RGBA buffer transformation.

One pass over the buffer: per pixel, optionally apply the channel adjustment
in the active model, then remap the pixel for display. Pixels are
independent, so the outer loop runs under prange.

Models are passed as integer codes (see colormagic.constants.MODEL_CODES):
    0 = RGB, 1 = HSV, 2 = CMYK, 3 = LAB, 4 = YUV
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from colormagic.color.kernels import (
    clamp_numba,
    cmyk_to_rgb_numba,
    hsv_to_rgb_numba,
    lab_to_rgb_numba,
    rgb_to_cmyk_numba,
    rgb_to_hsv_numba,
    rgb_to_lab_numba,
    rgb_to_yuv_numba,
    round_half_up_numba,
    yuv_to_rgb_numba,
)
from colormagic.constants import (
    CHANNEL_RANGES,
    HSV_BOOST_DIVISOR,
    HUE_PERIOD,
    LAB_AB_BYTE_OFFSET,
    MODEL_CODES,
    PERCENT_TO_BYTE,
)

_RGB = MODEL_CODES["RGB"]
_HSV = MODEL_CODES["HSV"]
_CMYK = MODEL_CODES["CMYK"]
_LAB = MODEL_CODES["LAB"]
_YUV = MODEL_CODES["YUV"]

# Channel bounds as plain float globals (frozen into the compiled code)
_BYTE_LO, _BYTE_HI = (float(v) for v in CHANNEL_RANGES["RGB"]["r"])
_PCT_LO, _PCT_HI = (float(v) for v in CHANNEL_RANGES["CMYK"]["c"])
_L_LO, _L_HI = (float(v) for v in CHANNEL_RANGES["LAB"]["l"])
_AB_LO, _AB_HI = (float(v) for v in CHANNEL_RANGES["LAB"]["a"])
_HUE_PERIOD = float(HUE_PERIOD)
_BOOST = float(HSV_BOOST_DIVISOR)
_AB_OFFSET = float(LAB_AB_BYTE_OFFSET)
_PCT_TO_BYTE = float(PERCENT_TO_BYTE)

# ============================================================================
# Per-Pixel Operations
# ============================================================================


@njit(cache=True, nogil=True)
def wrap_hue_numba(h: float) -> float:
    """Wrap degrees into [0, 360)."""
    h = np.fmod(h, _HUE_PERIOD)
    if h < 0:
        h += _HUE_PERIOD
    return h


@njit(cache=True, nogil=True)
def store_byte_numba(x: float) -> float:
    """Value as an 8-bit clamped store keeps it: clamp, then round half to even."""
    return np.rint(clamp_numba(x, _BYTE_LO, _BYTE_HI))


@njit(cache=True, nogil=True)
def adjust_pixel_numba(
    model_code: int, r: float, g: float, b: float, deltas: NDArray[np.float64]
) -> tuple[float, float, float]:
    """
    Shift one pixel by per-channel deltas expressed in the given model.

    Args:
        model_code: Model the deltas belong to
        r, g, b: Source RGB bytes
        deltas: Channel deltas in model channel order (length 4, unused tail ignored)

    Returns:
        Adjusted RGB bytes
    """
    if model_code == _HSV:
        h, s, v = rgb_to_hsv_numba(r, g, b)
        return hsv_to_rgb_numba(
            wrap_hue_numba(h + deltas[0]),
            clamp_numba(s + deltas[1], _PCT_LO, _PCT_HI),
            clamp_numba(v + deltas[2], _PCT_LO, _PCT_HI),
        )

    if model_code == _CMYK:
        c, m, y, k = rgb_to_cmyk_numba(r, g, b)
        return cmyk_to_rgb_numba(
            clamp_numba(c + deltas[0], _PCT_LO, _PCT_HI),
            clamp_numba(m + deltas[1], _PCT_LO, _PCT_HI),
            clamp_numba(y + deltas[2], _PCT_LO, _PCT_HI),
            clamp_numba(k + deltas[3], _PCT_LO, _PCT_HI),
        )

    if model_code == _LAB:
        lightness, a, lab_b = rgb_to_lab_numba(r, g, b)
        return lab_to_rgb_numba(
            clamp_numba(lightness + deltas[0], _L_LO, _L_HI),
            clamp_numba(a + deltas[1], _AB_LO, _AB_HI),
            clamp_numba(lab_b + deltas[2], _AB_LO, _AB_HI),
        )

    if model_code == _YUV:
        y, u, v = rgb_to_yuv_numba(r, g, b)
        return yuv_to_rgb_numba(
            clamp_numba(y + deltas[0], _BYTE_LO, _BYTE_HI),
            clamp_numba(u + deltas[1], _BYTE_LO, _BYTE_HI),
            clamp_numba(v + deltas[2], _BYTE_LO, _BYTE_HI),
        )

    return (
        round_half_up_numba(clamp_numba(r + deltas[0], _BYTE_LO, _BYTE_HI)),
        round_half_up_numba(clamp_numba(g + deltas[1], _BYTE_LO, _BYTE_HI)),
        round_half_up_numba(clamp_numba(b + deltas[2], _BYTE_LO, _BYTE_HI)),
    )


@njit(cache=True, nogil=True)
def visualize_pixel_numba(model_code: int, r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Remap one pixel for display in the given model.

    Returns the raw (unclamped, unrounded) channel values; the caller stores
    them with store_byte_numba.
    """
    if model_code == _HSV:
        _, s, v = rgb_to_hsv_numba(r, g, b)
        boost = 1.0 + s / _BOOST
        return (
            min(_BYTE_HI, r * boost),
            min(_BYTE_HI, g * boost),
            min(_BYTE_HI, b * (1.0 + v / _BOOST)),
        )

    if model_code == _CMYK:
        c, m, y, k = rgb_to_cmyk_numba(r, g, b)
        return (
            max(_BYTE_LO, _BYTE_HI - (c * _PCT_TO_BYTE + k * _PCT_TO_BYTE)),
            max(_BYTE_LO, _BYTE_HI - (m * _PCT_TO_BYTE + k * _PCT_TO_BYTE)),
            max(_BYTE_LO, _BYTE_HI - (y * _PCT_TO_BYTE + k * _PCT_TO_BYTE)),
        )

    if model_code == _LAB:
        lightness, a, lab_b = rgb_to_lab_numba(r, g, b)
        return (
            clamp_numba(lightness * _PCT_TO_BYTE, _BYTE_LO, _BYTE_HI),
            clamp_numba(a + _AB_OFFSET, _BYTE_LO, _BYTE_HI),
            clamp_numba(lab_b + _AB_OFFSET, _BYTE_LO, _BYTE_HI),
        )

    if model_code == _YUV:
        return rgb_to_yuv_numba(r, g, b)

    return r, g, b


# ============================================================================
# Buffer Pass
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def transform_rgba_numba(
    src: NDArray[np.uint8],
    model_code: int,
    deltas: NDArray[np.float64],
    apply_adjustment: bool,
    out: NDArray[np.uint8],
) -> None:
    """
    Adjust and remap every pixel of a flat RGBA buffer.

    Args:
        src: Input bytes [N * 4] (R, G, B, A interleaved), never written
        model_code: Active model
        deltas: Adjustment deltas in model channel order [4]
        apply_adjustment: If False, only the display remap runs
        out: Output bytes [N * 4] (pre-allocated)

    Note: Alpha is copied through unchanged
    """
    n = src.shape[0] // 4
    for i in prange(n):
        o = i * 4
        r = float(src[o])
        g = float(src[o + 1])
        b = float(src[o + 2])

        if apply_adjustment:
            r, g, b = adjust_pixel_numba(model_code, r, g, b, deltas)

        r, g, b = visualize_pixel_numba(model_code, r, g, b)

        out[o] = np.uint8(store_byte_numba(r))
        out[o + 1] = np.uint8(store_byte_numba(g))
        out[o + 2] = np.uint8(store_byte_numba(b))
        out[o + 3] = src[o + 3]
