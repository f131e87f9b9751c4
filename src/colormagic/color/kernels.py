"""
Numba-compiled scalar color conversions.

Per-pixel counterparts of colormagic.color.conversions, callable from the
batch kernels in colormagic.transform.kernels. Channels travel as float64 in
display units (RGB 0-255, percentages 0-100, hue in degrees) and every value
a converter returns is already rounded to an integer, exactly like the
reference implementation.

fastmath is left off on purpose: the kernels must round identically to the
reference converters.
"""

import math

import numpy as np
from numba import njit

from colormagic.constants import (
    CIE_EPSILON,
    CIE_KAPPA_SLOPE,
    CIE_OFFSET,
    D65_X,
    D65_Y,
    D65_Z,
    SRGB_COMPRESS_THRESHOLD,
    SRGB_EXPAND_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
    YUV_CHROMA_OFFSET,
)

# Matrix coefficients as plain float globals (frozen into the compiled code)
_XR, _XG, _XB = SRGB_TO_XYZ[0]
_YR, _YG, _YB = SRGB_TO_XYZ[1]
_ZR, _ZG, _ZB = SRGB_TO_XYZ[2]
_RX, _RY, _RZ = XYZ_TO_SRGB[0]
_GX, _GY, _GZ = XYZ_TO_SRGB[1]
_BX, _BY, _BZ = XYZ_TO_SRGB[2]

# ============================================================================
# Helpers
# ============================================================================


@njit(cache=True, nogil=True)
def round_half_up_numba(x: float) -> float:
    """Round to nearest integer, ties towards +infinity."""
    return np.floor(x + 0.5)


@njit(cache=True, nogil=True)
def clamp_numba(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]."""
    return min(max(x, lo), hi)


@njit(cache=True, nogil=True)
def to_byte_numba(x: float) -> float:
    """Normalized channel -> rounded display byte in [0, 255]."""
    return clamp_numba(round_half_up_numba(x * 255.0), 0.0, 255.0)


# ============================================================================
# HSV
# ============================================================================


@njit(cache=True, nogil=True)
def rgb_to_hsv_numba(r8: float, g8: float, b8: float) -> tuple[float, float, float]:
    """RGB bytes -> (hue degrees, saturation %, value %)."""
    r = r8 / 255.0
    g = g8 / 255.0
    b = b8 / 255.0

    max_c = max(r, max(g, b))
    min_c = min(r, min(g, b))
    delta = max_c - min_c

    h = 0.0
    if delta != 0:
        if max_c == r:
            h = np.fmod((g - b) / delta, 6.0)
        elif max_c == g:
            h = (b - r) / delta + 2.0
        else:
            h = (r - g) / delta + 4.0

    hue = round_half_up_numba(h * 60.0)
    if hue < 0:
        hue += 360.0

    s = 0.0
    if max_c != 0:
        s = delta / max_c

    return hue, round_half_up_numba(s * 100.0), round_half_up_numba(max_c * 100.0)


@njit(cache=True, nogil=True)
def hsv_to_rgb_numba(hue: float, sat: float, val: float) -> tuple[float, float, float]:
    """(hue degrees, saturation %, value %) -> RGB bytes."""
    h = np.fmod(hue, 360.0)
    if h < 0:
        h += 360.0
    s = sat / 100.0
    v = val / 100.0

    c = v * s
    h_sector = h / 60.0
    x = c * (1.0 - abs(np.fmod(h_sector, 2.0) - 1.0))
    m = v - c

    if h_sector < 1.0:
        r, g, b = c, x, 0.0
    elif h_sector < 2.0:
        r, g, b = x, c, 0.0
    elif h_sector < 3.0:
        r, g, b = 0.0, c, x
    elif h_sector < 4.0:
        r, g, b = 0.0, x, c
    elif h_sector < 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return to_byte_numba(r + m), to_byte_numba(g + m), to_byte_numba(b + m)


# ============================================================================
# CMYK
# ============================================================================


@njit(cache=True, nogil=True)
def rgb_to_cmyk_numba(r8: float, g8: float, b8: float) -> tuple[float, float, float, float]:
    """RGB bytes -> (c, m, y, k) percentages."""
    r = r8 / 255.0
    g = g8 / 255.0
    b = b8 / 255.0

    k = 1.0 - max(r, max(g, b))
    c = 0.0
    m = 0.0
    y = 0.0
    if k != 1.0:
        c = (1.0 - r - k) / (1.0 - k)
        m = (1.0 - g - k) / (1.0 - k)
        y = (1.0 - b - k) / (1.0 - k)

    return (
        round_half_up_numba(c * 100.0),
        round_half_up_numba(m * 100.0),
        round_half_up_numba(y * 100.0),
        round_half_up_numba(k * 100.0),
    )


@njit(cache=True, nogil=True)
def cmyk_to_rgb_numba(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """(c, m, y, k) percentages -> RGB bytes."""
    key = 1.0 - k / 100.0
    return (
        to_byte_numba((1.0 - c / 100.0) * key),
        to_byte_numba((1.0 - m / 100.0) * key),
        to_byte_numba((1.0 - y / 100.0) * key),
    )


# ============================================================================
# LAB
# ============================================================================


@njit(cache=True, nogil=True)
def _srgb_to_linear_numba(c: float) -> float:
    if c > SRGB_EXPAND_THRESHOLD:
        return math.pow((c + SRGB_OFFSET) / SRGB_SCALE, SRGB_GAMMA)
    return c / SRGB_LINEAR_SLOPE


@njit(cache=True, nogil=True)
def _linear_to_srgb_numba(c: float) -> float:
    if c > SRGB_COMPRESS_THRESHOLD:
        return SRGB_SCALE * math.pow(c, 1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return SRGB_LINEAR_SLOPE * c


@njit(cache=True, nogil=True)
def _lab_f_numba(t: float) -> float:
    if t > CIE_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return CIE_KAPPA_SLOPE * t + CIE_OFFSET


@njit(cache=True, nogil=True)
def _lab_f_inv_numba(t: float) -> float:
    t3 = t * t * t
    if t3 > CIE_EPSILON:
        return t3
    return (t - CIE_OFFSET) / CIE_KAPPA_SLOPE


@njit(cache=True, nogil=True)
def rgb_to_lab_numba(r8: float, g8: float, b8: float) -> tuple[float, float, float]:
    """RGB bytes -> (L, a*, b*)."""
    r = _srgb_to_linear_numba(r8 / 255.0)
    g = _srgb_to_linear_numba(g8 / 255.0)
    b = _srgb_to_linear_numba(b8 / 255.0)

    x = (r * _XR + g * _XG + b * _XB) / D65_X
    y = (r * _YR + g * _YG + b * _YB) / D65_Y
    z = (r * _ZR + g * _ZG + b * _ZB) / D65_Z

    fx = _lab_f_numba(x)
    fy = _lab_f_numba(y)
    fz = _lab_f_numba(z)

    return (
        round_half_up_numba(116.0 * fy - 16.0),
        round_half_up_numba(500.0 * (fx - fy)),
        round_half_up_numba(200.0 * (fy - fz)),
    )


@njit(cache=True, nogil=True)
def lab_to_rgb_numba(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    """(L, a*, b*) -> RGB bytes."""
    fy = (lightness + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    x = _lab_f_inv_numba(fx) * D65_X
    y = _lab_f_inv_numba(fy) * D65_Y
    z = _lab_f_inv_numba(fz) * D65_Z

    r_lin = x * _RX + y * _RY + z * _RZ
    g_lin = x * _GX + y * _GY + z * _GZ
    b_lin = x * _BX + y * _BY + z * _BZ

    return (
        to_byte_numba(_linear_to_srgb_numba(r_lin)),
        to_byte_numba(_linear_to_srgb_numba(g_lin)),
        to_byte_numba(_linear_to_srgb_numba(b_lin)),
    )


# ============================================================================
# YUV
# ============================================================================


@njit(cache=True, nogil=True)
def rgb_to_yuv_numba(r8: float, g8: float, b8: float) -> tuple[float, float, float]:
    """RGB bytes -> (y, u, v) with chroma offset into byte range."""
    r = r8 / 255.0
    g = g8 / 255.0
    b = b8 / 255.0

    y = 0.299 * r + 0.587 * g + 0.114 * b
    u = -0.14713 * r - 0.28886 * g + 0.436 * b
    v = 0.615 * r - 0.51499 * g - 0.10001 * b

    return (
        round_half_up_numba(y * 255.0),
        round_half_up_numba((u + YUV_CHROMA_OFFSET) * 255.0),
        round_half_up_numba((v + YUV_CHROMA_OFFSET) * 255.0),
    )


@njit(cache=True, nogil=True)
def yuv_to_rgb_numba(y8: float, u8: float, v8: float) -> tuple[float, float, float]:
    """(y, u, v) -> RGB bytes."""
    y = y8 / 255.0
    u = u8 / 255.0 - YUV_CHROMA_OFFSET
    v = v8 / 255.0 - YUV_CHROMA_OFFSET

    r = y + 1.13983 * v
    g = y - 0.39465 * u - 0.58060 * v
    b = y + 2.03211 * u

    return to_byte_numba(r), to_byte_numba(g), to_byte_numba(b)
