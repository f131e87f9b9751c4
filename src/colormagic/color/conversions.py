"""
RGB <-> HSV / CMYK / LAB / YUV conversions.

Scalar reference implementation operating on immutable color values in
display units. Every forward converter rounds its outputs to integers and
every inverse converter clamps and rounds the resulting RGB channels, so
RGB -> model -> RGB is close to, but not exactly, the identity.

The batch kernels in colormagic.color.kernels mirror these formulas
operation for operation and are tested against them.

Example:
    >>> from colormagic.color.conversions import rgb_to_hsv, hsv_to_rgb
    >>> rgb_to_hsv(RGBColor(255, 0, 0))
    HSVColor(h=0, s=100, v=100)
    >>> hsv_to_rgb(HSVColor(120, 100, 100))
    RGBColor(r=0, g=255, b=0)
"""

from __future__ import annotations

import math
from collections.abc import Callable

from colormagic.color.models import (
    CMYKColor,
    ColorModel,
    ColorValue,
    HSVColor,
    LABColor,
    RGBColor,
    YUVColor,
    as_rgb,
)
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


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties towards +infinity."""
    return math.floor(x + 0.5)


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]."""
    return min(max(x, lo), hi)


def _to_byte(x: float) -> int:
    """Normalized channel -> display byte (rounded, clamped to [0, 255])."""
    return int(clamp(round_half_up(x * 255.0), 0, 255))


# =============================================================================
# RGB <-> HSV
# =============================================================================


def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """Convert RGB to HSV (hue in degrees, saturation/value in percent)."""
    rgb = as_rgb(rgb)
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    if delta != 0:
        if max_c == r:
            # Truncating remainder: negative sectors stay negative until wrapped below
            h = math.fmod((g - b) / delta, 6.0)
        elif max_c == g:
            h = (b - r) / delta + 2.0
        else:
            h = (r - g) / delta + 4.0

    hue = round_half_up(h * 60.0)
    if hue < 0:
        hue += 360

    s = 0.0 if max_c == 0 else delta / max_c

    return HSVColor(
        h=hue,
        s=round_half_up(s * 100.0),
        v=round_half_up(max_c * 100.0),
    )


def hsv_to_rgb(hsv: HSVColor) -> RGBColor:
    """Convert HSV back to RGB using the 6-sector hue decomposition."""
    h = math.fmod(hsv.h, 360.0)
    if h < 0:
        h += 360.0
    s = hsv.s / 100.0
    v = hsv.v / 100.0

    c = v * s
    h_sector = h / 60.0
    x = c * (1.0 - abs(math.fmod(h_sector, 2.0) - 1.0))
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

    return RGBColor(_to_byte(r + m), _to_byte(g + m), _to_byte(b + m))


# =============================================================================
# RGB <-> CMYK
# =============================================================================


def rgb_to_cmyk(rgb: RGBColor) -> CMYKColor:
    """Convert RGB to CMYK percentages. Pure black is (0, 0, 0, 100)."""
    rgb = as_rgb(rgb)
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    k = 1.0 - max(r, g, b)
    if k == 1.0:
        c = m = y = 0.0
    else:
        c = (1.0 - r - k) / (1.0 - k)
        m = (1.0 - g - k) / (1.0 - k)
        y = (1.0 - b - k) / (1.0 - k)

    return CMYKColor(
        c=round_half_up(c * 100.0),
        m=round_half_up(m * 100.0),
        y=round_half_up(y * 100.0),
        k=round_half_up(k * 100.0),
    )


def cmyk_to_rgb(cmyk: CMYKColor) -> RGBColor:
    """Convert CMYK percentages back to RGB."""
    k = 1.0 - cmyk.k / 100.0
    return RGBColor(
        _to_byte((1.0 - cmyk.c / 100.0) * k),
        _to_byte((1.0 - cmyk.m / 100.0) * k),
        _to_byte((1.0 - cmyk.y / 100.0) * k),
    )


# =============================================================================
# RGB <-> LAB (CIE L*a*b*, D65, via XYZ)
# =============================================================================


def _srgb_to_linear(c: float) -> float:
    """sRGB gamma expansion."""
    if c > SRGB_EXPAND_THRESHOLD:
        return math.pow((c + SRGB_OFFSET) / SRGB_SCALE, SRGB_GAMMA)
    return c / SRGB_LINEAR_SLOPE


def _linear_to_srgb(c: float) -> float:
    """sRGB gamma compression."""
    if c > SRGB_COMPRESS_THRESHOLD:
        return SRGB_SCALE * math.pow(c, 1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return SRGB_LINEAR_SLOPE * c


def _lab_f(t: float) -> float:
    """CIE L*a*b* companding function."""
    if t > CIE_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return CIE_KAPPA_SLOPE * t + CIE_OFFSET


def _lab_f_inv(t: float) -> float:
    """Inverse of the companding function."""
    t3 = t * t * t
    if t3 > CIE_EPSILON:
        return t3
    return (t - CIE_OFFSET) / CIE_KAPPA_SLOPE


def rgb_to_xyz(rgb: RGBColor) -> tuple[float, float, float]:
    """Convert RGB to D65-normalized XYZ (white maps to roughly (1, 1, 1))."""
    rgb = as_rgb(rgb)
    r = _srgb_to_linear(rgb.r / 255.0)
    g = _srgb_to_linear(rgb.g / 255.0)
    b = _srgb_to_linear(rgb.b / 255.0)

    (xr, xg, xb), (yr, yg, yb), (zr, zg, zb) = SRGB_TO_XYZ
    x = (r * xr + g * xg + b * xb) / D65_X
    y = (r * yr + g * yg + b * yb) / D65_Y
    z = (r * zr + g * zg + b * zb) / D65_Z
    return x, y, z


def rgb_to_lab(rgb: RGBColor) -> LABColor:
    """Convert RGB to CIE L*a*b*."""
    x, y, z = rgb_to_xyz(rgb)

    fx = _lab_f(x)
    fy = _lab_f(y)
    fz = _lab_f(z)

    return LABColor(
        l=round_half_up(116.0 * fy - 16.0),
        a=round_half_up(500.0 * (fx - fy)),
        b=round_half_up(200.0 * (fy - fz)),
    )


def lab_to_rgb(lab: LABColor) -> RGBColor:
    """Convert CIE L*a*b* back to RGB."""
    fy = (lab.l + 16.0) / 116.0
    fx = lab.a / 500.0 + fy
    fz = fy - lab.b / 200.0

    x = _lab_f_inv(fx) * D65_X
    y = _lab_f_inv(fy) * D65_Y
    z = _lab_f_inv(fz) * D65_Z

    (rx, ry, rz), (gx, gy, gz), (bx, by, bz) = XYZ_TO_SRGB
    r = _linear_to_srgb(x * rx + y * ry + z * rz)
    g = _linear_to_srgb(x * gx + y * gy + z * gz)
    b = _linear_to_srgb(x * bx + y * by + z * bz)

    return RGBColor(_to_byte(r), _to_byte(g), _to_byte(b))


# =============================================================================
# RGB <-> YUV
# =============================================================================


def rgb_to_yuv(rgb: RGBColor) -> YUVColor:
    """Convert RGB to YUV with chroma re-centered on 128 (saturated colors overshoot [0, 255])."""
    rgb = as_rgb(rgb)
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    y = 0.299 * r + 0.587 * g + 0.114 * b
    u = -0.14713 * r - 0.28886 * g + 0.436 * b
    v = 0.615 * r - 0.51499 * g - 0.10001 * b

    return YUVColor(
        y=round_half_up(y * 255.0),
        u=round_half_up((u + YUV_CHROMA_OFFSET) * 255.0),
        v=round_half_up((v + YUV_CHROMA_OFFSET) * 255.0),
    )


def yuv_to_rgb(yuv: YUVColor) -> RGBColor:
    """Convert YUV back to RGB."""
    y = yuv.y / 255.0
    u = yuv.u / 255.0 - YUV_CHROMA_OFFSET
    v = yuv.v / 255.0 - YUV_CHROMA_OFFSET

    r = y + 1.13983 * v
    g = y - 0.39465 * u - 0.58060 * v
    b = y + 2.03211 * u

    return RGBColor(_to_byte(r), _to_byte(g), _to_byte(b))


# =============================================================================
# Conversion dispatch
# =============================================================================


def _rgb_identity(rgb: RGBColor) -> RGBColor:
    return as_rgb(rgb)


# All conversion functions: model -> (from_rgb, to_rgb)
MODEL_CONVERTERS: dict[ColorModel, tuple[Callable, Callable]] = {
    ColorModel.RGB: (_rgb_identity, _rgb_identity),
    ColorModel.HSV: (rgb_to_hsv, hsv_to_rgb),
    ColorModel.CMYK: (rgb_to_cmyk, cmyk_to_rgb),
    ColorModel.LAB: (rgb_to_lab, lab_to_rgb),
    ColorModel.YUV: (rgb_to_yuv, yuv_to_rgb),
}


def to_model(rgb: RGBColor, model: ColorModel | str) -> ColorValue:
    """
    Express an RGB color in the given model.

    Args:
        rgb: Source color (RGBColor or an (r, g, b) sequence)
        model: Target model tag or name

    Returns:
        Color value of the target model's type

    Raises:
        ValueError: If the model name is unknown
    """
    from_rgb, _ = MODEL_CONVERTERS[ColorModel.parse(model)]
    return from_rgb(as_rgb(rgb))


def to_rgb(color: ColorValue, model: ColorModel | str) -> RGBColor:
    """
    Reduce a color value of the given model back to RGB.

    Raises:
        ValueError: If the model name is unknown
    """
    _, back_to_rgb = MODEL_CONVERTERS[ColorModel.parse(model)]
    return back_to_rgb(color)
