"""
Human-readable color readouts.

Example:
    >>> format_color((255, 0, 0), "HSV")
    'HSV(0°, 100%, 100%)'
    >>> format_color((255, 255, 255), "LAB")
    'LAB(100, 0, 0)'
"""

from __future__ import annotations

import math

from colormagic.buffer import PixelBuffer
from colormagic.color.conversions import as_rgb, rgb_to_cmyk, rgb_to_hsv, rgb_to_lab, rgb_to_yuv
from colormagic.color.models import ColorModel, RGBColor


def _resolve_model(model: ColorModel | str) -> ColorModel:
    """Model for display; unknown names fall back to RGB."""
    try:
        return ColorModel.parse(model)
    except ValueError:
        return ColorModel.RGB


def format_color(rgb: RGBColor, model: ColorModel | str) -> str:
    """
    Render an RGB color in the given model.

    Formats:
        RGB(r, g, b), HSV(h°, s%, v%), CMYK(c%, m%, y%, k%), LAB(l, a, b), YUV(y, u, v)

    An unrecognized model name renders as RGB.
    """
    rgb = as_rgb(rgb)
    model = _resolve_model(model)

    if model is ColorModel.HSV:
        hsv = rgb_to_hsv(rgb)
        return f"HSV({hsv.h}°, {hsv.s}%, {hsv.v}%)"
    if model is ColorModel.CMYK:
        cmyk = rgb_to_cmyk(rgb)
        return f"CMYK({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)"
    if model is ColorModel.LAB:
        lab = rgb_to_lab(rgb)
        return f"LAB({lab.l}, {lab.a}, {lab.b})"
    if model is ColorModel.YUV:
        yuv = rgb_to_yuv(rgb)
        return f"YUV({yuv.y}, {yuv.u}, {yuv.v})"
    return f"RGB({rgb.r}, {rgb.g}, {rgb.b})"


def probe_pixel(buffer: PixelBuffer, x: int, y: int, model: ColorModel | str) -> str | None:
    """
    Readout of the pixel under a pointer.

    Args:
        buffer: Surface being displayed
        x: Column, fractional positions are floored (may be outside the buffer)
        y: Row, fractional positions are floored (may be outside the buffer)
        model: Model to report in

    Returns:
        Formatted color, or None when (x, y) is outside the buffer or not finite
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    rgb = buffer.pixel(math.floor(x), math.floor(y))
    if rgb is None:
        return None
    return format_color(rgb, model)
