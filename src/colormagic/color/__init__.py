"""
Color models and conversions.

Provides immutable color values for RGB, HSV, CMYK, LAB and YUV, the
reference converters between them, and Numba mirrors of the converters for
per-pixel kernels.
"""

from colormagic.color.conversions import (
    MODEL_CONVERTERS,
    cmyk_to_rgb,
    hsv_to_rgb,
    lab_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    rgb_to_yuv,
    to_model,
    to_rgb,
    yuv_to_rgb,
)
from colormagic.color.models import (
    CMYKColor,
    ColorModel,
    ColorValue,
    HSVColor,
    LABColor,
    RGBColor,
    YUVColor,
)

__all__ = [
    "ColorModel",
    "ColorValue",
    "RGBColor",
    "HSVColor",
    "CMYKColor",
    "LABColor",
    "YUVColor",
    "MODEL_CONVERTERS",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_xyz",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_yuv",
    "yuv_to_rgb",
    "to_model",
    "to_rgb",
]
