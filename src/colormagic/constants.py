"""
Constants and default values for colormagic converters and pipelines.

Centralizes magic numbers and configuration defaults for better maintainability.
"""

from __future__ import annotations

# =============================================================================
# sRGB Transfer Function
# =============================================================================

SRGB_EXPAND_THRESHOLD = 0.04045  # Encoded value below which the curve is linear
SRGB_COMPRESS_THRESHOLD = 0.0031308  # Linear value below which the curve is linear
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# =============================================================================
# CIE XYZ / L*a*b*
# =============================================================================

# D65 reference white
D65_X = 0.95047
D65_Y = 1.0
D65_Z = 1.08883

# CIE nonlinearity (approximate constants, kept for compatibility)
CIE_EPSILON = 0.008856
CIE_KAPPA_SLOPE = 7.787
CIE_OFFSET = 16.0 / 116.0

# Linear sRGB -> XYZ (rows: X, Y, Z)
SRGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

# XYZ -> linear sRGB (rows: R, G, B)
XYZ_TO_SRGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

# =============================================================================
# YUV (BT.601 weights)
# =============================================================================

YUV_CHROMA_OFFSET = 0.5  # Signed chroma is re-centered before scaling to [0, 255]

# =============================================================================
# Channel Ranges (per model, in display units)
# =============================================================================

RGB_MAX = 255
HUE_PERIOD = 360

# Valid range for every channel of every model: model -> {channel: (min, max)}
CHANNEL_RANGES = {
    "RGB": {"r": (0, 255), "g": (0, 255), "b": (0, 255)},
    "HSV": {"h": (0, 359), "s": (0, 100), "v": (0, 100)},
    "CMYK": {"c": (0, 100), "m": (0, 100), "y": (0, 100), "k": (0, 100)},
    "LAB": {"l": (0, 100), "a": (-128, 127), "b": (-128, 127)},
    "YUV": {"y": (0, 255), "u": (0, 255), "v": (0, 255)},
}

# =============================================================================
# Adjustment Ranges (slider limits for per-channel deltas)
# =============================================================================

ADJUSTMENT_RANGES = {
    "RGB": {"r": (-255, 255), "g": (-255, 255), "b": (-255, 255)},
    "HSV": {"h": (-180, 180), "s": (-100, 100), "v": (-100, 100)},
    "CMYK": {"c": (-100, 100), "m": (-100, 100), "y": (-100, 100), "k": (-100, 100)},
    "LAB": {"l": (-100, 100), "a": (-128, 128), "b": (-128, 128)},
    "YUV": {"y": (-255, 255), "u": (-255, 255), "v": (-255, 255)},
}

# Default UI slider ranges for building interfaces
UI_RANGES = {
    model: {
        channel: {"min": lo, "max": hi, "step": 1, "default": 0}
        for channel, (lo, hi) in channels.items()
    }
    for model, channels in ADJUSTMENT_RANGES.items()
}

# =============================================================================
# Visualization Remaps
# =============================================================================

PERCENT_TO_BYTE = 2.55  # 100% -> 255
HSV_BOOST_DIVISOR = 200.0  # Channel gain is 1 + reading / 200
LAB_AB_BYTE_OFFSET = 128

# =============================================================================
# General Constants
# =============================================================================

RGBA_CHANNELS = 4  # R, G, B, A
ALPHA_INDEX = 3

DEFAULT_MODEL = "RGB"

# Valid model names, in selector order
VALID_MODELS = ("RGB", "HSV", "CMYK", "LAB", "YUV")

# Numeric codes handed to the Numba kernels
MODEL_CODES = {"RGB": 0, "HSV": 1, "CMYK": 2, "LAB": 3, "YUV": 4}

MODEL_DESCRIPTIONS = {
    "RGB": "Red, Green, Blue - Additive color model",
    "HSV": "Hue, Saturation, Value - Intuitive color model",
    "CMYK": "Cyan, Magenta, Yellow, Key - Print color model",
    "LAB": "Lightness, A*, B* - Perceptual color model",
    "YUV": "Luma, Chrominance - Video color model",
}

# Workspace surface the image is fitted into (aspect ratio preserved)
WORKSPACE_MAX_SIZE = (400, 300)
DEFAULT_SHOW_ORIGINAL = True
