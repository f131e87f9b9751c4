"""
colormagic - Color Model Engine

Conversions between RGB and HSV, CMYK, LAB and YUV, per-channel adjustments
in any of those models, and rendering of RGBA pixel buffers as seen through a
model.

Features:
- Reference converters on immutable color values (RGB is canonical)
- Channel adjustments with clamping and hue wrap-around
- Numba-compiled buffer pass (adjust + display remap, alpha untouched)
- Fluent ModelTransform pipeline with stacking and parameterized templates
- Human-readable readouts and pixel probes
- Pillow-based image loading and saving
- Workspace facade with the original/transformed view rule

Example - Conversions:
    >>> from colormagic import RGBColor, rgb_to_hsv, format_color
    >>> rgb_to_hsv(RGBColor(0, 255, 0))
    HSVColor(h=120, s=100, v=100)
    >>> format_color((255, 0, 0), "CMYK")
    'CMYK(0%, 100%, 100%, 0%)'

Example - Buffers:
    >>> from colormagic import ColorAdjustment, load_image, transform_image
    >>>
    >>> image = load_image("photo.png")
    >>> shifted = transform_image(image, "HSV", ColorAdjustment("HSV", h=30))

Example - Pipelines:
    >>> from colormagic import ModelTransform, Param
    >>>
    >>> pipeline = ModelTransform("LAB").adjust(l=10).adjust(b=-15)
    >>> result = pipeline(image)
    >>>
    >>> template = ModelTransform.template("HSV", h=Param("hue", default=0, range=(-180, 180)))
    >>> frames = [template(image, params={"hue": float(h)}) for h in range(0, 180, 30)]
"""

__version__ = "0.1.0"

# Adjustments
from colormagic.adjustments import ColorAdjustment, adjust_color

# Pixel buffers
from colormagic.buffer import PixelBuffer

# Color models and converters
from colormagic.color.conversions import (
    MODEL_CONVERTERS,
    cmyk_to_rgb,
    hsv_to_rgb,
    lab_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_yuv,
    to_model,
    to_rgb,
    yuv_to_rgb,
)
from colormagic.color.models import (
    CMYKColor,
    ColorModel,
    HSVColor,
    LABColor,
    RGBColor,
    YUVColor,
)

# Channel and slider ranges
from colormagic.constants import UI_RANGES

# Readouts
from colormagic.formatting import format_color, probe_pixel

# Image I/O
from colormagic.io import UnreadableImageError, load_image, resize_to_fit, save_image

# Parameterized pipelines
from colormagic.params import Param

# Protocols
from colormagic.protocols import PipelineStage

# Buffer transformation
from colormagic.transform.api import transform_color, transform_image, visualize_color
from colormagic.transform.pipeline import ModelTransform

# Render state
from colormagic.workspace import Workspace

__all__ = [
    # Version
    "__version__",
    # Color values
    "ColorModel",
    "RGBColor",
    "HSVColor",
    "CMYKColor",
    "LABColor",
    "YUVColor",
    # Converters
    "MODEL_CONVERTERS",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_yuv",
    "yuv_to_rgb",
    "to_model",
    "to_rgb",
    # Adjustments
    "ColorAdjustment",
    "adjust_color",
    # Buffers and transformation
    "PixelBuffer",
    "transform_image",
    "transform_color",
    "visualize_color",
    "ModelTransform",
    # Parameterization
    "Param",
    "UI_RANGES",
    # Protocols
    "PipelineStage",
    # Readouts
    "format_color",
    "probe_pixel",
    # Image I/O
    "load_image",
    "save_image",
    "resize_to_fit",
    "UnreadableImageError",
    # Render state
    "Workspace",
]
