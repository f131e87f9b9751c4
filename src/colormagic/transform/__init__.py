"""
Buffer transformation module.

Renders RGBA buffers in a color model (with optional per-channel adjustment)
through a fused Numba kernel, with a chainable pipeline interface.
"""

from colormagic.transform.api import transform_color, transform_image, visualize_color
from colormagic.transform.pipeline import ModelTransform

__all__ = [
    "ModelTransform",
    "transform_image",
    "transform_color",
    "visualize_color",
]
