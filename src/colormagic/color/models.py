"""
Color model tags and immutable color values.

Every color value is a frozen dataclass holding integers in the display units
of its model. RGB is the canonical representation; every other model is
derived from it and reducible back to it.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import Enum
from typing import ClassVar, Iterator, TypeAlias

from colormagic.constants import MODEL_DESCRIPTIONS, VALID_MODELS


class ColorModel(str, Enum):
    """Supported color models."""

    RGB = "RGB"
    HSV = "HSV"
    CMYK = "CMYK"
    LAB = "LAB"
    YUV = "YUV"

    @classmethod
    def parse(cls, value: ColorModel | str) -> ColorModel:
        """
        Resolve a model tag from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the name is not a supported model
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(
            f"model='{value}' is not valid. Valid options are: {', '.join(VALID_MODELS)}"
        )

    @property
    def channels(self) -> tuple[str, ...]:
        """Channel names of this model, in storage order."""
        return COLOR_TYPES[self].channels

    @property
    def description(self) -> str:
        """Short human-readable description for model selectors."""
        return MODEL_DESCRIPTIONS[self.value]


class _ColorValue:
    """Shared behavior for color values (iteration in channel order)."""

    channels: ClassVar[tuple[str, ...]] = ()

    def __iter__(self) -> Iterator[int]:
        return iter(astuple(self))

    def as_tuple(self) -> tuple[int, ...]:
        """Channel values in storage order."""
        return astuple(self)


@dataclass(frozen=True)
class RGBColor(_ColorValue):
    """Display color, each channel an integer in [0, 255]."""

    r: int
    g: int
    b: int

    channels: ClassVar[tuple[str, ...]] = ("r", "g", "b")


@dataclass(frozen=True)
class HSVColor(_ColorValue):
    """Hue in degrees [0, 360), saturation and value as percentages [0, 100]."""

    h: int
    s: int
    v: int

    channels: ClassVar[tuple[str, ...]] = ("h", "s", "v")


@dataclass(frozen=True)
class CMYKColor(_ColorValue):
    """Subtractive ink coverage, four percentages [0, 100]. k=100 is pure black."""

    c: int
    m: int
    y: int
    k: int

    channels: ClassVar[tuple[str, ...]] = ("c", "m", "y", "k")


@dataclass(frozen=True)
class LABColor(_ColorValue):
    """CIE L*a*b* (D65): lightness [0, 100], a*/b* roughly [-128, 127]."""

    l: int  # noqa: E741
    a: int
    b: int

    channels: ClassVar[tuple[str, ...]] = ("l", "a", "b")


@dataclass(frozen=True)
class YUVColor(_ColorValue):
    """
    Luma and offset chroma, nominally in [0, 255].

    Saturated colors fall outside that range: pure red has v=284 and cyan
    has v=-29. Converters return those values unclamped; only an
    adjustment clamps them, so any YUV delta on such a color also pulls
    its chroma back into [0, 255].
    """

    y: int
    u: int
    v: int

    channels: ClassVar[tuple[str, ...]] = ("y", "u", "v")


ColorValue: TypeAlias = RGBColor | HSVColor | CMYKColor | LABColor | YUVColor

COLOR_TYPES: dict[ColorModel, type] = {
    ColorModel.RGB: RGBColor,
    ColorModel.HSV: HSVColor,
    ColorModel.CMYK: CMYKColor,
    ColorModel.LAB: LABColor,
    ColorModel.YUV: YUVColor,
}


def as_rgb(color: RGBColor | tuple[int, int, int] | list[int]) -> RGBColor:
    """Coerce an (r, g, b) sequence into an RGBColor."""
    if isinstance(color, RGBColor):
        return color
    r, g, b = color
    return RGBColor(int(r), int(g), int(b))
