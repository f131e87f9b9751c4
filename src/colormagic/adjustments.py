"""
Per-channel color adjustments.

A ColorAdjustment is a tagged value: the model it applies to plus a delta for
some or all of that model's channels. Absent channels default to 0. Deltas are
not range-checked; the adjuster clamps every channel (and wraps hue) after the
delta is added.

Example:
    >>> from colormagic import ColorAdjustment, RGBColor, adjust_color
    >>> warmer = ColorAdjustment("HSV", h=-20, s=15)
    >>> adjust_color(RGBColor(40, 90, 200), warmer)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from colormagic.color.conversions import MODEL_CONVERTERS, as_rgb, clamp, round_half_up
from colormagic.color.models import COLOR_TYPES, ColorModel, RGBColor
from colormagic.constants import ADJUSTMENT_RANGES, CHANNEL_RANGES, HUE_PERIOD


@dataclass(frozen=True)
class ColorAdjustment:
    """
    Per-channel deltas for a single color model.

    Attributes:
        model: Model the deltas are expressed in
        deltas: Channel name -> delta (read-only mapping, absent = 0)

    Example:
        >>> ColorAdjustment("LAB", l=10, b=-25)
        ColorAdjustment(model='LAB', l=10, b=-25)
    """

    model: ColorModel
    deltas: Mapping[str, float] = field(default_factory=dict)

    def __init__(
        self,
        model: ColorModel | str,
        deltas: Mapping[str, float] | None = None,
        **channel_deltas: float,
    ):
        """
        Create an adjustment.

        Args:
            model: Model tag or case-insensitive name
            deltas: Optional mapping of channel name -> delta
            **channel_deltas: Channel deltas as keywords (merged over deltas)

        Raises:
            ValueError: If the model or a channel name is unknown
            TypeError: If a delta is not a number
        """
        model = ColorModel.parse(model)
        merged = dict(deltas or {})
        merged.update(channel_deltas)

        valid = model.channels
        checked: dict[str, float] = {}
        for channel, value in merged.items():
            key = channel.lower()
            if key not in valid:
                raise ValueError(
                    f"channel='{channel}' is not valid for {model.value}. "
                    f"Valid options are: {', '.join(valid)}"
                )
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise TypeError(
                    f"{key} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )
            checked[key] = value.item() if isinstance(value, np.generic) else value

        object.__setattr__(self, "model", model)
        object.__setattr__(self, "deltas", MappingProxyType(checked))

    @classmethod
    def zero(cls, model: ColorModel | str) -> ColorAdjustment:
        """All-zero adjustment for a model (the reset state)."""
        model = ColorModel.parse(model)
        return cls(model, {channel: 0 for channel in model.channels})

    def delta(self, channel: str) -> float:
        """Delta for one channel (0 if absent)."""
        return self.deltas.get(channel, 0)

    def as_vector(self) -> tuple[float, ...]:
        """Deltas in the model's channel order, absent channels as 0."""
        return tuple(self.delta(channel) for channel in self.model.channels)

    def is_zero(self) -> bool:
        """True if no channel is shifted."""
        return all(value == 0 for value in self.deltas.values())

    def clamped(self) -> ColorAdjustment:
        """Copy with every delta limited to the model's slider range."""
        ranges = ADJUSTMENT_RANGES[self.model.value]
        return ColorAdjustment(
            self.model,
            {ch: clamp(value, *ranges[ch]) for ch, value in self.deltas.items()},
        )

    def __add__(self, other: ColorAdjustment) -> ColorAdjustment:
        """Stack two adjustments for the same model (deltas add)."""
        if not isinstance(other, ColorAdjustment):
            return NotImplemented
        if other.model is not self.model:
            raise ValueError(
                f"Cannot combine {self.model.value} and {other.model.value} adjustments"
            )
        combined = dict(self.deltas)
        for channel, value in other.deltas.items():
            combined[channel] = combined.get(channel, 0) + value
        return ColorAdjustment(self.model, combined)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorAdjustment):
            return NotImplemented
        return self.model is other.model and self.as_vector() == other.as_vector()

    def __hash__(self) -> int:
        return hash((self.model, self.as_vector()))

    def __reduce__(self):
        return (ColorAdjustment, (self.model.value, dict(self.deltas)))

    def __copy__(self) -> ColorAdjustment:
        return self

    def __deepcopy__(self, memo) -> ColorAdjustment:
        return self

    def __repr__(self) -> str:
        parts = ", ".join(f"{ch}={value}" for ch, value in self.deltas.items())
        if parts:
            return f"ColorAdjustment(model='{self.model.value}', {parts})"
        return f"ColorAdjustment(model='{self.model.value}')"


def _apply_delta(model: ColorModel, channel: str, value: float, delta: float) -> float:
    """Shift one channel and bring it back into the model's range."""
    shifted = value + delta
    if model is ColorModel.HSV and channel == "h":
        return shifted % HUE_PERIOD
    lo, hi = CHANNEL_RANGES[model.value][channel]
    return clamp(shifted, lo, hi)


def adjust_color(rgb: RGBColor, adjustment: ColorAdjustment | None) -> RGBColor:
    """
    Apply an adjustment to a single RGB color.

    The color is converted into the adjustment's model, each delta is added
    to its channel, the result is clamped (hue wraps modulo 360) and converted
    back to RGB. A missing or all-zero adjustment returns the color unchanged.

    Args:
        rgb: Source color (RGBColor or an (r, g, b) sequence)
        adjustment: Deltas to apply, or None

    Returns:
        Adjusted RGB color
    """
    rgb = as_rgb(rgb)
    if adjustment is None or adjustment.is_zero():
        return rgb

    model = adjustment.model
    from_rgb, back_to_rgb = MODEL_CONVERTERS[model]
    color = from_rgb(rgb)

    shifted = {
        channel: _apply_delta(model, channel, value, adjustment.delta(channel))
        for channel, value in zip(model.channels, color)
    }

    if model is ColorModel.RGB:
        return RGBColor(*(round_half_up(shifted[ch]) for ch in model.channels))
    return back_to_rgb(COLOR_TYPES[model](**shifted))
