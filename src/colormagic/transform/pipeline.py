"""
ModelTransform: Fluent pipeline for rendering buffers in a color model.

This module provides a chainable API around transform_image: pick the active
model, stack per-channel adjustments, then apply the pipeline to any number
of buffers.

Key Features:
- Method chaining for intuitive pipeline construction
- **Adjustment stacking**: repeated adjust() calls add up per channel
- Identity fast path (RGB with no effective adjustment returns a copy)
- Parameterized templates for sliders and animation

Example:
    >>> pipeline = (ModelTransform("HSV")
    ...     .adjust(h=20)        # Hue +20
    ...     .adjust(s=-10)       # Saturation -10
    ...     .adjust(h=10)        # Stacked: hue +30 total
    ... )
    >>> result = pipeline(buffer)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Self

from colormagic.adjustments import ColorAdjustment
from colormagic.buffer import PixelBuffer
from colormagic.color.models import ColorModel
from colormagic.params import Param
from colormagic.transform.api import transform_image
from colormagic.validators import validate_type

logger = logging.getLogger(__name__)


class ModelTransform:
    """
    Chainable buffer transformation for a single color model.

    The pipeline holds the active model and a list of adjustments for that
    model. Adjustments are combined additively at apply time:
        adjust(h=20).adjust(h=10) -> adjust(h=30)

    Hue deltas are not normalized when stacking; the adjuster wraps hue
    modulo 360 per pixel, so +370 and +10 render identically.

    Example:
        >>> pipeline = ModelTransform("LAB").adjust(l=10).adjust(b=-20)
        >>> pipeline.adjustment
        ColorAdjustment(model='LAB', l=10, b=-20)
        >>> display = pipeline.apply(buffer)
    """

    __slots__ = (
        "_model",
        "_adjustments",  # list[ColorAdjustment] in call order
        "_param_map",  # dict[str, tuple[Param, str]] param name -> (Param, channel)
        "_param_order",  # tuple[str, ...] pre-sorted param names for cache keys
        "_validated_cache",  # dict[tuple, ColorAdjustment] adjustments for seen params
    )

    def __init__(self, model: ColorModel | str = ColorModel.RGB):
        """
        Initialize the pipeline.

        Args:
            model: Active model tag or case-insensitive name

        Raises:
            ValueError: If the model name is unknown
        """
        self._model = ColorModel.parse(model)
        self._adjustments: list[ColorAdjustment] = []

        # Parameterized template support
        self._param_map: dict[str, tuple[Param, str]] = {}
        self._param_order: tuple[str, ...] = ()
        self._validated_cache: dict[tuple, ColorAdjustment] = {}

        logger.info("[ModelTransform] Initialized with model=%s", self._model.value)

    @classmethod
    def template(cls, model: ColorModel | str, **param_specs: Param) -> Self:
        """
        Create a parameterized pipeline whose channel deltas are set at call time.

        Args:
            model: Active model tag or name
            **param_specs: Channel name -> Param (e.g. h=Param("hue", 0, (-180, 180)))

        Returns:
            ModelTransform configured as a parameterized template

        Example:
            >>> from colormagic import ModelTransform, Param
            >>> template = ModelTransform.template(
            ...     "HSV",
            ...     h=Param("hue", default=0, range=(-180, 180)),
            ...     v=Param("value", default=0, range=(-100, 100)),
            ... )
            >>> frame1 = template(buffer, params={"hue": 45})
            >>> frame2 = template(buffer, params={"hue": 90, "value": -20})
        """
        pipeline = cls(model)
        valid_channels = pipeline._model.channels

        seen_param_names = set()

        for channel, param in param_specs.items():
            if not isinstance(param, Param):
                raise TypeError(
                    f"Expected Param object for '{channel}', got {type(param).__name__}"
                )

            if channel not in valid_channels:
                raise ValueError(
                    f"Unknown channel '{channel}' for {pipeline._model.value}. "
                    f"Valid channels: {list(valid_channels)}"
                )

            if param.name in seen_param_names:
                raise ValueError(
                    f"Duplicate parameter name '{param.name}'. Each Param must have a unique name."
                )
            seen_param_names.add(param.name)

            pipeline._param_map[param.name] = (param, channel)
            pipeline.adjust(**{channel: param.default})

        pipeline._param_order = tuple(sorted(pipeline._param_map.keys()))

        logger.info(
            "[ModelTransform] Created parameterized template with params: %s",
            pipeline._param_order,
        )
        return pipeline

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def model(self) -> ColorModel:
        """Active color model."""
        return self._model

    @property
    def adjustments(self) -> list[ColorAdjustment]:
        """Adjustments in the order they were added."""
        return self._adjustments.copy()

    @property
    def adjustment(self) -> ColorAdjustment | None:
        """Combined adjustment (None if no adjust() call was made)."""
        if not self._adjustments:
            return None
        combined = ColorAdjustment.zero(self._model)
        for adjustment in self._adjustments:
            combined = combined + adjustment
        return combined

    # ========================================================================
    # Operations
    # ========================================================================

    @validate_type((ColorAdjustment, type(None)), "adjustment")
    def adjust(self, adjustment: ColorAdjustment | None = None, **deltas: float) -> Self:
        """
        Add per-channel deltas for the active model.

        Args:
            adjustment: Optional ColorAdjustment (must be tagged with the active model)
            **deltas: Channel deltas as keywords (e.g. h=30, s=-10)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If the adjustment belongs to another model or a channel is unknown
            TypeError: If a delta is not a number

        Example:
            >>> ModelTransform("CMYK").adjust(c=10).adjust(k=-5)
        """
        if adjustment is not None:
            if adjustment.model is not self._model:
                raise ValueError(
                    f"Adjustment for {adjustment.model.value} cannot be added to a "
                    f"{self._model.value} pipeline. Use ModelTransform('{adjustment.model.value}')."
                )
            self._adjustments.append(adjustment)

        if deltas:
            self._adjustments.append(ColorAdjustment(self._model, deltas))

        # Cached template adjustments embed the stacked defaults
        self._validated_cache = {}
        return self

    def is_identity(self) -> bool:
        """
        Check if this pipeline leaves buffers unchanged.

        Only RGB displays pixels as-is; every other model remaps them even
        without an adjustment.
        """
        if self._model is not ColorModel.RGB:
            return False
        combined = self.adjustment
        return combined is None or combined.is_zero()

    # ========================================================================
    # Application
    # ========================================================================

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        """
        Render a buffer through this pipeline.

        Args:
            buffer: Source RGBA buffer (never modified)

        Returns:
            New PixelBuffer with the same dimensions
        """
        return self._render(buffer, self.adjustment)

    def _render(self, buffer: PixelBuffer, adjustment: ColorAdjustment | None) -> PixelBuffer:
        if self._model is ColorModel.RGB and (adjustment is None or adjustment.is_zero()):
            logger.debug("[ModelTransform] Identity pipeline, returning copy")
            return buffer.copy()

        result = transform_image(buffer, self._model, adjustment)
        logger.info(
            "[ModelTransform] Applied %s to %d pixels (%d adjustments)",
            self._model.value,
            buffer.pixel_count,
            len(self._adjustments),
        )
        return result

    def _get_cache_key(self, params: dict[str, float]) -> tuple:
        """Parameter values in pre-sorted order (missing ones as None)."""
        return tuple(params.get(name) for name in self._param_order)

    def _apply_with_params(self, buffer: PixelBuffer, params: dict[str, float]) -> PixelBuffer:
        """
        Apply the template with runtime parameter substitution.

        Each given parameter replaces the total delta of its channel; channels
        without a runtime value keep their stacked defaults.

        Raises:
            ValueError: If a parameter name is unknown or a value is out of range
        """
        for param_name in params:
            if param_name not in self._param_map:
                raise ValueError(
                    f"Unknown parameter '{param_name}'. "
                    f"Valid parameters: {sorted(self._param_map.keys())}"
                )

        cache_key = self._get_cache_key(params)

        if cache_key in self._validated_cache:
            adjustment = self._validated_cache[cache_key]
        else:
            combined = self.adjustment
            deltas = dict(combined.deltas) if combined is not None else {}
            for param_name, value in params.items():
                param_obj, channel = self._param_map[param_name]
                deltas[channel] = param_obj.validate(value)

            adjustment = ColorAdjustment(self._model, deltas)
            self._validated_cache[cache_key] = adjustment

        return self._render(buffer, adjustment)

    def __call__(self, buffer: PixelBuffer, params: dict[str, float] | None = None) -> PixelBuffer:
        """
        Apply the pipeline when called as a function.

        Args:
            buffer: Source RGBA buffer
            params: Optional runtime parameter values for parameterized templates

        Returns:
            New PixelBuffer

        Example (parameterized template):
            >>> template = ModelTransform.template(
            ...     "YUV", u=Param("u", default=0, range=(-255, 255))
            ... )
            >>> out = template(buffer, params={"u": 40})
        """
        if params is not None:
            if not self._param_map:
                raise ValueError(
                    "Pipeline was not created with template(). "
                    "Use ModelTransform() for non-parameterized pipelines."
                )
            return self._apply_with_params(buffer, params)

        return self.apply(buffer)

    def reset(self) -> Self:
        """
        Clear all adjustments and parameters (the model is kept).

        Returns:
            Self for method chaining
        """
        self._adjustments = []
        self._param_map = {}
        self._param_order = ()
        self._validated_cache = {}
        logger.debug("[ModelTransform] Reset to defaults")
        return self

    def copy(self) -> Self:
        """
        Create a deep copy of this pipeline.

        Example:
            >>> base = ModelTransform("HSV").adjust(h=30)
            >>> brighter = base.copy().adjust(v=20)  # Independent copy
        """
        return deepcopy(self)

    def __len__(self) -> int:
        """Return number of adjust() operations (before stacking)."""
        return len(self._adjustments)

    def __repr__(self) -> str:
        """String representation of the pipeline."""
        combined = self.adjustment
        if combined is None or combined.is_zero():
            param_str = "no adjustment"
        else:
            param_str = ", ".join(
                f"{channel}={value:+g}"
                for channel, value in zip(self._model.channels, combined.as_vector())
                if value != 0
            )

        num_ops = len(self)
        if num_ops > 0:
            return f"ModelTransform({self._model.value}: {param_str}) [{num_ops} ops]"
        return f"ModelTransform({self._model.value}: {param_str})"

    def __copy__(self) -> Self:
        """Shallow copy delegates to deep copy."""
        return self.copy()

    def __deepcopy__(self, memo) -> Self:
        """Create an independent pipeline; adjustments and Params are immutable and shared."""
        new = ModelTransform(self._model)
        new._adjustments = self._adjustments.copy()
        new._param_map = self._param_map.copy()
        new._param_order = self._param_order
        new._validated_cache = self._validated_cache.copy()
        return new
