"""
Workspace: render state for an interactive color model viewer.

Holds the loaded image, the selected model, the adjustment for that model and
the original/transformed view toggle, and produces the surface to display.

Render rule: the transformed view is shown when "show original" is off OR a
non-zero adjustment is present; otherwise the original image is shown.
Pixel probes always sample the rendered surface.

Example:
    >>> ws = Workspace().load("photo.png")
    >>> ws.select_model("HSV").set_channel("h", 40)
    >>> surface = ws.render()
    >>> ws.probe(10, 20)  # e.g. 'HSV(52°, 61%, 80%)'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Self

from colormagic.adjustments import ColorAdjustment
from colormagic.buffer import PixelBuffer
from colormagic.color.models import ColorModel
from colormagic.constants import DEFAULT_MODEL, DEFAULT_SHOW_ORIGINAL, WORKSPACE_MAX_SIZE
from colormagic.formatting import probe_pixel
from colormagic.io import load_image, resize_to_fit
from colormagic.transform.api import transform_image
from colormagic.validators import validate_type

logger = logging.getLogger(__name__)


class Workspace:
    """
    Selected model, adjustment and view toggle over one image.

    Switching the model discards the current adjustment, so an adjustment is
    always expressed in the active model.
    """

    __slots__ = (
        "_image",
        "_model",
        "_adjustment",
        "_show_original",
        "_max_size",
        "_rendered",  # cached surface, None when stale
    )

    def __init__(
        self,
        model: ColorModel | str = DEFAULT_MODEL,
        show_original: bool = DEFAULT_SHOW_ORIGINAL,
        max_size: tuple[int, int] | None = WORKSPACE_MAX_SIZE,
    ):
        """
        Initialize an empty workspace.

        Args:
            model: Initially selected model
            show_original: Initial state of the view toggle
            max_size: Loaded images are fitted into this (width, height); None keeps native size
        """
        self._image: PixelBuffer | None = None
        self._model = ColorModel.parse(model)
        self._adjustment = ColorAdjustment.zero(self._model)
        self._show_original = bool(show_original)
        self._max_size = max_size
        self._rendered: PixelBuffer | None = None

    # ========================================================================
    # Image
    # ========================================================================

    def load(self, source: str | Path | bytes | BinaryIO) -> Self:
        """
        Decode an image and make it the workspace image.

        Raises:
            UnreadableImageError: If the image cannot be decoded (state is unchanged)
        """
        return self.set_image(load_image(source))

    @validate_type(PixelBuffer, "buffer")
    def set_image(self, buffer: PixelBuffer) -> Self:
        """Use an already decoded buffer (fitted to max_size if set)."""
        if self._max_size is not None:
            buffer = resize_to_fit(buffer, self._max_size)
        self._image = buffer
        self._rendered = None
        logger.info("[Workspace] Image set (%dx%d)", buffer.width, buffer.height)
        return self

    def clear(self) -> Self:
        """Remove the image (model and adjustment are kept)."""
        self._image = None
        self._rendered = None
        return self

    @property
    def image(self) -> PixelBuffer | None:
        """The (fitted) source image, or None."""
        return self._image

    # ========================================================================
    # Model and Adjustment
    # ========================================================================

    @property
    def model(self) -> ColorModel:
        """Selected color model."""
        return self._model

    @property
    def adjustment(self) -> ColorAdjustment:
        """Current adjustment (always for the selected model)."""
        return self._adjustment

    @property
    def has_adjustment(self) -> bool:
        """True if any channel of the current adjustment is non-zero."""
        return not self._adjustment.is_zero()

    def select_model(self, model: ColorModel | str) -> Self:
        """
        Switch the active model and reset the adjustment.

        Raises:
            ValueError: If the model name is unknown
        """
        model = ColorModel.parse(model)
        if model is not self._model:
            logger.debug("[Workspace] Model %s -> %s, adjustment reset", self._model.value, model.value)
        self._model = model
        return self.reset_adjustment()

    @validate_type(ColorAdjustment, "adjustment")
    def set_adjustment(self, adjustment: ColorAdjustment) -> Self:
        """
        Replace the adjustment.

        Raises:
            ValueError: If the adjustment is for another model
        """
        if adjustment.model is not self._model:
            raise ValueError(
                f"Adjustment for {adjustment.model.value} does not match the selected "
                f"model {self._model.value}. Call select_model() first."
            )
        self._adjustment = adjustment
        self._rendered = None
        return self

    def set_channel(self, channel: str, value: float) -> Self:
        """
        Set one channel's delta (a slider move), keeping the others.

        Raises:
            ValueError: If the channel does not belong to the selected model
            TypeError: If value is not a number
        """
        deltas = dict(self._adjustment.deltas)
        deltas[channel] = value
        return self.set_adjustment(ColorAdjustment(self._model, deltas))

    def reset_adjustment(self) -> Self:
        """Zero every channel of the selected model."""
        self._adjustment = ColorAdjustment.zero(self._model)
        self._rendered = None
        return self

    # ========================================================================
    # View Toggle
    # ========================================================================

    @property
    def show_original(self) -> bool:
        """State of the original/transformed view toggle."""
        return self._show_original

    @show_original.setter
    def show_original(self, value: bool) -> None:
        self._show_original = bool(value)
        self._rendered = None

    def toggle_view(self) -> Self:
        """Flip the original/transformed view toggle."""
        self.show_original = not self._show_original
        return self

    @property
    def shows_transformed(self) -> bool:
        """True if render() produces the transformed view."""
        return not self._show_original or self.has_adjustment

    # ========================================================================
    # Rendering and Probing
    # ========================================================================

    def render(self) -> PixelBuffer | None:
        """
        Surface to display for the current state.

        Returns:
            Transformed or original buffer, or None when no image is loaded
        """
        if self._image is None:
            return None
        if self._rendered is None:
            if self.shows_transformed:
                self._rendered = transform_image(self._image, self._model, self._adjustment)
            else:
                self._rendered = self._image
        return self._rendered

    def probe(self, x: float, y: float) -> str | None:
        """
        Readout of the rendered pixel at (x, y) in the selected model.

        Returns:
            Formatted color, or None when no image is loaded or (x, y) is outside it
        """
        surface = self.render()
        if surface is None:
            return None
        return probe_pixel(surface, x, y, self._model)

    def probe_display(
        self, x: float, y: float, display_size: tuple[float, float]
    ) -> str | None:
        """
        Readout for a pointer position on a scaled display of the surface.

        Args:
            x, y: Pointer position relative to the displayed surface's top-left corner
            display_size: (width, height) the surface is displayed at

        Returns:
            Formatted color, or None when nothing is under the pointer
        """
        surface = self.render()
        if surface is None:
            return None
        display_width, display_height = display_size
        if display_width <= 0 or display_height <= 0:
            return None
        # probe_pixel floors and rejects non-finite positions
        px = x * (surface.width / display_width)
        py = y * (surface.height / display_height)
        return probe_pixel(surface, px, py, self._model)

    def __repr__(self) -> str:
        image = f"{self._image.width}x{self._image.height}" if self._image is not None else "empty"
        view = "transformed" if self.shows_transformed else "original"
        return f"Workspace({self._model.value}, {self._adjustment!r}, {view}, {image})"
