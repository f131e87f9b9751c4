"""
Protocol definitions for colormagic pipeline interfaces.

Defines the common interface that buffer pipelines implement.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from colormagic.buffer import PixelBuffer


@runtime_checkable
class PipelineStage(Protocol):
    """
    Protocol for buffer pipeline stages (ModelTransform).

    A stage maps a PixelBuffer to a new PixelBuffer without modifying its
    input, so stages can be applied repeatedly to the same source image.
    """

    def apply(self, buffer: PixelBuffer) -> PixelBuffer:
        """
        Render a buffer through this stage.

        Args:
            buffer: Source RGBA buffer

        Returns:
            New PixelBuffer
        """
        ...

    def reset(self) -> object:
        """Reset the stage to its initial state (no adjustments)."""
        ...

    def __call__(self, buffer: PixelBuffer) -> PixelBuffer:
        """Apply the stage (callable interface)."""
        ...

    def __len__(self) -> int:
        """Return number of operations in the stage."""
        ...
