"""
Parameter placeholders for parameterized pipeline templates.

This module provides the Param class for creating ModelTransform templates
whose channel deltas are substituted at runtime (slider values, animation).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Param:
    """
    Parameter placeholder for pipeline templates.

    Attributes:
        name: Parameter identifier used in the params dict (e.g. "hue")
        default: Delta used when no runtime value is given
        range: Optional (min, max) tuple for validation

    Example:
        >>> from colormagic import ModelTransform, Param
        >>> template = ModelTransform.template(
        ...     "HSV",
        ...     h=Param("hue", default=0, range=(-180, 180)),
        ...     s=Param("sat", default=0, range=(-100, 100)),
        ... )
        >>> result = template(buffer, params={"hue": 30, "sat": 15})
    """

    name: str
    default: float
    range: tuple[float, float] | None = None

    def __post_init__(self):
        """Validate parameter definition."""
        if self.range is not None:
            min_val, max_val = self.range
            if min_val >= max_val:
                raise ValueError(
                    f"Invalid range for {self.name}: min ({min_val}) must be < max ({max_val})"
                )
            if not (min_val <= self.default <= max_val):
                raise ValueError(
                    f"Default value {self.default} for {self.name} outside range {self.range}"
                )

    def validate(self, value: float) -> float:
        """
        Validate a parameter value against its range.

        Args:
            value: Value to validate

        Returns:
            Validated value as float

        Raises:
            TypeError: If value is not a number
            ValueError: If value is outside defined range

        Example:
            >>> param = Param("hue", default=0, range=(-180, 180))
            >>> param.validate(45)
            45.0
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{self.name} must be a number, got {type(value).__name__}")
        if self.range is not None:
            min_val, max_val = self.range
            if not (min_val <= value <= max_val):
                raise ValueError(f"{self.name}={value} outside valid range {self.range}")
        return float(value)

    def __repr__(self) -> str:
        """String representation."""
        if self.range is not None:
            return f"Param(name='{self.name}', default={self.default}, range={self.range})"
        return f"Param(name='{self.name}', default={self.default})"
