"""
Coordinate Errors

Exceptions raised by the validated constructors of the coordinate model.
"""

from typing import Any, Tuple


class CoordinateError(ValueError):
    """Base exception for coordinate model errors."""


class OutOfRangeError(CoordinateError):
    """Raised when a latitude or longitude lies outside its allowed range."""

    def __init__(self, value: float, allowed_range: Tuple[float, float]):
        self.value = value
        self.allowed_range = allowed_range
        super().__init__(
            f"Value {value} is out of range [{allowed_range[0]}, {allowed_range[1]}]"
        )


class InvalidCornerOrderError(CoordinateError):
    """Raised when south_west is not strictly south-west of north_east."""

    def __init__(self, south_west: Any, north_east: Any):
        self.south_west = south_west
        self.north_east = north_east
        super().__init__(
            f"south_west ({south_west}) must be strictly south-west of north_east ({north_east})"
        )
