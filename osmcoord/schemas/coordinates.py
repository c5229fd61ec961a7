"""
Coordinates

A single point on earth as a (latitude, longitude) pair.

Coordinates are ordered by dominance rather than lexicographically:

| Lat     | Lon     | Result  |
|---------|---------|---------|
| Less    | Less    | Less    |
| Less    | Equal   | Less    |
| Equal   | Less    | Less    |
| Equal   | Equal   | Equal   |
| Equal   | Greater | Greater |
| Greater | Equal   | Greater |
| Greater | Greater | Greater |

Any other combination is incomparable, so a < b means "a is south-west of b".
"""

import numbers
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from osmcoord.schemas import ordering
from osmcoord.schemas.latitude import Latitude
from osmcoord.schemas.longitude import Longitude
from osmcoord.schemas.ordering import Ordering

_DOMINANCE: Dict[Tuple[Ordering, Ordering], Ordering] = {
    (Ordering.LESS, Ordering.LESS): Ordering.LESS,
    (Ordering.LESS, Ordering.EQUAL): Ordering.LESS,
    (Ordering.EQUAL, Ordering.LESS): Ordering.LESS,
    (Ordering.EQUAL, Ordering.EQUAL): Ordering.EQUAL,
    (Ordering.EQUAL, Ordering.GREATER): Ordering.GREATER,
    (Ordering.GREATER, Ordering.EQUAL): Ordering.GREATER,
    (Ordering.GREATER, Ordering.GREATER): Ordering.GREATER,
}


class Coordinates(BaseModel):
    """
    Geographic coordinates (latitude and longitude).

    Latitude is the y axis, longitude the x axis.
    """

    model_config = ConfigDict(frozen=True)

    latitude: Latitude = Field(..., description="Latitude in decimal degrees")
    longitude: Longitude = Field(..., description="Longitude in decimal degrees")

    @classmethod
    def validated(cls, latitude: float, longitude: float) -> "Coordinates":
        """
        Construct coordinates from raw degrees.

        Args:
            latitude: Latitude in [-90, 90]
            longitude: Longitude in [-180, 180]

        Returns:
            Coordinates with both values unchanged

        Raises:
            OutOfRangeError: If either value is out of range
        """
        return cls.model_construct(
            latitude=Latitude.validated(latitude),
            longitude=Longitude.validated(longitude),
        )

    @classmethod
    def wrapped(cls, latitude: float, longitude: float) -> "Coordinates":
        """Construct coordinates, clamping the latitude and wrapping the longitude."""
        return cls.model_construct(
            latitude=Latitude.clamped(latitude),
            longitude=Longitude.wrapped(longitude),
        )

    @classmethod
    def unchecked(cls, latitude: float, longitude: float) -> "Coordinates":
        return cls.model_construct(
            latitude=Latitude.unchecked(latitude),
            longitude=Longitude.unchecked(longitude),
        )

    @classmethod
    def from_tuple(cls, value: Tuple[float, float]) -> "Coordinates":
        """Construct validated coordinates from a (latitude, longitude) tuple."""
        latitude, longitude = value
        return cls.validated(latitude, longitude)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.latitude.value, self.longitude.value)

    def partial_compare(self, other: "Coordinates") -> Optional[Ordering]:
        """
        Compare by dominance.

        Returns:
            The ordering of self relative to other, or None if one axis is
            greater while the other is less
        """
        key = (
            ordering.compare(self.latitude, other.latitude),
            ordering.compare(self.longitude, other.longitude),
        )
        return _DOMINANCE.get(key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self) -> int:
        return hash((self.latitude, self.longitude))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return ordering.is_less(self.partial_compare(other))

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return ordering.is_less_or_equal(self.partial_compare(other))

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return ordering.is_greater(self.partial_compare(other))

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return ordering.is_greater_or_equal(self.partial_compare(other))

    def __add__(self, other: Any) -> "Coordinates":
        if not isinstance(other, Coordinates):
            return NotImplemented
        return type(self).model_construct(
            latitude=self.latitude + other.latitude,
            longitude=self.longitude + other.longitude,
        )

    def __sub__(self, other: Any) -> "Coordinates":
        if not isinstance(other, Coordinates):
            return NotImplemented
        return type(self).model_construct(
            latitude=self.latitude - other.latitude,
            longitude=self.longitude - other.longitude,
        )

    def __mul__(self, other: Any) -> "Coordinates":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self).model_construct(
            latitude=self.latitude * other,
            longitude=self.longitude * other,
        )

    def __truediv__(self, other: Any) -> "Coordinates":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self).model_construct(
            latitude=self.latitude / other,
            longitude=self.longitude / other,
        )

    def __str__(self) -> str:
        return f"{self.latitude} {self.longitude}"
