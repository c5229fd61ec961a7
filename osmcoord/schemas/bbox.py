"""
Bounding Box

Axis-aligned rectangle on the latitude/longitude plane, defined by its
south-west (lower left) and north-east (upper right) corners.

See https://wiki.openstreetmap.org/wiki/Bounding_box
"""

import logging
import math
import numbers
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from osmcoord.core.exceptions import InvalidCornerOrderError
from osmcoord.schemas import ordering
from osmcoord.schemas.coordinates import Coordinates
from osmcoord.schemas.ordering import Ordering

logger = logging.getLogger(__name__)


def _between_inclusive(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def _overlaps_1d(a_min: float, a_max: float, b_min: float, b_max: float) -> bool:
    return a_min <= b_max and b_min <= a_max


def _is_south_west_of(south_west: Coordinates, north_east: Coordinates) -> bool:
    return (
        south_west.latitude < north_east.latitude
        and south_west.longitude < north_east.longitude
    )


class BBox(BaseModel):
    """
    A bounding box.

    Validated boxes satisfy south_west.latitude < north_east.latitude and
    south_west.longitude < north_east.longitude. Width, height, area and
    center are always derived from the corners.
    """

    model_config = ConfigDict(frozen=True)

    south_west: Coordinates = Field(..., description="Lower left corner")
    north_east: Coordinates = Field(..., description="Upper right corner")

    @model_validator(mode="after")
    def validate_corner_order(self) -> "BBox":
        """Reject decoded boxes whose corners are not strictly ordered."""
        if not _is_south_west_of(self.south_west, self.north_east):
            raise InvalidCornerOrderError(self.south_west, self.north_east)
        return self

    @classmethod
    def validated(cls, south_west: Coordinates, north_east: Coordinates) -> "BBox":
        """
        Construct a bounding box from its corners.

        Args:
            south_west: Lower left corner
            north_east: Upper right corner

        Returns:
            The bounding box

        Raises:
            InvalidCornerOrderError: If south_west is not strictly south and
                strictly west of north_east
        """
        if not _is_south_west_of(south_west, north_east):
            logger.debug("Rejected bbox corners %s / %s", south_west, north_east)
            raise InvalidCornerOrderError(south_west, north_east)
        return cls.model_construct(south_west=south_west, north_east=north_east)

    @classmethod
    def unchecked(cls, south_west: Coordinates, north_east: Coordinates) -> "BBox":
        """Construct a bounding box without checking the corner order."""
        return cls.model_construct(south_west=south_west, north_east=north_east)

    @classmethod
    def from_bounds(
        cls,
        south_west_latitude: float,
        south_west_longitude: float,
        north_east_latitude: float,
        north_east_longitude: float,
    ) -> "BBox":
        """
        Construct a bounding box from raw degrees.

        Latitudes are clamped and longitudes wrapped, the corner order is not
        checked.
        """
        return cls.unchecked(
            Coordinates.wrapped(south_west_latitude, south_west_longitude),
            Coordinates.wrapped(north_east_latitude, north_east_longitude),
        )

    @classmethod
    def from_tuple(cls, value: Tuple[float, float, float, float]) -> "BBox":
        """
        Construct a validated bounding box from
        (south_west.latitude, south_west.longitude, north_east.latitude, north_east.longitude).

        Raises:
            OutOfRangeError: If any value is out of range
            InvalidCornerOrderError: If the corners are not strictly ordered
        """
        sw_lat, sw_lon, ne_lat, ne_lon = value
        return cls.validated(
            Coordinates.validated(sw_lat, sw_lon),
            Coordinates.validated(ne_lat, ne_lon),
        )

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (
            self.south_west.latitude.value,
            self.south_west.longitude.value,
            self.north_east.latitude.value,
            self.north_east.longitude.value,
        )

    def corners(self) -> Tuple[float, float, float, float]:
        """Alias of to_tuple, (south, west, north, east)."""
        return self.to_tuple()

    # Dimensions

    @property
    def height(self) -> float:
        """Latitude delta in degrees."""
        return self.north_east.latitude.value - self.south_west.latitude.value

    @property
    def width(self) -> float:
        """Longitude delta in degrees."""
        return self.north_east.longitude.value - self.south_west.longitude.value

    @property
    def height_rad(self) -> float:
        return self.deg_to_rad(self.height)

    @property
    def width_rad(self) -> float:
        return self.deg_to_rad(self.width)

    @property
    def area(self) -> float:
        """Area in square degrees."""
        return self.width * self.height

    @property
    def center(self) -> Coordinates:
        # (latitude delta, longitude delta) is (height, width)
        return self.south_west + Coordinates.wrapped(self.height / 2.0, self.width / 2.0)

    @staticmethod
    def deg_to_rad(degrees: float) -> float:
        return math.radians(degrees)

    @staticmethod
    def rad_to_deg(radians: float) -> float:
        return math.degrees(radians)

    # Predicates

    def contains(self, point: Coordinates) -> bool:
        """Check if the point lies inside the box or on its boundary."""
        return _between_inclusive(
            point.latitude.value,
            self.south_west.latitude.value,
            self.north_east.latitude.value,
        ) and _between_inclusive(
            point.longitude.value,
            self.south_west.longitude.value,
            self.north_east.longitude.value,
        )

    def contains_bbox(self, other: "BBox") -> bool:
        """Check if both corners of other lie inside this box (inclusive)."""
        return self.contains(other.south_west) and self.contains(other.north_east)

    def intersects(self, other: "BBox") -> bool:
        """Check if the boxes overlap on both axes. Touching edges count."""
        a_south, a_west, a_north, a_east = self.to_tuple()
        b_south, b_west, b_north, b_east = other.to_tuple()

        return _overlaps_1d(a_south, a_north, b_south, b_north) and _overlaps_1d(
            a_west, a_east, b_west, b_east
        )

    def intersection(self, other: "BBox") -> Optional["BBox"]:
        """
        Compute the overlapping box.

        Returns:
            The overlap, or None if the boxes do not intersect. The overlap of
            two touching boxes has zero width or height.
        """
        if not self.intersects(other):
            return None

        a_south, a_west, a_north, a_east = self.to_tuple()
        b_south, b_west, b_north, b_east = other.to_tuple()

        return type(self).from_bounds(
            max(a_south, b_south),
            max(a_west, b_west),
            min(a_north, b_north),
            min(a_east, b_east),
        )

    def expand(self, delta: Union[float, Coordinates]) -> "BBox":
        """
        Grow the box by delta, half on each side.

        Args:
            delta: Degrees added on both axes, or Coordinates holding the
                (latitude, longitude) growth

        Returns:
            The expanded box. Latitudes clamp at the poles and longitudes wrap.
        """
        if isinstance(delta, Coordinates):
            lat_delta, lon_delta = delta.to_tuple()
        else:
            lat_delta = lon_delta = float(delta)

        half = Coordinates.unchecked(lat_delta / 2.0, lon_delta / 2.0)
        return type(self).unchecked(self.south_west - half, self.north_east + half)

    # Comparison

    def partial_compare(self, other: "BBox") -> Optional[Ordering]:
        """
        Compare by containment.

        Returns:
            LESS if self is nested in other, GREATER if other is nested in
            self, EQUAL if both, None otherwise
        """
        self_in_other = other.contains_bbox(self)
        other_in_self = self.contains_bbox(other)

        if self_in_other and other_in_self:
            return Ordering.EQUAL
        if self_in_other:
            return Ordering.LESS
        if other_in_self:
            return Ordering.GREATER
        return None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return self.south_west == other.south_west and self.north_east == other.north_east

    def __hash__(self) -> int:
        return hash((self.south_west, self.north_east))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return ordering.is_less(self.partial_compare(other))

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return ordering.is_less_or_equal(self.partial_compare(other))

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return ordering.is_greater(self.partial_compare(other))

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return ordering.is_greater_or_equal(self.partial_compare(other))

    # Scaling

    def __mul__(self, other: Any) -> "BBox":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self).unchecked(self.south_west * other, self.north_east * other)

    def __truediv__(self, other: Any) -> "BBox":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self).unchecked(self.south_west / other, self.north_east / other)

    def __str__(self) -> str:
        return (
            f"((South: {self.south_west.latitude}, West: {self.south_west.longitude}), "
            f"(North: {self.north_east.latitude}, East: {self.north_east.longitude}))"
        )
