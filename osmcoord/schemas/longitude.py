"""
Longitude

East-west angular coordinate in [-180, 180]. Longitude is periodic, so values
outside the range wrap around. 180°E and 180°W are the same meridian and the
canonical representative of it is -180.
"""

import logging
from typing import ClassVar

from osmcoord.schemas.angle import Angle

logger = logging.getLogger(__name__)

LONGITUDE_MIN = -180.0
LONGITUDE_MAX = 180.0


class Longitude(Angle):
    """Longitude in decimal degrees, wrapped into [-180, 180) on overflow."""

    MIN: ClassVar[float] = LONGITUDE_MIN
    MAX: ClassVar[float] = LONGITUDE_MAX
    POSITIVE_SUFFIX: ClassVar[str] = "°E"
    NEGATIVE_SUFFIX: ClassVar[str] = "°W"

    @classmethod
    def wrapped(cls, value: float) -> "Longitude":
        """Construct a longitude, wrapping value into [-180, 180)."""
        value = float(value)
        wrapped = cls.normalized(value)
        if wrapped != value:
            logger.debug("Wrapped longitude %s to %s", value, wrapped)
        return cls.model_construct(wrapped)

    @classmethod
    def _coerce(cls, value: float) -> "Longitude":
        return cls.wrapped(value)
