"""
Latitude

North-south angular coordinate in [-90, 90]. Latitude does not wrap over the
poles, values outside the range saturate at the nearest bound.
"""

import logging
from typing import ClassVar

from osmcoord.schemas.angle import Angle

logger = logging.getLogger(__name__)

LATITUDE_MIN = -90.0
LATITUDE_MAX = 90.0


class Latitude(Angle):
    """Latitude in decimal degrees, clamped on overflow."""

    MIN: ClassVar[float] = LATITUDE_MIN
    MAX: ClassVar[float] = LATITUDE_MAX
    POSITIVE_SUFFIX: ClassVar[str] = "°N"
    NEGATIVE_SUFFIX: ClassVar[str] = "°S"

    @classmethod
    def clamped(cls, value: float) -> "Latitude":
        """Construct a latitude, saturating value into [-90, 90]."""
        value = float(value)
        clamped = min(max(value, cls.MIN), cls.MAX)
        if clamped != value:
            logger.debug("Clamped latitude %s to %s", value, clamped)
        return cls.model_construct(clamped)

    @classmethod
    def _coerce(cls, value: float) -> "Latitude":
        return cls.clamped(value)
