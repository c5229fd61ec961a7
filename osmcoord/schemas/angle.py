"""
Angle Base Type

Common behaviour of the scalar coordinate types. An angle wraps a single
float, serializes as that bare float, and keeps itself inside its range by
re-applying the subclass policy (clamp or wrap) after every arithmetic
operation.
"""

import logging
import numbers
import struct
from typing import Any, ClassVar, Optional

from pydantic import ConfigDict, RootModel, field_validator

from osmcoord.core.exceptions import OutOfRangeError
from osmcoord.schemas.normalize import Normalized
from osmcoord.utils import logger as _  # noqa: F401 - Import to configure logging

logger = logging.getLogger(__name__)

_SIGN_MASK = 0x7FFFFFFFFFFFFFFF


def total_order_key(value: float) -> int:
    """
    Map a float onto an integer that sorts in IEEE 754 total order.

    Negative zero is folded into positive zero so that the two compare and
    hash equal.
    """
    if value == 0.0:
        value = 0.0
    (bits,) = struct.unpack("<q", struct.pack("<d", value))
    if bits < 0:
        bits ^= _SIGN_MASK
    return bits


class Angle(RootModel[float], Normalized):
    """
    A single angular coordinate in decimal degrees.

    Subclasses declare MIN, MAX, the hemisphere suffixes and how an out of
    range result is brought back into range (_coerce).
    """

    model_config = ConfigDict(frozen=True)

    POSITIVE_SUFFIX: ClassVar[str]
    NEGATIVE_SUFFIX: ClassVar[str]

    @field_validator("root")
    @classmethod
    def validate_range(cls, v: float) -> float:
        """Reject decoded values outside the allowed range."""
        if not cls.is_valid(v):
            raise OutOfRangeError(v, cls.allowed_range())
        return v

    @classmethod
    def validated(cls, value: float):
        """
        Construct an angle, failing if value is outside [MIN, MAX].

        Raises:
            OutOfRangeError: If the value is out of range or NaN
        """
        value = float(value)
        if not cls.is_valid(value):
            logger.debug("Rejected %s %s outside %s", cls.__name__, value, cls.allowed_range())
            raise OutOfRangeError(value, cls.allowed_range())
        return cls.model_construct(value)

    @classmethod
    def unchecked(cls, value: float):
        """Construct an angle without any range check."""
        return cls.model_construct(float(value))

    @classmethod
    def _coerce(cls, value: float):
        raise NotImplementedError

    @property
    def value(self) -> float:
        return self.root

    def __float__(self) -> float:
        return self.root

    # Comparison and hashing

    def _key(self) -> int:
        return total_order_key(self.root)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._key() >= other._key()

    # Arithmetic

    @staticmethod
    def _operand(other: Any) -> Optional[float]:
        if isinstance(other, Angle):
            return other.root
        if isinstance(other, numbers.Real):
            return float(other)
        return None

    def __add__(self, other: Any):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._coerce(self.root + operand)

    def __sub__(self, other: Any):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._coerce(self.root - operand)

    def __mul__(self, other: Any):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._coerce(self.root * operand)

    def __truediv__(self, other: Any):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._coerce(self.root / operand)

    def __neg__(self):
        return self._coerce(-self.root)

    def __str__(self) -> str:
        if self.root >= 0.0:
            return f"{self.root} {self.POSITIVE_SUFFIX}"
        return f"{abs(self.root)} {self.NEGATIVE_SUFFIX}"
