"""
Range Normalization

Shared range contract for the scalar coordinate types. A type declares its
closed range through MIN and MAX and may reduce arbitrary values into
[MIN, MAX) with the circular normalization.
"""

from typing import ClassVar, Tuple


class Normalized:
    """
    Mixin declaring a fixed numeric range [MIN, MAX].

    Subclasses must set MIN and MAX. normalized() wraps a value into the
    half-open interval [MIN, MAX) using a Euclidean (never negative)
    remainder, so MAX itself maps to MIN.
    """

    MIN: ClassVar[float]
    MAX: ClassVar[float]

    @classmethod
    def span(cls) -> float:
        return cls.MAX - cls.MIN

    @classmethod
    def allowed_range(cls) -> Tuple[float, float]:
        return (cls.MIN, cls.MAX)

    @classmethod
    def is_valid(cls, value: float) -> bool:
        """Inclusive membership test, False for NaN."""
        return cls.MIN <= value <= cls.MAX

    @classmethod
    def normalized(cls, value: float) -> float:
        """
        Reduce value into [MIN, MAX).

        Args:
            value: Any finite number

        Returns:
            ((value - MIN) mod SPAN) + MIN

        Raises:
            ValueError: If the declared range is empty or inverted
        """
        span = cls.span()
        if not span > 0:
            raise ValueError(f"{cls.__name__} range must have a positive span, got {span}")

        remainder = (value - cls.MIN) % span
        # Float modulo of a tiny negative number can round up to the span itself
        if remainder >= span:
            remainder = 0.0
        return remainder + cls.MIN
