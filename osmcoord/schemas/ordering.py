"""
Ordering

Three-valued comparison result used by the partial orders of the
coordinate model. An incomparable pair is represented by None.
"""

from enum import Enum
from typing import Any, Optional


class Ordering(int, Enum):
    """Outcome of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(left: Any, right: Any) -> Ordering:
    """Compare two totally ordered values."""
    if left < right:
        return Ordering.LESS
    if left == right:
        return Ordering.EQUAL
    return Ordering.GREATER


def is_less(result: Optional[Ordering]) -> bool:
    return result is Ordering.LESS


def is_less_or_equal(result: Optional[Ordering]) -> bool:
    return result is Ordering.LESS or result is Ordering.EQUAL


def is_greater(result: Optional[Ordering]) -> bool:
    return result is Ordering.GREATER


def is_greater_or_equal(result: Optional[Ordering]) -> bool:
    return result is Ordering.GREATER or result is Ordering.EQUAL
