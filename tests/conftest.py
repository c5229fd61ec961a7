import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from osmcoord.schemas.bbox import BBox  # noqa: E402
from osmcoord.schemas.coordinates import Coordinates  # noqa: E402


@pytest.fixture
def sample_coordinates():
    """Sample coordinates for testing."""
    return Coordinates.validated(1.0, 2.0)


@pytest.fixture
def sample_bbox():
    """A small validated box, south-west (1, 1.5) and north-east (2, 2.5)."""
    return BBox.validated(
        Coordinates.validated(1.0, 1.5),
        Coordinates.validated(2.0, 2.5),
    )


@pytest.fixture
def outer_bbox():
    """A 50 by 50 degree box anchored at the origin."""
    return BBox.from_bounds(0.0, 0.0, 50.0, 50.0)
