"""
Unit tests for Coordinates.
"""

import pytest
from pydantic import ValidationError

from osmcoord.core.exceptions import OutOfRangeError
from osmcoord.schemas.coordinates import Coordinates
from osmcoord.schemas.latitude import Latitude
from osmcoord.schemas.longitude import Longitude
from osmcoord.schemas.ordering import Ordering


def test_accessors(sample_coordinates):
    """Test latitude and longitude accessors"""
    assert sample_coordinates.latitude.value == 1.0
    assert sample_coordinates.longitude.value == 2.0


def test_tuple(sample_coordinates):
    """Test conversion to a (latitude, longitude) tuple"""
    assert sample_coordinates.to_tuple() == (1.0, 2.0)
    assert Coordinates.from_tuple((1.0, 2.0)) == sample_coordinates


def test_validated_rejects_latitude():
    """Test the latitude range error propagates"""
    with pytest.raises(OutOfRangeError) as exc_info:
        Coordinates.validated(91.0, 0.0)

    assert exc_info.value.allowed_range == (-90.0, 90.0)


def test_validated_rejects_longitude():
    """Test the longitude range error propagates"""
    with pytest.raises(OutOfRangeError) as exc_info:
        Coordinates.from_tuple((0.0, 181.0))

    assert exc_info.value.allowed_range == (-180.0, 180.0)


def test_wrapped_never_fails():
    """Test wrapped clamps latitude and wraps longitude"""
    coordinates = Coordinates.wrapped(100.0, 190.0)

    assert coordinates.latitude == Latitude.validated(90.0)
    assert coordinates.longitude == Longitude.validated(-170.0)


def test_unchecked():
    """Test unchecked keeps raw values"""
    assert Coordinates.unchecked(100.0, 190.0).to_tuple() == (100.0, 190.0)


def test_equality():
    """Test equality requires both axes to match"""
    assert Coordinates.validated(1.0, 1.0) == Coordinates.validated(1.0, 1.0)
    assert Coordinates.validated(1.0, 1.0) != Coordinates.validated(2.0, 2.0)
    assert Coordinates.validated(2.0, 1.0) != Coordinates.validated(1.0, 1.0)
    assert Coordinates.validated(1.0, 2.0) != Coordinates.validated(1.0, 1.0)
    assert hash(Coordinates.validated(1.0, 1.0)) == hash(Coordinates.validated(1.0, 1.0))


@pytest.mark.parametrize(
    "left,right,expected",
    [
        ((1.0, 1.0), (2.0, 2.0), Ordering.LESS),
        ((1.0, 2.0), (2.0, 2.0), Ordering.LESS),
        ((2.0, 1.0), (2.0, 2.0), Ordering.LESS),
        ((2.0, 2.0), (2.0, 2.0), Ordering.EQUAL),
        ((2.0, 3.0), (2.0, 2.0), Ordering.GREATER),
        ((3.0, 2.0), (2.0, 2.0), Ordering.GREATER),
        ((3.0, 3.0), (2.0, 2.0), Ordering.GREATER),
        ((1.0, 3.0), (2.0, 2.0), None),
        ((3.0, 1.0), (2.0, 2.0), None),
    ],
)
def test_dominance_table(left, right, expected):
    """Test every row of the dominance table"""
    assert Coordinates.validated(*left).partial_compare(Coordinates.validated(*right)) is expected


def test_less_than():
    """Test south-west coordinates compare less"""
    coord1 = Coordinates.validated(1.0, 1.0)
    coord2 = Coordinates.validated(2.0, 2.0)

    assert coord1 < coord2
    assert coord1 <= coord2
    assert not coord1 > coord2


def test_partial_greater_latitude():
    """Test greater on one axis and equal on the other compares greater"""
    coord1 = Coordinates.validated(3.0, 2.0)
    coord2 = Coordinates.validated(2.0, 2.0)

    assert coord1 > coord2
    assert not coord1 < coord2


def test_incomparable():
    """Test mixed axis orderings are neither less nor greater"""
    coord1 = Coordinates.validated(3.0, 1.0)
    coord2 = Coordinates.validated(2.0, 2.0)

    assert not coord1 < coord2
    assert not coord1 > coord2
    assert not coord1 <= coord2
    assert not coord1 >= coord2
    assert coord1 != coord2


def test_add_and_sub():
    """Test component-wise addition and subtraction"""
    result = Coordinates.validated(10.0, 170.0) + Coordinates.validated(85.0, 20.0)

    assert result == Coordinates.validated(90.0, -170.0)
    assert Coordinates.validated(10.0, 10.0) - Coordinates.validated(5.0, 20.0) == (
        Coordinates.validated(5.0, -10.0)
    )


def test_mul_and_div():
    """Test scalar multiplication and division"""
    assert Coordinates.validated(10.0, 20.0) * 2 == Coordinates.validated(20.0, 40.0)
    assert Coordinates.validated(10.0, 20.0) / 2 == Coordinates.validated(5.0, 10.0)
    assert Coordinates.validated(60.0, 100.0) * 2 == Coordinates.validated(90.0, -160.0)


def test_display():
    """Test display renders both axes"""
    assert str(Coordinates.validated(1.5, -2.5)) == "1.5 °N 2.5 °W"


def test_serialization_round_trip(sample_coordinates):
    """Test structural encoding and decoding"""
    data = sample_coordinates.model_dump()

    assert data == {"latitude": 1.0, "longitude": 2.0}
    assert Coordinates.model_validate(data) == sample_coordinates
    assert Coordinates.model_validate_json(sample_coordinates.model_dump_json()) == sample_coordinates


def test_deserialization_rejects_out_of_range():
    """Test decoding validates both axes"""
    with pytest.raises(ValidationError):
        Coordinates.model_validate({"latitude": 0.0, "longitude": 200.0})
