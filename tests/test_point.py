import math

import pytest

from limavns.point import Point


def test_coordinates_are_stored_as_floats():
    p = Point([1, 2, 3])
    assert p.coordinates == (1.0, 2.0, 3.0)
    assert p.dimensions == 3
    assert len(p) == 3
    assert p[1] == 2.0
    assert list(p) == [1.0, 2.0, 3.0]


def test_squared_distance_example():
    assert Point([0, 0]).squared_distance(Point([3, 4])) == 25.0


def test_distance_example():
    assert Point([0, 0]).distance(Point([3, 4])) == 5.0


def test_distance_to_self_is_zero():
    p = Point([1.5, -2.25, 7.0])
    assert p.squared_distance(p) == 0.0
    assert p.distance(p) == 0.0


def test_distance_is_symmetric():
    a = Point([1.0, 2.0, -3.5])
    b = Point([-4.0, 0.5, 2.0])
    assert a.squared_distance(b) == b.squared_distance(a)


def test_squared_distance_accepts_sequence():
    a = Point([1.0, 2.0])
    b = Point([4.0, -1.0])
    assert a.squared_distance([4.0, -1.0]) == a.squared_distance(b)


def test_distance_is_sqrt_of_squared():
    a = Point([0.3, 1.7, -2.2])
    b = Point([5.1, -0.4, 0.9])
    assert a.distance(b) == pytest.approx(math.sqrt(a.squared_distance(b)))


def test_str_format():
    assert str(Point([1.5, -2])) == "1.500000 -2.000000 "


def test_points_are_immutable_and_comparable():
    a = Point([1, 2])
    assert a == Point((1.0, 2.0))
    with pytest.raises(AttributeError):
        a.coordinates = (0.0,)