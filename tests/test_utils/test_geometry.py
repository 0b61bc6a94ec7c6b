"""Tests for geometry helpers."""

from pnmkit.utils.geometry import Point, as_points, points_array, sign, step_toward


def test_sign():
    assert sign(5) == 1
    assert sign(-3) == -1
    assert sign(0) == 0


def test_point_coercion():
    assert Point.of([2, 3]) == Point(2, 3)
    assert as_points([(1, 2), Point(3, 4)]) == [Point(1, 2), Point(3, 4)]


def test_step_toward():
    assert step_toward(Point(0, 0), Point(3, -2)) == Point(1, -1)
    assert step_toward(Point(3, 1), Point(3, -2)) == Point(3, 0)
    assert step_toward(Point(3, 1), Point(3, 1)) == Point(3, 1)


def test_points_array():
    assert points_array([Point(1, 2), Point(3, 4)]).tolist() == [[1, 2], [3, 4]]
    assert points_array([]).shape == (0, 2)
