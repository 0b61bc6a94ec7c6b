"""Tests for pure rasterization helpers."""

import numpy as np

from pnmkit.utils.geometry import Point
from pnmkit.utils.rasterizer import (
    clip_points,
    disc_mask,
    line_points,
    midpoint_circle_points,
    polygon_spans,
    polyline_points,
    ring_mask,
)


def test_line_points_order_and_endpoints():
    pts = line_points(Point(3, 0), Point(0, 0))
    assert pts.tolist() == [[3, 0], [2, 0], [1, 0], [0, 0]]


def test_line_points_single_cell():
    assert line_points(Point(2, 2), Point(2, 2)).tolist() == [[2, 2]]


def test_line_points_steep_is_8_connected():
    pts = line_points(Point(0, 0), Point(2, 7))
    assert len(pts) == 8
    steps = np.abs(np.diff(pts, axis=0))
    assert steps.max() == 1
    assert len({tuple(p) for p in pts.tolist()}) == len(pts)


def test_polyline_closed():
    pts = polyline_points([Point(0, 0), Point(2, 0), Point(2, 2)], closed=True)
    cells = {tuple(p) for p in pts.tolist()}
    assert cells == {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 1)}


def test_polyline_empty():
    assert polyline_points([]).shape == (0, 2)


def test_clip_points():
    pts = np.array([[0, 0], [-1, 0], [4, 4], [5, 1], [1, 5]])
    assert clip_points(pts, 5, 5).tolist() == [[0, 0], [4, 4]]


def test_ring_mask_band():
    mask = ring_mask(21, 21, Point(10, 10), 10)
    # scaled radius 8.5: distances in (8.0, 9.0) qualify
    assert not mask[10, 18]
    assert mask[16, 16]
    assert not mask[10, 19]
    assert not mask[10, 10]


def test_ring_mask_custom_scale():
    mask = ring_mask(11, 11, Point(5, 5), 4, scale=1.0, tolerance=0.5)
    assert mask[5, 9]
    assert mask[1, 5]


def test_disc_mask_count():
    assert int(disc_mask(9, 9, Point(4, 4), 2).sum()) == 13


def test_midpoint_circle_radius_zero():
    assert midpoint_circle_points(Point(1, 1), 0).tolist() == [[1, 1]]


def test_midpoint_circle_no_duplicates():
    pts = midpoint_circle_points(Point(0, 0), 5)
    cells = [tuple(p) for p in pts.tolist()]
    assert len(cells) == len(set(cells))
    assert (5, 0) in cells and (0, -5) in cells
    assert all(abs(x * x + y * y - 25) <= 5 for x, y in cells)


def test_polygon_spans_square():
    spans = polygon_spans([Point(0, 0), Point(4, 0), Point(4, 2), Point(0, 2)], 0, 10)
    assert spans == [(0, 0, 4), (1, 0, 4)]


def test_polygon_spans_row_window():
    spans = polygon_spans([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)], 2, 2)
    assert spans == [(2, 0, 4)]


def test_polygon_spans_nonzero_overlap():
    # Winding direction does not change the filled area
    pts = [Point(0, 0), Point(4, 0), Point(4, 2), Point(0, 2)]
    assert polygon_spans(pts, 0, 5) == polygon_spans(pts[::-1], 0, 5)


def test_polygon_spans_degenerate():
    assert polygon_spans([Point(0, 0), Point(3, 3)], 0, 5) == []
    assert polygon_spans([Point(0, 0), Point(3, 0), Point(5, 0)], 0, 5) == []
