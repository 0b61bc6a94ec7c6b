"""Rasterization utilities: vector primitives to pixel coordinates and masks.

Every function here is pure. Callers decide how to plot the result and are
responsible for clipping against the target grid (see ``clip_points``).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pnmkit.utils.geometry import Point, points_array, sign

# ── Named constants ──

# Ring circle: the legacy renderer draws at 85% of the requested radius and
# accepts pixels within half a pixel of that ring.
RING_RADIUS_SCALE = 0.85
RING_TOLERANCE = 0.5


def line_points(start: Point, end: Point) -> NDArray[np.int64]:
    """Bresenham digital line from ``start`` to ``end``, both endpoints included.

    Returns an Nx2 array of (x, y) rows in plotting order. The path is
    8-connected and visits every cell exactly once.
    """
    x, y = start
    dx = abs(end.x - x)
    dy = abs(end.y - y)
    sx = sign(end.x - x)
    sy = sign(end.y - y)
    err = dx - dy

    out: list[tuple[int, int]] = []
    while True:
        out.append((x, y))
        if x == end.x and y == end.y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return np.asarray(out, dtype=np.int64)


def polyline_points(points: Sequence[Point], closed: bool = False) -> NDArray[np.int64]:
    """Concatenate the Bresenham segments joining consecutive points."""
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.int64)
    if len(points) == 1:
        return points_array(points)
    pairs = list(zip(points[:-1], points[1:]))
    if closed:
        pairs.append((points[-1], points[0]))
    return np.concatenate([line_points(a, b) for a, b in pairs])


def clip_points(pts: NDArray[np.int64], width: int, height: int) -> NDArray[np.int64]:
    """Drop rows of an Nx2 (x, y) array that fall outside the grid."""
    if len(pts) == 0:
        return pts
    inside = (pts[:, 0] >= 0) & (pts[:, 0] < width) & (pts[:, 1] >= 0) & (pts[:, 1] < height)
    return pts[inside]


def _distance_field(width: int, height: int, center: Point) -> NDArray[np.float64]:
    ys, xs = np.mgrid[0:height, 0:width]
    dx = (xs - center.x).astype(np.float64)
    dy = (ys - center.y).astype(np.float64)
    return np.sqrt(dx * dx + dy * dy)


def ring_mask(
    width: int,
    height: int,
    center: Point,
    radius: int,
    scale: float = RING_RADIUS_SCALE,
    tolerance: float = RING_TOLERANCE,
) -> NDArray[np.bool_]:
    """Approximate circle outline: pixels within ``tolerance`` of ``scale * radius``.

    Matches the legacy ring renderer pixel for pixel. It is not a true
    circle; use ``midpoint_circle_points`` for that.
    """
    dist = _distance_field(width, height, center)
    return np.abs(dist - float(radius) * scale) < tolerance


def disc_mask(width: int, height: int, center: Point, radius: int) -> NDArray[np.bool_]:
    """Exact filled disc, dx² + dy² <= r²."""
    ys, xs = np.mgrid[0:height, 0:width]
    dx = xs - center.x
    dy = ys - center.y
    return dx * dx + dy * dy <= radius * radius


def midpoint_circle_points(center: Point, radius: int) -> NDArray[np.int64]:
    """Integer midpoint circle algorithm with 8-way symmetry.

    Duplicate cells at the octant seams are removed; ordering is unspecified.
    """
    if radius < 0:
        return np.empty((0, 2), dtype=np.int64)
    if radius == 0:
        return np.asarray([center], dtype=np.int64)

    cx, cy = center
    x, y = radius, 0
    d = 1 - radius
    cells: set[tuple[int, int]] = set()
    while x >= y:
        for px, py in ((x, y), (y, x), (-y, x), (-x, y), (-x, -y), (-y, -x), (y, -x), (x, -y)):
            cells.add((cx + px, cy + py))
        y += 1
        if d < 0:
            d += 2 * y + 1
        else:
            x -= 1
            d += 2 * (y - x) + 1
    return np.asarray(sorted(cells), dtype=np.int64)


def polygon_spans(
    points: Sequence[Point],
    row_min: int,
    row_max: int,
) -> list[tuple[int, int, int]]:
    """Scanline fill using the nonzero winding rule.

    Pixel centers sit on integer coordinates. Each edge covers the half-open
    row interval ``[y_low, y_high)`` so shared vertices are counted once and
    horizontal edges contribute nothing (the outline covers them).

    Returns ``(y, x_start, x_end)`` spans with inclusive ends, restricted to
    rows ``row_min..row_max``.
    """
    if len(points) < 3:
        return []

    a = points_array(points)
    b = np.roll(a, -1, axis=0)
    keep = a[:, 1] != b[:, 1]
    a, b = a[keep], b[keep]
    if len(a) == 0:
        return []

    direction = np.where(b[:, 1] > a[:, 1], 1, -1)
    y_low = np.minimum(a[:, 1], b[:, 1])
    y_high = np.maximum(a[:, 1], b[:, 1])

    first = max(row_min, int(y_low.min()))
    last = min(row_max, int(y_high.max()) - 1)

    spans: list[tuple[int, int, int]] = []
    for y in range(first, last + 1):
        active = (y_low <= y) & (y < y_high)
        if not np.any(active):
            continue
        ax, ay = a[active, 0], a[active, 1]
        bx, by = b[active, 0], b[active, 1]
        xs = ax + (y - ay) * (bx - ax) / (by - ay)
        order = np.argsort(xs, kind="stable")
        xs = xs[order]
        winding = np.cumsum(direction[active][order])
        for i in range(len(xs) - 1):
            if winding[i] == 0:
                continue
            x_start = math.ceil(xs[i])
            x_end = math.floor(xs[i + 1])
            if x_start <= x_end:
                spans.append((y, x_start, x_end))
    return spans
