"""Drawing operations — vector primitives plotted onto any pixel model.

Coordinates are (x, y) with x the column. Pixels outside the grid are
dropped silently. ``value`` is coerced by the target image: truthy for
bitmaps, a level for greyscale, an (R, G, B) triple for color.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pnmkit.engine.config import RasterConfig
from pnmkit.engine.registry import OperationKind, operation
from pnmkit.errors import OperationError
from pnmkit.models.image import NetpbmImage
from pnmkit.utils.geometry import Point, as_points, step_toward
from pnmkit.utils.rasterizer import (
    clip_points,
    disc_mask,
    line_points,
    midpoint_circle_points,
    polygon_spans,
    polyline_points,
    ring_mask,
)

logger = logging.getLogger(__name__)

Coord = Sequence[int]


def plot_points(image: NetpbmImage, pts: NDArray[np.int64], value: Any) -> None:
    """Write ``value`` at every in-bounds (x, y) row of ``pts``."""
    pixel = image.coerce(value)
    pts = clip_points(pts, image.width, image.height)
    if len(pts):
        image.data[pts[:, 1], pts[:, 0]] = pixel


def plot_mask(image: NetpbmImage, mask: NDArray[np.bool_], value: Any) -> None:
    image.data[mask] = image.coerce(value)


def _config(config: RasterConfig | None) -> RasterConfig:
    return config or RasterConfig()


def _check_radius(radius: int) -> int:
    radius = int(radius)
    if radius < 0:
        raise OperationError(f"Radius must be non-negative, got {radius}")
    return radius


# ── Lines and rectangles ──


@operation(name="line", kind=OperationKind.DRAWING, description="Bresenham line segment")
def draw_line(image: NetpbmImage, start: Coord, end: Coord, value: Any) -> NetpbmImage:
    plot_points(image, line_points(Point.of(start), Point.of(end)), value)
    return image


def _corners(origin: Coord, width: int, height: int) -> tuple[Point, Point, Point, Point]:
    p1 = Point.of(origin)
    p2 = Point(p1.x + int(width), p1.y)
    p3 = Point(p1.x, p1.y + int(height))
    p4 = Point(p1.x + int(width), p1.y + int(height))
    return p1, p2, p3, p4


@operation(name="rectangle", kind=OperationKind.DRAWING, description="Rectangle outline")
def draw_rectangle(
    image: NetpbmImage, origin: Coord, width: int, height: int, value: Any
) -> NetpbmImage:
    """Outline spanning x..x+width and y..y+height inclusive."""
    p1, p2, p3, p4 = _corners(origin, width, height)
    plot_points(image, polyline_points([p1, p2, p4, p3], closed=True), value)
    return image


@operation(name="filled_rectangle", kind=OperationKind.DRAWING, description="Solid rectangle")
def draw_filled_rectangle(
    image: NetpbmImage, origin: Coord, width: int, height: int, value: Any
) -> NetpbmImage:
    """Fill exactly the extent covered by ``draw_rectangle``.

    That is ``height + 1`` rows of ``width + 1`` pixels, since the outline
    includes both corner columns and rows. Negative sizes extend up/left.
    """
    p1, _, _, p4 = _corners(origin, width, height)
    x0, x1 = sorted((p1.x, p4.x))
    y0, y1 = sorted((p1.y, p4.y))
    x0, x1 = max(x0, 0), min(x1, image.width - 1)
    y0, y1 = max(y0, 0), min(y1, image.height - 1)
    pixel = image.coerce(value)
    if x0 <= x1 and y0 <= y1:
        image.data[y0 : y1 + 1, x0 : x1 + 1] = pixel
    return image


# ── Circles ──


@operation(
    name="circle",
    kind=OperationKind.DRAWING,
    configurable=True,
    description="Circle outline",
)
def draw_circle(
    image: NetpbmImage,
    center: Coord,
    radius: int,
    value: Any,
    config: RasterConfig | None = None,
) -> NetpbmImage:
    """Ring mode plots pixels within tolerance of ``scale * radius``; midpoint mode is exact."""
    cfg = _config(config)
    c = Point.of(center)
    radius = _check_radius(radius)
    if cfg.circle_mode == "midpoint":
        plot_points(image, midpoint_circle_points(c, radius), value)
    else:
        mask = ring_mask(
            image.width,
            image.height,
            c,
            radius,
            scale=cfg.circle_radius_scale,
            tolerance=cfg.circle_tolerance,
        )
        plot_mask(image, mask, value)
    return image


@operation(
    name="filled_circle",
    kind=OperationKind.DRAWING,
    configurable=True,
    description="Solid circle",
)
def draw_filled_circle(
    image: NetpbmImage,
    center: Coord,
    radius: int,
    value: Any,
    config: RasterConfig | None = None,
) -> NetpbmImage:
    """Ring mode unions rings radius..0; midpoint mode fills dx² + dy² <= r²."""
    cfg = _config(config)
    c = Point.of(center)
    radius = _check_radius(radius)
    if cfg.circle_mode == "midpoint":
        plot_mask(image, disc_mask(image.width, image.height, c, radius), value)
        return image

    mask = np.zeros((image.height, image.width), dtype=np.bool_)
    for r in range(radius, -1, -1):
        mask |= ring_mask(
            image.width,
            image.height,
            c,
            r,
            scale=cfg.circle_radius_scale,
            tolerance=cfg.circle_tolerance,
        )
    plot_mask(image, mask, value)
    return image


# ── Triangles and polygons ──


@operation(name="triangle", kind=OperationKind.DRAWING, description="Triangle outline")
def draw_triangle(
    image: NetpbmImage, p1: Coord, p2: Coord, p3: Coord, value: Any
) -> NetpbmImage:
    plot_points(image, polyline_points(as_points([p1, p2, p3]), closed=True), value)
    return image


def sweep_points(p1: Point, p2: Point, p3: Point) -> NDArray[np.int64]:
    """Lines from ``p3`` to a point walking one unit per axis from ``p1`` to ``p2``.

    Acute triangles can be left with gaps.
    """
    segments = []
    current = p1
    while current != p2:
        segments.append(line_points(p3, current))
        current = step_toward(current, p2)
    segments.append(line_points(p3, current))
    return np.concatenate(segments)


def _fill_polygon(image: NetpbmImage, points: list[Point], value: Any) -> None:
    pixel = image.coerce(value)
    for y, xs, xe in polygon_spans(points, 0, image.height - 1):
        xs, xe = max(xs, 0), min(xe, image.width - 1)
        if xs <= xe:
            image.data[y, xs : xe + 1] = pixel
    plot_points(image, polyline_points(points, closed=True), pixel)


@operation(
    name="filled_triangle",
    kind=OperationKind.DRAWING,
    configurable=True,
    description="Solid triangle",
)
def draw_filled_triangle(
    image: NetpbmImage,
    p1: Coord,
    p2: Coord,
    p3: Coord,
    value: Any,
    config: RasterConfig | None = None,
) -> NetpbmImage:
    cfg = _config(config)
    a, b, c = as_points([p1, p2, p3])
    if cfg.triangle_fill == "scanline":
        _fill_polygon(image, [a, b, c], value)
    else:
        plot_points(image, sweep_points(a, b, c), value)
    return image


@operation(name="polygon", kind=OperationKind.DRAWING, description="Closed polygon outline")
def draw_polygon(image: NetpbmImage, points: Sequence[Coord], value: Any) -> NetpbmImage:
    pts = as_points(points)
    if not pts:
        raise OperationError("Polygon needs at least one point")
    plot_points(image, polyline_points(pts, closed=True), value)
    return image


@operation(
    name="filled_polygon",
    kind=OperationKind.DRAWING,
    description="Solid polygon, nonzero winding rule",
)
def draw_filled_polygon(
    image: NetpbmImage, points: Sequence[Coord], value: Any
) -> NetpbmImage:
    """Scanline fill sampled at pixel centers, plus the outline.

    One or two points degrade to a dot or a line.
    """
    pts = as_points(points)
    if not pts:
        raise OperationError("Polygon needs at least one point")
    _fill_polygon(image, pts, value)
    return image
