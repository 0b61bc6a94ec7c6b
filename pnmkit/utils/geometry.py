"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    """Integer pixel coordinate. ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    @classmethod
    def of(cls, value: Sequence[int]) -> "Point":
        """Coerce a 2-sequence (tuple, list, Point) into a Point."""
        x, y = value
        return cls(int(x), int(y))


def sign(value: int) -> int:
    """Return 1, 0 or -1 following the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def as_points(values: Iterable[Sequence[int]]) -> list[Point]:
    return [Point.of(v) for v in values]


def points_array(points: Sequence[Point]) -> NDArray[np.int64]:
    """Nx2 integer array of (x, y) rows."""
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.int64)
    return np.asarray(points, dtype=np.int64).reshape(-1, 2)


def step_toward(current: Point, target: Point) -> Point:
    """Move one unit along each axis where ``current`` differs from ``target``."""
    return Point(
        current.x + sign(target.x - current.x),
        current.y + sign(target.y - current.y),
    )
