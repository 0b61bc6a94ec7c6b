"""Raster configuration — selects between legacy-compatible and exact algorithms."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pnmkit.utils.rasterizer import RING_RADIUS_SCALE, RING_TOLERANCE

if TYPE_CHECKING:
    from pnmkit.config import Settings


class Polarity(str, enum.Enum):
    """Which side of the half-maximum threshold becomes a set bitmap pixel."""

    # level < max // 2 → set. Netpbm bitmaps use 1 for ink, so dark is set.
    DARK_IS_SET = "dark_is_set"
    # level > max // 2 → set.
    BRIGHT_IS_SET = "bright_is_set"


@dataclass
class RasterConfig:
    """Controls circle/triangle rasterization and bitmap thresholding."""

    # "ring" reproduces the legacy approximate circle; "midpoint" is exact
    circle_mode: str = "ring"
    circle_radius_scale: float = RING_RADIUS_SCALE
    circle_tolerance: float = RING_TOLERANCE

    # "sweep" reproduces the legacy vertex sweep; "scanline" is exact
    triangle_fill: str = "sweep"

    polarity: Polarity = Polarity.DARK_IS_SET

    def __post_init__(self) -> None:
        if self.circle_mode not in ("ring", "midpoint"):
            raise ValueError(f"Unknown circle mode: {self.circle_mode}")
        if self.triangle_fill not in ("sweep", "scanline"):
            raise ValueError(f"Unknown triangle fill: {self.triangle_fill}")
        self.polarity = Polarity(self.polarity)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RasterConfig":
        if settings.pnmkit_raster_compat:
            return cls(circle_mode="ring", triangle_fill="sweep")
        return cls(circle_mode="midpoint", triangle_fill="scanline")
