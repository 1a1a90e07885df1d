"""Pillar geometry: solid columns from a shared floor to each surface.

Every cell is rendered as one unit cube stretched vertically from
floor_bottom up to its surface, so neighbouring cells of different height
never leave a gap between them.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import DegeneratePillarError


class Pillars:
    """Vertical extents for every cell, arrays of shape (depth, width)."""

    def __init__(
        self,
        surface_height: NDArray[np.float64],
        surface_y: NDArray[np.int64],
        floor: float,
        height: NDArray[np.float64],
    ):
        self.surface_height = surface_height
        self.surface_y = surface_y
        self.floor = floor
        self.height = height

    @property
    def top(self) -> NDArray[np.float64]:
        return self.floor + self.height

    @property
    def center(self) -> NDArray[np.float64]:
        return self.floor + self.height / 2.0


def synthesize_pillars(
    heights: NDArray[np.float64],
    height_multiplier: float,
    floor_bottom: float,
) -> Pillars:
    """Convert normalized surface heights into pillar extents.

    Args:
        heights: Normalized surface heights (after sea pinning and
            mountain exaggeration).
        height_multiplier: World units per unit of height.
        floor_bottom: Shared base level.

    Returns:
        Pillars for the grid.

    Raises:
        DegeneratePillarError: If any pillar would be zero or negative in
            height. Clamping would hide a floor/multiplier misconfiguration.
    """
    surface_height = heights * height_multiplier
    surface_y = np.floor(surface_height).astype(np.int64)
    pillar_height = surface_y - floor_bottom

    degenerate = pillar_height <= 0
    if degenerate.any():
        raise DegeneratePillarError(
            count=int(degenerate.sum()),
            min_height=float(pillar_height.min()),
            floor_bottom=floor_bottom,
        )

    return Pillars(
        surface_height=surface_height,
        surface_y=surface_y,
        floor=floor_bottom,
        height=pillar_height.astype(np.float64),
    )


def scale_compensation(
    pillar_height: ArrayLike,
    scale: ArrayLike = 1.0,
) -> NDArray[np.float64] | float:
    """Vertical scale for a child parented to a stretched pillar cube.

    The pillar's unit cube is stretched by pillar_height on y, so a child
    sharing that basis must divide its own vertical scale by it to keep its
    absolute size.
    """
    result = np.asarray(scale, dtype=np.float64) / np.asarray(
        pillar_height, dtype=np.float64
    )
    if result.ndim == 0:
        return float(result)
    return result
