"""City road network: central cross plus randomized quadtree subdivision."""

import numpy as np
import structlog

from ..types import Rect
from .config import CityConfig

logger = structlog.get_logger()

# Split points are drawn from this fraction range of the usable span
SPLIT_FRACTION_MIN = 0.3
SPLIT_FRACTION_MAX = 0.7


def city_bounds(width: int, depth: int, size: int) -> Rect | None:
    """Centered city square, or None when the city is disabled.

    The side is min(size, min(width, depth) - 2), keeping a one-cell
    margin of terrain around the district.
    """
    side = min(size, min(width, depth) - 2)
    if side <= 0:
        return None
    return Rect(x=(width - side) // 2, z=(depth - side) // 2, width=side, depth=side)


def center_lines(start: int, side: int) -> list[int]:
    """Index of the middle line(s) of a span.

    Even spans have no single middle cell, so both middle lines are used.
    """
    if side % 2:
        return [start + side // 2]
    return [start + side // 2 - 1, start + side // 2]


def _split_offset(span: int, min_block: int, fraction: float) -> int:
    low = min_block
    high = span - min_block
    return int(low + (high - low) * fraction)


class RoadNetworkBuilder:
    """Accumulates road cells for one city district.

    Road marking is idempotent, so overlapping lines from different
    recursion branches are harmless. The order of random draws is fixed,
    which makes the resulting road set a pure function of the generator
    state and the configuration.
    """

    def __init__(self, bounds: Rect, config: CityConfig, rng: np.random.Generator):
        self.bounds = bounds
        self.config = config
        self._rng = rng
        self._roads: set[tuple[int, int]] = set()

    def __len__(self) -> int:
        return len(self._roads)

    def __contains__(self, cell: tuple[int, int]) -> bool:
        return cell in self._roads

    def mark(self, x: int, z: int) -> None:
        """Mark a single cell as road."""
        self._roads.add((x, z))

    def mark_row(self, z: int, x_start: int, x_end: int) -> None:
        """Mark cells [x_start, x_end) of row z."""
        for x in range(x_start, x_end):
            self.mark(x, z)

    def mark_column(self, x: int, z_start: int, z_end: int) -> None:
        """Mark cells [z_start, z_end) of column x."""
        for z in range(z_start, z_end):
            self.mark(x, z)

    def mark_central_cross(self) -> None:
        """Mark the middle row(s) and column(s) of the whole district.

        This connects every quadrant regardless of later random draws.
        """
        b = self.bounds
        for z in center_lines(b.z, b.depth):
            self.mark_row(z, b.x, b.x2)
        for x in center_lines(b.x, b.width):
            self.mark_column(x, b.z, b.z2)

    def subdivide(self, rect: Rect, depth: int) -> None:
        """Recursively split a block into quadrants separated by roads.

        Args:
            rect: Block to split.
            depth: Remaining recursion budget.
        """
        min_block = self.config.min_block_size
        if (
            depth <= 0
            or rect.width < 2 * min_block
            or rect.depth < 2 * min_block
            or self._rng.random() > self.config.subdivide_chance
        ):
            self._leaf_road(rect)
            return

        split_x = rect.x + _split_offset(
            rect.width,
            min_block,
            self._rng.uniform(SPLIT_FRACTION_MIN, SPLIT_FRACTION_MAX),
        )
        split_z = rect.z + _split_offset(
            rect.depth,
            min_block,
            self._rng.uniform(SPLIT_FRACTION_MIN, SPLIT_FRACTION_MAX),
        )

        draw_row = self._rng.random() < self.config.main_road_chance
        draw_column = self._rng.random() < self.config.main_road_chance
        if not (draw_row or draw_column):
            # A split with no road would seal the block off
            if self._rng.random() < 0.5:
                draw_row = True
            else:
                draw_column = True

        if draw_row:
            self.mark_row(split_z, rect.x, rect.x2)
        if draw_column:
            self.mark_column(split_x, rect.z, rect.z2)

        left = split_x - rect.x
        right = rect.x2 - split_x - 1
        near = split_z - rect.z
        far = rect.z2 - split_z - 1
        quadrants = [
            Rect(x=rect.x, z=rect.z, width=left, depth=near),
            Rect(x=split_x + 1, z=rect.z, width=right, depth=near),
            Rect(x=rect.x, z=split_z + 1, width=left, depth=far),
            Rect(x=split_x + 1, z=split_z + 1, width=right, depth=far),
        ]
        for quadrant in quadrants:
            if quadrant.width > 0 and quadrant.depth > 0:
                self.subdivide(quadrant, depth - 1)

    def _leaf_road(self, rect: Rect) -> None:
        """Maybe run one road through the middle of an unsplit block."""
        min_block = self.config.min_block_size
        if rect.width < 2 * min_block or rect.depth < 2 * min_block:
            return
        if self._rng.random() >= self.config.leaf_road_chance:
            return
        if self._rng.random() < 0.5:
            self.mark_row(rect.z + rect.depth // 2, rect.x, rect.x2)
        else:
            self.mark_column(rect.x + rect.width // 2, rect.z, rect.z2)

    def build(self) -> frozenset[tuple[int, int]]:
        """Lay out the full network and return it as an immutable set."""
        self.mark_central_cross()
        self.subdivide(self.bounds, self.config.max_depth)
        return frozenset(self._roads)


def build_road_set(
    width: int,
    depth: int,
    config: CityConfig,
    rng: np.random.Generator,
) -> tuple[Rect | None, frozenset[tuple[int, int]]]:
    """Build the city bounds and road set for a grid.

    Args:
        width: Grid width.
        depth: Grid depth.
        config: City layout parameters.
        rng: Generator for the ROADS stream.

    Returns:
        Tuple of (city bounds or None, frozen set of (x, z) road cells).
    """
    bounds = city_bounds(width, depth, config.size)
    if bounds is None:
        if config.size > 0:
            logger.warning(
                "city_disabled",
                reason="grid too small",
                size=config.size,
                width=width,
                depth=depth,
            )
        return None, frozenset()

    roads = RoadNetworkBuilder(bounds, config, rng).build()
    logger.info("road_network_built", bounds=str(bounds), roads=len(roads))
    return bounds, roads
