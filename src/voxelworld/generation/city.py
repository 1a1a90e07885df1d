"""City tile resolution: roads, roadside buildings and empty lots."""

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..biome_types import CityRole, role_value
from ..types import FACING_DELTAS, Facing, Rect
from .config import CityConfig

NO_FACING = 0
NO_TEMPLATE = -1


class CityLayout:
    """Per-cell city attributes, arrays of shape (depth, width)."""

    def __init__(
        self,
        in_city: NDArray[np.bool_],
        road: NDArray[np.bool_],
        role: NDArray[np.uint8],
        facing: NDArray[np.uint8],
        template: NDArray[np.int16],
    ):
        self.in_city = in_city
        self.road = road
        self.role = role
        self.facing = facing
        self.template = template


def city_mask(bounds: Rect | None, width: int, depth: int) -> NDArray[np.bool_]:
    """Boolean mask of cells inside the city square."""
    mask = np.zeros((depth, width), dtype=bool)
    if bounds is not None:
        mask[bounds.z : bounds.z2, bounds.x : bounds.x2] = True
    return mask


def road_mask(
    roads: Iterable[tuple[int, int]], width: int, depth: int
) -> NDArray[np.bool_]:
    """Rasterize a road set into a boolean mask indexed [z, x]."""
    mask = np.zeros((depth, width), dtype=bool)
    for x, z in roads:
        mask[z, x] = True
    return mask


def resolve_facing(road: NDArray[np.bool_]) -> NDArray[np.uint8]:
    """Facing towards the first axis neighbour that is a road.

    Neighbours are checked in FACING_DELTAS order (+z, -z, +x, -x); corner
    lots take the first match. Cells with no axis road neighbour get
    NO_FACING.
    """
    padded = np.pad(road, 1, constant_values=False)
    depth, width = road.shape
    conditions = []
    choices = []
    for facing, (dx, dz) in FACING_DELTAS.items():
        neighbour = padded[1 + dz : 1 + dz + depth, 1 + dx : 1 + dx + width]
        conditions.append(neighbour)
        choices.append(int(facing))
    return np.select(conditions, choices, default=NO_FACING).astype(np.uint8)


def resolve_city_tiles(
    bounds: Rect | None,
    roads: frozenset[tuple[int, int]],
    width: int,
    depth: int,
    config: CityConfig,
    rng: np.random.Generator,
) -> CityLayout:
    """Assign a city role to every cell.

    Road set members are roads. Other city cells within one cell
    (Chebyshev) of a road become buildings when their density roll passes
    and a template exists; the rest are empty lots.

    Both random fields are drawn for the whole grid up front, so a cell's
    outcome never depends on evaluation order.

    Args:
        bounds: City square, or None when the city is disabled.
        roads: Frozen road set.
        width: Grid width.
        depth: Grid depth.
        config: City configuration.
        rng: Generator for the CITY stream.

    Returns:
        CityLayout for the grid.
    """
    density_roll = rng.random((depth, width))
    template_pick = rng.random((depth, width))

    in_city = city_mask(bounds, width, depth)
    road = road_mask(roads, width, depth) & in_city

    role = np.full((depth, width), role_value(CityRole.NONE), dtype=np.uint8)
    facing = np.zeros((depth, width), dtype=np.uint8)
    template = np.full((depth, width), NO_TEMPLATE, dtype=np.int16)

    if bounds is None:
        return CityLayout(in_city, road, role, facing, template)

    near_road = ndimage.binary_dilation(road, structure=np.ones((3, 3), dtype=bool))
    templates = config.building_templates
    building = (
        in_city
        & ~road
        & near_road
        & (density_roll < config.building_density)
        & (len(templates) > 0)
    )

    role[in_city] = role_value(CityRole.EMPTY_LOT)
    role[road] = role_value(CityRole.ROAD)
    role[building] = role_value(CityRole.BUILDING)

    if building.any():
        # Lots touching a road only diagonally face north
        building_facing = resolve_facing(road)
        building_facing[building_facing == NO_FACING] = int(Facing.NORTH)
        facing[building] = building_facing[building]

        picks = np.minimum(
            (template_pick * len(templates)).astype(np.int16), len(templates) - 1
        )
        template[building] = picks[building]

    return CityLayout(in_city, road, role, facing, template)
