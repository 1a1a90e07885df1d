"""Main world generation orchestration."""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import NDArray

from ..biome_types import (
    BiomeKind,
    CityRole,
    biome_value,
    biome_value_to_kind,
    role_value,
    role_value_to_role,
)
from ..exceptions import CoordinateOutOfBoundsError
from ..types import Facing, Rect
from .city import NO_FACING, NO_TEMPLATE, resolve_city_tiles
from .classification import classify_biomes
from .config import GenerationConfig
from .curve import HeightCurve
from .fields import effective_octaves, make_height_field, make_moisture_field
from .noise import PerlinNoise
from .objects import NO_PROP, PropPlacement, place_props
from .pillars import Pillars, synthesize_pillars
from .rng import Stream, derive_octave_offsets, make_rng
from .roads import build_road_set

logger = structlog.get_logger()


@dataclass(frozen=True)
class Cell:
    """Everything the renderer needs to know about one grid cell."""

    x: int
    z: int
    raw_height: float
    height: float
    moisture: float
    biome: BiomeKind
    is_water: bool
    in_city: bool
    is_road: bool
    role: CityRole
    facing: Facing | None
    building: str | None
    surface_height: float
    surface_y: int
    pillar_floor: float
    pillar_top: float
    pillar_height: float
    pillar_center: float
    prop: PropPlacement | None


class GridResult:
    """Result of world generation.

    Per-cell attributes are stored as arrays indexed [z, x]; ``cell`` and
    ``cells`` expose them as Cell records.
    """

    def __init__(
        self,
        config: GenerationConfig,
        city_bounds: Rect | None,
        roads: frozenset[tuple[int, int]],
        octave_offsets: NDArray[np.float64],
        raw_height: NDArray[np.float64],
        height: NDArray[np.float64],
        moisture: NDArray[np.float64],
        biome: NDArray[np.uint8],
        water: NDArray[np.bool_],
        in_city: NDArray[np.bool_],
        road: NDArray[np.bool_],
        role: NDArray[np.uint8],
        facing: NDArray[np.uint8],
        template: NDArray[np.int16],
        pillars: Pillars,
        props: list[PropPlacement],
        prop_index: NDArray[np.int32],
    ):
        self.config = config
        self.city_bounds = city_bounds
        self.roads = roads
        self.octave_offsets = octave_offsets
        self.raw_height = raw_height
        self.height = height
        self.moisture = moisture
        self.biome = biome
        self.water = water
        self.in_city = in_city
        self.road = road
        self.role = role
        self.facing = facing
        self.template = template
        self.pillars = pillars
        self.props = props
        self.prop_index = prop_index

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def depth(self) -> int:
        return self.config.depth

    def __len__(self) -> int:
        return self.width * self.depth

    def in_bounds(self, x: int, z: int) -> bool:
        """Whether (x, z) is a cell of this grid."""
        return 0 <= x < self.width and 0 <= z < self.depth

    def cell(self, x: int, z: int) -> Cell:
        """Build the Cell record for (x, z).

        Raises:
            CoordinateOutOfBoundsError: If (x, z) is outside the grid.
        """
        if not self.in_bounds(x, z):
            raise CoordinateOutOfBoundsError(
                f"Cell ({x}, {z}) outside {self.width}x{self.depth} grid"
            )

        facing_value = int(self.facing[z, x])
        template_index = int(self.template[z, x])
        prop_index = int(self.prop_index[z, x])
        pillars = self.pillars

        return Cell(
            x=x,
            z=z,
            raw_height=float(self.raw_height[z, x]),
            height=float(self.height[z, x]),
            moisture=float(self.moisture[z, x]),
            biome=biome_value_to_kind(self.biome[z, x]),
            is_water=bool(self.water[z, x]),
            in_city=bool(self.in_city[z, x]),
            is_road=bool(self.road[z, x]),
            role=role_value_to_role(self.role[z, x]),
            facing=None if facing_value == NO_FACING else Facing(facing_value),
            building=(
                None
                if template_index == NO_TEMPLATE
                else self.config.city.building_templates[template_index]
            ),
            surface_height=float(pillars.surface_height[z, x]),
            surface_y=int(pillars.surface_y[z, x]),
            pillar_floor=float(pillars.floor),
            pillar_top=float(pillars.top[z, x]),
            pillar_height=float(pillars.height[z, x]),
            pillar_center=float(pillars.center[z, x]),
            prop=None if prop_index == NO_PROP else self.props[prop_index],
        )

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, x-major then z."""
        for x in range(self.width):
            for z in range(self.depth):
                yield self.cell(x, z)

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()


def generate(config: GenerationConfig) -> GridResult:
    """Generate a complete world from configuration.

    Stages run in a fixed order: the road set and octave offsets consume
    their random streams first, then every per-cell field is evaluated
    from those frozen inputs.

    Args:
        config: World generation configuration.

    Returns:
        GridResult with per-cell arrays, the road set and props.

    Raises:
        DegeneratePillarError: If floor_bottom is not below every surface.
    """
    width, depth, seed = config.width, config.depth, config.seed
    logger.info("generation_started", width=width, depth=depth, seed=seed)

    # Stage A: road network
    bounds, roads = build_road_set(
        width, depth, config.city, make_rng(seed, Stream.ROADS)
    )

    # Stage B: octave offsets
    octaves = effective_octaves(config.noise.octaves)
    octave_offsets = derive_octave_offsets(make_rng(seed, Stream.OFFSETS), octaves)

    # Stage C: continuous fields
    noise = PerlinNoise(make_rng(seed, Stream.NOISE))
    raw_height = make_height_field(width, depth, noise, config.noise, octave_offsets)
    height = HeightCurve(config.height_curve)(raw_height)
    moisture = make_moisture_field(width, depth, noise, config.noise, octave_offsets)

    # Stage D: biomes
    classification = classify_biomes(height, moisture, config.biome_rules)

    # Stage E: city tiles (heights stay connected to the terrain)
    city = resolve_city_tiles(
        bounds, roads, width, depth, config.city, make_rng(seed, Stream.CITY)
    )

    # Stage F: pillars
    pillars = synthesize_pillars(
        classification.surface_height,
        config.height_multiplier,
        config.floor_bottom,
    )

    # Stage G: props
    props, prop_index = place_props(
        classification.biome,
        classification.water,
        city.in_city,
        pillars,
        config.biomes,
        make_rng(seed, Stream.PROPS),
    )

    result = GridResult(
        config=config,
        city_bounds=bounds,
        roads=roads,
        octave_offsets=octave_offsets,
        raw_height=raw_height,
        height=height,
        moisture=moisture,
        biome=classification.biome,
        water=classification.water,
        in_city=city.in_city,
        road=city.road,
        role=city.role,
        facing=city.facing,
        template=city.template,
        pillars=pillars,
        props=props,
        prop_index=prop_index,
    )

    _log_grid_stats(result)
    return result


def _log_grid_stats(result: GridResult) -> None:
    """Log biome and city role counts."""
    total = len(result)
    biomes = {
        kind.value: int(np.sum(result.biome == biome_value(kind))) for kind in BiomeKind
    }
    roles = {
        role.value: int(np.sum(result.role == role_value(role)))
        for role in CityRole
        if role is not CityRole.NONE
    }
    logger.info(
        "generation_complete",
        cells=total,
        biomes=biomes,
        city=roles,
        props=len(result.props),
        min_pillar=float(result.pillars.height.min()),
        max_pillar=float(result.pillars.height.max()),
    )
