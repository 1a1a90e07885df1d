"""Biome prop placement: trees, rocks, cacti on top of land pillars."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..biome_types import BiomeKind, biome_value
from .classification import get_biome
from .config import BiomeDefinition
from .pillars import Pillars, scale_compensation

# Uniform size jitter for natural variation
PROP_SCALE_MIN = 0.8
PROP_SCALE_MAX = 1.2

NO_PROP = -1


@dataclass(frozen=True)
class PropPlacement:
    """A prop to instantiate on top of a pillar.

    ``y`` is the pillar top. ``vertical_scale`` is already divided by the
    pillar height for renderers that parent the prop to the stretched
    pillar cube; ``scale`` is the absolute size.
    """

    x: int
    z: int
    y: float
    prop_id: str
    biome: BiomeKind
    rotation: float
    scale: float
    vertical_scale: float


def place_props(
    biome: NDArray[np.uint8],
    water: NDArray[np.bool_],
    in_city: NDArray[np.bool_],
    pillars: Pillars,
    biomes: Sequence[BiomeDefinition],
    rng: np.random.Generator,
) -> tuple[list[PropPlacement], NDArray[np.int32]]:
    """Decide which cells spawn a biome prop.

    A land cell outside the city spawns a prop when its roll is below the
    resolved biome's prop density. Biome names resolve through get_biome,
    so a missing definition uses the first configured biome.

    Args:
        biome: uint8 biome values.
        water: Water mask.
        in_city: City mask.
        pillars: Pillar extents for anchoring and scale compensation.
        biomes: Configured biome definitions.
        rng: Generator for the PROPS stream.

    Returns:
        Tuple of (placements in x-major order, per-cell index into the
        placements or NO_PROP).
    """
    shape = biome.shape
    roll = rng.random(shape)
    pick = rng.random(shape)
    scale = rng.uniform(PROP_SCALE_MIN, PROP_SCALE_MAX, size=shape)
    rotation = rng.uniform(0.0, 360.0, size=shape)

    index = np.full(shape, NO_PROP, dtype=np.int32)
    placements: list[PropPlacement] = []

    eligible = ~water & ~in_city
    spawn = np.zeros(shape, dtype=bool)
    prop_lists: dict[int, tuple[BiomeKind, tuple[str, ...]]] = {}

    for kind in BiomeKind:
        definition = get_biome(biomes, kind.value)
        if definition is None or not definition.props:
            continue
        value = biome_value(kind)
        prop_lists[value] = (kind, definition.props)
        spawn |= eligible & (biome == value) & (roll < definition.prop_density)

    top = pillars.top
    # Transposed so placements come out x-major like the cell sequence
    xs, zs = np.nonzero(spawn.T)
    for x, z in zip(xs.tolist(), zs.tolist()):
        kind, props = prop_lists[int(biome[z, x])]
        prop_id = props[min(int(pick[z, x] * len(props)), len(props) - 1)]
        cell_scale = float(scale[z, x])
        index[z, x] = len(placements)
        placements.append(
            PropPlacement(
                x=x,
                z=z,
                y=float(top[z, x]),
                prop_id=prop_id,
                biome=kind,
                rotation=float(rotation[z, x]),
                scale=cell_scale,
                vertical_scale=scale_compensation(pillars.height[z, x], cell_scale),
            )
        )

    return placements, index
