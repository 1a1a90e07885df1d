"""Tests for biome prop placement."""

import numpy as np
import pytest

from voxelworld.biome_types import BiomeKind, biome_value
from voxelworld.generation.config import BiomeDefinition
from voxelworld.generation.objects import (
    NO_PROP,
    PROP_SCALE_MAX,
    PROP_SCALE_MIN,
    place_props,
)
from voxelworld.generation.pillars import synthesize_pillars
from voxelworld.generation.rng import Stream, make_rng

GRASS = biome_value(BiomeKind.GRASS_FIELD)
DESERT = biome_value(BiomeKind.DESERT)

DENSE_GRASS = (
    BiomeDefinition(name="GrassField", prop_density=1.0, props=("tree", "bush")),
)


def _place(biome, water=None, in_city=None, biomes=DENSE_GRASS, seed=42):
    shape = biome.shape
    water = np.zeros(shape, dtype=bool) if water is None else water
    in_city = np.zeros(shape, dtype=bool) if in_city is None else in_city
    pillars = synthesize_pillars(
        np.full(shape, 0.5), height_multiplier=10.0, floor_bottom=-5.0
    )
    return place_props(biome, water, in_city, pillars, biomes, make_rng(seed, Stream.PROPS))


class TestPlaceProps:
    """Tests for place_props."""

    def test_full_density_covers_every_cell(self) -> None:
        placements, index = _place(np.full((3, 4), GRASS, dtype=np.uint8))
        assert len(placements) == 12
        assert np.all(index != NO_PROP)

    def test_x_major_order(self) -> None:
        placements, _ = _place(np.full((2, 3), GRASS, dtype=np.uint8))
        assert [(p.x, p.z) for p in placements] == [
            (0, 0),
            (0, 1),
            (1, 0),
            (1, 1),
            (2, 0),
            (2, 1),
        ]

    def test_index_points_at_placement(self) -> None:
        placements, index = _place(np.full((3, 3), GRASS, dtype=np.uint8))
        for placement in placements:
            assert placements[index[placement.z, placement.x]] is placement

    def test_water_and_city_excluded(self) -> None:
        biome = np.full((3, 3), GRASS, dtype=np.uint8)
        water = np.zeros((3, 3), dtype=bool)
        water[0, 0] = True
        in_city = np.zeros((3, 3), dtype=bool)
        in_city[1, 1] = True

        placements, index = _place(biome, water=water, in_city=in_city)
        assert len(placements) == 7
        assert index[0, 0] == NO_PROP
        assert index[1, 1] == NO_PROP

    def test_zero_density_places_nothing(self) -> None:
        biomes = (BiomeDefinition(name="GrassField", prop_density=0.0, props=("tree",)),)
        placements, index = _place(np.full((4, 4), GRASS, dtype=np.uint8), biomes=biomes)
        assert placements == []
        assert np.all(index == NO_PROP)

    def test_no_candidates_places_nothing(self) -> None:
        biomes = (BiomeDefinition(name="GrassField", prop_density=1.0),)
        placements, _ = _place(np.full((4, 4), GRASS, dtype=np.uint8), biomes=biomes)
        assert placements == []

    def test_no_biomes_places_nothing(self) -> None:
        placements, _ = _place(np.full((4, 4), GRASS, dtype=np.uint8), biomes=())
        assert placements == []

    def test_missing_biome_uses_first_definition(self) -> None:
        placements, _ = _place(np.full((2, 2), DESERT, dtype=np.uint8))
        assert len(placements) == 4
        assert all(p.prop_id in ("tree", "bush") for p in placements)
        assert all(p.biome is BiomeKind.DESERT for p in placements)

    def test_anchored_on_pillar_top(self) -> None:
        placements, _ = _place(np.full((2, 2), GRASS, dtype=np.uint8))
        assert all(p.y == 5.0 for p in placements)

    def test_scale_and_rotation_ranges(self) -> None:
        placements, _ = _place(np.full((6, 6), GRASS, dtype=np.uint8))
        for p in placements:
            assert PROP_SCALE_MIN <= p.scale <= PROP_SCALE_MAX
            assert 0.0 <= p.rotation < 360.0

    def test_vertical_scale_compensated(self) -> None:
        placements, _ = _place(np.full((2, 2), GRASS, dtype=np.uint8))
        for p in placements:
            assert p.vertical_scale == pytest.approx(p.scale / 10.0)

    def test_deterministic(self) -> None:
        biome = np.full((5, 5), GRASS, dtype=np.uint8)
        biomes = (
            BiomeDefinition(
                name="GrassField", prop_density=0.5, props=("tree", "bush", "flowers")
            ),
        )
        first, _ = _place(biome, biomes=biomes, seed=9)
        second, _ = _place(biome, biomes=biomes, seed=9)
        assert first == second
