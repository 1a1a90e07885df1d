"""Tests for generation config models."""

import pytest
from pydantic import ValidationError

from voxelworld.generation.config import (
    BiomeDefinition,
    CityConfig,
    GenerationConfig,
    HeightCurveConfig,
    NoiseConfig,
)


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_defaults(self) -> None:
        config = GenerationConfig()
        assert config.width == 50
        assert config.depth == 50
        assert config.seed == 42
        assert config.height_multiplier == 5.0
        assert config.floor_bottom == -5.0
        assert config.biome_rules.sea_level == 0.3
        assert config.biome_rules.mountain_threshold == 0.7
        assert config.biome_rules.moisture_threshold == 0.4
        assert [b.name for b in config.biomes] == [
            "Sea",
            "GrassField",
            "Desert",
            "Mountain",
        ]

    @pytest.mark.parametrize("field", ["width", "depth"])
    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_grid_rejected(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            GenerationConfig(**{field: value})

    def test_negative_seed_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerationConfig(seed=-1)

    def test_frozen(self) -> None:
        config = GenerationConfig()
        with pytest.raises(ValidationError):
            config.width = 10

    def test_duplicate_biome_names_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate"):
            GenerationConfig(
                biomes=(BiomeDefinition(name="Sea"), BiomeDefinition(name="Sea"))
            )

    def test_empty_biomes_allowed(self) -> None:
        assert GenerationConfig(biomes=()).biomes == ()

    def test_octaves_below_one_allowed(self) -> None:
        """Low octave counts degrade at generation time instead."""
        assert GenerationConfig(noise=NoiseConfig(octaves=0)).noise.octaves == 0


class TestNoiseConfig:
    """Tests for NoiseConfig."""

    def test_zero_scale_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoiseConfig(scale=0)

    def test_negative_persistence_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoiseConfig(persistence=-0.1)

    def test_zero_persistence_allowed(self) -> None:
        assert NoiseConfig(persistence=0.0).persistence == 0.0


class TestHeightCurveConfig:
    """Tests for HeightCurveConfig validation."""

    def test_default_s_curve(self) -> None:
        assert HeightCurveConfig().points == ((0.0, 0.0), (0.5, 0.2), (1.0, 1.0))

    def test_single_point_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least two"):
            HeightCurveConfig(points=((0.0, 0.0),))

    def test_non_increasing_rejected(self) -> None:
        with pytest.raises(ValidationError, match="strictly increasing"):
            HeightCurveConfig(points=((0.0, 0.0), (0.5, 0.5), (0.5, 1.0)))


class TestBiomeDefinition:
    """Tests for BiomeDefinition."""

    def test_prop_density_bounds(self) -> None:
        with pytest.raises(ValidationError):
            BiomeDefinition(name="x", prop_density=1.5)
        with pytest.raises(ValidationError):
            BiomeDefinition(name="x", prop_density=-0.1)

    def test_props_from_list(self) -> None:
        biome = BiomeDefinition(name="Forest", props=["tree", "log"])
        assert biome.props == ("tree", "log")


class TestCityConfig:
    """Tests for CityConfig."""

    def test_subdivide_chance_may_exceed_one(self) -> None:
        """Values above 1 mean 'always subdivide'."""
        assert CityConfig(subdivide_chance=1.5).subdivide_chance == 1.5

    def test_building_density_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CityConfig(building_density=2.0)

    def test_zero_min_block_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CityConfig(min_block_size=0)
