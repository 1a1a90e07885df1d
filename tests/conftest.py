"""Shared test fixtures for generation tests."""

import pytest

from voxelworld.generation.config import (
    BiomeRulesConfig,
    CityConfig,
    GenerationConfig,
    NoiseConfig,
)
from voxelworld.generation.generator import GridResult, generate


@pytest.fixture
def terrain_config() -> GenerationConfig:
    """10x10 single-octave terrain with the city disabled."""
    return GenerationConfig(
        width=10,
        depth=10,
        seed=42,
        noise=NoiseConfig(octaves=1, persistence=0.5, lacunarity=2.0, scale=20.0),
        biome_rules=BiomeRulesConfig(sea_level=0.3),
        height_multiplier=10.0,
        floor_bottom=-5.0,
        city=CityConfig(size=0),
    )


@pytest.fixture
def small_city_config() -> GenerationConfig:
    """10x10 grid with a 4x4 city district."""
    return GenerationConfig(
        width=10,
        depth=10,
        seed=42,
        height_multiplier=10.0,
        floor_bottom=-5.0,
        city=CityConfig(size=4, min_block_size=1),
    )


@pytest.fixture
def default_result() -> GridResult:
    """Default 50x50 world with a 20x20 city."""
    return generate(GenerationConfig())
