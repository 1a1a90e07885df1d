"""Procedural world generation package.

This package turns a seed and a GenerationConfig into a voxel terrain grid:
fractal heights, biome labels, a city road network with roadside
buildings, gapless pillar geometry and biome prop placements.
"""

from .classification import get_biome
from .config import (
    BiomeDefinition,
    BiomeRulesConfig,
    CityConfig,
    GenerationConfig,
    HeightCurveConfig,
    NoiseConfig,
)
from .generator import Cell, GridResult, generate
from .objects import PropPlacement
from .pillars import scale_compensation
from .validation import ValidationResult, validate_grid

__all__ = [
    "BiomeDefinition",
    "BiomeRulesConfig",
    "Cell",
    "CityConfig",
    "GenerationConfig",
    "GridResult",
    "HeightCurveConfig",
    "NoiseConfig",
    "PropPlacement",
    "ValidationResult",
    "generate",
    "get_biome",
    "scale_compensation",
    "validate_grid",
]
