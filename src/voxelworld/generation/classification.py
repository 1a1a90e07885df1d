"""Biome classification: sea, mountain, desert, grass field."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..biome_types import BiomeKind, biome_value
from .config import BiomeDefinition, BiomeRulesConfig


class BiomeClassification:
    """Per-cell biome labels and the heights they imply."""

    def __init__(
        self,
        biome: NDArray[np.uint8],
        surface_height: NDArray[np.float64],
        water: NDArray[np.bool_],
    ):
        self.biome = biome
        self.surface_height = surface_height
        self.water = water


def classify_biomes(
    heights: NDArray[np.float64],
    moisture: NDArray[np.float64],
    rules: BiomeRulesConfig,
) -> BiomeClassification:
    """Apply the ordered biome rules to every cell.

    Rules, first match wins:
        1. height <= sea_level: Sea, height pinned to sea_level.
        2. height > mountain_threshold: Mountain, height exaggerated.
        3. moisture < moisture_threshold: Desert.
        4. otherwise GrassField.

    Exaggeration happens after classification and never feeds back into
    the thresholds.

    Args:
        heights: Remapped heights.
        moisture: Moisture field [0, 1].
        rules: Threshold configuration.

    Returns:
        BiomeClassification with uint8 biome values, surface heights in
        normalized units and the water mask.
    """
    sea = heights <= rules.sea_level
    mountain = ~sea & (heights > rules.mountain_threshold)
    desert = ~sea & ~mountain & (moisture < rules.moisture_threshold)

    biome = np.full(heights.shape, biome_value(BiomeKind.GRASS_FIELD), dtype=np.uint8)
    biome[desert] = biome_value(BiomeKind.DESERT)
    biome[mountain] = biome_value(BiomeKind.MOUNTAIN)
    biome[sea] = biome_value(BiomeKind.SEA)

    surface = np.where(mountain, heights * rules.mountain_exaggeration, heights)
    surface = np.where(sea, rules.sea_level, surface)

    return BiomeClassification(biome=biome, surface_height=surface, water=sea)


def classify_cell(height: float, moisture: float, rules: BiomeRulesConfig) -> BiomeKind:
    """Scalar version of the biome rules for a single cell."""
    if height <= rules.sea_level:
        return BiomeKind.SEA
    if height > rules.mountain_threshold:
        return BiomeKind.MOUNTAIN
    if moisture < rules.moisture_threshold:
        return BiomeKind.DESERT
    return BiomeKind.GRASS_FIELD


def get_biome(
    biomes: Sequence[BiomeDefinition],
    name: str,
) -> BiomeDefinition | None:
    """Look up a biome definition by name.

    Falls back to the first defined biome when the name is missing.
    Returns None only when no biomes are configured at all.
    """
    for biome in biomes:
        if biome.name == name:
            return biome
    if biomes:
        return biomes[0]
    return None
