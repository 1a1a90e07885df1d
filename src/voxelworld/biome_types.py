"""Biome kinds and city roles, with their compact uint8 storage values."""

from enum import Enum


class BiomeKind(str, Enum):
    """Terrain biomes produced by the classifier.

    Values double as the lookup names for configured biome definitions.
    """

    SEA = "Sea"
    DESERT = "Desert"
    GRASS_FIELD = "GrassField"
    MOUNTAIN = "Mountain"

    @property
    def is_water(self) -> bool:
        """Whether the biome is a water surface."""
        return self in _WATER_KINDS


class CityRole(str, Enum):
    """What occupies a cell of the city district."""

    NONE = "none"
    ROAD = "road"
    BUILDING = "building"
    EMPTY_LOT = "empty_lot"


_WATER_KINDS = frozenset({BiomeKind.SEA})

# Sequential integers for array storage
_BIOME_VALUES: dict[BiomeKind, int] = {
    BiomeKind.SEA: 0,
    BiomeKind.DESERT: 1,
    BiomeKind.GRASS_FIELD: 2,
    BiomeKind.MOUNTAIN: 3,
}
_BIOME_KINDS = {value: kind for kind, value in _BIOME_VALUES.items()}

_ROLE_VALUES: dict[CityRole, int] = {
    CityRole.NONE: 0,
    CityRole.ROAD: 1,
    CityRole.BUILDING: 2,
    CityRole.EMPTY_LOT: 3,
}
_ROLE_KINDS = {value: role for role, value in _ROLE_VALUES.items()}


def biome_value(kind: BiomeKind) -> int:
    """Convert BiomeKind to its uint8 storage value."""
    return _BIOME_VALUES[kind]


def biome_value_to_kind(value: int) -> BiomeKind:
    """Convert a uint8 storage value back to BiomeKind.

    Unknown values default to GRASS_FIELD.
    """
    return _BIOME_KINDS.get(int(value), BiomeKind.GRASS_FIELD)


def role_value(role: CityRole) -> int:
    """Convert CityRole to its uint8 storage value."""
    return _ROLE_VALUES[role]


def role_value_to_role(value: int) -> CityRole:
    """Convert a uint8 storage value back to CityRole."""
    return _ROLE_KINDS.get(int(value), CityRole.NONE)
