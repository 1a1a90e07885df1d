"""Deterministic voxel terrain and city district generation."""

from .biome_types import BiomeKind, CityRole
from .config import find_config, list_configs, load_config
from .exceptions import (
    ConfigurationError,
    CoordinateOutOfBoundsError,
    DegeneratePillarError,
    VoxelWorldError,
)
from .generation import (
    Cell,
    GenerationConfig,
    GridResult,
    generate,
    validate_grid,
)
from .types import FACING_DELTAS, Facing, Rect

__all__ = [
    # Types
    "BiomeKind",
    "CityRole",
    "Facing",
    "FACING_DELTAS",
    "Rect",
    # Generation
    "Cell",
    "GenerationConfig",
    "GridResult",
    "generate",
    "validate_grid",
    # Config files
    "find_config",
    "list_configs",
    "load_config",
    # Exceptions
    "VoxelWorldError",
    "ConfigurationError",
    "DegeneratePillarError",
    "CoordinateOutOfBoundsError",
]
