"""Custom exceptions for world generation."""


class VoxelWorldError(Exception):
    """Base exception for world generation errors."""

    pass


class ConfigurationError(VoxelWorldError):
    """Raised when a generation config cannot produce a valid world."""

    pass


class DegeneratePillarError(ConfigurationError):
    """Raised when a pillar would have zero or negative height.

    Usually means floor_bottom sits at or above the lowest reachable
    surface height for the chosen height multiplier.
    """

    def __init__(self, count: int, min_height: float, floor_bottom: float):
        super().__init__(
            f"{count} pillars have non-positive height (min {min_height:g}); "
            f"floor_bottom={floor_bottom:g} must be below every surface"
        )
        self.count = count
        self.min_height = min_height
        self.floor_bottom = floor_bottom


class CoordinateOutOfBoundsError(VoxelWorldError):
    """Raised when a cell lookup falls outside the grid."""

    pass
