"""Core types shared across the generation pipeline."""

from dataclasses import dataclass
from enum import IntEnum


class Facing(IntEnum):
    """Axis direction a building faces (towards its road).

    Coordinate system: +X is East, +Z is North.
    """

    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4

    @property
    def yaw(self) -> float:
        """Rotation about the vertical axis in degrees."""
        return FACING_YAW[self]


# Neighbour offsets (dx, dz) in road-lookup priority order
FACING_DELTAS: dict[Facing, tuple[int, int]] = {
    Facing.NORTH: (0, 1),
    Facing.SOUTH: (0, -1),
    Facing.EAST: (1, 0),
    Facing.WEST: (-1, 0),
}

FACING_YAW: dict[Facing, float] = {
    Facing.NORTH: 0.0,
    Facing.EAST: 90.0,
    Facing.SOUTH: 180.0,
    Facing.WEST: 270.0,
}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned block of cells, half-open on both axes."""

    x: int
    z: int
    width: int
    depth: int

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def z2(self) -> int:
        return self.z + self.depth

    def contains(self, x: int, z: int) -> bool:
        """Whether (x, z) lies inside the rectangle."""
        return self.x <= x < self.x2 and self.z <= z < self.z2

    def __str__(self) -> str:
        return f"[{self.x}..{self.x2}) x [{self.z}..{self.z2})"
