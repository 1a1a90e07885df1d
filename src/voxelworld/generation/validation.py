"""Post-generation invariant checks."""

import numpy as np
import structlog

from ..biome_types import BiomeKind, biome_value
from .generator import GridResult
from .objects import NO_PROP
from .roads import center_lines

logger = structlog.get_logger()


class ValidationResult:
    """Result of grid validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_grid(result: GridResult) -> ValidationResult:
    """Check a generated grid against the world invariants.

    Args:
        result: Generated grid.

    Returns:
        ValidationResult with any errors/warnings.
    """
    validation = ValidationResult()

    _check_water(result, validation)
    _check_pillars(result, validation)
    _check_props(result, validation)
    _check_roads(result, validation)
    _check_central_cross(result, validation)

    if validation.passed:
        logger.info("grid_validation_passed")
    else:
        logger.warning("grid_validation_failed", errors=validation.errors)

    for warning in validation.warnings:
        logger.warning("grid_validation_warning", message=warning)

    return validation


def _check_water(result: GridResult, validation: ValidationResult) -> None:
    """Water cells are sea, flagged, and sit exactly at sea level."""
    rules = result.config.biome_rules
    below = result.height <= rules.sea_level

    wrong_biome = np.sum(below & (result.biome != biome_value(BiomeKind.SEA)))
    if wrong_biome:
        validation.add_error(f"{wrong_biome} cells below sea level are not Sea")

    unflagged = np.sum(below != result.water)
    if unflagged:
        validation.add_error(f"{unflagged} cells have an inconsistent water flag")

    sea_surface = rules.sea_level * result.config.height_multiplier
    off_level = np.sum(result.water & (result.pillars.surface_height != sea_surface))
    if off_level:
        validation.add_error(f"{off_level} water cells are not at sea level")


def _check_pillars(result: GridResult, validation: ValidationResult) -> None:
    """Every pillar has positive height."""
    degenerate = np.sum(result.pillars.height <= 0)
    if degenerate:
        validation.add_error(f"{degenerate} pillars have non-positive height")


def _check_props(result: GridResult, validation: ValidationResult) -> None:
    """Props never appear on water or in the city."""
    has_prop = result.prop_index != NO_PROP

    on_water = np.sum(has_prop & result.water)
    if on_water:
        validation.add_error(f"{on_water} props placed on water")

    in_city = np.sum(has_prop & result.in_city)
    if in_city:
        validation.add_error(f"{in_city} biome props placed inside the city")


def _check_roads(result: GridResult, validation: ValidationResult) -> None:
    """Roads lie inside the city and match the road mask."""
    bounds = result.city_bounds
    outside = [
        cell for cell in result.roads if bounds is None or not bounds.contains(*cell)
    ]
    if outside:
        validation.add_error(f"{len(outside)} road cells outside the city")

    if int(result.road.sum()) != len(result.roads):
        validation.add_error("Road mask does not match the road set")


def _check_central_cross(result: GridResult, validation: ValidationResult) -> None:
    """The middle row(s) and column(s) of the city are all road."""
    bounds = result.city_bounds
    if bounds is None:
        return

    missing = 0
    for z in center_lines(bounds.z, bounds.depth):
        missing += sum(
            (x, z) not in result.roads for x in range(bounds.x, bounds.x2)
        )
    for x in center_lines(bounds.x, bounds.width):
        missing += sum(
            (x, z) not in result.roads for z in range(bounds.z, bounds.z2)
        )
    if missing:
        validation.add_error(f"Central cross is missing {missing} road cells")

    road_fraction = len(result.roads) / (bounds.width * bounds.depth)
    if road_fraction > 0.6:
        validation.add_warning(f"Roads cover {road_fraction:.0%} of the city")
