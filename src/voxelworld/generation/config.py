"""World generation configuration models."""

from pydantic import BaseModel, Field, field_validator


class NoiseConfig(BaseModel, frozen=True):
    """Fractal noise parameters for the height and moisture fields."""

    scale: float = Field(default=20.0, gt=0, description="Cells per noise unit")
    octaves: int = Field(default=4, description="Number of octaves summed")
    persistence: float = Field(
        default=0.5, ge=0, description="Amplitude multiplier per octave"
    )
    lacunarity: float = Field(
        default=2.0, gt=0, description="Frequency multiplier per octave"
    )
    offset_x: float = Field(default=0.0, description="Sampling offset along x")
    offset_z: float = Field(default=0.0, description="Sampling offset along z")


class HeightCurveConfig(BaseModel, frozen=True):
    """Control points reshaping the normalized fractal height."""

    points: tuple[tuple[float, float], ...] = Field(
        default=((0.0, 0.0), (0.5, 0.2), (1.0, 1.0)),
        description="(input, output) pairs with strictly increasing input",
    )

    @field_validator("points")
    @classmethod
    def _check_points(
        cls, points: tuple[tuple[float, float], ...]
    ) -> tuple[tuple[float, float], ...]:
        if len(points) < 2:
            raise ValueError("height curve needs at least two control points")
        xs = [p[0] for p in points]
        if any(b <= a for a, b in zip(xs, xs[1:])):
            raise ValueError("height curve inputs must be strictly increasing")
        return points


class BiomeRulesConfig(BaseModel, frozen=True):
    """Thresholds for the ordered biome rules."""

    sea_level: float = Field(default=0.3, description="Heights at or below are sea")
    mountain_threshold: float = Field(
        default=0.7, description="Heights above become mountains"
    )
    mountain_exaggeration: float = Field(
        default=1.5, gt=0, description="Height multiplier applied to mountains"
    )
    moisture_threshold: float = Field(
        default=0.4, description="Moisture below this becomes desert"
    )


class BiomeDefinition(BaseModel, frozen=True):
    """A named biome with its material key and prop candidates."""

    name: str
    color: str = Field(default="#808080", description="Material color key")
    prop_density: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Chance a land cell gets a prop"
    )
    props: tuple[str, ...] = Field(default=(), description="Candidate prop ids")


def _default_biomes() -> tuple[BiomeDefinition, ...]:
    return (
        BiomeDefinition(name="Sea", color="#2f6fbf"),
        BiomeDefinition(
            name="GrassField",
            color="#4caf50",
            prop_density=0.12,
            props=("tree", "bush", "flowers"),
        ),
        BiomeDefinition(
            name="Desert",
            color="#e0c67a",
            prop_density=0.04,
            props=("cactus", "dry_rock"),
        ),
        BiomeDefinition(
            name="Mountain",
            color="#8d8d8d",
            prop_density=0.06,
            props=("rock", "pine"),
        ),
    )


class CityConfig(BaseModel, frozen=True):
    """City district layout parameters."""

    size: int = Field(default=20, description="Side of the centered city square")
    max_depth: int = Field(default=3, ge=0, description="Quadtree recursion depth")
    subdivide_chance: float = Field(
        default=0.8, description="Chance a block splits further (>1 = always)"
    )
    main_road_chance: float = Field(
        default=0.7, description="Chance each split line becomes a road"
    )
    min_block_size: int = Field(default=3, ge=1, description="Smallest block side")
    building_density: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Chance a roadside lot is built"
    )
    leaf_road_chance: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Chance an unsplit block gets one through-road",
    )
    building_templates: tuple[str, ...] = Field(
        default=("house", "shop", "apartment"),
        description="Building template ids (empty = no buildings)",
    )


class GenerationConfig(BaseModel, frozen=True):
    """Complete world generation configuration."""

    seed: int = Field(default=42, ge=0, description="Random seed for reproducibility")
    width: int = Field(default=50, gt=0, description="Grid width in cells (x)")
    depth: int = Field(default=50, gt=0, description="Grid depth in cells (z)")

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    height_multiplier: float = Field(
        default=5.0, gt=0, description="World units per unit of height"
    )
    height_curve: HeightCurveConfig = Field(default_factory=HeightCurveConfig)
    biome_rules: BiomeRulesConfig = Field(default_factory=BiomeRulesConfig)
    floor_bottom: float = Field(
        default=-5.0, description="Shared base level every pillar extends down to"
    )
    city: CityConfig = Field(default_factory=CityConfig)
    biomes: tuple[BiomeDefinition, ...] = Field(default_factory=_default_biomes)

    @field_validator("biomes")
    @classmethod
    def _check_unique_names(
        cls, biomes: tuple[BiomeDefinition, ...]
    ) -> tuple[BiomeDefinition, ...]:
        names = [b.name for b in biomes]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate biome names in {names}")
        return biomes
