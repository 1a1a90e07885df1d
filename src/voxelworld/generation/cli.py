"""Command-line interface for world generation."""

import argparse
import logging
import time
from typing import TYPE_CHECKING

import numpy as np
import structlog

from ..biome_types import BiomeKind, CityRole, biome_value_to_kind, role_value_to_role

if TYPE_CHECKING:
    from .generator import GridResult

_BIOME_GLYPHS = {
    BiomeKind.SEA: "~",
    BiomeKind.DESERT: ".",
    BiomeKind.GRASS_FIELD: ",",
    BiomeKind.MOUNTAIN: "^",
}
_ROLE_GLYPHS = {
    CityRole.ROAD: "#",
    CityRole.BUILDING: "B",
    CityRole.EMPTY_LOT: "_",
}

# Upper bound for --random-seed
RANDOM_SEED_MAX = 100_000


def render_ascii(result: "GridResult") -> str:
    """Render a grid as text, north (+z) at the top."""
    lines = []
    for z in reversed(range(result.depth)):
        row = []
        for x in range(result.width):
            role = role_value_to_role(result.role[z, x])
            if role is CityRole.NONE:
                row.append(_BIOME_GLYPHS[biome_value_to_kind(result.biome[z, x])])
            else:
                row.append(_ROLE_GLYPHS[role])
        lines.append("".join(row))
    return "\n".join(lines)


def main() -> None:
    """CLI entry point for world generation."""
    parser = argparse.ArgumentParser(
        description="Generate a voxel terrain grid with a city district"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a TOML generation config",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width")
    parser.add_argument("--depth", type=int, default=None, help="Grid depth")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help=f"Pick a random seed in [0, {RANDOM_SEED_MAX})",
    )
    parser.add_argument(
        "--city-size", type=int, default=None, help="City square side (0 disables)"
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Print an ASCII preview of the grid"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from .config import GenerationConfig
    from .generator import generate
    from .validation import validate_grid

    if args.config:
        try:
            config_path = find_config(args.config)
        except FileNotFoundError as e:
            logger.error("config_not_found", config=args.config, reason=str(e))
            raise SystemExit(2) from e
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = GenerationConfig()

    overrides: dict = {}
    if args.width is not None:
        overrides["width"] = args.width
    if args.depth is not None:
        overrides["depth"] = args.depth
    if args.random_seed:
        overrides["seed"] = int(np.random.default_rng().integers(RANDOM_SEED_MAX))
    elif args.seed is not None:
        overrides["seed"] = args.seed
    if args.city_size is not None:
        overrides["city"] = config.city.model_copy(update={"size": args.city_size})
    if overrides:
        config = GenerationConfig.model_validate(
            {**config.model_dump(), **overrides}
        )

    start_time = time.time()
    result = generate(config)
    gen_time = time.time() - start_time
    logger.info("generation_timed", seconds=round(gen_time, 3), seed=config.seed)

    validation = validate_grid(result)

    if args.ascii:
        print(render_ascii(result))

    if not validation.passed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
