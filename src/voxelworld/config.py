"""Generation config loading from TOML files."""

import tomllib
from pathlib import Path

from .generation.config import GenerationConfig

CONFIGS_DIR = Path(__file__).parent.parent.parent / "configs"


def load_config(config_path: Path) -> GenerationConfig:
    """Load a generation config from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenerationConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are invalid.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GenerationConfig.model_validate(data)


def find_config(name: str, configs_dir: Path = CONFIGS_DIR) -> Path:
    """Resolve a config name or path to a TOML file.

    Names with a ``.toml`` suffix or a path separator are used as paths;
    bare names select ``{configs_dir}/{name}.toml``.

    Raises:
        FileNotFoundError: If no matching file exists.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
    else:
        path = configs_dir / f"{name}.toml"

    if not path.exists():
        raise FileNotFoundError(
            f"Config '{name}' not found; named configs in {configs_dir}: "
            f"{list_configs(configs_dir)}"
        )
    return path


def list_configs(configs_dir: Path = CONFIGS_DIR) -> list[str]:
    """List available config names."""
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
