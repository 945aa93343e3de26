"""YAML configuration loader for pair statistics runs."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

# Config directory relative to this file
CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "PAIR_STATS_CONFIG"
DEFAULT_CONFIG_NAME = "prod"


def _require_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid {name}: {value!r}. Must be an integer")
    if value < minimum:
        raise ValueError(f"Invalid {name}: {value}. Must be >= {minimum}")


@dataclass
class PairStatsConfig:
    threshold: int = 2
    delimiter: str = "\t"
    min_fields: int = 3
    strict: bool = False
    workers: int = 1
    timeout: float = 30.0

    def __post_init__(self) -> None:
        _require_int("threshold", self.threshold, 0)
        _require_int("min_fields", self.min_fields, 2)
        _require_int("workers", self.workers, 1)

        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError(f"Invalid delimiter: {self.delimiter!r}. Must be a non-empty string")

        if not isinstance(self.strict, bool):
            raise ValueError(f"Invalid strict: {self.strict!r}. Must be true or false")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ValueError(f"Invalid timeout: {self.timeout!r}. Must be a number")
        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}. Must be > 0")


def find_config_path(name: str | None, config_dir: Path = CONFIG_DIR) -> Path:
    """Resolve a config name or path to an existing YAML file.

    Args:
        name: Config name without extension, a path to a YAML file, or
            None for $PAIR_STATS_CONFIG (default 'prod')
        config_dir: Directory holding the named configs

    Raises:
        FileNotFoundError: If the config file doesn't exist
    """
    if name is None:
        name = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME)

    if "/" in name or name.endswith((".yaml", ".yml")):
        config_path = Path(name)
    else:
        config_path = config_dir / f"{name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_config_data(path: Path) -> dict[str, Any]:
    """Load a config file as a mapping of known PairStatsConfig fields."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    known = {field.name for field in fields(PairStatsConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return data


def load_config(name: str | None = None) -> PairStatsConfig:
    """Load pair statistics config by name (e.g., 'test' or 'prod').

    Args:
        name: Config name without extension, a path to a config file, or
            None to use $PAIR_STATS_CONFIG (default 'prod')

    Returns:
        PairStatsConfig instance
    """
    data = load_config_data(find_config_path(name))
    return PairStatsConfig(**data)


_config: PairStatsConfig | None = None


def get_config() -> PairStatsConfig:
    """Get the active config, loading the default one lazily."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: PairStatsConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Drop the active config, forcing a reload on next get_config()."""
    global _config
    _config = None
