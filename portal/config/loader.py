"""Layered TOML configuration for the registry.

The layers, lowest precedence first:

    config/default.toml        shared defaults, optional
    config/{PORTAL_ENV}.toml   per-environment overrides, optional

PORTAL_* environment variables are applied on top by Settings, not here.
Without PORTAL_CONFIG_DIR the directory is the config/ folder that ships
next to the portal package in a source checkout.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from portal.observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_ENV = "PORTAL_CONFIG_DIR"
ENVIRONMENT_ENV = "PORTAL_ENV"
DEFAULT_ENVIRONMENT = "development"

PROJECT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def get_config_dir() -> Path:
    """Resolve the configuration directory.

    An explicit PORTAL_CONFIG_DIR must exist. The project directory may
    be absent, e.g. when portal is installed from a wheel.
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path
    return PROJECT_CONFIG_DIR


def get_environment() -> str:
    """Environment name from PORTAL_ENV, normalised to lower case."""
    env = os.environ.get(ENVIRONMENT_ENV, "").strip().lower()
    return env or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override, merging nested tables.

    Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Layer files that exist in config_dir, lowest precedence first."""
    candidates = [config_dir / "default.toml", config_dir / f"{environment}.toml"]
    return [path for path in candidates if path.is_file()]


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Merge the TOML layers into one dictionary.

    Missing layers are skipped, so an empty or absent directory yields an
    empty dict and Settings falls back to its model defaults.
    """
    config_dir = config_dir if config_dir is not None else get_config_dir()
    environment = environment if environment is not None else get_environment()

    layers = config_layers(config_dir, environment)
    if not layers:
        logger.warning(
            "config_files_not_found",
            config_dir=str(config_dir),
            environment=environment,
        )
        return {}

    config: dict[str, Any] = {}
    for path in layers:
        config = deep_merge(config, load_toml(path))

    logger.debug(
        "config_loaded",
        environment=environment,
        files=[path.name for path in layers],
    )
    return config
