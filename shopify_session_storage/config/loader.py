"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Overridden with SHOPIFY_SESSION_CONFIG_DIR; otherwise ``config/`` in the
    working directory.
    """
    config_dir_env = os.environ.get("SHOPIFY_SESSION_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    return Path.cwd() / "config"


def get_environment() -> str:
    """Get the current environment from SHOPIFY_SESSION_ENV (default 'development')."""
    return os.environ.get("SHOPIFY_SESSION_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Both config/default.toml and config/{env}.toml are optional; the
    storage is usable from environment variables alone.
    """
    config_dir = get_config_dir()
    config: dict[str, Any] = {}

    for path in (config_dir / "default.toml", config_dir / f"{get_environment()}.toml"):
        if path.exists():
            config = deep_merge(config, load_toml(path))

    return config
