"""
Configuration loading.

Settings live in TOML files under ``ileap/config``, one per environment.
"""
import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from ileap.utils.constants import ConfigFile

__all__ = ["Config", "ConfigFile", "get_config", "get_environment_config_file"]

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


class Config:
    """Parsed configuration file."""

    def __init__(self, config_file: str, data: dict[str, Any]):
        self.config_file = config_file
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        """Return a top-level table, or an empty dict when it is absent."""
        return self.data.get(name, {})


@lru_cache
def get_config(config_file: str) -> Config:
    """
    Load a configuration file.

    Args:
        config_file: File name inside the config directory (e.g. "test.toml")

    Returns:
        Config wrapping the parsed TOML document

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    with path.open("rb") as f:
        data = tomllib.load(f)
    logger.info(f"Loaded configuration from {path}")
    return Config(config_file, data)


def get_environment_config_file() -> str:
    """Config file name selected by the ENVIRONMENT variable."""
    env = os.getenv("ENVIRONMENT", "development")
    return f"{env}.toml"
