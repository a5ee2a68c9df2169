"""
Configuration management for the Luminescence command catalog.

Loads/saves TOML configuration for the effect resource location and logging.
The config file is looked up at $LUMINESCENCE_CONFIG, then
$XDG_CONFIG_HOME/luminescence/config.toml.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from luminescence.loader import DEFAULT_RESOURCE_NAME, Source, bundled_resource

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LUMINESCENCE_CONFIG"


class CatalogConfig(BaseModel):
    """Effect resource configuration."""

    resource_name: str = Field(
        default=DEFAULT_RESOURCE_NAME, description="Bundled resource name, without extension"
    )
    path: Optional[Path] = Field(
        default=None, description="Explicit resource file, overrides the bundled resource"
    )

    @field_validator("path")
    @classmethod
    def _expand_home(cls, value: Optional[Path]) -> Optional[Path]:
        return value.expanduser() if value is not None else None

    def resolve_source(self) -> Source:
        """Resolve where the effect list is read from."""
        if self.path is not None:
            return self.path
        return bundled_resource(self.resource_name)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(
        default="%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)-20s | %(message)s",
        description="Log record format",
    )
    datefmt: str = Field(default="%Y-%m-%d %H:%M:%S", description="Timestamp format")


class Config(BaseModel):
    """Complete Luminescence configuration."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get the configuration file path, honoring $LUMINESCENCE_CONFIG."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "luminescence" / "config.toml"


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from TOML file.

    A missing file is not an error; the effect list then comes from the
    bundled resource and logging keeps its defaults.

    Args:
        path: Configuration file path. If None, uses get_config_path().

    Returns:
        Loaded configuration object.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Config()

    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    config = Config.model_validate(data)
    logger.debug(f"Loaded config from {path}, effect source: {config.catalog.resolve_source()}")
    return config


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """
    Save configuration to TOML file.

    An unset resource path is omitted, since TOML has no null.

    Args:
        config: Configuration object to save.
        path: Configuration file path. If None, uses get_config_path().
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    import tomli_w

    with open(path, "wb") as f:
        tomli_w.dump(config.model_dump(mode="json", exclude_none=True), f)


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure root logging for an embedding application.

    The library never configures logging on import; call this once at startup.
    """
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
        datefmt=config.datefmt,
    )
