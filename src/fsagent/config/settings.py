"""Configuration management for fsagent.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fsagent.tree.ignore import DEFAULT_IGNORE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/fsagent.yaml")


class ServerConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)


class WalkerConfig(BaseModel):
    root: Path | None = Field(
        default=None, description="Traversal root; the working directory when unset"
    )
    ignore: list[str] = Field(default_factory=lambda: sorted(DEFAULT_IGNORE))
    max_depth: int | None = Field(default=None, ge=1)
    follow_symlinks: bool = Field(default=False)

    def resolve_root(self) -> Path:
        return (self.root or Path.cwd()).absolute()


class FilesConfig(BaseModel):
    encoding: str = Field(default="utf-8")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the fsagent service.

    Values come from (highest priority first) environment variables,
    the .env file, the YAML file passed as init arguments, then defaults.
    Nested fields use ``__``, e.g. ``FSAGENT_SERVER__PORT=8000``.
    """

    model_config = {
        "env_prefix": "FSAGENT_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    server: ServerConfig = Field(default_factory=ServerConfig)
    walker: WalkerConfig = Field(default_factory=WalkerConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
