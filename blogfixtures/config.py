"""Configuration management for the blog fixtures CLI.

Settings are read from ``~/.blogfixtures/config.toml`` when it exists and
can be overridden with ``BLOGFIXTURES_*`` environment variables. The
configuration is read-only; nothing here writes to disk.
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .render import FORMATS


ENV_PREFIX = "BLOGFIXTURES_"


class Settings(BaseModel):
    """Display settings for the blog fixtures CLI."""

    output_format: Optional[str] = Field(None, description="Output format (table, json, yaml); auto when unset")
    table_theme: str = Field(default="default", description="Table theme (default, simple)")
    colors: bool = Field(default=True, description="Whether tables are printed with colors")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate output format name."""
        if v is None:
            return v
        v = v.lower()
        if v not in FORMATS:
            raise ValueError(f"Output format must be one of: {', '.join(FORMATS)}")
        return v

    @field_validator("table_theme")
    @classmethod
    def validate_table_theme(cls, v: str) -> str:
        """Validate table theme name."""
        v = v.lower()
        if v not in ("default", "simple"):
            raise ValueError("Table theme must be 'default' or 'simple'")
        return v


class ConfigManager:
    """Loads CLI settings from the config file and environment."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Configuration directory path. If None, uses default.
        """
        self.config_dir = config_dir or Path.home() / ".blogfixtures"
        self.config_file = self.config_dir / "config.toml"
        self._settings: Optional[Settings] = None

    def load(self) -> Settings:
        """Load settings, applying environment overrides over the config file.

        Returns:
            Loaded settings

        Raises:
            ConfigError: If the config file or an override is invalid
        """
        if self._settings is not None:
            return self._settings

        file_data = self._read_file()
        try:
            Settings(**file_data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", details={"source": str(self.config_file)})

        env_data = self._read_env()
        try:
            self._settings = Settings(**{**file_data, **env_data})
        except PydanticValidationError as e:
            names = sorted({ENV_PREFIX + str(error["loc"][0]).upper() for error in e.errors() if error["loc"]})
            raise ConfigError(
                f"Invalid configuration: {e}",
                details={"env_vars": names},
            )

        return self._settings

    def reload(self) -> Settings:
        """Discard cached settings and load them again."""
        self._settings = None
        return self.load()

    def _read_file(self) -> Dict[str, Any]:
        """Read the ``[display]`` table from the config file."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load configuration: {e}", details={"source": str(self.config_file)})

        display = config_data.get("display", {})
        if not isinstance(display, dict):
            raise ConfigError("The [display] section must be a table", details={"source": str(self.config_file)})
        return dict(display)

    def _read_env(self) -> Dict[str, Any]:
        """Collect overrides from environment variables."""
        overrides: Dict[str, Any] = {}
        for field in Settings.model_fields:
            value = os.getenv(ENV_PREFIX + field.upper())
            if value:
                overrides[field] = value
        return overrides
