"""vnscript configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vnscript.exceptions import ConfigurationError, check_config_keys


def _default_character_keys() -> dict[str, str]:
    return {"主人公": "protagonist", "ななたう": "nanatau"}


def _default_character_names() -> dict[str, str]:
    return {"protagonist": "主人公", "nanatau": "ななたう", "system": "システム"}


class VNScriptSettings(BaseSettings):
    """vnscript configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
    2. Config file values (YAML, TOML, or JSON)
    3. Environment variables (prefixed with VNSCRIPT_)
       Example: export VNSCRIPT_LOG_LEVEL=DEBUG
    4. .env file (in current directory or specified path)
    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="VNSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    # Script input
    script_encoding: str = Field(
        default="utf-8",
        description="Text encoding used when loading scenario files",
    )

    # Audio settings
    bgm_track: str = Field(
        default="bgm_main",
        description="Track id requested from the audio layer for BGM directives",
    )
    bgm_volume: float = Field(default=0.6, ge=0.0, le=1.0)
    bgm_loop: bool = Field(default=True)
    se_track: str = Field(
        default="se_click",
        description="Track id requested from the audio layer for SE directives",
    )
    se_volume: float = Field(default=0.8, ge=0.0, le=1.0)

    # Stage geometry
    stage_width: int = Field(default=1280, gt=0)
    stage_height: int = Field(default=720, gt=0)
    portrait_width: int = Field(default=300, gt=0)
    portrait_height: int = Field(default=400, gt=0)
    portrait_baseline: int = Field(
        default=650,
        description="Vertical position of the portrait's bottom edge",
        ge=0,
    )

    # Characters
    character_keys: dict[str, str] = Field(
        default_factory=_default_character_keys,
        description="Script character name to character registry key",
    )
    character_names: dict[str, str] = Field(
        default_factory=_default_character_names,
        description="Registry key to display name for the built-in registry",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path."""
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.resolve()
        raise ValueError(
            f"Path fields must be string or Path. Got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @classmethod
    def from_env(cls) -> VNScriptSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> VNScriptSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> VNScriptSettings:
        """Load settings with proper precedence from multiple sources.

        Args:
            config_files: List of config files to load (later files override earlier).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                    data.update(file_settings.model_dump(exclude_unset=True))
                except FileNotFoundError:
                    from vnscript.config.logging import get_logger as _get_logger

                    _get_logger("vnscript.config.settings").warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )

        settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: VNScriptSettings | None = None


def _get_config_paths() -> list[Path | str]:
    """Get the existing config files, later files overriding earlier ones."""
    potential_paths = [
        Path.home() / ".config" / "vnscript" / "config.yaml",
        Path.home() / ".config" / "vnscript" / "config.toml",
        Path.cwd() / "vnscript.yaml",
        Path.cwd() / "vnscript.json",
        Path.cwd() / "vnscript.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue
    return existing_paths


def get_settings() -> VNScriptSettings:
    """Get the global settings instance.

    Returns:
        Global VNScriptSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = VNScriptSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = VNScriptSettings.from_env()
    return _settings


def set_settings(settings: VNScriptSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    Forces get_settings() to re-read environment variables and config files
    on the next call. Useful for testing with monkeypatched environments.
    """
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> VNScriptSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides.
                      Only non-None values are applied.

    Returns:
        VNScriptSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return VNScriptSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    if cli_overrides:
        filtered_overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if filtered_overrides:
            data = settings.model_dump()
            data.update(filtered_overrides)
            settings = VNScriptSettings(**data)
    return settings
