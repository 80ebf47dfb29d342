"""Configuration management for pipelint using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILE_NAME = ".pipelint.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class OutputFormat(str, Enum):
    """CLI output formats."""
    TABLE = "table"
    JSON = "json"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    check_cycles: bool = Field(alias="checkCycles", default=True)
    check_references: bool = Field(alias="checkReferences", default=True)
    check_properties: bool = Field(alias="checkProperties", default=True)
    # Link targets must also have a known component, not only exist
    resolve_components: bool = Field(alias="resolveComponents", default=True)
    runtime_key_prefixes: list[str] = Field(
        alias="runtimeKeyPrefixes", default_factory=lambda: ["elyra_"]
    )

    @field_validator("runtime_key_prefixes")
    @classmethod
    def validate_runtime_key_prefixes(cls, v):
        if any(not prefix for prefix in v):
            raise ValueError("runtime key prefixes must be non-empty strings")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class PipelintConfig(BaseModel):
    """Complete pipelint configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> PipelintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .pipelint.json

    Returns:
        PipelintConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
        return PipelintConfig(**config_data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .pipelint.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> PipelintConfig:
    """Create default configuration."""
    return PipelintConfig()
