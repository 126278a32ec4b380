"""Configuration management for stategraph using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".stategraph.json"


class OutputFormat(str, Enum):
    """Diagram output formats."""
    DOT = "dot"
    PLANTUML = "plantuml"
    MERMAID = "mermaid"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class RenderConfig(BaseModel):
    """Rendering configuration section."""
    default_format: OutputFormat = Field(alias="defaultFormat", default=OutputFormat.DOT)
    graph_name: str = Field(alias="graphName", default="Automata")
    pad: float = 0.25
    nodesep: float = 0.75
    ranksep: float = 1.0

    @field_validator("graph_name")
    @classmethod
    def validate_graph_name(cls, v):
        if not v.isidentifier():
            raise ValueError(f"graph_name must be an identifier, got: {v!r}")
        return v

    @field_validator("pad", "nodesep", "ranksep")
    @classmethod
    def validate_spacing(cls, v):
        if v < 0:
            raise ValueError("graph spacing values must be >= 0")
        return v

    model_config = ConfigDict(use_enum_values=True, validate_default=True, populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    dir: str = "."


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Diagrams go to stdout, so only warnings are logged unless asked.
    """
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class StategraphConfig(BaseModel):
    """Complete stategraph configuration model."""
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> StategraphConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .stategraph.json

    Returns:
        StategraphConfig: Loaded and validated configuration

    Raises:
        ValueError: If the configuration file is not valid JSON or holds
                    invalid values
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if not config_path or not config_path.exists():
        return create_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    try:
        return StategraphConfig(**config_data)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .stategraph.json by searching up the directory tree.

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


def create_default_config() -> StategraphConfig:
    """Create default configuration."""
    return StategraphConfig()
