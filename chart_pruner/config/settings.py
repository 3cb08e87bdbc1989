"""
Chart Pruner - Configuration

The root directory and the log category are fixed values. Only the logging
level and output format are read from the environment, through the variable
names carried by PrunerConfig.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from chart_pruner.config.exceptions import ConfigurationError

DEFAULT_ROOT_PATH = Path("/chonko-1/chartdata/USGS-Topo/28-JAN-2023")
DEFAULT_LOG_ENV_VAR = "CHARTS_LOG"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMATS = {"json", "console"}


class PrunerConfig(BaseModel):
    """Configuration for a prune run."""

    root_path: Path = Field(
        default=DEFAULT_ROOT_PATH,
        description="Directory whose chart tiles are deduplicated",
    )
    log_env_var: str = Field(
        default=DEFAULT_LOG_ENV_VAR,
        description="Environment variable holding the log level",
    )
    log_format_env_var: str = Field(
        default="LOG_FORMAT",
        description="Environment variable selecting json or console output",
    )


class LoggingSettings(BaseModel):
    """Logging settings resolved from the environment."""

    level: str = "INFO"
    log_format: str = "console"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and check the level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {sorted(LOG_LEVELS)}, got: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        log_format = v.strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(LOG_FORMATS)}, got: {v}")
        return log_format

    @property
    def json_format(self) -> bool:
        return self.log_format == "json"


def load_logging_settings(config: PrunerConfig) -> LoggingSettings:
    """
    Read logging settings from the environment.

    Args:
        config: Pruner configuration naming the environment variables

    Returns:
        LoggingSettings: Validated level and format

    Raises:
        ConfigurationError: If a variable holds an unknown level or format
    """
    level = os.getenv(config.log_env_var, "INFO")
    log_format = os.getenv(config.log_format_env_var, "console")

    # Empty variable means "not set"
    try:
        return LoggingSettings(
            level=level or "INFO",
            log_format=log_format or "console",
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid logging settings from {config.log_env_var}/"
            f"{config.log_format_env_var}: {e}"
        ) from e
