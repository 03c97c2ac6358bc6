"""Generator settings.

Loaded from ``STRUCTSCHEMA_``-prefixed environment variables (and a local
``.env`` file) by the CLI. Command line options take precedence. The
pipeline functions themselves receive settings explicitly and never read
the environment.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeneratorSettings(BaseSettings):
    """Settings for schema generation.

    Example:
        >>> # From environment
        >>> settings = GeneratorSettings()
        >>>
        >>> # Explicit
        >>> settings = GeneratorSettings(output_dir="schemas", strip_json_options=True)
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTSCHEMA_",
        env_file=".env",
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("."),
        description="Directory the schema file is written to",
    )
    strip_json_options: bool = Field(
        default=False,
        description="Drop ',omitempty'-style suffixes from json tag names",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics written to stderr",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level
