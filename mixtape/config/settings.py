"""Configuration management using Pydantic Settings.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels and optional log file
- EngineConfig: Output defaults and diagnostics for the change engine

Environment variables use the ``MIXTAPE_`` prefix with ``__`` as the nested
delimiter, e.g. ``MIXTAPE_LOGGING__CONSOLE_LEVEL=DEBUG`` or
``MIXTAPE_ENGINE__VERIFY_INDEX=true``.
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None


class EngineConfig(BaseModel):
    """Change engine defaults."""

    default_output: Path = Path("./output.json")
    # Re-derive the lookup index after each apply and compare
    verify_index: bool = False


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    The .env file is loaded automatically when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="MIXTAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    engine: EngineConfig = EngineConfig()


# Singleton instance for application use
settings = Settings()
