"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- IndexingConfig: Fallback keys, recency windows and bucket sizes for list indexes
- LabelsConfig: Display text for the recency group keys
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("libview.log")
    real_time_debug: bool = True


class IndexingConfig(BaseModel):
    """Defaults handed to the indexing strategies and comparators."""

    text_fallback: str = "_"
    other_glyph: str = "⌘"
    date_fallback_label: str = "undefined"
    year_fallback: str = "0000"

    # Recency windows; week and month count back from the start of today
    today_hours: float = 24.0
    last_week_days: float = 7.0
    last_month_days: float = 30.0

    digits_bucket_size: int = 10


class LabelsConfig(BaseModel):
    """Display text for group keys that are not shown verbatim."""

    today: str = "Today"
    last_week: str = "Last week"
    last_month: str = "Last month"
    undefined: str = "Unknown date"

    def resolve(self, key: Any) -> str:
        """Return display text for a group key, or the key itself."""
        labels = {
            "today": self.today,
            "last-week": self.last_week,
            "last-month": self.last_month,
            "undefined": self.undefined,
        }
        return labels.get(key, str(key)) if isinstance(key, str) else str(key)


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, FILE_LOG_LEVEL, LOG_FILE
    - Nested: LOGGING__CONSOLE_LEVEL, INDEXING__TEXT_FALLBACK, LABELS__TODAY

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    indexing: IndexingConfig = IndexingConfig()
    labels: LabelsConfig = LabelsConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Handles flat env vars (CONSOLE_LOG_LEVEL) and maps them to the
        nested structure expected by the models (logging.console_level).
        """
        if not isinstance(data, dict):
            return data

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                data.setdefault("logging", {})[field_key] = data.pop(env_key)

        return data


# Singleton instance for application use
settings = Settings()


def get_config(key: str, default: Any = None) -> Any:
    """Flat accessor for nested settings.

    Accepts either a dotted path (``"indexing.text_fallback"``) or an
    upper-case flat name (``"INDEXING_TEXT_FALLBACK"``).

    Args:
        key: Setting name
        default: Value returned when the setting does not exist

    Returns:
        The configured value or ``default``
    """
    if "." in key:
        section_name, _, field_name = key.partition(".")
    else:
        section_name, _, field_name = key.lower().partition("_")

    section = getattr(settings, section_name, None)
    if section is None:
        return default
    if not field_name:
        return section
    return getattr(section, field_name, default)
