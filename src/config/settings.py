"""Configuration management using Pydantic Settings.

Type-safe configuration with automatic environment variable loading and
validation. The configuration is organized into logical groups:
- LoggingConfig: Logging levels and log file location
- SearchConfig: Result limits, history sizes and default file locations
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("nextsound.log")
    real_time_debug: bool = True


class SearchConfig(BaseModel):
    """Catalog search and quick-find configuration."""

    # None means "return every matching track"
    default_limit: int | None = Field(default=None, ge=0)
    quick_find_limit: int = Field(default=8, ge=0)

    # Quick-find history caps
    max_recent_queries: int = Field(default=10, ge=1)
    max_recent_items: int = Field(default=20, ge=1)
    recent_items_shown: int = Field(default=5, ge=1)

    catalog_path: Path = Path("data/catalog.json")
    history_path: Path = Path("data/search_history.json")


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables use nested naming (LOGGING__CONSOLE_LEVEL,
    SEARCH__CATALOG_PATH). Flat names (CONSOLE_LOG_LEVEL, SEARCH_CATALOG_PATH)
    are accepted in the .env file and as keyword arguments.

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = LoggingConfig()
    search: SearchConfig = SearchConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat .env keys and keyword arguments onto the nested structure."""
        if not isinstance(data, dict):
            return data

        transformed = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        search_mapping = {
            "search_default_limit": "default_limit",
            "search_quick_find_limit": "quick_find_limit",
            "search_max_recent_queries": "max_recent_queries",
            "search_max_recent_items": "max_recent_items",
            "search_catalog_path": "catalog_path",
            "search_history_path": "history_path",
        }
        for env_key, field_key in search_mapping.items():
            if env_key in data:
                transformed.setdefault("search", {})[field_key] = data.pop(env_key)

        data.update(transformed)

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_FLAT_KEY_MAP = {
    # Logging settings
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    # Search settings
    "SEARCH_DEFAULT_LIMIT": lambda: settings.search.default_limit,
    "SEARCH_QUICK_FIND_LIMIT": lambda: settings.search.quick_find_limit,
    "SEARCH_MAX_RECENT_QUERIES": lambda: settings.search.max_recent_queries,
    "SEARCH_MAX_RECENT_ITEMS": lambda: settings.search.max_recent_items,
    "SEARCH_CATALOG_PATH": lambda: settings.search.catalog_path,
    "SEARCH_HISTORY_PATH": lambda: settings.search.history_path,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Args:
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default

    Example:
        >>> limit = get_config("SEARCH_QUICK_FIND_LIMIT", 8)
    """
    if key in _FLAT_KEY_MAP:
        return _FLAT_KEY_MAP[key]()

    return default
