"""Configuration module for NextSound search.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access function

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

log_startup_info() -> None
    Log the active configuration at debug level

Usage:
------
```python
from src.config import settings
limit = settings.search.quick_find_limit

from src.config import get_logger
logger = get_logger(__name__)
logger.info("Starting search")
```
"""

from .logging import get_logger, log_startup_info, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "log_startup_info",
    "settings",
    "setup_loguru_logger",
]
