"""Configuration module for Mixtape.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from mixtape.config import settings
output = settings.engine.default_output

from mixtape.config import get_logger
logger = get_logger(__name__)
logger.info("Reading catalog")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import settings

__all__ = [
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
