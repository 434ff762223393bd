"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, reload_config, Config, SearchConfig
from .logger import get_logger
from .exceptions import (
    SchoolSearchError,
    ConfigurationError,
    CatalogError,
    SearchError
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "SearchConfig",
    "get_logger",
    "SchoolSearchError",
    "ConfigurationError",
    "CatalogError",
    "SearchError"
]
