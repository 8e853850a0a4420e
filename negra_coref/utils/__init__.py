"""Configuration and logging helpers."""

from .config import ConfigManager, DEFAULT_CONFIG
from .logging import PACKAGE_LOGGER, setup_logging

__all__ = ["ConfigManager", "DEFAULT_CONFIG", "PACKAGE_LOGGER", "setup_logging"]
