"""Config package facade."""

from config.defaults import DEFAULT_EXTENSIONS, DEFAULT_REMOVAL_PATTERNS
from config.loader import config_from_dict, load_config
from config.models import (
    CleanerConfig,
    Config,
    JellyfinConfig,
    LoggingConfig,
    RunConfig,
    ScanConfig,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_REMOVAL_PATTERNS",
    "CleanerConfig",
    "Config",
    "JellyfinConfig",
    "LoggingConfig",
    "RunConfig",
    "ScanConfig",
    "config_from_dict",
    "load_config",
]
