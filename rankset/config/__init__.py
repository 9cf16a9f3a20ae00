"""Configuration defaults, loading and validation."""

from .defaults import DefaultConfig, LoggingParams, RankingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "RankingParams",
    "ValidationError",
    "get_default_config",
]
