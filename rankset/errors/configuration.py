"""Configuration error raised when merged settings fail validation."""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Invalid configuration file or values."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 source: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []
        self.source = source
        self.recoverable = False
