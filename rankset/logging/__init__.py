"""
Logging configuration and utilities for RankSet.
"""
from .config import (
    configure_from_settings,
    configure_logging,
    get_logger,
    get_ranking_logger,
    log_ranking,
)

__all__ = [
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "get_ranking_logger",
    "log_ranking",
]
