"""
Centralized logging configuration for RankSet.

Output is rendered by structlog and emitted through the standard library
``logging`` module, so the ``logging`` section of the merged configuration
(``LoggingParams``) controls both the level and the renderer. Loggers handed
out here are lazy proxies: they pick up whatever configuration is active
when they first log, not when they are created.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from ..config.defaults import LoggingParams


def _build_processors(params: LoggingParams) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if params.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if params.format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(params: Optional[LoggingParams] = None) -> None:
    """
    Configure structlog and the root stdlib logger.

    Args:
        params: Logging parameters; built-in defaults when omitted
    """
    params = params or LoggingParams()
    log_level = getattr(logging, params.level.upper())

    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    # basicConfig is a no-op once handlers exist, the level must still apply
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=_build_processors(params),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: dict[str, Any]) -> LoggingParams:
    """Configure logging from the ``logging`` section of a merged config."""
    section = settings.get("logging") or {}
    defaults = LoggingParams()
    params = LoggingParams(
        level=section.get("level", defaults.level),
        format_json=section.get("format_json", defaults.format_json),
        include_timestamp=section.get("include_timestamp", defaults.include_timestamp),
    )
    configure_logging(params)
    return params


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a lazily configured structlog logger.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_ranking_logger(name: str) -> FilteringBoundLogger:
    """Get a lazy logger carrying ``subsystem="ranking"``."""
    return structlog.get_logger(name, subsystem="ranking")


def log_ranking(
    logger: FilteringBoundLogger,
    strategy: str,
    size: int,
    top_key: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed ranking with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Name of the ranking strategy used
        size: Number of items ranked
        top_key: Key of the highest weighted item, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy=strategy,
        size=size,
        top_key=top_key,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Ranking complete")
