"""Default configuration parameters for RankSet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingParams:
    """Ranking extraction parameters."""
    strategy: str = "selection"                      # "selection" or "sorted"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ranking: RankingParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ranking=RankingParams(),
        logging=LoggingParams(),
    )
