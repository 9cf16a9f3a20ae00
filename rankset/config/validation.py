"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_STRATEGIES = ("selection", "sorted")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_ranking_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ranking parameters."""
        errors = []

        if "strategy" in params:
            value = params["strategy"]
            if value not in VALID_STRATEGIES:
                errors.append(ValidationError(
                    field="ranking.strategy",
                    message=f"Must be one of {', '.join(VALID_STRATEGIES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params:
                value = params[flag]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=f"logging.{flag}",
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("ranking", "logging"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        ranking = config.get("ranking")
        if isinstance(ranking, dict):
            errors.extend(ConfigValidator.validate_ranking_params(ranking))

        logging_params = config.get("logging")
        if isinstance(logging_params, dict):
            errors.extend(ConfigValidator.validate_logging_params(logging_params))

        return errors
