"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "rankset.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file, if present."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Could not parse {self.config_file}: {e}",
                source=str(self.config_file),
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{self.config_file} must contain a mapping at top level",
                source=str(self.config_file),
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Configuration file
        3. Global defaults (lowest priority)
        """
        config = _deep_merge(asdict(self.defaults), self.load_file_config())
        return _deep_merge(config, overrides or {})

    def load(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Merge configuration and raise ConfigurationError if it is invalid."""
        config = self.merge_config(overrides)
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors,
                source=str(self.config_file),
            )
        return config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``override``, merging nested mappings."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged
