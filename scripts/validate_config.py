#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rankset.config.loader import ConfigLoader
from rankset.config.validation import ConfigValidator, ValidationError
from rankset.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration found in ``config_dir``."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating {loader.config_file}...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
