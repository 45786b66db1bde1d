"""YAML configuration loader with environment variable overrides.

Configuration is layered (later layers win):

  1. config/radioart.yaml -- static defaults checked into the repo
  2. .env file            -- local developer overrides (not committed)
  3. Environment vars     -- set at deploy time

The YAML file is flat: its keys are ``Settings`` field names.
"""

from pathlib import Path

import yaml

from radioart.config.settings import Settings
from radioart.utils.errors import ConfigurationError


def load_settings(path: str | Path = "config/radioart.yaml") -> Settings:
    """Load YAML defaults and overlay environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is not an
            error; the environment and built-in defaults are used alone.

    Returns:
        Fully resolved Settings.

    Raises:
        ConfigurationError: If the file cannot be parsed or is not a mapping.
    """
    config_path = Path(path)
    yaml_config: dict = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Cannot read {config_path}: {exc}") from exc

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping at the top level")

    # Fields set from env/.env are in model_fields_set; those beat YAML.
    env_settings = Settings()
    env_overrides = env_settings.model_dump(include=env_settings.model_fields_set)

    known = {k: v for k, v in yaml_config.items() if k in Settings.model_fields}
    return Settings(**{**known, **env_overrides})
