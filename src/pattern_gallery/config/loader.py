"""Configuration loading from defaults, files and the environment."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pattern_gallery.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from pattern_gallery.config.utils.env_expansion import expand_config_env_vars
from pattern_gallery.domain.core.exceptions import ConfigurationError


class ConfigurationLoader:
    """
    Loads raw configuration dictionaries.

    Sources are applied in order, later ones winning:
    defaults, configuration file (JSON or YAML), environment overrides.
    """

    def load(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load and merge configuration from all sources."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            file_config = self.load_file(config_file)
            self.merge(config, file_config)

        config = expand_config_env_vars(config)
        self.apply_env_overrides(config)
        return config

    def load_file(self, config_file: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file."""
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in (".yml", ".yaml"):
                    import yaml

                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        return data

    def merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge ``override`` into ``base`` in place."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self.merge(base[key], value)
            else:
                base[key] = value
        return base

    def apply_env_overrides(self, config: Dict[str, Any]) -> None:
        """Apply ``PATTERN_GALLERY_*`` environment overrides."""
        for env_name, (section, key, cast) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None:
                continue
            try:
                value = cast(raw)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid value for {env_name}: {raw!r}", missing_fields=[f"{section}.{key}"]
                )
            config.setdefault(section, {})[key] = value
