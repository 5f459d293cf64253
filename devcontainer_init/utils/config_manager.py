"""Configuration file management utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from ..models.config import DevcontainerConfig
from ..services.exceptions import ConfigError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigManager:
    """Loads and saves generation configs as JSON or YAML files."""

    def __init__(self, config_file: Path):
        """Initialize config manager."""
        self.config_file = Path(config_file)

    @property
    def is_yaml(self) -> bool:
        return self.config_file.suffix.lower() in YAML_SUFFIXES

    def _read_data(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            raise ConfigError(f"Configuration file not found: {self.config_file}")

        try:
            text = self.config_file.read_text()
            data = yaml.safe_load(text) if self.is_yaml else json.loads(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_file} must contain a mapping of settings")
        return data

    def load_config(self) -> DevcontainerConfig:
        """Load and validate the configuration file."""
        data = self._read_data()
        try:
            config = DevcontainerConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}:\n{e}") from e

        logger.debug(f"Loaded configuration from {self.config_file}")
        return config

    def save_config(self, config: DevcontainerConfig) -> None:
        """Save a configuration so the run can be replayed with --config."""
        data = config.model_dump(mode="json", by_alias=True)
        if self.is_yaml:
            text = yaml.safe_dump(data, sort_keys=False)
        else:
            text = json.dumps(data, indent=2) + "\n"

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(text)
        except OSError as e:
            raise ConfigError(f"Could not write {self.config_file}: {e}") from e

        logger.info(f"Saved configuration to {self.config_file}")
