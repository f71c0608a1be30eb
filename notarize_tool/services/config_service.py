"""Input collection service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import ALL_INPUTS, ENV_CONFIG_PATH, ENV_INPUT_PREFIX, PROJECT_CONFIG_FILE

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    """Environment variable carrying an input, e.g. INPUT_PRODUCT-PATH"""
    return f"{ENV_INPUT_PREFIX}{name.replace(' ', '_').upper()}"


class ConfigService:
    """Collects run inputs from CLI overrides, the environment and YAML

    Precedence, highest first:
        1. Explicit overrides (CLI options)
        2. INPUT_* environment variables
        3. The ``inputs`` mapping of the YAML configuration file
    """

    def __init__(self,
                 config_path: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 search_dir: Optional[Path] = None):
        """
        Initialize config service

        Args:
            config_path: Explicit YAML file (must exist)
            environ: Environment to read (default: os.environ)
            search_dir: Directory searched for .notarize-tool.yaml (default: cwd)
        """
        self.environ = environ if environ is not None else os.environ
        self.search_dir = Path(search_dir) if search_dir else Path.cwd()
        self.config_path = self._resolve_config_path(config_path)

    def _resolve_config_path(self, config_path: Optional[Path]) -> Optional[Path]:
        if config_path is None and self.environ.get(ENV_CONFIG_PATH):
            config_path = Path(self.environ[ENV_CONFIG_PATH])

        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigError(f"Configuration file not found: {config_path}")
            return config_path

        default_path = self.search_dir / PROJECT_CONFIG_FILE
        return default_path if default_path.exists() else None

    def load_file(self) -> Dict[str, Any]:
        """Load inputs from the YAML configuration file

        Returns:
            Inputs mapping, empty when there is no file
        """
        if self.config_path is None:
            return {}

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {self.config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration file {self.config_path}: expected a mapping")

        inputs = data.get('inputs') or {}
        if not isinstance(inputs, dict):
            raise ConfigError(f"Invalid configuration file {self.config_path}: 'inputs' must be a mapping")

        for key in inputs:
            if key not in ALL_INPUTS:
                logger.warning(f"Ignoring unknown input '{key}' in {self.config_path}")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return {k: v for k, v in inputs.items() if k in ALL_INPUTS and v is not None}

    def get_input(self, name: str) -> Optional[str]:
        """Read a single input from the environment, trimmed"""
        value = self.environ.get(input_env_name(name))
        if value is None:
            return None
        value = value.strip()
        return value or None

    def env_inputs(self) -> Dict[str, str]:
        """All inputs present in the environment"""
        inputs = {}
        for name in ALL_INPUTS:
            value = self.get_input(name)
            if value is not None:
                inputs[name] = value
        return inputs

    def collect(self, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge all input sources

        Args:
            overrides: Values that win over every other source; None values are ignored

        Returns:
            Inputs keyed by input name
        """
        inputs = self.load_file()
        inputs.update(self.env_inputs())
        if overrides:
            inputs.update({k: v for k, v in overrides.items() if v is not None})
        return inputs
