"""
YAML loader for chart definitions and chart defaults.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Union

from crcharts.exceptions import ConfigError


class ConfigLoader:
    """
    Load and parse YAML chart configuration files.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize config loader.

        Parameters
        ----------
        config_path : str or Path
            Path to YAML configuration file
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from the YAML file.

        Returns
        -------
        dict
            Configuration dictionary (empty for an empty file)

        Raises
        ------
        ConfigError
            If the file is not valid YAML
        """
        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        return config or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Parameters
        ----------
        key : str
            Configuration key, nested keys joined with dots
            (e.g. ``'defaults.min_height'``)
        default : Any
            Value returned when the key is missing

        Returns
        -------
        Any
            Configuration value
        """
        value = self.load()

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @staticmethod
    def save(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
        """
        Save a chart definition to a YAML file.

        Parameters
        ----------
        config : dict
            Configuration dictionary
        config_path : str or Path
            Destination path; parent directories are created
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
