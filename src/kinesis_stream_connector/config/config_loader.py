"""Configuration loader utility for kinesis-stream-connector.

This module loads connector configuration from:
- JSON and YAML files
- Dictionary objects

Sources are merged with priority order:
File configuration > Base configuration
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading configuration from multiple sources."""

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file.

        Args:
            file_path: Path to the configuration file.

        Returns:
            Dictionary containing the configuration data.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file format is not supported or invalid.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read().strip()

            if not content:
                return {}

            if file_path.suffix.lower() in ['.yml', '.yaml']:
                data = yaml.safe_load(content) or {}
            elif file_path.suffix.lower() == '.json':
                data = json.loads(content)
            else:
                # Unknown extension, try JSON first
                try:
                    data = json.loads(content)
                except json.JSONDecodeError:
                    data = yaml.safe_load(content) or {}

        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid configuration file format: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file must contain a mapping, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries.

        Later configurations override earlier ones for matching keys.
        Nested dictionaries are merged recursively.
        """
        result = {}

        for config in configs:
            if not config:
                continue

            result = ConfigLoader._deep_merge(result, config)

        return result

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def load_config(
        config_file: Optional[Union[str, Path]] = None,
        base_config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Load configuration from a file layered over a base dictionary.

        Args:
            config_file: Path to configuration file (JSON or YAML).
            base_config: Base configuration dictionary.

        Returns:
            Merged configuration dictionary.

        Raises:
            FileNotFoundError: If config_file is specified but doesn't exist.
            ValueError: If config_file has invalid format.
        """
        configs = []

        if base_config:
            configs.append(base_config)

        if config_file:
            try:
                file_config = ConfigLoader.load_from_file(config_file)
                configs.append(file_config)
                logger.info(f"Loaded configuration from file: {config_file}")
            except Exception as e:
                logger.error(f"Failed to load configuration file {config_file}: {e}")
                raise

        return ConfigLoader.merge_configs(*configs)
