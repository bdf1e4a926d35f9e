"""
Configuration Manager for the Single-Page Archiver

Loads the optional YAML/JSON settings file and applies environment
variable overrides. Only ambient settings (logging) live here; archiving
options always come from the command line.
"""

import os
import json
import yaml
from typing import Dict, Any, Optional, Mapping
from dataclasses import dataclass
from pathlib import Path

from archiver.core.base import ConfigurationError
from archiver.core.logging import parse_size


DEFAULT_CONFIG_PATH = "~/.config/archiver/config.yaml"
ENV_VAR_CONFIG = "ARCHIVER_CONFIG"
ENV_VAR_LOG_LEVEL = "LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging system configuration"""
    level: str = "INFO"
    file: Optional[str] = None
    max_size: str = "10MB"
    backup_count: int = 3


class ConfigManager:
    """
    Configuration manager with support for YAML/JSON files
    and environment variable integration.
    """

    def __init__(self, config_path: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.config_path = (
            config_path
            or self.environ.get(ENV_VAR_CONFIG)
            or DEFAULT_CONFIG_PATH
        )
        self._config_data: Dict[str, Any] = {}
        self.logging_config: Optional[LoggingConfig] = None

    def load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from file with environment variable override"""
        if config_path:
            self.config_path = config_path

        config_file = Path(self.config_path).expanduser()

        if not config_file.exists():
            self._config_data = self._get_default_config()
        else:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    if config_file.suffix.lower() == '.json':
                        self._config_data = json.load(f)
                    else:  # Assume YAML
                        self._config_data = yaml.safe_load(f) or {}
            except (OSError, ValueError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}")

        if not isinstance(self._config_data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a mapping")

        self._apply_env_overrides()
        self._parse_config()

        return self._config_data

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration dictionary"""
        return {
            'logging': {
                'level': 'INFO',
                'file': None,
                'max_size': '10MB',
                'backup_count': 3
            }
        }

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides"""
        if self.environ.get(ENV_VAR_LOG_LEVEL):
            self._config_data.setdefault('logging', {})['level'] = self.environ[ENV_VAR_LOG_LEVEL]

    def _parse_config(self) -> None:
        """Parse configuration into dataclass objects"""
        logging_data = self._config_data.get('logging') or {}
        if not isinstance(logging_data, dict):
            raise ConfigurationError("'logging' section must be a mapping")

        level = str(logging_data.get('level', 'INFO')).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {level}")

        try:
            backup_count = int(logging_data.get('backup_count', 3))
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Invalid backup_count: {logging_data.get('backup_count')!r}"
            )

        max_size = str(logging_data.get('max_size', '10MB'))
        try:
            parse_size(max_size)
        except ValueError:
            raise ConfigurationError(f"Invalid max_size: {max_size!r}")

        self.logging_config = LoggingConfig(
            level=level,
            file=logging_data.get('file'),
            max_size=max_size,
            backup_count=backup_count
        )
