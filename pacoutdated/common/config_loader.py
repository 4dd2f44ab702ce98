"""
Config Loader Module - Handles configuration loading and validation
"""

import math
import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .. import config as config_module
from .errors import ConfigMalformedError, ConfigMissingError

logger = logging.getLogger(__name__)

TRUTHY = ('1', 'true', 'yes', 'on')

# Environment variable -> configuration key
ENV_OVERRIDES = {
    'PACOUTDATED_PACMAN_CONF': 'pacman_conf',
    'PACOUTDATED_LOCAL_DB': 'local_db_dir',
    'PACOUTDATED_TIMEOUT': 'fetch_timeout',
    'PACOUTDATED_SKIP_UNREACHABLE': 'skip_unreachable_repos',
    'PACOUTDATED_ARCH': 'arch',
    'PACOUTDATED_LOG_FILE': 'log_file',
    'DEBUG': 'debug_mode',
}

BOOLEAN_KEYS = ('skip_unreachable_repos', 'debug_mode')
PATH_KEYS = ('pacman_conf', 'local_db_dir')
OPTIONAL_STRING_KEYS = ('arch', 'log_file')


class ConfigLoader:
    """Handles configuration loading and validation"""

    @staticmethod
    def load_defaults() -> Dict[str, Any]:
        """Load defaults from the config module"""
        return {
            'pacman_conf': getattr(config_module, 'PACMAN_CONF_PATH', '/etc/pacman.conf'),
            'local_db_dir': getattr(config_module, 'LOCAL_DB_DIR', '/var/lib/pacman/local'),
            'fetch_timeout': getattr(config_module, 'FETCH_TIMEOUT', 30),
            'skip_unreachable_repos': getattr(config_module, 'SKIP_UNREACHABLE_REPOS', False),
            'debug_mode': getattr(config_module, 'DEBUG_MODE', False),
            'log_file': getattr(config_module, 'LOG_FILE', None),
            'arch': getattr(config_module, 'ARCH', None),
        }

    @staticmethod
    def load_yaml_config(config_file) -> Dict[str, Any]:
        """
        Load settings from a YAML file

        Args:
            config_file: Path of a YAML file holding a top-level mapping

        Returns:
            Dictionary of recognised settings

        Raises:
            ConfigMissingError: the file does not exist
            ConfigMalformedError: the file is not valid YAML or not a mapping
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigMissingError(f"settings file does not exist: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigMalformedError(f"invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigMalformedError(f"{path} must contain a mapping of settings")

        known = ConfigLoader.load_defaults().keys()
        settings = {}
        for key, value in data.items():
            if key in known:
                settings[key] = value
            else:
                logger.warning(f"⚠️ Ignoring unknown setting '{key}' in {path}")

        logger.debug(f"Loaded {len(settings)} settings from {path}")
        return settings

    @staticmethod
    def load_environment_config() -> Dict[str, Any]:
        """Load configuration from environment variables"""
        settings = {}
        for var, key in ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value is None or value.strip() == '':
                continue
            settings[key] = value.strip()
        return settings

    @staticmethod
    def normalize(settings: Dict[str, Any]) -> Dict[str, Any]:
        """Coerce string values coming from the environment or YAML"""
        for key in BOOLEAN_KEYS:
            value = settings.get(key)
            if isinstance(value, str):
                settings[key] = value.lower() in TRUTHY
            else:
                settings[key] = bool(value)

        for key in PATH_KEYS:
            value = settings.get(key)
            if not isinstance(value, str) or not value:
                raise ConfigMalformedError(f"{key} must be a path, got {value!r}")

        for key in OPTIONAL_STRING_KEYS:
            value = settings.get(key)
            if value is not None and (not isinstance(value, str) or not value):
                raise ConfigMalformedError(f"{key} must be a string, got {value!r}")

        settings['fetch_timeout'] = ConfigLoader._parse_timeout(settings['fetch_timeout'])

        return settings

    @staticmethod
    def _parse_timeout(raw) -> float:
        """Accept a positive number of seconds, int or float"""
        value = raw
        if isinstance(raw, str):
            try:
                value = int(raw)
            except ValueError:
                try:
                    value = float(raw)
                except ValueError:
                    value = None

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigMalformedError(f"fetch_timeout must be a number of seconds, got {raw!r}")
        if not math.isfinite(value) or value <= 0:
            raise ConfigMalformedError(f"fetch_timeout must be positive, got {value!r}")
        return value

    @staticmethod
    def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the effective configuration.

        Precedence (lowest to highest):
        1. config.py defaults
        2. YAML settings file, when given
        3. Environment variables
        """
        settings = ConfigLoader.load_defaults()

        if config_file:
            settings.update(ConfigLoader.load_yaml_config(config_file))

        settings.update(ConfigLoader.load_environment_config())

        return ConfigLoader.normalize(settings)


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Shortcut for ConfigLoader.load_config"""
    return ConfigLoader.load_config(config_file)
