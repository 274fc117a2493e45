"""
Configuration loading from defaults, the YAML config file, and the environment
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

from raur import config as defaults
from raur.errors import ConfigError


class ConfigLoader:
    """
    Loads configuration from module defaults and an optional YAML file.
    CLI flags are applied on top by the caller.
    """

    # Keys accepted in the config file, with the type each must have
    KNOWN_KEYS = {
        'aur_url': str,
        'request_timeout': (int, float),
        'clone_timeout': (int, float),
        'makepkg_timeout': (int, float, type(None)),
        'skip_pgp_check': bool,
        'debug': bool,
        'log_file': str,
        'workspace_prefix': str,
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize ConfigLoader

        Args:
            config_file: Path to YAML config (defaults to raur.config.CONFIG_FILE)
            logger: Optional logger instance
        """
        self.config_file = Path(config_file or defaults.CONFIG_FILE).expanduser()
        self.logger = logger or logging.getLogger(__name__)

    def default_config(self) -> Dict[str, Any]:
        """Configuration built only from raur.config"""
        return {
            'aur_url': defaults.AUR_URL,
            'request_timeout': defaults.REQUEST_TIMEOUT,
            'clone_timeout': defaults.CLONE_TIMEOUT,
            'makepkg_timeout': defaults.MAKEPKG_TIMEOUT,
            'skip_pgp_check': defaults.SKIP_PGP_CHECK,
            'debug': defaults.DEBUG_MODE,
            'log_file': defaults.LOG_FILE,
            'workspace_prefix': defaults.WORKSPACE_PREFIX,
        }

    def read_file(self) -> Dict[str, Any]:
        """
        Read overrides from the YAML config file

        Returns:
            Mapping of recognized keys; empty if the file does not exist

        Raises:
            ConfigError: File unreadable, not YAML, or a value has the wrong type
        """
        if not self.config_file.is_file():
            return {}

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {self.config_file}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.config_file} must contain a mapping")

        overrides = {}
        for key, value in data.items():
            expected = self.KNOWN_KEYS.get(key)
            if expected is None:
                self.logger.warning(f"⚠️ Ignoring unknown config key '{key}' in {self.config_file}")
                continue
            # bool is an int subclass; don't let `true` pass as a timeout
            if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
                raise ConfigError(f"Config key '{key}' in {self.config_file} has invalid value {value!r}")
            overrides[key] = value

        return overrides

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration: defaults, then config file overrides

        Returns:
            Dictionary with configuration values
        """
        config = self.default_config()
        config.update(self.read_file())
        config['aur_url'] = config['aur_url'].rstrip('/')

        self.logger.debug("🔧 Configuration loaded:")
        self.logger.debug(f"   Config file: {self.config_file} ({'found' if self.config_file.is_file() else 'absent'})")
        self.logger.debug(f"   AUR URL: {config['aur_url']}")
        self.logger.debug(f"   Skip PGP check: {config['skip_pgp_check']}")
        self.logger.debug(f"   Debug mode: {config['debug']}")

        return config

