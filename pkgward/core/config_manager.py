"""Configuration manager for loading and saving app settings."""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..utils.constants import (
    CONFIG_FILE,
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_PRIVILEGE_COMMAND,
    SERVICE_FILE_SUFFIX,
)
from ..utils.privilege import PrivilegeHelper
from .package_manager import BACKENDS

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages application settings stored in a YAML file."""

    CONFIG_VERSION = "1.0"

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_file: Path of the YAML config file, defaults to ~/.config/pkgward/config.yaml
        """
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.settings: Dict[str, Any] = {}
        self._ensure_default_settings()

    def _ensure_config_dir(self):
        """Create the config directory if it doesn't exist."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

    def load_config(self) -> bool:
        """Load configuration from file.

        Returns:
            True if config loaded successfully, False otherwise
        """
        if not self.config_file.exists():
            logger.info("Config file not found, using defaults")
            self._load_defaults()
            return False

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)

            if not data:
                logger.warning("Empty config file, using defaults")
                self._load_defaults()
                return False

            if not self._validate_config(data):
                logger.error("Invalid config file, using defaults")
                self._load_defaults()
                return False

            self.settings = dict(data.get("settings", {}))
            self._ensure_default_settings()

            logger.info(f"Loaded settings from {self.config_file}")
            return True

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            self._load_defaults()
            return False
        except OSError as e:
            logger.error(f"Failed to read config: {e}")
            self._load_defaults()
            return False

    def save_config(self) -> bool:
        """Save configuration to file.

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            self._ensure_config_dir()

            # Create backup if config exists
            if self.config_file.exists():
                backup_file = self.config_file.with_suffix('.yaml.bak')
                shutil.copy2(self.config_file, backup_file)
                logger.debug(f"Created backup at {backup_file}")

            data = {
                "version": self.CONFIG_VERSION,
                "settings": self.settings
            }

            # Write to temp file first (atomic write)
            temp_file = self.config_file.with_suffix('.yaml.tmp')
            with open(temp_file, 'w') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)

            temp_file.replace(self.config_file)

            logger.info(f"Saved settings to {self.config_file}")
            return True

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to save config: {e}")
            return False

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def _validate_config(self, data: dict) -> bool:
        """Validate configuration data structure.

        Args:
            data: Configuration dictionary

        Returns:
            True if valid, False otherwise
        """
        if not isinstance(data, dict):
            logger.error("Config must be a dictionary")
            return False

        if "version" not in data:
            logger.warning("Config missing version, assuming valid")

        settings = data.get("settings", {})
        if not isinstance(settings, dict):
            logger.error("Settings must be a dictionary")
            return False

        package_manager = settings.get("package_manager", DEFAULT_PACKAGE_MANAGER)
        if not isinstance(package_manager, str) or (package_manager != "auto" and package_manager not in BACKENDS):
            logger.error(f"Invalid package_manager: {package_manager}")
            return False

        privilege_command = settings.get("privilege_command", DEFAULT_PRIVILEGE_COMMAND)
        if privilege_command is None:
            # An empty YAML value means no escalation
            settings["privilege_command"] = ""
        elif not PrivilegeHelper.is_valid_command(privilege_command):
            logger.error(f"Invalid privilege_command: {privilege_command}")
            return False

        suffix = settings.get("service_suffix", SERVICE_FILE_SUFFIX)
        if not isinstance(suffix, str) or not suffix:
            logger.error("service_suffix must be a non-empty string")
            return False

        return True

    def _load_defaults(self):
        """Load default configuration."""
        self.settings = {}
        self._ensure_default_settings()
        logger.info("Loaded default configuration")

    def _ensure_default_settings(self):
        """Ensure all default settings exist."""
        defaults = {
            "package_manager": DEFAULT_PACKAGE_MANAGER,
            "privilege_command": DEFAULT_PRIVILEGE_COMMAND,
            "service_suffix": SERVICE_FILE_SUFFIX,
        }

        for key, value in defaults.items():
            if key not in self.settings:
                self.settings[key] = value
