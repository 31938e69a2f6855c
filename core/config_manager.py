#!/usr/bin/env python3
"""
Configuration Manager for ProjectLauncher

This module provides a JSON-based configuration storage system with a
QSettings-compatible interface.

The configuration file is stored in a user-specific location:
- Windows: C:\\Users\\<username>\\AppData\\Local\\ProjectLauncher\\config.json
- Linux: ~/.config/ProjectLauncher/config.json
- macOS: ~/Library/Application Support/ProjectLauncher/config.json

The project registry (projects.json) lives in the same directory.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional
from PyQt6.QtCore import QByteArray

from constants import (
    APP_NAME, DEFAULT_PROJECTS_DIRNAME, DISMISS_DELAY_SECONDS, MAX_LOG_LINES
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages application configuration using a JSON file.

    Attributes:
        config_dir (Path): Directory holding the configuration and the project registry
        config_file (Path): Path to the JSON configuration file
        _config (dict): In-memory configuration dictionary
    """

    def __init__(self, organization: str = APP_NAME,
                 config_filename: str = "config.json",
                 config_dir: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            organization: Organization name (used for directory structure)
            config_filename: Name of the configuration file (default: config.json)
            config_dir: Explicit configuration directory, overrides the platform default

        Example:
            # Default configuration
            config = ConfigManager()

            # Isolated configuration, e.g. for tests
            config = ConfigManager(config_dir=tmp_path)
        """
        self.organization = organization

        # Determine the configuration directory based on the platform
        self.config_dir = Path(config_dir) if config_dir else self._get_config_directory()
        self.config_file = self.config_dir / config_filename

        # Create the configuration directory if it doesn't exist
        self._ensure_config_directory()

        # Load existing configuration or create empty one
        self._config = self._load_config()

    def _get_config_directory(self) -> Path:
        """
        Get the platform-specific configuration directory.

        Returns:
            Path object pointing to the configuration directory
        """
        if os.name == 'nt':  # Windows
            base_dir = Path(os.environ.get('LOCALAPPDATA',
                                          Path.home() / 'AppData' / 'Local'))
        elif os.name == 'posix':
            if sys.platform == 'darwin':  # macOS
                base_dir = Path.home() / 'Library' / 'Application Support'
            else:  # Linux and other Unix-like systems
                base_dir = Path(os.environ.get('XDG_CONFIG_HOME',
                                              Path.home() / '.config'))
        else:
            # Fallback for unknown platforms
            base_dir = Path.home() / '.config'

        return base_dir / self.organization

    def _ensure_config_directory(self) -> None:
        """Create the configuration directory if it doesn't exist."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self.config_dir}: {e}")

    def _load_config(self) -> dict:
        """
        Load configuration from the JSON file.

        Returns:
            Dictionary containing the configuration data, or empty dict if
            the file doesn't exist or cannot be read.
        """
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load config from {self.config_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config in {self.config_file}: expected an object")
            return {}
        return data

    def _save_config(self) -> None:
        """
        Save the current configuration to the JSON file.

        If the save fails, a warning is logged but the application continues.
        """
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning(f"Could not save config to {self.config_file}: {e}")

    def setValue(self, key: str, value: Any) -> None:
        """
        Set a configuration value and save it to disk.

        Args:
            key: Configuration key (e.g., 'projects_directory', 'geometry')
            value: Value to store (must be JSON-serializable or a QByteArray)
        """
        # Convert QByteArray to base64 string for JSON serialization
        if isinstance(value, QByteArray):
            value = value.toBase64().data().decode('utf-8')

        self._config[key] = value
        self._save_config()

    def value(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key to retrieve
            default: Default value if the key doesn't exist

        Returns:
            The stored value, or the default if the key is not found
        """
        value = self._config.get(key, default)

        # Geometry is stored by Qt as a byte array
        if isinstance(value, str) and key == 'geometry':
            return QByteArray.fromBase64(value.encode('utf-8'))

        return value

    def remove(self, key: str) -> None:
        if key in self._config:
            del self._config[key]
            self._save_config()

    def contains(self, key: str) -> bool:
        return key in self._config

    def allKeys(self) -> list:
        return list(self._config.keys())

    def sync(self) -> None:
        """Write the configuration to disk (changes are already saved on setValue)."""
        self._save_config()

    def get_projects_directory(self) -> str:
        """
        Get the default parent directory for new projects.

        Returns the configured directory, or ~/LauncherProjects if not set.
        """
        projects_dir = self.value('projects_directory', '')
        if not projects_dir:
            projects_dir = str(Path.home() / DEFAULT_PROJECTS_DIRNAME)
        return projects_dir

    def get_dismiss_delay(self) -> float:
        """Seconds the creation log stays visible after a job ended."""
        try:
            delay = float(self.value('dismiss_delay_seconds', DISMISS_DELAY_SECONDS))
        except (TypeError, ValueError):
            return DISMISS_DELAY_SECONDS
        return delay if delay >= 0 else DISMISS_DELAY_SECONDS

    def get_max_log_lines(self) -> Optional[int]:
        """Cap on creation log lines; None (or 0 in the file) means unbounded."""
        value = self.value('max_log_lines', MAX_LOG_LINES)
        if value is None:
            return None
        try:
            lines = int(value)
        except (TypeError, ValueError):
            return MAX_LOG_LINES
        return lines if lines > 0 else None
