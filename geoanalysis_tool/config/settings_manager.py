"""
Settings Manager for GeoAnalysis Tool

Manages persistent user overrides of the built-in settings.
Stores settings in JSON format at: ~/.geoanalysis_tool/settings.json
(or the path named by the GEOANALYSIS_TOOL_SETTINGS environment variable).

Features:
- Save/load backend and logging overrides
- Apply overrides onto the global Settings instance
- Reset to built-in defaults
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

from .settings import Settings

logger = logging.getLogger(__name__)

# Default settings location
DEFAULT_SETTINGS_DIR = Path.home() / ".geoanalysis_tool"
SETTINGS_FILE = DEFAULT_SETTINGS_DIR / "settings.json"
SETTINGS_ENV_VAR = "GEOANALYSIS_TOOL_SETTINGS"

SETTINGS_FORMAT = "geoanalysis_tool_settings"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsManager:
    """
    Manages persistent user overrides.

    Recognised keys:
        open_browser: bool, whether --viewcode opens the source in a browser
        log_level: str, base logging level when -v is not given
    """

    def __init__(self, settings_file: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            settings_file: Optional custom settings file path. Defaults to
                $GEOANALYSIS_TOOL_SETTINGS, then ~/.geoanalysis_tool/settings.json
        """
        if settings_file is None:
            env_path = os.environ.get(SETTINGS_ENV_VAR)
            settings_file = Path(env_path) if env_path else SETTINGS_FILE
        self.settings_file = Path(settings_file)
        self.settings_dir = self.settings_file.parent

    def _load_settings_file(self) -> Dict[str, Any]:
        """
        Load the entire settings file.

        Returns:
            Settings dictionary or empty dict if missing or unreadable
        """
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file (invalid JSON): {e}")
            return {}
        except OSError as e:
            logger.error(f"Failed to read settings file: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Invalid settings file format - using defaults")
            return {}
        return data

    def load_overrides(self) -> Dict[str, Any]:
        """Return the validated overrides stored in the settings file."""
        data = self._load_settings_file()
        overrides = {}

        if "open_browser" in data:
            if isinstance(data["open_browser"], bool):
                overrides["open_browser"] = data["open_browser"]
            else:
                logger.warning(f"Ignoring non-boolean open_browser: {data['open_browser']!r}")

        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level in VALID_LOG_LEVELS:
                overrides["log_level"] = level
            else:
                logger.warning(f"Ignoring unknown log_level: {data['log_level']!r}")

        return overrides

    def save_overrides(self, overrides: Dict[str, Any]):
        """
        Merge overrides into the settings file.

        Raises:
            OSError: if the file cannot be written
        """
        data = self._load_settings_file()
        data.update(overrides)
        data["format"] = SETTINGS_FORMAT

        self.settings_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info(f"Settings saved to {self.settings_file}")

    def apply_to(self, settings: Settings) -> Settings:
        """Copy stored overrides onto a Settings instance."""
        overrides = self.load_overrides()
        if "open_browser" in overrides:
            settings.backend.open_browser = overrides["open_browser"]
        if "log_level" in overrides:
            settings.logging.level = overrides["log_level"]
        return settings

    def reset_to_defaults(self):
        """Delete the settings file so built-in defaults apply."""
        if self.settings_file.exists():
            self.settings_file.unlink()
            logger.info("Settings reset to defaults")


# Module-level singleton instance
_settings_manager_instance: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """
    Get the global settings manager instance (singleton pattern).

    Returns:
        SettingsManager instance
    """
    global _settings_manager_instance
    if _settings_manager_instance is None:
        _settings_manager_instance = SettingsManager()
    return _settings_manager_instance
