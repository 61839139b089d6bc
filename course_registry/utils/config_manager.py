"""
Configuration Manager for the Course Registry
Handles loading and saving application settings
"""
import json
import logging
import os
from typing import Any, Dict

log = logging.getLogger("CourseRegistry")


class ConfigurationManager:
    """Manages application configuration settings"""

    def __init__(self, config_file: str = "config.json"):
        """
        Initialize configuration manager

        Args:
            config_file: Path to configuration file
        """
        self.config_file = config_file
        self.settings = self._load_default_config()
        self.load_config()

    def _load_default_config(self) -> Dict[str, Any]:
        """Load default configuration settings"""
        return {
            "logging": {
                "level": "INFO",
                "dir": "logs",
                "to_file": True
            },
            "app": {
                "title": "Course Management System",
                "load_demo_data": True,
                "pause_after_action": True
            },
            "reports": {
                "output_dir": "reports"
            }
        }

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, section by section over the defaults"""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    loaded_config = json.load(f)
            except (OSError, ValueError) as e:
                log.error(f"Error loading config: {e}. Using defaults.")
                return self.settings

            if not isinstance(loaded_config, dict):
                log.error(
                    f"Error loading config: expected a JSON object in {self.config_file}, "
                    f"got {type(loaded_config).__name__}. Using defaults."
                )
                return self.settings

            for section, values in loaded_config.items():
                if isinstance(values, dict) and isinstance(self.settings.get(section), dict):
                    self.settings[section].update(values)
                else:
                    self.settings[section] = values
        else:
            self.save_config(self.settings)

        return self.settings

    def save_config(self, settings: Dict[str, Any]) -> bool:
        """Save configuration to file"""
        try:
            self.settings = settings
            with open(self.config_file, 'w') as f:
                json.dump(settings, f, indent=4)
            return True
        except OSError as e:
            log.error(f"Error saving config: {e}")
            return False

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a specific setting value"""
        keys = key.split('.')
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
