# services/settings_service.py
# A simple service for persisting application settings.

import json
import logging
import os

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class SettingsService:
    """
    Manages loading and saving application settings from a JSON file.
    This includes window geometry, the last used config directory and the
    import strictness switch.
    """
    def __init__(self, file_name="app_settings.json"):
        """
        Initializes the service and loads existing settings from the file.
        """
        self.file_path = file_name
        self.settings = self._load()

    def _load(self):
        """
        Loads the settings from the JSON file.
        Returns an empty dictionary if the file doesn't exist or is invalid.
        """
        try:
            if os.path.exists(self.file_path):
                with open(self.file_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                logger.warning("Ignoring settings file %s: not a JSON object", self.file_path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load settings: %s", e)
        return {}

    def save(self):
        """Saves the current settings dictionary to the JSON file."""
        try:
            with open(self.file_path, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            logger.warning("Could not save settings: %s", e)

    def get_value(self, key, default=None):
        """
        Retrieves a value from the settings for a given key.

        Args:
            key (str): The key for the setting, e.g. ``"paths/last_config_dir"``.
            default: The value to return if the key is not found.

        Returns:
            The setting value or the default.
        """
        return self.settings.get(key, default)

    def set_value(self, key, value):
        """
        Sets a value in the settings for a given key.
        """
        self.settings[key] = value

# Create a singleton instance to be used throughout the application
settings_service = SettingsService()
