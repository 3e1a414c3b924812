# -*- coding: utf-8 -*-
"""
BetterNames Settings Model

Holds the category flags and preset selection with:
- Typed access to the values the ingestor needs
- Change notifications (Observer pattern)
- Validation and defaults
"""

from typing import Optional, Dict, Any, List, Callable

from betternames_logger import get_logger
import betternames_config as config
import betternames_settings as bn_settings
from models.category_config import CategoryConfiguration

logger = get_logger("models.settings")


class SettingsModel:
    """
    Singleton model for the user's configuration.

    Values come from the settings file (read-only) and may be changed in
    memory by the host; observers are told about every change.
    """

    _instance: Optional['SettingsModel'] = None
    _initialized: bool = False

    KEY_PRESET = bn_settings.PRESET_KEY
    KEY_UI_LANGUAGE = bn_settings.UI_LANGUAGE_KEY
    KEY_OFFICIAL_FIXES = bn_settings.OFFICIAL_FIXES_FLAG
    FLAG_KEYS = bn_settings.FLAG_KEYS

    def __new__(cls, settings_file=None) -> 'SettingsModel':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_file=None):
        if SettingsModel._initialized:
            return

        self._settings: Dict[str, Any] = {}
        self._observers: Dict[str, List[Callable]] = {}
        self._settings_file = settings_file

        self._load()

        SettingsModel._initialized = True
        logger.debug("SettingsModel initialized")

    # =============================================================================
    # SINGLETON ACCESS
    # =============================================================================

    @classmethod
    def instance(cls) -> 'SettingsModel':
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = SettingsModel()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset singleton (for testing)."""
        cls._instance = None
        cls._initialized = False

    # =============================================================================
    # LOADING
    # =============================================================================

    def _load(self):
        self._settings = bn_settings.load_settings(self._settings_file)

    def reload(self):
        """Re-read the settings file, notifying observers of changed values."""
        old = dict(self._settings)
        self._load()
        for key, value in self._settings.items():
            if old.get(key) != value:
                self._notify(key, value)

    def update(self, values: Dict[str, Any]):
        """Apply several values, validated like the settings file."""
        merged = dict(self._settings)
        merged.update(values)
        validated = bn_settings.validate_settings(merged)
        for key, value in validated.items():
            self.set(key, value)

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def subscribe(self, key: str, callback: Callable[[Any], None]):
        """
        Subscribe to changes on a specific setting.

        Args:
            key: Setting key to watch
            callback: Function called with new value when setting changes
        """
        if key not in self._observers:
            self._observers[key] = []
        self._observers[key].append(callback)

    def unsubscribe(self, key: str, callback: Callable):
        """Unsubscribe from setting changes."""
        if key in self._observers and callback in self._observers[key]:
            self._observers[key].remove(callback)

    def _notify(self, key: str, value: Any):
        """Notify observers of a setting change."""
        for callback in list(self._observers.get(key, [])):
            try:
                callback(value)
            except Exception:
                logger.exception(f"Error in settings observer for '{key}'")

    # =============================================================================
    # GENERIC ACCESS
    # =============================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value and notify observers if it changed."""
        old_value = self._settings.get(key)
        if old_value != value:
            self._settings[key] = value
            self._notify(key, value)

    # =============================================================================
    # TYPED PROPERTIES
    # =============================================================================

    @property
    def preset_selection(self) -> str:
        return self._settings.get(self.KEY_PRESET, config.DEFAULT_PRESET)

    @preset_selection.setter
    def preset_selection(self, value: str):
        self.set(self.KEY_PRESET, value)
        logger.info(f"Preset switched to: {value}")

    @property
    def is_custom_mode(self) -> bool:
        return self.preset_selection == config.CUSTOM_PRESET

    @property
    def ui_language(self) -> str:
        return self._settings.get(self.KEY_UI_LANGUAGE, config.DEFAULT_UI_LANGUAGE)

    @ui_language.setter
    def ui_language(self, value: str):
        self.set(self.KEY_UI_LANGUAGE, value)

    def flag(self, name: str) -> bool:
        return bool(self._settings.get(name, True))

    def set_flag(self, name: str, enabled: bool):
        self.set(name, bool(enabled))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._settings)

    def snapshot(self) -> CategoryConfiguration:
        """Immutable copy of the current flags for one load."""
        return CategoryConfiguration.from_dict(self._settings)
