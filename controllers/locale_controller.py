# -*- coding: utf-8 -*-
"""
BetterNames Locale Controller

Handles the load cycle:
- Resolving the preset or custom translation directory
- Building a fresh translation store and publishing it in one step
- Reporting failed sources to the operator
- Reacting to preset switches, manual reloads and resets
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from betternames_exceptions import PresetNotFoundError
from betternames_logger import get_logger
import betternames_config as config
from core.ingestor import build_store
from core.preset_manager import PresetManager
from core.translation_store import TranslationStore
from models.load_report import LoadReport
from models.settings_model import SettingsModel

logger = get_logger("controllers.locale")


class LocaleController(QObject):
    """
    Controller for translation loading.

    Signals:
        translations_loaded(int): Emitted with the published entry count
        load_failed(str): Emitted with the aggregated report when any source failed
        custom_reset(int): Emitted with the number of files restored
    """

    translations_loaded = pyqtSignal(int)
    load_failed = pyqtSignal(str)
    custom_reset = pyqtSignal(int)

    def __init__(
        self,
        settings: Optional[SettingsModel] = None,
        presets: Optional[PresetManager] = None,
        store: Optional[TranslationStore] = None
    ):
        """
        Initialize the locale controller.

        Args:
            settings: Settings model instance
            presets: Preset manager (defaults to the bundled Locales directory)
            store: Live store handed to lookup hooks
        """
        super().__init__()
        self._settings = settings if settings is not None else SettingsModel.instance()
        self._presets = presets if presets is not None else PresetManager(config.DEFAULT_LOCALES_DIR)
        self._store = store if store is not None else TranslationStore()
        self._last_report: Optional[LoadReport] = None

        self._settings.subscribe(SettingsModel.KEY_PRESET, self._on_preset_changed)

        logger.debug("LocaleController initialized")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def store(self) -> TranslationStore:
        return self._store

    @property
    def presets(self) -> PresetManager:
        return self._presets

    @property
    def last_report(self) -> Optional[LoadReport]:
        return self._last_report

    def lookup(self, key: str) -> Optional[str]:
        """Exact-match lookup for interception hooks; None passes through."""
        return self._store.lookup(key)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self) -> LoadReport:
        """Seed the custom directory if needed, then run the first load."""
        self._presets.ensure_custom_directory()
        return self.load_from_settings()

    def shutdown(self):
        self._settings.unsubscribe(SettingsModel.KEY_PRESET, self._on_preset_changed)
        self._store.clear()

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_from_settings(self) -> LoadReport:
        """
        Rebuild the translation mapping from the current settings.

        The live store keeps serving the previous mapping until the new one
        is complete.
        """
        snapshot = self._settings.snapshot()
        translation_dir = self._presets.resolve_translation_directory(snapshot)

        fresh, report = build_store(snapshot, translation_dir, fixes_path=self._presets.fixes_path)
        self._store.replace(fresh)
        self._last_report = report

        logger.info(f"Published {self._store.count()} translations from {translation_dir}")
        self.translations_loaded.emit(self._store.count())

        if report.has_errors:
            summary = report.summary()
            logger.error(summary)
            self.load_failed.emit(summary)

        return report

    def reload(self) -> LoadReport:
        """Manual reload from disk."""
        report = self.load_from_settings()
        logger.info("Translations reloaded")
        return report

    def reset_custom_translations(self) -> LoadReport:
        """Restore the custom directory from the default preset and reload."""
        try:
            copied = self._presets.reset_custom_directory()
        except PresetNotFoundError as e:
            logger.warning(e.message)
            copied = 0
        self.custom_reset.emit(copied)
        logger.info("All custom translations reverted")
        return self.load_from_settings()

    def _on_preset_changed(self, value):
        logger.info(f"Preset changed to '{value}', reloading translations")
        self.load_from_settings()
