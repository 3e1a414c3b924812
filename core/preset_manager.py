# -*- coding: utf-8 -*-
"""
BetterNames Preset Manager

Resolves which directory a load reads from and keeps the user-editable
copy of the translation files seeded.
"""

import shutil
from pathlib import Path
from typing import List, Optional

import betternames_config as config
from betternames_exceptions import PresetNotFoundError
from betternames_logger import get_logger
from models.category_config import CategoryConfiguration

logger = get_logger("core.preset_manager")


class PresetManager:
    """
    Locates preset and custom translation directories.

    Layout:
        <locales_root>/general.json
        <locales_root>/NamesTranslation/预置翻译/<preset>/*.csv
        <data_root>/NamesTranslation/*.csv          (user-editable copy)
    """

    def __init__(self, locales_root, data_root=None):
        self.locales_root = Path(locales_root)
        self.data_root = Path(data_root) if data_root else config.DATA_DIR

    @property
    def presets_dir(self) -> Path:
        return self.locales_root / config.NAMES_TRANSLATION_DIR / config.PRESETS_DIR

    @property
    def custom_dir(self) -> Path:
        return self.data_root / config.NAMES_TRANSLATION_DIR

    @property
    def fixes_path(self) -> Path:
        return self.locales_root / config.OFFICIAL_FIXES_FILE

    def list_presets(self) -> List[str]:
        """Sorted names of the bundled presets."""
        if not self.presets_dir.is_dir():
            return []
        return sorted(p.name for p in self.presets_dir.iterdir() if p.is_dir() and p.name)

    def preset_dir(self, preset: str) -> Path:
        return self.presets_dir / preset

    def resolve_translation_directory(self, settings: CategoryConfiguration) -> Path:
        """Directory the CSV sources are read from for this configuration."""
        if settings.is_custom_mode:
            return self.custom_dir
        return self.preset_dir(settings.preset)

    def _has_csv(self, directory: Path) -> bool:
        return directory.is_dir() and any(directory.glob("*.csv"))

    def ensure_custom_directory(self) -> bool:
        """
        Seed the custom directory from the default preset when it has no CSV.

        Returns:
            True if files were copied.
        """
        if not self.presets_dir.is_dir():
            logger.warning(f"Presets directory does not exist: {self.presets_dir}")
            return False
        if self._has_csv(self.custom_dir):
            return False
        logger.info("Custom translation directory is empty, restoring from the default preset...")
        try:
            return self.reset_custom_directory() > 0
        except PresetNotFoundError as e:
            logger.warning(e.message)
            return False

    def reset_custom_directory(self, preset: Optional[str] = None) -> int:
        """
        Overwrite the custom directory with a preset's CSV files.

        Returns:
            Number of files copied.

        Raises:
            PresetNotFoundError: the preset directory does not exist
        """
        preset = preset or config.DEFAULT_PRESET
        source_dir = self.preset_dir(preset)
        if not source_dir.is_dir():
            raise PresetNotFoundError(
                f"Default preset directory does not exist: {source_dir}",
                preset=preset, path=str(source_dir),
            )

        self.custom_dir.mkdir(parents=True, exist_ok=True)
        copied = 0
        for source_file in sorted(source_dir.glob("*.csv")):
            shutil.copyfile(source_file, self.custom_dir / source_file.name)
            copied += 1

        self._create_hint_files()
        logger.info(f"Restored {copied} translation files from preset '{preset}' to {self.custom_dir}")
        return copied

    def _create_hint_files(self):
        for name in config.HINT_FILES:
            hint = self.custom_dir / name
            if hint.exists():
                continue
            try:
                hint.write_text("", encoding='utf-8')
            except OSError as e:
                logger.warning(f"Failed to create hint file {hint}: {e}")
