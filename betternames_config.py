import os, sys
from pathlib import Path

def resource_path(relative_path):
    """Get absolute path to a bundled resource, works for dev and for PyInstaller."""
    try:
        # PyInstaller creates a temp folder and stores path in _MEIPASS
        base_path = sys._MEIPASS
    except AttributeError:
        # Development mode: directory containing this config file (project root)
        base_path = os.path.dirname(os.path.abspath(__file__))

    return os.path.join(base_path, relative_path)

VERSION = "0.4.2"
DEFAULT_UI_LANGUAGE = "zh"  # Supported: "zh" (简体中文), "en" (English)

APP_DIR = Path.home() / ".betternames"
SETTINGS_FILE_PATH = APP_DIR / "settings.json"
DATA_DIR = APP_DIR / "ModsData"
DEFAULT_LOCALES_DIR = Path(resource_path("Locales"))

# Directory layout below the locales root
NAMES_TRANSLATION_DIR = "NamesTranslation"
PRESETS_DIR = "预置翻译"
DEFAULT_PRESET = "甲"
CUSTOM_PRESET = "__custom__"
OFFICIAL_FIXES_FILE = "general.json"

HINT_FILES = (
    "可以编辑来自定义翻译（内含原文）",
    "如果改错了可以从设置里重置",
)

# Header markers
KEY_COLUMN = "key"
TRANSLATION_MARKER = "你的翻译"
CATEGORY_SEPARATOR = "_"
BOM_CHAR = "\ufeff"

FORMAT_FILE = "格式.csv"
BRAND_KEY_PREFIX = "Assets.NAME"
UNKNOWN_KEY_PREFIX = "Assets.UNKNOWN"

__all__ = [
    "VERSION", "DEFAULT_UI_LANGUAGE", "resource_path",
    "APP_DIR", "SETTINGS_FILE_PATH", "DATA_DIR", "DEFAULT_LOCALES_DIR",
    "NAMES_TRANSLATION_DIR", "PRESETS_DIR", "DEFAULT_PRESET", "CUSTOM_PRESET",
    "OFFICIAL_FIXES_FILE", "HINT_FILES",
    "KEY_COLUMN", "TRANSLATION_MARKER", "CATEGORY_SEPARATOR", "BOM_CHAR",
    "FORMAT_FILE", "BRAND_KEY_PREFIX", "UNKNOWN_KEY_PREFIX",
]

# Import logger at the end to avoid circular imports
from betternames_logger import get_logger
_logger = get_logger("config")
_logger.debug("betternames_config.py loaded")
