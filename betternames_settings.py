"""
BetterNames Settings Module
Reads the user's settings file. Writing settings is the host's job.
"""

import json
from pathlib import Path

import betternames_config as config
from betternames_logger import get_logger
logger = get_logger("settings")

PRESET_KEY = "preset_selection"
UI_LANGUAGE_KEY = "ui_language"
OFFICIAL_FIXES_FLAG = "enable_official_fixes"

# One flag per category plus the global fixes switch. All default to on.
FLAG_KEYS = (
    OFFICIAL_FIXES_FLAG,
    "enable_street_names",
    "enable_alley_names",
    "enable_highway_names",
    "enable_bridge_names",
    "enable_dam_names",
    "enable_city_names",
    "enable_district_names",
    "enable_company_names",
    "enable_citizen_male_names",
    "enable_citizen_female_names",
    "enable_citizen_male_surnames",
    "enable_citizen_female_surnames",
    "enable_citizen_household_surnames",
    "enable_dog_names",
)


def default_settings():
    """Fresh dict of default settings."""
    settings = {flag: True for flag in FLAG_KEYS}
    settings[PRESET_KEY] = config.DEFAULT_PRESET
    settings[UI_LANGUAGE_KEY] = config.DEFAULT_UI_LANGUAGE
    return settings


def validate_settings(loaded_data):
    """
    Merge loaded values over the defaults, resetting anything invalid.

    Unknown keys are kept as-is so newer settings files still load.
    """
    settings = default_settings()
    if not isinstance(loaded_data, dict):
        logger.warning("Settings data is not a dict. Using defaults.")
        return settings

    settings.update(loaded_data)

    for flag in FLAG_KEYS:
        if not isinstance(settings.get(flag), bool):
            logger.warning(f"Invalid '{flag}' value ({settings.get(flag)!r}). Using default.")
            settings[flag] = True

    preset = settings.get(PRESET_KEY)
    if not isinstance(preset, str) or not preset.strip():
        logger.warning(f"Invalid '{PRESET_KEY}' value ({preset!r}). Using default.")
        settings[PRESET_KEY] = config.DEFAULT_PRESET

    if settings.get(UI_LANGUAGE_KEY) not in ("zh", "en"):
        logger.warning(f"Invalid '{UI_LANGUAGE_KEY}' value ({settings.get(UI_LANGUAGE_KEY)!r}). Using default.")
        settings[UI_LANGUAGE_KEY] = config.DEFAULT_UI_LANGUAGE

    return settings


def load_settings(settings_file=None):
    """Load settings from a JSON file, or return defaults if not found."""
    settings_file = Path(settings_file) if settings_file else config.SETTINGS_FILE_PATH

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return default_settings()

    try:
        logger.debug(f"Loading settings: {settings_file}")
        with settings_file.open('r', encoding='utf-8-sig') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"Settings file ({settings_file}) is corrupted (invalid JSON). Using defaults.")
        return default_settings()
    except OSError as e:
        logger.error(f"Error reading settings ({settings_file}): {e}. Using defaults.")
        return default_settings()

    settings = validate_settings(loaded_data)
    logger.debug("Settings loaded.")
    return settings
