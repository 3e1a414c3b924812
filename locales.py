# -*- coding: utf-8 -*-
"""
BetterNames Localization Module
User-visible diagnostics in Simplified Chinese and English.
"""

from betternames_logger import get_logger

logger = get_logger("locales")

SUPPORTED_UI_LANGUAGES = {
    "zh": "简体中文",
    "en": "English"
}

DEFAULT_UI_LANGUAGE = "zh"
_current_language = DEFAULT_UI_LANGUAGE


def set_language(lang_code: str):
    """Set the current UI language."""
    global _current_language
    if lang_code in SUPPORTED_UI_LANGUAGES:
        _current_language = lang_code
        logger.debug(f"UI language set to: {lang_code}")
    else:
        logger.warning(f"Unsupported language code '{lang_code}'. Keeping '{_current_language}'.")


def get_language() -> str:
    """Get the current UI language code."""
    return _current_language


def tr(key: str, **kwargs) -> str:
    """
    Translate a key to the current language.

    Args:
        key: Translation key
        **kwargs: Format parameters for the translated string

    Returns:
        Translated string, or the key itself if not found
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS.get("en", {}))
    text = translations.get(key, key)

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing format key {e} for translation '{key}'")

    return text


# =============================================================================
# TRANSLATIONS DICTIONARY
# =============================================================================

TRANSLATIONS = {
    "zh": {
        "app_name": "更好的中文译名",

        # Source diagnostics
        "error_source_missing": "{name} 文件不存在: {path}",
        "error_source_empty": "{name} 加载失败或为空: {path}",
        "error_header_failed": "{name} 表头解析失败: {path} (表头: {headers})",
        "error_too_few_lines": "{name} 行数不足: {path}",
        "error_source_read": "{name} 读取失败: {path} ({error})",
        "error_directory_missing": "翻译目录不存在: {path}",

        # Aggregated report
        "report_header": "{app}: {count} 个文件加载失败",
        "report_advice": "请点击【继续】，然后前往 设置 → 更好的中文译名 → 自定义 → 撤销所有自定义翻译 来重置文件。",
        "report_loaded": "共加载 {count} 条翻译",

        # Presets
        "preset_custom": "自定义",
    },
    "en": {
        "app_name": "Better Chinese Names",

        "error_source_missing": "{name} does not exist: {path}",
        "error_source_empty": "{name} failed to load or is empty: {path}",
        "error_header_failed": "{name} header could not be resolved: {path} (headers: {headers})",
        "error_too_few_lines": "{name} has too few lines: {path}",
        "error_source_read": "{name} could not be read: {path} ({error})",
        "error_directory_missing": "Translation directory does not exist: {path}",

        "report_header": "{app}: {count} file(s) failed to load",
        "report_advice": "Press Continue, then go to Settings → Better Chinese Names → Customize → Reset all custom translations to restore the files.",
        "report_loaded": "Loaded {count} translations",

        "preset_custom": "Custom",
    },
}
