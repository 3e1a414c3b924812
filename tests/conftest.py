# -*- coding: utf-8 -*-
"""
BetterNames Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
import json
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def write_csv(path: Path, lines, encoding: str = 'utf-8-sig', newline: str = '\n') -> Path:
    """Write lines to a CSV file with the given encoding."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(newline.join(lines).encode(encoding))
    return path


def preset_files(city: str = "春田"):
    """File name -> lines for a complete translation directory (17 entries)."""
    return {
        "格式.csv": [
            "Key,名称,官译,你的翻译",
            "Assets.CITIZEN_NAME_FORMAT,市民姓名格式,{FIRST} {LAST},{LAST}{FIRST}",
        ],
        "巷公路街名.csv": [
            "官译_（可空）巷名,官译_（可空）公路名,官译_（可空）街名,你的翻译_巷名,你的翻译_公路名,你的翻译_街名",
            "Alley A,Hwy A,Street A,甲巷,甲公路,甲街",
            "Alley B,,Street B,乙巷,,乙街",
        ],
        "桥坝名.csv": [
            "官译_（可空）桥名,官译_（可空）坝名,你的翻译_桥名,你的翻译_坝名",
            "Long Bridge,Big Dam,长桥,大坝",
        ],
        "姓氏.csv": [
            "官译_（可空）女姓,官译_（可空）家族姓,官译_（可空）男姓,你的翻译_女姓,你的翻译_家族姓,你的翻译_男姓",
            "Smith,Smith,Smith,王,李,张",
        ],
        "城市名.csv": ["官译_（可空）城市名,你的翻译_城市名", f"Springfield,{city}"],
        "区名.csv": ["官译_（可空）区名,你的翻译_区名", "Downtown,市中心"],
        "男名.csv": ["官译_（可空）男名,你的翻译_男名", "John,约翰"],
        "女名.csv": ["官译_（可空）女名,你的翻译_女名", "Mary,玛丽"],
        "狗名.csv": ["官译_（可空）狗名,你的翻译_狗名", "Rex,旺财"],
        "品牌名.csv": ["品牌ID,行业信息,官译_品牌名,你的翻译_品牌名", "Acme,公司: Office,Acme,艾克米"],
    }


def write_translation_dir(directory: Path, city: str = "春田") -> Path:
    for name, lines in preset_files(city).items():
        write_csv(directory / name, lines)
    return directory


# =============================================================================
# LOCALE TREE FIXTURES
# =============================================================================

@pytest.fixture
def translation_dir(tmp_path) -> Path:
    """A complete translation directory."""
    return write_translation_dir(tmp_path / "translations")


@pytest.fixture
def locales_root(tmp_path) -> Path:
    """
    Locales tree with two presets (甲, 乙) and an official-fixes file.
    """
    root = tmp_path / "Locales"
    presets = root / "NamesTranslation" / "预置翻译"
    write_translation_dir(presets / "甲", city="春田")
    write_translation_dir(presets / "乙", city="斯普林菲尔德")
    (root / "general.json").write_text(
        json.dumps({"Menu.TRENDING": "当前热门"}, ensure_ascii=False), encoding='utf-8'
    )
    return root


@pytest.fixture
def data_root(tmp_path) -> Path:
    return tmp_path / "ModsData"


@pytest.fixture
def preset_manager(locales_root, data_root):
    from core.preset_manager import PresetManager
    return PresetManager(locales_root, data_root)


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def all_enabled():
    """Configuration with every flag on and the default preset."""
    from models.category_config import CategoryConfiguration
    return CategoryConfiguration()


@pytest.fixture
def settings_file(tmp_path) -> Path:
    """Path to a settings file that does not exist yet."""
    return tmp_path / "settings.json"


@pytest.fixture
def settings_model(settings_file):
    """Fresh SettingsModel instance reading an isolated settings file."""
    from models.settings_model import SettingsModel
    SettingsModel.reset_instance()
    model = SettingsModel(settings_file)
    yield model
    SettingsModel.reset_instance()


@pytest.fixture(autouse=True)
def reset_ui_language():
    import locales
    yield
    locales.set_language(locales.DEFAULT_UI_LANGUAGE)
