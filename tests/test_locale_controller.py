# -*- coding: utf-8 -*-
"""
Unit Tests for LocaleController

Signals are connected to plain lists; no Qt event loop is needed because
emits from the owning thread are delivered directly.
"""

import pytest

pytest.importorskip("PyQt6.QtCore")

import betternames_config as config
from controllers.locale_controller import LocaleController
from core.translation_store import TranslationStore


@pytest.fixture
def controller(settings_model, preset_manager):
    ctrl = LocaleController(settings_model, preset_manager)
    yield ctrl
    ctrl.shutdown()


@pytest.fixture
def signals(controller):
    received = {"loaded": [], "failed": [], "reset": []}
    controller.translations_loaded.connect(received["loaded"].append)
    controller.load_failed.connect(received["failed"].append)
    controller.custom_reset.connect(received["reset"].append)
    return received


class TestLoading:
    """Tests for the load cycle."""

    def test_initialize(self, controller, signals, preset_manager):
        report = controller.initialize()

        assert not report.has_errors
        assert controller.store.count() == 18
        assert controller.lookup("Menu.TRENDING") == "当前热门"
        assert controller.lookup("Assets.CITY_NAME:0") == "春田"
        assert signals["loaded"] == [18]
        assert signals["failed"] == []
        assert (preset_manager.custom_dir / "城市名.csv").exists()

    def test_unknown_key_passes_through(self, controller):
        controller.initialize()

        assert controller.lookup("Assets.CITY_NAME:99") is None

    def test_publish_keeps_store_identity(self, settings_model, preset_manager):
        live = TranslationStore({"stale": "x"})
        ctrl = LocaleController(settings_model, preset_manager, store=live)

        ctrl.load_from_settings()

        assert ctrl.store is live
        assert live.lookup("stale") is None
        assert live.count() == 18
        ctrl.shutdown()

    def test_publish_into_empty_host_store(self, settings_model, preset_manager):
        """An empty store handed in by the host is the one that gets filled."""
        live = TranslationStore()
        ctrl = LocaleController(settings_model, preset_manager, store=live)

        ctrl.load_from_settings()

        assert ctrl.store is live
        assert live.lookup("Assets.CITY_NAME:0") == "春田"
        ctrl.shutdown()

    def test_failed_sources_reported(self, controller, signals, locales_root):
        (locales_root / "NamesTranslation" / "预置翻译" / "甲" / "狗名.csv").unlink()

        report = controller.load_from_settings()

        assert report.failed_count == 1
        assert controller.store.count() == 17
        assert len(signals["failed"]) == 1
        assert "狗名.csv" in signals["failed"][0]
        assert controller.last_report is report

    def test_flag_change_applies_on_reload(self, controller, settings_model):
        controller.load_from_settings()
        settings_model.set_flag("enable_dog_names", False)

        assert controller.lookup("Assets.ANIMAL_NAME_DOG:0") == "旺财"

        controller.reload()

        assert controller.lookup("Assets.ANIMAL_NAME_DOG:0") is None

    def test_official_fixes_off(self, controller, settings_model):
        settings_model.set_flag(settings_model.KEY_OFFICIAL_FIXES, False)

        controller.load_from_settings()

        assert controller.lookup("Menu.TRENDING") is None
        assert controller.store.count() == 17


class TestPresetSwitching:
    """Tests for preset changes and the custom directory."""

    def test_preset_change_reloads(self, controller, signals, settings_model):
        controller.initialize()

        settings_model.preset_selection = "乙"

        assert controller.lookup("Assets.CITY_NAME:0") == "斯普林菲尔德"
        assert signals["loaded"] == [18, 18]

    def test_missing_preset_reports_directory(self, controller, signals, settings_model):
        settings_model.preset_selection = "丙"

        assert controller.store.count() == 1
        assert controller.last_report.failed_count == 1
        assert len(signals["failed"]) == 1

    def test_custom_mode_reads_user_files(self, controller, settings_model, preset_manager):
        controller.initialize()
        custom_city = preset_manager.custom_dir / "城市名.csv"
        custom_city.write_text("官译_城市名,你的翻译_城市名\nSpringfield,自定义城", encoding='utf-8')

        settings_model.preset_selection = config.CUSTOM_PRESET

        assert controller.lookup("Assets.CITY_NAME:0") == "自定义城"

    def test_reset_custom_translations(self, controller, signals, settings_model, preset_manager):
        controller.initialize()
        settings_model.preset_selection = config.CUSTOM_PRESET
        (preset_manager.custom_dir / "城市名.csv").write_text(
            "官译_城市名,你的翻译_城市名\nSpringfield,自定义城", encoding='utf-8'
        )
        controller.reload()

        controller.reset_custom_translations()

        assert signals["reset"] == [10]
        assert controller.lookup("Assets.CITY_NAME:0") == "春田"

    def test_shutdown_stops_listening(self, controller, signals, settings_model):
        controller.shutdown()

        settings_model.preset_selection = "乙"

        assert signals["loaded"] == []
        assert controller.store.count() == 0
