import sys
import json
import logging
import argparse
from pathlib import Path

from betternames_logger import get_logger, set_console_level
logger = get_logger("main")

import betternames_config as config
import locales
from betternames_exceptions import PresetNotFoundError
from controllers.locale_controller import LocaleController
from core.preset_manager import PresetManager
from models.settings_model import SettingsModel


def build_parser():
    parser = argparse.ArgumentParser(
        description="Load translation CSV files and build the name override table (BetterNames).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "locales_root",
        nargs='?',
        default=str(config.DEFAULT_LOCALES_DIR),
        help="Directory holding general.json and NamesTranslation/."
    )
    parser.add_argument(
        "--data-root",
        default=str(config.DATA_DIR),
        help="Directory holding the user-editable NamesTranslation/ copy."
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--preset", help="Preset name to load (overrides the settings file).")
    selection.add_argument("--custom", action="store_true", help="Load the user-editable directory.")
    parser.add_argument("--settings", default=None, help="Settings JSON file.")
    parser.add_argument("--lang", choices=sorted(locales.SUPPORTED_UI_LANGUAGES), default=None,
                        help="Language of diagnostics.")
    parser.add_argument("--list-presets", action="store_true", help="List available presets and exit.")
    parser.add_argument("--reset", action="store_true",
                        help="Restore the user-editable directory from the default preset before loading.")
    parser.add_argument("--dump", default=None, help="Write the resulting mapping to this JSON file.")
    parser.add_argument("--report", default=None, help="Write the load report to this JSON file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    if args.lang:
        locales.set_language(args.lang)

    presets = PresetManager(args.locales_root, args.data_root)
    if args.list_presets:
        for name in presets.list_presets():
            print(name)
        print(f"{config.CUSTOM_PRESET}\t{locales.tr('preset_custom')}")
        return 0

    SettingsModel.reset_instance()
    settings = SettingsModel(args.settings)
    locales.set_language(args.lang or settings.ui_language)

    controller = LocaleController(settings, presets)
    controller.load_failed.connect(lambda summary: print(summary, file=sys.stderr))

    if args.reset:
        try:
            presets.reset_custom_directory()
        except PresetNotFoundError as e:
            logger.warning(e.message)
            print(e.message, file=sys.stderr)
    else:
        presets.ensure_custom_directory()

    # Applying the selection through the model triggers the load when it changes
    if args.custom:
        settings.preset_selection = config.CUSTOM_PRESET
    elif args.preset:
        settings.preset_selection = args.preset

    if controller.last_report is None:
        controller.load_from_settings()

    store = controller.store
    print(locales.tr("report_loaded", count=store.count()))

    if args.dump:
        dump_path = Path(args.dump)
        with dump_path.open('w', encoding='utf-8') as f:
            json.dump(dict(store.as_mapping()), f, ensure_ascii=False, indent=2, sort_keys=True)
        logger.info(f"Mapping written to {dump_path}")

    if args.report:
        report_path = Path(args.report)
        with report_path.open('w', encoding='utf-8') as f:
            json.dump(controller.last_report.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info(f"Load report written to {report_path}")

    return 0 if store.count() > 0 else 1


if __name__ == "__main__":
    sys.exit(main())
