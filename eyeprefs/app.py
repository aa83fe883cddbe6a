"""
Application entry point: wires logging, translations, the settings store
and the preferences window together.
"""
import argparse
import logging
import traceback

from eyeprefs.config import SettingsStore
from eyeprefs.constants import APP_NAME, VERSION
from eyeprefs.core.i18n import setup_translations
from eyeprefs.core.metadata import default_extension_path, load_metadata
from eyeprefs.utils.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eye-on-cursor-prefs",
        description=f"{APP_NAME} preferences",
    )
    parser.add_argument("--path", default=None,
                        help="extension directory (metadata.json, locale/, media/)")
    parser.add_argument("--config", default=None,
                        help="settings file to edit instead of the default location")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv=None) -> int:
    """Main entry point for the preferences window."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        path = args.path or default_extension_path()
        setup_translations(path)
        metadata = load_metadata(path)
        store = SettingsStore(args.config)
        logging.info(f"Editing settings in {store.CONFIG_FILE}")

        from eyeprefs.ui.window import PreferencesWindow
        window = PreferencesWindow(store, metadata, path)
        window.run()
        return 0
    except Exception as e:
        logging.critical(f"Failed to start preferences: {e}")
        traceback.print_exc()
        return 1
