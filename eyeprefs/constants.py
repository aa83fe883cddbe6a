"""
Constants and configuration values for Eye on Cursor preferences.
"""
import os

# ============== VERSION ==============
VERSION = "1.3.0"
APP_NAME = "Eye on Cursor"
EXTENSION_UUID = "eye-on-cursor@djinnalexio.github.io"
GITHUB_REPO = "djinnalexio/eye-on-cursor"
PROJECT_URL = f"https://github.com/{GITHUB_REPO}"
DEVELOPER = "djinnalexio"
LICENSE_NAME = "GPL-3.0-or-later"

# ============== PATHS ==============
CONFIG_DIR_NAME = "eye-on-cursor"
SETTINGS_FILENAME = "settings.json"
METADATA_FILENAME = "metadata.json"
LOGO_RELPATH = os.path.join("media", "logo.png")
LOCALE_DOMAIN = EXTENSION_UUID

# ============== UI ==============
THEME = "darkly"
WINDOW_SIZE = (640, 720)
ABOUT_SIZE = (420, 520)
LOGO_SIZE = (96, 96)

# Marker returned by gettext when no translator credits exist for a locale
TRANSLATOR_CREDITS_MARKER = "translator_credits"
