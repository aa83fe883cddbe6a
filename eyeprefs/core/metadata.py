"""
Extension metadata loading.

The extension directory carries a metadata.json describing the extension
(name, uuid, version, ...). Fields missing from the file fall back to the
built-in values so the about dialog always has something to show.
"""
import json
import logging
import os
from typing import Any, Dict, Optional

from eyeprefs.constants import (
    APP_NAME, EXTENSION_UUID, VERSION, PROJECT_URL, DEVELOPER, LICENSE_NAME,
    METADATA_FILENAME,
)

DEFAULT_METADATA: Dict[str, Any] = {
    "name": APP_NAME,
    "uuid": EXTENSION_UUID,
    "version": VERSION,
    "description": "Eyes that follow your cursor",
    "url": PROJECT_URL,
    "developer": DEVELOPER,
    "license": LICENSE_NAME,
}


def default_extension_path() -> str:
    """Directory of the installed extension, or the package dir when run from source."""
    data_home = os.environ.get('XDG_DATA_HOME') or os.path.join(os.path.expanduser('~'), '.local', 'share')
    installed = os.path.join(data_home, 'gnome-shell', 'extensions', EXTENSION_UUID)
    if os.path.isdir(installed):
        return installed
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def load_metadata(path: Optional[str] = None) -> Dict[str, Any]:
    """Read ``<path>/metadata.json`` merged over the built-in metadata."""
    metadata = DEFAULT_METADATA.copy()
    if not path:
        return metadata

    metadata_file = os.path.join(path, METADATA_FILENAME)
    if not os.path.exists(metadata_file):
        logging.debug(f"No metadata file at {metadata_file}, using defaults")
        return metadata

    try:
        with open(metadata_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logging.warning(f"Failed to read {metadata_file}: {e}")
        return metadata

    if isinstance(data, dict):
        metadata.update(data)
    # Extensions publish an integer version; keep it printable either way
    metadata['version'] = str(metadata.get('version', VERSION))
    return metadata
