"""
Configuration management for Eye on Cursor.
Handles the eye settings file, typed access and change notification.
"""
import os
import json
import logging
import itertools
from typing import Any, Callable, Dict, Optional

from eyeprefs.constants import CONFIG_DIR_NAME, SETTINGS_FILENAME
from eyeprefs.core.schema import SCHEMA, ENUM, INT, BOOL, Setting, default_settings


class SettingsError(ValueError):
    """Base class for rejected settings operations."""


class UnknownSettingError(SettingsError):
    """The key is not part of the schema."""


class SettingTypeError(SettingsError):
    """The accessor or value does not match the setting's kind."""


class SettingRangeError(SettingsError):
    """The value lies outside the setting's constraints."""


def _default_config_dir() -> str:
    base = os.environ.get('XDG_CONFIG_HOME') or os.path.join(os.path.expanduser('~'), '.config')
    return os.path.join(base, CONFIG_DIR_NAME)


class SettingsStore:
    """Manages the eye settings stored in $XDG_CONFIG_HOME/eye-on-cursor/settings.json

    Values are kept in a flat dict keyed by setting name. Enum settings are
    persisted by nick and exposed by index, like the shell's settings API.
    """

    CONFIG_DIR = _default_config_dir()
    CONFIG_FILE = os.path.join(CONFIG_DIR, SETTINGS_FILENAME)

    def __init__(self, config_file: Optional[str] = None):
        if config_file:
            self.CONFIG_FILE = config_file
            self.CONFIG_DIR = os.path.dirname(os.path.abspath(config_file))
        self._config: Dict[str, Any] = {}
        self._handlers: Dict[int, tuple] = {}
        self._handler_ids = itertools.count(1)
        self.load()

    def _ensure_config_dir(self):
        """Create config directory if it doesn't exist."""
        if not os.path.exists(self.CONFIG_DIR):
            os.makedirs(self.CONFIG_DIR)

    def load(self) -> Dict[str, Any]:
        """Load settings from file, falling back to defaults per key."""
        data: Dict[str, Any] = {}
        if os.path.exists(self.CONFIG_FILE):
            try:
                with open(self.CONFIG_FILE, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("settings root is not an object")
            except (json.JSONDecodeError, ValueError, IOError) as e:
                logging.warning(f"Ignoring unreadable settings file {self.CONFIG_FILE}: {e}")
                data = {}

        self._config = default_settings()
        for key, value in data.items():
            setting = SCHEMA.get(key)
            if setting is None:
                # Keep unknown keys so newer versions don't lose data
                self._config[key] = value
            elif setting.accepts(value):
                self._config[key] = value
            else:
                logging.warning(f"Invalid stored value for {key}: {value!r}, using default")

        return self._config

    def save(self):
        """Save settings to file."""
        self._ensure_config_dir()
        with open(self.CONFIG_FILE, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())

    # Schema lookups
    def _lookup(self, key: str, kind: Optional[str] = None) -> Setting:
        setting = SCHEMA.get(key)
        if setting is None:
            raise UnknownSettingError(f"Unknown setting: {key}")
        if kind is not None and setting.kind != kind:
            raise SettingTypeError(f"Setting {key} is of type {setting.kind}, not {kind}")
        return setting

    def _write(self, key: str, value: Any) -> bool:
        """Store, save and notify. Returns False when the value was unchanged."""
        if self._config.get(key) == value:
            return False
        self._config[key] = value
        self.save()
        logging.info(f"Auto-saved {key}: {value}")
        self._emit(key)
        return True

    # Enum settings
    def get_enum(self, key: str) -> int:
        """Get the index of the selected option of an enum setting."""
        setting = self._lookup(key, ENUM)
        return setting.nicks.index(self._config[key])

    def get_string(self, key: str) -> str:
        """Get the nick of the selected option of an enum setting."""
        self._lookup(key, ENUM)
        return self._config[key]

    def set_enum(self, key: str, value: int) -> bool:
        setting = self._lookup(key, ENUM)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SettingTypeError(f"Enum index for {key} must be an int, got {value!r}")
        if not 0 <= value < len(setting.options):
            raise SettingRangeError(f"Enum index {value} out of range for {key}")
        return self._write(key, setting.nicks[value])

    # Integer settings
    def get_int(self, key: str) -> int:
        self._lookup(key, INT)
        return self._config[key]

    def set_int(self, key: str, value: int) -> bool:
        setting = self._lookup(key, INT)
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SettingTypeError(f"Value for {key} must be an int, got {value!r}")
        if not setting.lower <= value <= setting.upper:
            raise SettingRangeError(
                f"Value {value} for {key} outside [{setting.lower}, {setting.upper}]")
        return self._write(key, value)

    # Boolean settings
    def get_boolean(self, key: str) -> bool:
        self._lookup(key, BOOL)
        return self._config[key]

    def set_boolean(self, key: str, value: bool) -> bool:
        self._lookup(key, BOOL)
        if not isinstance(value, bool):
            raise SettingTypeError(f"Value for {key} must be a bool, got {value!r}")
        return self._write(key, value)

    # Kind-dispatched access
    def get_value(self, key: str) -> Any:
        """Get a setting through the accessor matching its kind."""
        kind = self._lookup(key).kind
        if kind == ENUM:
            return self.get_enum(key)
        if kind == INT:
            return self.get_int(key)
        return self.get_boolean(key)

    def set_value(self, key: str, value: Any) -> bool:
        kind = self._lookup(key).kind
        if kind == ENUM:
            return self.set_enum(key, value)
        if kind == INT:
            return self.set_int(key, value)
        return self.set_boolean(key, value)

    # Defaults
    def reset(self, key: str) -> bool:
        """Restore a single setting to its default value."""
        setting = self._lookup(key)
        return self._write(key, setting.default)

    def restore_defaults(self):
        """Restore every eye setting to its default value."""
        for key in SCHEMA:
            self.reset(key)
        logging.info("Restored default eye settings")

    # Change notification
    def connect(self, key: Optional[str], callback: Callable[[str], Any]) -> int:
        """Call ``callback(key)`` after ``key`` changes (any key when None).

        Returns a handler id for disconnect().
        """
        if key is not None:
            self._lookup(key)
        handler_id = next(self._handler_ids)
        self._handlers[handler_id] = (key, callback)
        return handler_id

    def disconnect(self, handler_id: int):
        self._handlers.pop(handler_id, None)

    def _emit(self, key: str):
        # Snapshot so handlers may disconnect while being notified
        for handler_id, (watched, callback) in list(self._handlers.items()):
            if handler_id not in self._handlers:
                continue
            if watched is None or watched == key:
                callback(key)
