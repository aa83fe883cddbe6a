"""
Core modules for Eye on Cursor preferences.
"""
from eyeprefs.core.schema import Setting, SCHEMA, EYE_SETTINGS
from eyeprefs.core.bindings import (
    Control, EnumControl, IntControl, BoolControl,
    SettingsBoundForm, AboutTrigger, build,
)
from eyeprefs.core.metadata import load_metadata

__all__ = [
    'Setting', 'SCHEMA', 'EYE_SETTINGS',
    'Control', 'EnumControl', 'IntControl', 'BoolControl',
    'SettingsBoundForm', 'AboutTrigger', 'build',
    'load_metadata',
]
