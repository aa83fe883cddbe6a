"""
UI components for Eye on Cursor preferences.
"""
from eyeprefs.ui.window import PreferencesWindow
from eyeprefs.ui.eye_page import EyePage
from eyeprefs.ui.about import AboutDialog

__all__ = ['PreferencesWindow', 'EyePage', 'AboutDialog']
