"""
Eye on Cursor preferences.
"""
from eyeprefs.constants import VERSION

__version__ = VERSION
