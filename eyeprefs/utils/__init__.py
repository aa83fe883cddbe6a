"""
Utility modules for Eye on Cursor preferences.
"""
from eyeprefs.utils.logging_setup import setup_logging

__all__ = ['setup_logging']
