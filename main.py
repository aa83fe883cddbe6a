#!/usr/bin/env python3
"""
Eye on Cursor Preferences - Main Entry Point

Runs the preferences window from a source checkout. When installed, use the
``eye-on-cursor-prefs`` command instead.
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from eyeprefs.app import main


if __name__ == "__main__":
    sys.exit(main())
