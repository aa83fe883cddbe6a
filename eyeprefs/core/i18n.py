"""
Translation helpers.

Labels are translated through a module-level gettext catalog. Until
setup_translations() is called the catalog is a NullTranslations, so every
string is returned untranslated.
"""
import gettext
import logging
import os
from typing import Optional

from eyeprefs.constants import LOCALE_DOMAIN

_translations: gettext.NullTranslations = gettext.NullTranslations()


def setup_translations(extension_path: Optional[str] = None,
                       languages: Optional[list] = None) -> gettext.NullTranslations:
    """Load the message catalog shipped in ``<extension_path>/locale``.

    Falls back to the untranslated catalog when no .mo file matches.
    """
    global _translations
    localedir = os.path.join(extension_path, 'locale') if extension_path else None
    _translations = gettext.translation(LOCALE_DOMAIN, localedir=localedir,
                                        languages=languages, fallback=True)
    logging.debug(f"Translations loaded: {type(_translations).__name__}")
    return _translations


def _(message: str) -> str:
    return _translations.gettext(message)


def N_(message: str) -> str:
    """Mark a string for extraction without translating it yet."""
    return message
