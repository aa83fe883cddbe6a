"""
About dialog for Eye on Cursor.
"""
import logging
import os
import webbrowser

import tkinter as tk
from tkinter import BOTH, X, W, RIGHT

import ttkbootstrap as ttk
from PIL import Image, ImageTk

from eyeprefs.constants import ABOUT_SIZE, LOGO_RELPATH, LOGO_SIZE, TRANSLATOR_CREDITS_MARKER
from eyeprefs.core.i18n import _


class AboutDialog:
    """Modal dialog showing extension metadata and credits.

    The window is created by present(), so constructing the dialog has no
    side effects.
    """

    def __init__(self, metadata: dict, path: str, translator_credits: str = ""):
        """Initialize the about dialog.

        Args:
            metadata: Extension metadata (name, version, description, url, ...)
            path: Extension directory, used to find the logo
            translator_credits: Translated credits string for the current locale
        """
        self.metadata = metadata
        self.path = path
        self.translator_credits = translator_credits
        self.window = None
        self._logo = None

    @property
    def has_translator_credits(self) -> bool:
        credits = (self.translator_credits or "").strip()
        return bool(credits) and credits != TRANSLATOR_CREDITS_MARKER

    def present(self, parent=None):
        """Open the dialog as a modal window over ``parent``."""
        self.window = tk.Toplevel(parent)
        self.window.title(_("About {name}").format(name=self.metadata.get('name', '')))
        self.window.geometry(f"{ABOUT_SIZE[0]}x{ABOUT_SIZE[1]}")
        self.window.resizable(False, False)
        if parent is not None:
            self.window.transient(parent)

        self._create_widgets()

        # Center
        self.window.update_idletasks()
        x = (self.window.winfo_screenwidth() - ABOUT_SIZE[0]) // 2
        y = (self.window.winfo_screenheight() - ABOUT_SIZE[1]) // 2
        self.window.geometry(f"+{x}+{y}")

        self.window.protocol("WM_DELETE_WINDOW", self.close)
        try:
            self.window.grab_set()
        except tk.TclError as e:
            # Window not viewable yet
            logging.debug(f"Could not grab about dialog: {e}")
        self.window.focus_force()
        logging.debug("About dialog presented")
        return self.window

    def close(self):
        if self.window is not None:
            self.window.grab_release()
            self.window.destroy()
            self.window = None

    def _load_logo(self):
        logo_file = os.path.join(self.path, LOGO_RELPATH) if self.path else ""
        if not logo_file or not os.path.exists(logo_file):
            return None
        try:
            image = Image.open(logo_file)
            image.thumbnail(LOGO_SIZE)
            return ImageTk.PhotoImage(image, master=self.window)
        except (OSError, tk.TclError) as e:
            logging.warning(f"Could not load logo {logo_file}: {e}")
            return None

    def _create_widgets(self):
        main = ttk.Frame(self.window, padding=25)
        main.pack(fill=BOTH, expand=True)

        self._logo = self._load_logo()
        if self._logo is not None:
            ttk.Label(main, image=self._logo).pack(pady=(0, 10))

        ttk.Label(main, text=self.metadata.get('name', ''),
                  font=('Cantarell', 16, 'bold')).pack()
        ttk.Label(main, text=_("Version {version}").format(version=self.metadata.get('version', '')),
                  bootstyle="info").pack(pady=(2, 10))

        description = self.metadata.get('description')
        if description:
            ttk.Label(main, text=description, wraplength=360,
                      justify=tk.CENTER).pack(pady=(0, 10))

        url = self.metadata.get('url')
        if url:
            ttk.Button(main, text=_("Website"), command=lambda: webbrowser.open(url),
                       bootstyle="link").pack()

        ttk.Separator(main).pack(fill=X, pady=15)

        credits = ttk.Frame(main)
        credits.pack(fill=X)
        developer = self.metadata.get('developer')
        if developer:
            ttk.Label(credits, text=_("Developer"), font=('Cantarell', 10, 'bold')).pack(anchor=W)
            ttk.Label(credits, text=developer).pack(anchor=W, pady=(0, 8))
        if self.has_translator_credits:
            ttk.Label(credits, text=_("Translators"), font=('Cantarell', 10, 'bold')).pack(anchor=W)
            ttk.Label(credits, text=self.translator_credits, wraplength=360).pack(anchor=W, pady=(0, 8))
        license_name = self.metadata.get('license')
        if license_name:
            ttk.Label(credits, text=_("License: {license}").format(license=license_name),
                      font=('Cantarell', 9), bootstyle="secondary").pack(anchor=W)

        ttk.Button(main, text=_("Close"), command=self.close,
                   bootstyle="secondary", width=10).pack(side=RIGHT, pady=(15, 0))


def make_about_dialog(metadata: dict, path: str, translator_credits: str) -> AboutDialog:
    return AboutDialog(metadata, path, translator_credits)
