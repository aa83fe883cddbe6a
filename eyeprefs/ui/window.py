"""
Preferences window hosting the settings pages.
"""
import logging
import tkinter as tk
from tkinter import BOTH, X, RIGHT

import ttkbootstrap as ttk

from eyeprefs.constants import THEME, WINDOW_SIZE
from eyeprefs.core.i18n import _
from eyeprefs.ui.eye_page import EyePage


class PreferencesWindow:
    """Top-level preferences window.

    Creates the application root when no parent is given, otherwise a
    Toplevel over ``parent``.
    """

    def __init__(self, store, metadata: dict, path: str, parent=None):
        self.store = store
        self.metadata = metadata
        self.path = path
        self.pages = []

        if parent is None:
            self.window = ttk.Window(themename=THEME)
        else:
            self.window = tk.Toplevel(parent)
        self.window.title(_("{name} Preferences").format(name=metadata.get('name', '')))
        self.window.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")
        self.window.minsize(480, 400)
        self.window.protocol("WM_DELETE_WINDOW", self.close)

        self._create_widgets()

    def _create_widgets(self):
        notebook = ttk.Notebook(self.window)
        notebook.pack(fill=BOTH, expand=True, padx=10, pady=10)
        self.notebook = notebook

        self.add_page(EyePage(notebook, self.store, self.metadata, self.path))

        btn_frame = ttk.Frame(self.window)
        btn_frame.pack(fill=X, padx=10, pady=(0, 10))
        ttk.Button(btn_frame, text=_("Close"), command=self.close,
                   bootstyle="secondary", width=15).pack(side=RIGHT)

    def add_page(self, page):
        self.notebook.add(page, text=f"  {page.title}  ")
        self.pages.append(page)
        return page

    def close(self):
        for page in self.pages:
            page.unbind()
        self.window.destroy()
        logging.info("Preferences window closed")

    def run(self):
        self.window.mainloop()
