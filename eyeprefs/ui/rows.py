"""
Preference rows: a title/subtitle on the left and one widget on the right.

Each row wraps a bound Control. User input is forwarded to the control, and
the control's listener pushes store-side changes back into the widget.
"""
import logging
import tkinter as tk
from tkinter import X, W, LEFT, RIGHT

import ttkbootstrap as ttk

TITLE_FONT = ('Cantarell', 11)
SUBTITLE_FONT = ('Cantarell', 9)
GROUP_FONT = ('Cantarell', 12, 'bold')


class PreferencesGroup(ttk.Frame):
    """Titled block of rows."""

    def __init__(self, master, title: str = "", **kwargs):
        super().__init__(master, **kwargs)
        self.rows = []
        if title:
            ttk.Label(self, text=title, font=GROUP_FONT).pack(anchor=W, pady=(0, 6))
        self._body = ttk.Frame(self, bootstyle="secondary", padding=1)
        self._body.pack(fill=X)

    @property
    def body(self):
        return self._body

    def add(self, row_cls, *args, **kwargs):
        """Create ``row_cls(body, *args, **kwargs)`` and stack it in the group."""
        if self.rows:
            ttk.Separator(self._body).pack(fill=X)
        row = row_cls(self._body, *args, **kwargs)
        row.pack(fill=X)
        self.rows.append(row)
        return row


class PreferencesRow(ttk.Frame):
    """Row layout shared by every preference row."""

    def __init__(self, master, title: str, subtitle: str = ""):
        super().__init__(master, padding=(12, 8))
        self.text_frame = ttk.Frame(self)
        self.text_frame.pack(side=LEFT, fill=X, expand=True)
        self.title_label = ttk.Label(self.text_frame, text=title, font=TITLE_FONT)
        self.title_label.pack(anchor=W)
        if subtitle:
            ttk.Label(self.text_frame, text=subtitle, font=SUBTITLE_FONT,
                      bootstyle="secondary", wraplength=380).pack(anchor=W)


class ComboRow(PreferencesRow):
    """Drop-down bound to an EnumControl."""

    def __init__(self, master, control):
        super().__init__(master, control.title, control.subtitle)
        self.control = control
        self.combo = ttk.Combobox(self, values=control.labels, state="readonly", width=12)
        self.combo.current(control.selected)
        self.combo.pack(side=RIGHT)
        self.combo.bind('<<ComboboxSelected>>', self._on_selected)
        control.add_listener(self._on_control_changed)

    def _on_selected(self, event=None):
        self.control.select(self.combo.current())

    def _on_control_changed(self, index):
        self.combo.current(index)


class SpinRow(PreferencesRow):
    """Spin button bound to an IntControl.

    Typed values are committed on Return, focus-out or the arrow buttons and
    clamped into the control's range.
    """

    def __init__(self, master, control):
        super().__init__(master, control.title, control.subtitle)
        self.control = control
        self.var = tk.StringVar(master=self, value=str(control.value))
        self.spin = ttk.Spinbox(self, from_=control.lower, to=control.upper,
                                increment=control.step, textvariable=self.var,
                                width=7, command=self._commit)
        self.spin.pack(side=RIGHT)
        self.spin.bind('<Return>', self._commit)
        self.spin.bind('<FocusOut>', self._commit)
        control.add_listener(self._on_control_changed)

    def _commit(self, event=None):
        text = self.var.get().strip()
        try:
            number = self.control.parse(text)
        except ValueError:
            logging.debug(f"Rejected non-numeric input {text!r} for {self.control.key}")
        else:
            self.control.set_value(number)
        # Show the clamped value (or the old one when the input was rejected)
        self.var.set(str(self.control.value))

    def _on_control_changed(self, value):
        self.var.set(str(value))


class SwitchRow(PreferencesRow):
    """Toggle switch bound to a BoolControl."""

    def __init__(self, master, control):
        super().__init__(master, control.title, control.subtitle)
        self.control = control
        self.var = tk.BooleanVar(master=self, value=control.active)
        ttk.Checkbutton(self, variable=self.var, command=self._on_toggled,
                        bootstyle="round-toggle").pack(side=RIGHT)
        control.add_listener(self._on_control_changed)

    def _on_toggled(self):
        self.control.set_active(self.var.get())

    def _on_control_changed(self, active):
        self.var.set(active)


class ActionRow(PreferencesRow):
    """Activatable row with optional prefix and suffix glyphs."""

    def __init__(self, master, title: str, subtitle: str = "", on_activate=None,
                 prefix: str = "", suffix: str = "›"):
        super().__init__(master, title, subtitle)
        self.on_activate = on_activate
        if prefix:
            prefix_label = ttk.Label(self, text=prefix, font=GROUP_FONT)
            prefix_label.pack(side=LEFT, before=self.text_frame, padx=(0, 10))
        if suffix:
            ttk.Label(self, text=suffix, font=GROUP_FONT).pack(side=RIGHT)

        self.configure(cursor="hand2", takefocus=True)
        for widget in (self, *self.winfo_children(), *self.text_frame.winfo_children()):
            widget.bind('<Button-1>', self.activate)
        self.bind('<Return>', self.activate)
        self.bind('<space>', self.activate)

    def activate(self, event=None):
        if self.on_activate:
            self.on_activate()
        return "break"
