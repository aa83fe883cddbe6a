"""
Eye settings page: placement and drawing groups plus the about row.
"""
import logging
from tkinter import X

import ttkbootstrap as ttk

from eyeprefs.core.bindings import SettingsBoundForm, AboutTrigger, EnumControl, IntControl, BoolControl
from eyeprefs.core.i18n import _
from eyeprefs.core.schema import PLACEMENT_SETTINGS, DRAWING_SETTINGS
from eyeprefs.ui.about import make_about_dialog
from eyeprefs.ui.rows import PreferencesGroup, ComboRow, SpinRow, SwitchRow, ActionRow

ROW_TYPES = (
    (EnumControl, ComboRow),
    (IntControl, SpinRow),
    (BoolControl, SwitchRow),
)


def row_for(control):
    for control_cls, row_cls in ROW_TYPES:
        if isinstance(control, control_cls):
            return row_cls
    raise TypeError(f"No row type for {type(control).__name__}")


class EyePage(ttk.Frame):
    """A page displaying the eye settings."""

    icon_name = 'view-reveal-symbolic'

    def __init__(self, master, store, metadata: dict, path: str, dialog_factory=make_about_dialog):
        super().__init__(master, padding=20)
        self.title = _('Eye')
        self.metadata = metadata
        self.path = path
        self.store = store

        self.placement_form = SettingsBoundForm(PLACEMENT_SETTINGS)
        self.drawing_form = SettingsBoundForm(DRAWING_SETTINGS)
        self.about = AboutTrigger(metadata, path, dialog_factory)

        self._add_group(_('Eye Placement'), self.placement_form)
        self._add_group(_('Eye Drawing'), self.drawing_form)

        about_group = PreferencesGroup(self)
        about_group.pack(fill=X, pady=(0, 15))
        self.about_row = about_group.add(ActionRow, self.about.title, self.about.subtitle,
                                         on_activate=self._on_about_activated, prefix="ⓘ")

    @property
    def controls(self):
        return self.placement_form.controls + self.drawing_form.controls

    def _add_group(self, title, form):
        group = PreferencesGroup(self, title)
        group.pack(fill=X, pady=(0, 15))
        for control in form.build(self.store):
            group.add(row_for(control), control)
        logging.debug(f"Added group {title!r} with {len(form.controls)} rows")
        return group

    def _on_about_activated(self):
        self.about.activate(self.winfo_toplevel())

    def unbind(self):
        """Detach every control from the store."""
        self.placement_form.unbind()
        self.drawing_form.unbind()
