"""
Controls bound to settings.

A Control mirrors one setting of a SettingsStore. User edits go through
select()/set_value()/set_active(), which normalize the value to the control's
constraints and write it to the store synchronously. Changes made to the store
from elsewhere are pushed back into the control through the store's change
notification. Views subscribe with add_listener() to redraw.
"""
import logging
import math
from typing import Any, Callable, List, Optional, Sequence

from eyeprefs.core.i18n import _
from eyeprefs.core.schema import EYE_SETTINGS, ENUM, INT, BOOL, Setting


class Control:
    """Base class for a single control bound to one setting."""

    def __init__(self, store, setting: Setting):
        self.store = store
        self.setting = setting
        self.key = setting.key
        self.title = _(setting.title) if setting.title else ''
        self.subtitle = _(setting.subtitle) if setting.subtitle else ''
        self._listeners: List[Callable[[Any], Any]] = []
        self._value = self._read()
        self._handler_id = store.connect(self.key, self._on_store_changed)

    @property
    def value(self):
        return self._value

    def add_listener(self, callback: Callable[[Any], Any]):
        """Call ``callback(value)`` whenever the displayed value changes."""
        self._listeners.append(callback)

    def refresh(self):
        """Re-read the store, updating the displayed value if it differs."""
        self._update(self._read())

    def unbind(self):
        """Stop following the store. The control keeps its last value."""
        if self._handler_id is not None:
            self.store.disconnect(self._handler_id)
            self._handler_id = None
        self._listeners.clear()

    def _on_store_changed(self, key: str):
        self.refresh()

    def _update(self, value):
        if value == self._value:
            return
        self._value = value
        for callback in list(self._listeners):
            callback(value)

    def _commit(self, value) -> bool:
        """Write a normalized user value to the store."""
        if value == self._value:
            return False
        self._write(value)
        self._update(value)
        return True

    def _read(self):
        raise NotImplementedError

    def _write(self, value):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.key!r}, value={self._value!r})"


class EnumControl(Control):
    """Combo-style control over a fixed, ordered list of labels."""

    def __init__(self, store, setting: Setting, labels: Optional[Sequence[str]] = None):
        self.labels = list(labels) if labels is not None else [_(label) for label in setting.labels]
        super().__init__(store, setting)

    @property
    def selected(self) -> int:
        return self._value

    @property
    def selected_label(self) -> str:
        return self.labels[self._value]

    def select(self, index: int) -> bool:
        """Select the option at ``index``; indices outside the list are ignored."""
        index = int(index)
        if not 0 <= index < len(self.labels):
            logging.debug(f"Ignoring out-of-range selection {index} for {self.key}")
            return False
        return self._commit(index)

    def _read(self):
        return self.store.get_enum(self.key)

    def _write(self, value):
        self.store.set_enum(self.key, value)


class IntControl(Control):
    """Spin-style control; values are clamped into [lower, upper]."""

    def __init__(self, store, setting: Setting):
        self.lower = setting.lower
        self.upper = setting.upper
        self.step = setting.step
        super().__init__(store, setting)

    @staticmethod
    def parse(value) -> float:
        """Convert user input to a finite number, raising ValueError otherwise."""
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"Not a finite number: {value!r}")
        return number

    def clamp(self, value) -> int:
        return max(self.lower, min(self.upper, int(round(self.parse(value)))))

    def set_value(self, value) -> bool:
        return self._commit(self.clamp(value))

    def _read(self):
        return self.store.get_int(self.key)

    def _write(self, value):
        self.store.set_int(self.key, value)


class BoolControl(Control):
    """Switch-style control."""

    @property
    def active(self) -> bool:
        return self._value

    def set_active(self, active) -> bool:
        return self._commit(bool(active))

    def _read(self):
        return self.store.get_boolean(self.key)

    def _write(self, value):
        self.store.set_boolean(self.key, value)


CONTROL_TYPES = {
    ENUM: EnumControl,
    INT: IntControl,
    BOOL: BoolControl,
}


def make_control(store, setting: Setting) -> Control:
    return CONTROL_TYPES[setting.kind](store, setting)


class SettingsBoundForm:
    """A declared list of settings turned into bound controls."""

    def __init__(self, settings: Sequence[Setting] = EYE_SETTINGS):
        self.settings = tuple(settings)
        self.controls: List[Control] = []

    def build(self, store) -> List[Control]:
        """Create one control per setting, in declaration order.

        Building again drops the previous controls' store subscriptions.
        """
        self.unbind()
        self.controls = [make_control(store, setting) for setting in self.settings]
        logging.debug(f"Built {len(self.controls)} bound controls")
        return self.controls

    def control(self, key: str) -> Control:
        for control in self.controls:
            if control.key == key:
                return control
        raise KeyError(key)

    def unbind(self):
        for control in self.controls:
            control.unbind()


def build(store) -> List[Control]:
    """Build the eye page's bound controls."""
    return SettingsBoundForm(EYE_SETTINGS).build(store)


class AboutTrigger:
    """Activatable row that presents the about dialog."""

    def __init__(self, metadata: dict, path: str, dialog_factory: Callable):
        self.metadata = metadata
        self.path = path
        self.dialog_factory = dialog_factory
        self.title = _('About')
        self.subtitle = _('Development information and credits')
        self.about_window = None

    def activate(self, parent=None):
        """Create a fresh dialog and present it over ``parent``."""
        self.about_window = self.dialog_factory(self.metadata, self.path, _('translator_credits'))
        self.about_window.present(parent)
        return self.about_window
