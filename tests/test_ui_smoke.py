"""
Smoke tests for the Tk preferences page. Skipped when no display is available.
"""
import pytest
from unittest.mock import MagicMock, patch

ttk = pytest.importorskip("ttkbootstrap")
import tkinter as tk

from eyeprefs.config import SettingRangeError
from eyeprefs.constants import THEME
from eyeprefs.ui.about import AboutDialog
from eyeprefs.ui.eye_page import EyePage
from eyeprefs.ui.rows import ComboRow, SpinRow, SwitchRow


@pytest.fixture(scope="module")
def root():
    try:
        root = ttk.Window(themename=THEME)
    except tk.TclError as e:
        pytest.skip(f"No display available: {e}")
    root.withdraw()
    yield root
    root.destroy()


@pytest.fixture
def page(root, store):
    factory = MagicMock()
    page = EyePage(root, store, {'name': 'Eye on Cursor'}, '/ext', dialog_factory=factory)
    page.dialog_factory = factory
    yield page
    page.unbind()
    page.destroy()


def _row(page, key):
    for group in page.winfo_children():
        for row in getattr(group, 'rows', []):
            control = getattr(row, 'control', None)
            if control is not None and control.key == key:
                return row
    raise KeyError(key)


def test_page_has_a_row_per_setting(page):
    assert len(page.controls) == 8
    assert isinstance(_row(page, 'eye-position'), ComboRow)
    assert isinstance(_row(page, 'eye-count'), SpinRow)
    assert isinstance(_row(page, 'eye-reactive'), SwitchRow)


def test_spin_commit_clamps_and_saves(page, store):
    row = _row(page, 'eye-count')
    row.var.set('250')
    row._commit()

    assert store.get_int('eye-count') == 100
    assert row.var.get() == '100'


def test_spin_rejects_text(page, store):
    row = _row(page, 'eye-width')
    row.var.set('wide')
    row._commit()

    assert store.get_int('eye-width') == 40
    assert row.var.get() == '40'


@pytest.mark.parametrize('text', ['inf', '-inf', '1e999'])
def test_spin_rejects_non_finite(page, store, text):
    row = _row(page, 'eye-count')
    row.var.set(text)
    row._commit()

    assert store.get_int('eye-count') == 1
    assert row.var.get() == '1'


def test_spin_store_error_propagates(page, store):
    row = _row(page, 'eye-count')
    row.var.set('5')
    with patch.object(store, 'set_int', side_effect=SettingRangeError("rejected")):
        with pytest.raises(SettingRangeError):
            row._commit()

    assert row.control.value == 1


def test_about_row_click_targets(page):
    row = page.about_row
    targets = [row, *row.winfo_children(), *row.text_frame.winfo_children()]

    assert len(targets) == len(set(targets))
    for widget in targets:
        assert widget.bind('<Button-1>')


def test_combo_selection_saves(page, store):
    row = _row(page, 'eye-shape')
    row.combo.current(1)
    row._on_selected()

    assert store.get_enum('eye-shape') == 1


def test_store_change_updates_widgets(page, store):
    store.set_boolean('eye-reactive', True)
    store.set_int('eye-line-width', 9)

    assert _row(page, 'eye-reactive').var.get() is True
    assert _row(page, 'eye-line-width').var.get() == '9'


def test_about_row_presents_dialog(page):
    page.about_row.activate()

    page.dialog_factory.assert_called_once()
    page.dialog_factory.return_value.present.assert_called_once_with(page.winfo_toplevel())


def test_about_dialog_present_and_close(root, temp_config_dir):
    dialog = AboutDialog({'name': 'Eye on Cursor', 'version': '7', 'developer': 'djinnalexio'},
                         temp_config_dir, 'translator_credits')
    window = dialog.present(root)

    assert window.winfo_exists()
    assert dialog.has_translator_credits is False
    dialog.close()
    assert dialog.window is None


def test_about_dialog_translator_credits():
    assert AboutDialog({}, '', 'Jean Dupont').has_translator_credits is True
    assert AboutDialog({}, '', '').has_translator_credits is False
