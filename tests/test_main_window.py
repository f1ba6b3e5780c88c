import dataclasses

import pytest
from PySide6 import QtGui

from catscroller import config
from catscroller.ui.controllers.main_controller import MainController
from catscroller.ui.main_window import MainWindow


def _text_color(label):
    return label.palette().color(QtGui.QPalette.WindowText)


@pytest.fixture
def window(qapp, store, rich):
    win = MainWindow(MainController(store, rich))
    yield win
    win.close()
    win.deleteLater()


def test_initial_render(window):
    assert window.windowTitle() == config.WINDOW_TITLE
    assert window.position_label.text() == "1"
    assert window.name_label.text() == "Gary"
    assert window.colour_label.text() == "Ginger"
    assert window.alive_label.text() == config.ALIVE_GLYPH
    assert not window.btn_prev.isEnabled()
    assert window.btn_next.isEnabled()
    assert window.btn_kill.isEnabled()


def test_window_is_fixed_size(window):
    assert window.minimumSize() == window.maximumSize()
    assert window.minimumSize().width() == config.WINDOW_W_PX
    assert window.minimumSize().height() == config.WINDOW_H_PX


def test_next_button_walks_to_last_cat(window):
    for _ in range(4):
        window.btn_next.click()
    assert window.position_label.text() == "5"
    assert window.name_label.text() == "Phil"
    assert not window.btn_next.isEnabled()
    assert window.btn_prev.isEnabled()


def test_kill_button_switches_to_dead_style(window):
    window.btn_kill.click()
    assert window.alive_label.text() == config.DEAD_GLYPH
    assert not window.btn_kill.isEnabled()
    assert _text_color(window.name_label) == QtGui.QColor(*config.COLOR_DEAD)


def test_add_button_adds_and_clears_inputs(window):
    window.name_edit.setText("Whiskers")
    window.colour_edit.setText("Grey")
    window.btn_add.click()
    assert window.position_label.text() == "6"
    assert window.name_label.text() == "Whiskers"
    assert window.colour_label.text() == "Grey"
    assert window.name_edit.text() == ""
    assert window.colour_edit.text() == ""
    assert _text_color(window.name_label) == QtGui.QColor(*config.COLOR_ALIVE)


def test_return_in_colour_field_submits(window):
    window.name_edit.setText("Whiskers")
    window.colour_edit.setText("Grey")
    window.colour_edit.returnPressed.emit()
    assert window.name_label.text() == "Whiskers"


def test_blank_name_keeps_inputs_and_state(window):
    window.name_edit.setText("   ")
    window.colour_edit.setText("Grey")
    window.btn_add.click()
    assert window.position_label.text() == "1"
    assert len(window.controller.store) == 5
    assert window.colour_edit.text() == "Grey"


def test_simple_variant_hides_colour_widgets(qapp, store, simple):
    win = MainWindow(MainController(store, simple))
    try:
        assert win.colour_label.isHidden()
        assert win.colour_edit.isHidden()
        assert win.alive_label.isHidden()
        assert win.btn_kill.isHidden()
        win.name_edit.setText("Whiskers")
        win.name_edit.returnPressed.emit()
        assert win.name_label.text() == "Whiskers"
        assert win.name_edit.text() == ""
    finally:
        win.close()
        win.deleteLater()


def test_dark_theme_sets_fusion_palette(qapp):
    from catscroller.ui.theme import apply_dark_theme

    apply_dark_theme(qapp)
    assert qapp.style().name().lower() == "fusion"
    assert qapp.palette().color(QtGui.QPalette.Window) == QtGui.QColor(*config.COLOR_WINDOW)


def test_visibility_follows_view_model(window):
    window.apply_view(dataclasses.replace(window.view, show_colour=False, show_alive=False))
    assert window.colour_label.isHidden()
    assert window.colour_edit.isHidden()
    assert window.alive_label.isHidden()
    assert window.btn_kill.isHidden()

    window.apply_view(dataclasses.replace(window.view, show_colour=True, show_alive=True))
    assert not window.colour_label.isHidden()
    assert not window.btn_kill.isHidden()


def test_simple_variant_clears_inputs_on_navigation(qapp, store, simple):
    win = MainWindow(MainController(store, simple))
    try:
        win.name_edit.setText("half typed")
        win.btn_next.click()
        assert win.position_label.text() == "2"
        assert win.name_edit.text() == ""
    finally:
        win.close()
        win.deleteLater()


def test_rich_variant_keeps_inputs_on_navigation(window):
    window.name_edit.setText("half")
    window.btn_next.click()
    assert window.position_label.text() == "2"
    assert window.name_edit.text() == "half"


def test_successful_add_focuses_name_input(window, monkeypatch):
    focused = []
    monkeypatch.setattr(window.name_edit, "setFocus", lambda *args: focused.append(True))

    window.btn_next.click()
    assert focused == []

    window.name_edit.setText("Whiskers")
    window.colour_edit.setText("Grey")
    window.btn_add.click()
    assert window.view.focus_name is True
    assert focused == [True]
