from __future__ import annotations

from PySide6 import QtGui, QtWidgets

from .. import config


def apply_dark_theme(app: QtWidgets.QApplication) -> None:
    """Flat dark look: Fusion style with a dark palette."""
    app.setStyle("Fusion")

    window = QtGui.QColor(*config.COLOR_WINDOW)
    base = QtGui.QColor(*config.COLOR_BASE)
    button = QtGui.QColor(*config.COLOR_BUTTON)
    text = QtGui.QColor(*config.COLOR_TEXT)
    disabled = QtGui.QColor(*config.COLOR_DISABLED_TEXT)
    highlight = QtGui.QColor(*config.COLOR_HIGHLIGHT)

    palette = QtGui.QPalette()
    palette.setColor(QtGui.QPalette.Window, window)
    palette.setColor(QtGui.QPalette.WindowText, text)
    palette.setColor(QtGui.QPalette.Base, base)
    palette.setColor(QtGui.QPalette.AlternateBase, window)
    palette.setColor(QtGui.QPalette.Text, text)
    palette.setColor(QtGui.QPalette.Button, button)
    palette.setColor(QtGui.QPalette.ButtonText, text)
    palette.setColor(QtGui.QPalette.Highlight, highlight)
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(255, 255, 255))
    palette.setColor(QtGui.QPalette.ToolTipBase, base)
    palette.setColor(QtGui.QPalette.ToolTipText, text)
    for role in (QtGui.QPalette.WindowText, QtGui.QPalette.Text, QtGui.QPalette.ButtonText):
        palette.setColor(QtGui.QPalette.Disabled, role, disabled)
    app.setPalette(palette)
