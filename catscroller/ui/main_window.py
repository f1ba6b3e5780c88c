from __future__ import annotations
from typing import Optional, Tuple

from PySide6 import QtCore, QtGui, QtWidgets

from .. import config
from .controllers.main_controller import MainController
from .events import Add, CatEvent, Kill, Next, Previous
from .state import CatViewModel


def _rect(bounds: Tuple[int, int, int, int]) -> QtCore.QRect:
    return QtCore.QRect(*bounds)


class MainWindow(QtWidgets.QMainWindow):
    """
    Fixed-size window showing one cat at a time.
    Widgets only forward events to the controller and apply the view models it emits.
    """

    def __init__(self, controller: MainController, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.view: Optional[CatViewModel] = None

        self._configure_window()
        self._setup_ui()
        self._connect_signals()

        self.controller.refresh()

    def _configure_window(self) -> None:
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setFixedSize(config.WINDOW_W_PX, config.WINDOW_H_PX)

    def _setup_ui(self) -> None:
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        font = QtGui.QFont(config.BASE_FONT_FAMILY, config.BASE_FONT_PT)
        font.setStyleHint(QtGui.QFont.SansSerif)

        def _label(text: str, bounds: Tuple[int, int, int, int], align: QtCore.Qt.AlignmentFlag) -> QtWidgets.QLabel:
            lbl = QtWidgets.QLabel(text, central)
            lbl.setAlignment(align | QtCore.Qt.AlignVCenter)
            lbl.setGeometry(_rect(bounds))
            lbl.setFont(font)
            return lbl

        def _button(text: str, bounds: Tuple[int, int, int, int]) -> QtWidgets.QPushButton:
            btn = QtWidgets.QPushButton(text, central)
            btn.setGeometry(_rect(bounds))
            btn.setFont(font)
            return btn

        def _line_edit(bounds: Tuple[int, int, int, int]) -> QtWidgets.QLineEdit:
            edit = QtWidgets.QLineEdit(central)
            edit.setGeometry(_rect(bounds))
            edit.setFont(font)
            return edit

        self.position_label = _label("00", config.RECT_POSITION, QtCore.Qt.AlignHCenter)
        self.name_label = _label("NAME", config.RECT_NAME, QtCore.Qt.AlignLeft)
        self.colour_label = _label("COLOUR", config.RECT_COLOUR, QtCore.Qt.AlignLeft)
        self.alive_label = _label(config.ALIVE_GLYPH, config.RECT_ALIVE, QtCore.Qt.AlignHCenter)

        self.btn_prev = _button(config.PREV_TEXT, config.RECT_PREV)
        self.btn_next = _button(config.NEXT_TEXT, config.RECT_NEXT)
        self.btn_kill = _button(config.KILL_TEXT, config.RECT_KILL)

        self.name_edit = _line_edit(config.RECT_NAME_INPUT)
        self.colour_edit = _line_edit(config.RECT_COLOUR_INPUT)
        self.btn_add = _button(config.ADD_TEXT, config.RECT_ADD)

    def _connect_signals(self) -> None:
        self.controller.view_changed.connect(self.apply_view)

        self.btn_next.clicked.connect(lambda *_: self._dispatch(Next()))
        self.btn_prev.clicked.connect(lambda *_: self._dispatch(Previous()))
        self.btn_kill.clicked.connect(lambda *_: self._dispatch(Kill()))
        self.btn_add.clicked.connect(lambda *_: self._submit_new_cat())
        self.name_edit.returnPressed.connect(self._submit_new_cat)
        self.colour_edit.returnPressed.connect(self._submit_new_cat)

    def _dispatch(self, event: CatEvent) -> None:
        self.controller.handle(event)

    def _submit_new_cat(self) -> None:
        self._dispatch(Add(self.name_edit.text(), self.colour_edit.text()))

    def center_on_screen(self) -> None:
        screen = self.screen() or QtGui.QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def apply_view(self, view: CatViewModel) -> None:
        """Overwrite every displayed field from the view model."""
        self.view = view

        self.position_label.setText(view.position_text)
        self.name_label.setText(view.name_text)
        self.colour_label.setText(view.colour_text)
        self.alive_label.setText(view.alive_glyph)

        color = QtGui.QColor(*view.text_rgb)
        for lbl in (self.position_label, self.name_label, self.colour_label, self.alive_label):
            pal = lbl.palette()
            pal.setColor(QtGui.QPalette.WindowText, color)
            lbl.setPalette(pal)

        self.btn_prev.setEnabled(view.prev_enabled)
        self.btn_next.setEnabled(view.next_enabled)
        self.btn_kill.setEnabled(view.kill_enabled)

        # Simple variant: name only, no alive state
        self.colour_label.setVisible(view.show_colour)
        self.colour_edit.setVisible(view.show_colour)
        self.alive_label.setVisible(view.show_alive)
        self.btn_kill.setVisible(view.show_alive)

        if view.clear_inputs:
            self.name_edit.clear()
            self.colour_edit.clear()
        if view.focus_name:
            self.name_edit.setFocus()
