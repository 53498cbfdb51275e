"""
PyQt6 front end: buttons and keys append to the session's expression buffer,
"=" computes, the history panel reloads past entries.
"""

import logging
import sys

from PyQt6 import QtCore, QtGui, QtWidgets

from .session import CalculatorSession
from .settings import Settings

logger = logging.getLogger(__name__)


# ----------------------------
# UI Components
# ----------------------------
class RoundedButton(QtWidgets.QPushButton):
    def __init__(self, text, slot=None, min_h=48):
        super().__init__(text)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(min_h)
        self.setFont(QtGui.QFont("Segoe UI", 11))
        if slot:
            self.clicked.connect(slot)


class CalcWindow(QtWidgets.QWidget):
    def __init__(self, session: CalculatorSession = None):
        super().__init__()
        self.session = session or CalculatorSession()
        self.dark_mode = self.session.settings.dark_mode
        self.setWindowTitle("Scientific Calculator")
        self.setMinimumSize(420, 600)

        self._build_ui()
        self._assign_key_map()
        self._apply_styles()
        self._refresh()

    def _build_ui(self):
        main = QtWidgets.QHBoxLayout(self)
        main.setContentsMargins(12, 12, 12, 12)

        left = QtWidgets.QVBoxLayout()
        left.setSpacing(8)

        # Top bar: title, angle mode, theme toggle
        topbar = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel("Calculator")
        title.setFont(QtGui.QFont("Segoe UI", 14, QtGui.QFont.Weight.DemiBold))
        topbar.addWidget(title)
        topbar.addStretch()

        self.angle_btn = QtWidgets.QPushButton(self.session.angle_mode.label)
        self.angle_btn.setToolTip("Toggle degrees / radians")
        self.angle_btn.setFixedSize(48, 28)
        self.angle_btn.clicked.connect(self.toggle_angle_mode)
        topbar.addWidget(self.angle_btn)

        self.theme_btn = QtWidgets.QPushButton("🌗")
        self.theme_btn.setToolTip("Toggle theme")
        self.theme_btn.setFixedSize(36, 28)
        self.theme_btn.clicked.connect(self.toggle_theme)
        topbar.addWidget(self.theme_btn)

        left.addLayout(topbar)

        # Expression label (small) + result line
        self.expr_label = QtWidgets.QLabel("")
        self.expr_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.expr_label.setFont(QtGui.QFont("Segoe UI", 12))
        left.addWidget(self.expr_label)

        self.result_edit = QtWidgets.QLineEdit("")
        self.result_edit.setReadOnly(True)
        self.result_edit.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)
        self.result_edit.setFont(QtGui.QFont("Segoe UI", 28, QtGui.QFont.Weight.Bold))
        self.result_edit.setMinimumHeight(72)
        self.result_edit.setFrame(False)
        left.addWidget(self.result_edit)

        # Memory row
        mem_row = QtWidgets.QHBoxLayout()
        for label, slot in [("MC", self.session.mem_clear), ("MR", self.session.mem_recall),
                            ("M+", self.session.mem_add), ("M-", self.session.mem_sub)]:
            b = RoundedButton(label, self._action(slot), min_h=36)
            b.setMaximumWidth(80)
            mem_row.addWidget(b)
        left.addLayout(mem_row)

        self.grid = QtWidgets.QGridLayout()
        self.grid.setSpacing(8)

        # (row, col, label, text appended to the buffer)
        btns = [
            (0, 0, "sin", "sin("), (0, 1, "cos", "cos("), (0, 2, "tan", "tan("), (0, 3, "π", "PI"), (0, 4, "e", "E"),
            (1, 0, "asin", "asin("), (1, 1, "acos", "acos("), (1, 2, "atan", "atan("), (1, 3, "^", "^"), (1, 4, "!", "!"),
            (2, 0, "ln", " ln("), (2, 1, "log", " log("), (2, 2, "exp", " exp("), (2, 3, "√", " sqrt("), (2, 4, "%", "%"),
            (3, 0, "(", "("), (3, 1, ")", ")"), (3, 2, "7", "7"), (3, 3, "8", "8"), (3, 4, "9", "9"),
            (4, 2, "4", "4"), (4, 3, "5", "5"), (4, 4, "6", "6"),
            (5, 2, "1", "1"), (5, 3, "2", "2"), (5, 4, "3", "3"),
            (6, 2, "0", "0"), (6, 3, ".", "."),
            (4, 0, "÷", " ÷ "), (4, 1, "×", " × "), (5, 0, "-", " - "), (5, 1, "+", " + "),
        ]
        for r, c, label, token in btns:
            self.grid.addWidget(RoundedButton(label, self._inserter(token)), r, c)

        self.grid.addWidget(RoundedButton("⌫", self._action(self.session.backspace)), 6, 0)
        self.grid.addWidget(RoundedButton("C", self._action(self.session.clear)), 6, 1)
        self.grid.addWidget(RoundedButton("=", self.on_equals), 6, 4)
        left.addLayout(self.grid)

        main.addLayout(left, 3)

        # Right: history panel
        self.history_panel = QtWidgets.QVBoxLayout()
        hlabel = QtWidgets.QLabel("History")
        hlabel.setFont(QtGui.QFont("Segoe UI", 12, QtGui.QFont.Weight.DemiBold))
        self.history_panel.addWidget(hlabel)
        self.history_list = QtWidgets.QListWidget()
        self.history_list.itemClicked.connect(self.on_history_click)
        self.history_panel.addWidget(self.history_list)
        main.addLayout(self.history_panel, 1)

    # ----------------------------
    # UI behaviors
    # ----------------------------
    def _inserter(self, token: str):
        return lambda: self._add(token)

    def _action(self, fn):
        def run():
            fn()
            self._refresh()
        return run

    def _assign_key_map(self):
        key_map = {
            QtCore.Qt.Key.Key_Enter: self.on_equals,
            QtCore.Qt.Key.Key_Return: self.on_equals,
            QtCore.Qt.Key.Key_Backspace: self._action(self.session.backspace),
            QtCore.Qt.Key.Key_Escape: self._action(self.session.clear),
        }
        self._key_map = key_map
        # plain characters typed on the keyboard
        self._char_map = {ch: ch for ch in "0123456789+-*/.()%^!"}
        self._char_map.update({"s": "sin(", "c": "cos(", "t": "tan("})

    def _apply_styles(self):
        self.setStyleSheet(self._stylesheet())

    def _stylesheet(self):
        if self.dark_mode:
            bg = "#0F1724"
            card = "rgba(255,255,255,0.04)"
            text = "#E6EEF3"
            sub = "#9FB4C8"
            btn = "rgba(255,255,255,0.04)"
            hover = "rgba(255,255,255,0.06)"
        else:
            bg = "#F6F7FB"
            card = "rgba(0,0,0,0.04)"
            text = "#0F1724"
            sub = "#4B5563"
            btn = "rgba(0,0,0,0.04)"
            hover = "rgba(0,0,0,0.06)"
        return f"""
            QWidget {{
                background: {bg};
                color: {text};
                font-family: "Segoe UI", "Inter", sans-serif;
            }}
            QLineEdit {{ background: transparent; color: {text}; }}
            QLabel {{ color: {sub}; }}
            QListWidget {{
                background: {card};
                border-radius: 10px;
                padding: 6px;
            }}
            QPushButton {{
                background: {btn};
                color: {text};
                border: none;
                border-radius: 10px;
                padding: 8px;
            }}
            QPushButton:hover {{ background: {hover}; }}
            QPushButton:pressed {{ background: rgba(0,0,0,0.12); }}
        """

    # ----------------------------
    # Input / Expression handling
    # ----------------------------
    def _add(self, token: str):
        self.session.append(token)
        self._refresh()

    def on_equals(self):
        self.session.compute()
        self._refresh()
        self._render_history()

    def toggle_angle_mode(self):
        mode = self.session.toggle_angle_mode()
        self.angle_btn.setText(mode.label)

    def toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self._apply_styles()

    # ----------------------------
    # History
    # ----------------------------
    def _render_history(self):
        self.history_list.clear()
        for entry in self.session.history.entries():
            self.history_list.addItem(str(entry))

    def on_history_click(self, item):
        row = self.history_list.row(item)
        self.session.load_history(row)
        self._refresh()

    # ----------------------------
    # Keyboard handling
    # ----------------------------
    def keyPressEvent(self, event):
        k = event.key()
        if k in self._key_map:
            self._key_map[k]()
            return
        ch = event.text()
        if ch and ch in self._char_map:
            self._add(self._char_map[ch])
            return
        super().keyPressEvent(event)

    # ----------------------------
    # Utility
    # ----------------------------
    def _refresh(self):
        self.expr_label.setText(self.session.expression)
        self.result_edit.setText(self.session.last_result)


# ----------------------------
# Run app
# ----------------------------
def run(settings: Settings = None) -> int:
    app = QtWidgets.QApplication(sys.argv)
    window = CalcWindow(CalculatorSession(settings))
    window.show()
    logger.debug("window shown")
    return app.exec()
