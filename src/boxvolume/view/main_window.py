"""
Main Application Window
=======================
The single screen of the calculator: three dimension inputs, a Calculate
button and the result label.

Why is this file needed?
------------------------
1. Layout: It organizes the input form and the result display.
2. Routing: It turns the compute trigger into a call on the presenter and
   renders whatever the presenter publishes. It contains no arithmetic.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QLabel
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent

from boxvolume.config import VISIBLE_APP_NAME
from boxvolume.app.scope import ViewModelStore
from boxvolume.app.state import VolumeViewModel
from boxvolume.model.volume import parse_dimension

logger = logging.getLogger(__name__)


class ViewState(Enum):
    IDLE = "idle"
    RESULT_SHOWN = "result_shown"


class MainWindow(QMainWindow):
    def __init__(self, view_models: ViewModelStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.view_model: VolumeViewModel = view_models.get_view_model(VolumeViewModel)
        self._view_state = ViewState.IDLE

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(360, 260)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # --- Dimensions Group ---
        grp = QGroupBox("Box Dimensions")
        form = QFormLayout(grp)

        self.edit_length = self._make_input("Length")
        self.edit_width = self._make_input("Width")
        self.edit_height = self._make_input("Height")
        form.addRow("Length:", self.edit_length)
        form.addRow("Width:", self.edit_width)
        form.addRow("Height:", self.edit_height)

        layout.addWidget(grp)

        # --- Actions ---
        self.btn_calculate = QPushButton("Calculate")
        self.btn_calculate.setMinimumHeight(40)
        self.btn_calculate.clicked.connect(self.on_calculate_clicked)
        layout.addWidget(self.btn_calculate)

        # --- Result ---
        self.lbl_result = QLabel("")
        self.lbl_result.setAlignment(Qt.AlignCenter)
        self.lbl_result.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_result.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.lbl_result)

        layout.addStretch()

        # Subscribe once; an existing result is delivered immediately
        self._unsubscribe: Optional[Callable[[], None]] = self.view_model.subscribe(self.on_volume_changed)

    def _make_input(self, name: str) -> QLineEdit:
        edit = QLineEdit()
        edit.setPlaceholderText(f"{name} (e.g. 2.5)")
        edit.setInputMethodHints(Qt.ImhFormattedNumbersOnly)
        edit.returnPressed.connect(self.on_calculate_clicked)
        return edit

    # --- PROPERTIES ---

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def result_text(self) -> str:
        return self.lbl_result.text()

    # --- SLOTS ---

    def on_calculate_clicked(self) -> None:
        # Each field falls back to 0.0 on its own
        length = parse_dimension(self.edit_length.text())
        width = parse_dimension(self.edit_width.text())
        height = parse_dimension(self.edit_height.text())

        self.view_model.calculate_volume(length, width, height)

    def on_volume_changed(self, text: Optional[str]) -> None:
        if text is None:
            return
        self.lbl_result.setText(text)
        self._view_state = ViewState.RESULT_SHOWN

    def detach(self) -> None:
        """Stop listening to the presenter. The presenter itself lives on in its store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("MainWindow detached from view model.")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.detach()
        super().closeEvent(event)
