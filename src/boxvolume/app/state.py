"""
Presenter State (View Model)
============================
Holds the display state of the calculator screen.

Why is this file needed?
------------------------
1. State Management: It owns the latest result so it survives when the window
   showing it is closed and recreated.
2. Decoupling: Views read through ``get_current`` / ``subscribe``; only
   ``calculate_volume`` writes the state.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, QMetaObject

from boxvolume.model.volume import VolumeResult

logger = logging.getLogger(__name__)


class VolumeViewModel(QObject):
    """Computes box volumes and publishes the formatted result."""
    volume_changed = Signal(str)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._display_text: Optional[str] = None
        self._connections: list[QMetaObject.Connection] = []
        self.last_result: Optional[VolumeResult] = None

    # --- READ-ONLY STATE ---

    def get_current(self) -> Optional[str]:
        """Latest display text, or None before the first calculation."""
        return self._display_text

    @property
    def subscriber_count(self) -> int:
        return len(self._connections)

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """
        Connect ``callback`` to ``volume_changed`` and return a function that disconnects it.

        If a result already exists, the callback is called once right away with it.
        """
        connection = self.volume_changed.connect(callback)
        self._connections.append(connection)
        logger.debug("Subscriber connected (%d total).", len(self._connections))

        def _unsubscribe() -> None:
            if connection in self._connections:
                self._connections.remove(connection)
                QObject.disconnect(connection)
                logger.debug("Subscriber disconnected (%d left).", len(self._connections))

        if self._display_text is not None:
            callback(self._display_text)
        return _unsubscribe

    # --- OPERATIONS ---

    def calculate_volume(self, length: float, width: float, height: float) -> None:
        result = VolumeResult.from_dimensions(length, width, height)
        if not result.is_finite:
            logger.warning(
                "Volume of %r x %r x %r is not finite (%s).", length, width, height, result.display_text
            )
        logger.debug("calculate_volume(%r, %r, %r) -> %s", length, width, height, result.display_text)
        self.last_result = result
        self._display_text = result.display_text
        self.volume_changed.emit(self._display_text)

    def on_cleared(self) -> None:
        """Called by the owning ViewModelStore when its scope ends."""
        for connection in self._connections:
            QObject.disconnect(connection)
        self._connections.clear()
        logger.debug("VolumeViewModel cleared.")
