"""PyQt6 toast display."""

from typing import Optional

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import QLabel, QWidget

from .toast import ToastDuration


class QtToastDisplay(QObject):
    """Toast display built on a single reusable frameless label.

    ``show`` may be called from any thread; the label is updated on the
    thread owning this object. A new message replaces the visible one and
    restarts its timer.
    """

    _requested = pyqtSignal(str, int)

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the display.

        Args:
            parent: Widget the label is attached to
        """
        super().__init__()
        self._parent = parent
        self.label: Optional[QLabel] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._hide)
        self._requested.connect(self._show)

    def show(self, message: str, duration: ToastDuration = ToastDuration.SHORT) -> None:
        self._requested.emit(message, int(duration))

    def is_showing(self) -> bool:
        return self._timer.isActive()

    def _show(self, message: str, duration_ms: int):
        if self.label is None:
            self.label = QLabel(self._parent)
            self.label.setWindowFlags(Qt.WindowType.ToolTip | Qt.WindowType.FramelessWindowHint)
            self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.label.setStyleSheet(
                "background-color: rgba(40, 40, 40, 220); color: white;"
                " padding: 8px 16px; border-radius: 6px;"
            )
        self.label.setText(message)
        self.label.adjustSize()
        self.label.show()
        self._timer.start(duration_ms)

    def _hide(self):
        if self.label is not None:
            self.label.hide()
