"""
Timer-driven canvas that steps the Lorenz system and paints its trail
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QSize, QTimer
from PyQt6.QtGui import QPainter, QColor

from ..core.controller import LorenzController
from ..visual.renderer import render


class AttractorWidget(QWidget):
    """Black canvas showing the trajectory trail"""

    def __init__(self, controller: LorenzController, parent=None):
        super().__init__(parent)
        self.controller = controller

        display = controller.config.get("display", {})
        self.preferred_size = QSize(int(display.get("width", 800)), int(display.get("height", 600)))
        self.point_size = int(display.get("point_size", 3))
        self.antialias = display.get("antialias", True)
        self.background = QColor(0, 0, 0)

        self.setStyleSheet("background-color: #000000;")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # Step + repaint on a fixed interval (~60 Hz)
        self.timer = QTimer(self)
        self.timer.setInterval(int(display.get("interval_ms", 16)))
        self.timer.timeout.connect(self.update_and_repaint)

    def sizeHint(self) -> QSize:
        return self.preferred_size

    def start(self):
        self.timer.start()

    def stop(self):
        self.timer.stop()

    def update_and_repaint(self):
        """Advance the system one step and schedule a repaint"""
        self.controller.tick()
        self.update()

    def keyPressEvent(self, event):
        """R restarts the trajectory from its initial position"""
        if event.key() == Qt.Key.Key_R:
            self.controller.reset()
            self.update()
        else:
            super().keyPressEvent(event)

    def resizeEvent(self, event):
        """Project new points around the centre of the current size"""
        size = event.size()
        self.controller.state.resize(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.background)
        render(painter, self.controller.state.history, self.point_size, self.antialias)
        painter.end()
