"""
Main application window
"""

import logging

from PyQt6.QtWidgets import QMainWindow

from ..core.controller import LorenzController
from .attractor_widget import AttractorWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window hosting the attractor canvas"""

    def __init__(self, controller: LorenzController):
        super().__init__()
        self.controller = controller
        self.setWindowTitle("Lorenz Attractor")

        self.canvas = AttractorWidget(controller, self)
        self.setCentralWidget(self.canvas)
        self.adjustSize()

    def start(self):
        self.canvas.start()

    def closeEvent(self, event):
        """Stop the animation and the audio when the window closes"""
        self.canvas.stop()
        self.controller.shutdown()
        logger.info("Window closed")
        event.accept()
