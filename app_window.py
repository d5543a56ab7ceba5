"""App window: hosts the wave view and its status bar readouts."""

import logging

from PyQt6.QtWidgets import QMainWindow, QStatusBar

from sinewave.view import WaveView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window for the sine explorer."""

    def __init__(self, fps=None, show_reference=True):
        super().__init__()
        self.setWindowTitle("Sine Explorer")
        self.resize(1200, 750)

        self.wave_view = WaveView(fps=fps, show_reference=show_reference)
        self.setCentralWidget(self.wave_view)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.addWidget(self.wave_view.size_label)
        self._status_bar.addWidget(self.wave_view.loop_label)

        self.wave_view.activate()

    def closeEvent(self, event):
        self.wave_view.deactivate()
        logger.info("Window closed")
        super().closeEvent(event)
