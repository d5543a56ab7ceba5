"""Wave canvas: device-scaled back buffer drawn by the animation loop."""

import logging

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtWidgets import QWidget

from sinewave.curve import draw_curves
from sinewave.grid import draw_grid
from sinewave.viewport import make_viewport

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = QColor(20, 20, 30)


def render_frame(painter, frame, show_reference=True):
    """Clear, then draw grid and curves for one frame."""
    viewport = frame.viewport
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.fillRect(0, 0, int(viewport.width) + 1, int(viewport.height) + 1,
                     BACKGROUND_COLOR)
    draw_grid(painter, viewport)
    draw_curves(painter, frame.params, viewport, show_reference)


class WaveCanvas(QWidget):
    """Custom widget holding the current Viewport and the last frame."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.viewport = None
        self.show_reference = True
        self._buffer = None
        self.setMinimumSize(320, 240)

    def current_viewport(self):
        """Viewport for the next frame, rebuilt if the screen ratio changed."""
        viewport = self.viewport
        if viewport is not None:
            dpr = self.devicePixelRatioF()
            if dpr != viewport.device_pixel_ratio:
                logger.debug("Device pixel ratio changed to %s", dpr)
                self.viewport = viewport.resized(self.width(), self.height(), dpr)
        return self.viewport

    def resizeEvent(self, event):
        self.viewport = make_viewport(
            self.width(), self.height(), self.devicePixelRatioF()
        )
        super().resizeEvent(event)

    def present(self, frame):
        """Render frame into the back buffer and schedule a repaint."""
        viewport = frame.viewport
        buffer = self._buffer
        if (
            buffer is None
            or buffer.width() != viewport.pixel_width
            or buffer.height() != viewport.pixel_height
            or buffer.devicePixelRatio() != viewport.device_pixel_ratio
        ):
            buffer = QImage(
                viewport.pixel_width, viewport.pixel_height,
                QImage.Format.Format_ARGB32_Premultiplied,
            )
            buffer.setDevicePixelRatio(viewport.device_pixel_ratio)
            self._buffer = buffer

        painter = QPainter(buffer)
        try:
            render_frame(painter, frame, self.show_reference)
        finally:
            painter.end()
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        if self._buffer is None:
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
        else:
            painter.drawImage(QPointF(0, 0), self._buffer)
        painter.end()
