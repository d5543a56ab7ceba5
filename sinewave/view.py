"""Wave view: owns the parameter state and wires canvas, controls and loop.

This is a QWidget suitable for embedding in the main window.
"""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel

from params import ParamState
from sinewave.animation import AnimationLoop
from sinewave.canvas import WaveCanvas
from sinewave.controls import WaveControls
from sinewave.formula import render_formula
from sinewave.notes import observation_note

logger = logging.getLogger(__name__)


class WaveView(QWidget):
    """Complete sine explorer: canvas + controls + animation loop."""

    def __init__(self, parent=None, state=None, fps=None, show_reference=True):
        super().__init__(parent)

        self.state = state if state is not None else ParamState()
        self.canvas = WaveCanvas()
        self.controls = WaveControls()

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        # Status bar labels (AppWindow will place these in a real status bar)
        self.size_label = QLabel()
        self.loop_label = QLabel()
        self._shown_viewport = None
        self._shown_loop_state = None

        self.loop = AnimationLoop(
            self.state,
            viewport_source=self.canvas.current_viewport,
            present=self._present,
            fps=fps,
            on_state_change=self._show_loop_state,
        )
        self._show_loop_state(self.loop.loop_state)

        # Wire signals
        self.controls._on_param_changed = self._on_param_changed
        self.controls.reset_btn.clicked.connect(self._reset)
        self.controls.reference_checkbox.toggled.connect(self._on_reference_toggled)
        self.controls.reference_checkbox.setChecked(show_reference)
        self.canvas.show_reference = show_reference

        self._refresh_text()

    # -- Public interface --

    def activate(self):
        """Start (or resume) the animation loop."""
        self.loop.start()

    def deactivate(self):
        """Stop scheduling frames."""
        self.loop.stop()

    # -- Frame presentation --

    def _present(self, frame):
        self.canvas.present(frame)
        viewport = frame.viewport
        if viewport != self._shown_viewport:
            self._shown_viewport = viewport
            self.size_label.setText(
                f"  {viewport.width:.0f}×{viewport.height:.0f} "
                f"@ {viewport.device_pixel_ratio:g}x  "
            )

    def _show_loop_state(self, loop_state):
        if loop_state is not self._shown_loop_state:
            self._shown_loop_state = loop_state
            self.loop_label.setText(f"  {loop_state.value}  ")

    # -- Text outputs --

    def _refresh_text(self, changed=None):
        controls = self.controls
        if controls is None:
            return
        render_formula(getattr(controls, "formula_label", None), self.state.get())
        obs_label = getattr(controls, "observation_label", None)
        if obs_label is not None:
            obs_label.setText(observation_note(changed))

    # -- Parameter changes --

    def _on_param_changed(self, channel, value):
        if self.state.update_channel(channel, value):
            self._refresh_text(self.state.last_changed)

    def _reset(self):
        params = self.state.reset()
        self.controls.show_params(params)
        self._refresh_text()
        logger.info("Parameters reset to defaults")

    def _on_reference_toggled(self, checked):
        self.canvas.show_reference = checked
