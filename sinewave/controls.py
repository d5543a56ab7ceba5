"""Wave control panel: parameter sliders, formula, notes and reset."""

import math

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QHBoxLayout,
    QLabel, QPushButton, QGroupBox, QCheckBox,
)

from params import DEFAULT_PARAMS, Field
from ui_common import make_slider, slider_value, set_slider_value
from sinewave.notes import IDLE_NOTE

# field: (label, minimum, maximum, unit suffix); phase is in multiples of pi
SLIDER_RANGES = {
    Field.AMPLITUDE: ("A", -3.0, 3.0, ""),
    Field.FREQUENCY: ("ω", 0.0, 5.0, ""),
    Field.PHASE: ("φ", -2.0, 2.0, "π"),
    Field.OFFSET: ("B", -2.0, 2.0, ""),
}


def slider_position(field, value):
    """Stored parameter value -> slider channel value."""
    if field is Field.PHASE:
        return value / math.pi
    return value


class WaveControls(QWidget):
    """Sliders for A, omega, phi and B plus display options."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._building = True
        self.sliders = {}
        self.value_labels = {}
        self._init_ui()
        self._building = False

    def _add_param_row(self, layout, row, field, slider):
        label_text, _, _, unit = SLIDER_RANGES[field]
        label = QLabel(label_text)
        value_label = QLabel()
        value_label.setMinimumWidth(55)
        value_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        layout.addWidget(label, row, 0)
        layout.addWidget(slider, row, 1)
        layout.addWidget(value_label, row, 2)
        self.value_labels[field] = value_label

        def _update(_val, f=field, sl=slider, u=unit):
            value = slider_value(sl)
            self._show_value(f, value, u)
            if not self._building:
                self._on_param_changed(f.value, value)

        slider.valueChanged.connect(_update)
        _update(slider.value())

    def _show_value(self, field, value, unit=None):
        if unit is None:
            unit = SLIDER_RANGES[field][3]
        self.value_labels[field].setText(f"{value:.1f}{unit}")

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Formula ---
        formula_group = QGroupBox("Formula")
        formula_layout = QVBoxLayout()
        formula_group.setLayout(formula_layout)
        self.formula_label = QLabel()
        self.formula_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        formula_layout.addWidget(self.formula_label)
        main_layout.addWidget(formula_group)

        # --- Parameters ---
        param_group = QGroupBox("Parameters")
        param_layout = QGridLayout()
        param_group.setLayout(param_layout)

        for row, field in enumerate(SLIDER_RANGES):
            _, minimum, maximum, _ = SLIDER_RANGES[field]
            default = slider_position(field, getattr(DEFAULT_PARAMS, field.value))
            slider = make_slider(minimum, maximum, default)
            self.sliders[field] = slider
            self._add_param_row(param_layout, row, field, slider)

        main_layout.addWidget(param_group)

        # --- Display ---
        display_group = QGroupBox("Display")
        display_layout = QHBoxLayout()
        display_group.setLayout(display_layout)

        self.reset_btn = QPushButton("Reset")
        self.reference_checkbox = QCheckBox("Show y = sin(x)")
        self.reference_checkbox.setChecked(True)
        display_layout.addWidget(self.reset_btn)
        display_layout.addWidget(self.reference_checkbox)

        main_layout.addWidget(display_group)

        # --- Observation ---
        obs_group = QGroupBox("Observation")
        obs_layout = QVBoxLayout()
        obs_group.setLayout(obs_layout)
        self.observation_label = QLabel(IDLE_NOTE)
        self.observation_label.setWordWrap(True)
        self.observation_label.setStyleSheet("color: #aaa;")
        obs_layout.addWidget(self.observation_label)
        main_layout.addWidget(obs_group)

        main_layout.addStretch()

    # -- Public accessors --

    def show_params(self, params):
        """Move sliders and readouts to params without emitting changes."""
        for field, slider in self.sliders.items():
            value = slider_position(field, getattr(params, field.value))
            set_slider_value(slider, value)
            self._show_value(field, slider_value(slider))

    # -- Callbacks (wired by WaveView) --

    def _on_param_changed(self, channel, value):
        """Called with (channel name, slider value). Override in parent."""
        pass
