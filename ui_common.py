"""Float-valued slider helpers shared by the control panels."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QSlider


def make_slider(minimum, maximum, value, resolution=10):
    """Create an integer QSlider that maps to float values.

    The slider range is [minimum*resolution, maximum*resolution].
    """
    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setMinimum(round(minimum * resolution))
    slider.setMaximum(round(maximum * resolution))
    slider.setValue(round(value * resolution))
    slider.resolution = resolution
    return slider


def slider_value(slider):
    """Read the float value from a slider created by make_slider."""
    return slider.value() / slider.resolution


def set_slider_value(slider, value):
    """Move a make_slider slider to the float value, without emitting."""
    was_blocked = slider.blockSignals(True)
    slider.setValue(round(value * slider.resolution))
    slider.blockSignals(was_blocked)
