"""Plot-space <-> pixel-space mapping.

Pixel rows grow downward while plot y grows upward, so y is negated.
All functions are pure in the Viewport and never round.
"""

import numpy as np


def to_pixel(x, y, viewport):
    """Map a plot-space point to logical pixel coordinates."""
    ox, oy = viewport.origin
    return ox + x * viewport.scale, oy - y * viewport.scale


def to_pixel_x(x, viewport):
    ox, _ = viewport.origin
    return ox + x * viewport.scale


def to_pixel_y(y, viewport):
    """Map plot y (scalar or array) to pixel rows."""
    _, oy = viewport.origin
    return oy - y * viewport.scale


def to_plot_x(px, viewport):
    """Map a pixel column (scalar or array) back to plot x."""
    ox, _ = viewport.origin
    return (px - ox) / viewport.scale


def pixel_columns(viewport):
    """Integer pixel columns [0, width) as a float array."""
    return np.arange(int(np.ceil(viewport.width)), dtype=float)


def column_plot_xs(viewport):
    """Plot x for every pixel column, one sample per column."""
    return to_plot_x(pixel_columns(viewport), viewport)
