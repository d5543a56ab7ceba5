"""Background grid, axes and pi-multiple tick labels.

Geometry is computed by pure functions returning NamedTuples so it can be
tested without a QPainter; draw_grid() turns it into painter calls.
Vertical grid lines sit on the pi/2 ticks, horizontal ones every
GRID_STEP_PX pixels anchored to the x axis.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QFont, QPainter, QPen

from sinewave.mapping import to_pixel_x


# Drawing constants
TICK_STEP = math.pi / 2
GRID_STEP_PX = 50.0
TICK_HALF_LENGTH = 5.0
LABEL_OFFSET = 8.0
LABEL_BOX_WIDTH = 60.0
LABEL_BOX_HEIGHT = 16.0
LABEL_POINT_SIZE = 9.0

GRID_COLOR = QColor(255, 255, 255, 38)
AXIS_COLOR = QColor(255, 255, 255, 153)
LABEL_COLOR = QColor(255, 255, 255, 204)
AXIS_WIDTH = 2.0


class Tick(NamedTuple):
    """A labelled tick on the x axis.

    Attributes:
        index: Multiple of pi/2 this tick marks.
        px: Pixel column of the tick.
        label: Symbolic label, e.g. "3π/2".
    """

    index: int
    px: float
    label: str


class GridLines(NamedTuple):
    """Pixel positions of background grid lines."""

    vertical: list[float]
    horizontal: list[float]


def pi_tick_label(i: int) -> str | None:
    """Symbolic label for the tick at i * pi/2, or None for the origin.

    Even indices are whole multiples of pi and odd ones halves; a
    coefficient of 1 is omitted.
    """
    if i == 0:
        return None
    sign = "-" if i < 0 else ""
    n = abs(i)
    if n % 2 == 0:
        half = n // 2
        return sign + ("" if half == 1 else str(half)) + "π"
    return sign + ("π/2" if n == 1 else f"{n}π/2")


def visible_tick_indices(viewport) -> range:
    """Indices i whose tick i * pi/2 lands inside [0, width]."""
    ox, _ = viewport.origin
    step_px = TICK_STEP * viewport.scale
    first = math.ceil((0.0 - ox) / step_px)
    last = math.floor((viewport.width - ox) / step_px)
    return range(first, last + 1)


def compute_ticks(viewport) -> list[Tick]:
    """Labelled ticks inside the viewport; the origin tick is skipped."""
    ticks: list[Tick] = []
    for i in visible_tick_indices(viewport):
        label = pi_tick_label(i)
        if label is None:
            continue
        px = to_pixel_x(i * TICK_STEP, viewport)
        if px < 0 or px > viewport.width:
            continue
        ticks.append(Tick(index=i, px=px, label=label))
    return ticks


def grid_lines(viewport) -> GridLines:
    """Background grid line positions for the viewport."""
    ox, oy = viewport.origin
    vertical = [
        to_pixel_x(i * TICK_STEP, viewport)
        for i in visible_tick_indices(viewport)
    ]
    horizontal = []
    y = oy % GRID_STEP_PX
    while y < viewport.height:
        horizontal.append(y)
        y += GRID_STEP_PX
    return GridLines(vertical=vertical, horizontal=horizontal)


def draw_grid(painter: QPainter, viewport) -> None:
    """Draw grid, axes and ticks. Later items are drawn on top.

    Args:
        painter: Active QPainter in logical pixel coordinates.
        viewport: Current Viewport.
    """
    w, h = viewport.width, viewport.height
    ox, oy = viewport.origin

    lines = grid_lines(viewport)
    grid_pen = QPen(GRID_COLOR)
    grid_pen.setWidthF(1.0)
    painter.setPen(grid_pen)
    for x in lines.vertical:
        painter.drawLine(QPointF(x, 0), QPointF(x, h))
    for y in lines.horizontal:
        painter.drawLine(QPointF(0, y), QPointF(w, y))

    axis_pen = QPen(AXIS_COLOR)
    axis_pen.setWidthF(AXIS_WIDTH)
    painter.setPen(axis_pen)
    painter.drawLine(QPointF(0, oy), QPointF(w, oy))
    painter.drawLine(QPointF(ox, 0), QPointF(ox, h))

    font = QFont()
    font.setPointSizeF(LABEL_POINT_SIZE)
    painter.setFont(font)
    for tick in compute_ticks(viewport):
        painter.setPen(axis_pen)
        painter.drawLine(
            QPointF(tick.px, oy - TICK_HALF_LENGTH),
            QPointF(tick.px, oy + TICK_HALF_LENGTH),
        )
        painter.setPen(LABEL_COLOR)
        painter.drawText(
            QRectF(tick.px - LABEL_BOX_WIDTH / 2, oy + LABEL_OFFSET,
                   LABEL_BOX_WIDTH, LABEL_BOX_HEIGHT),
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            tick.label,
        )
