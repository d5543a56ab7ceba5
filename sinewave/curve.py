"""Sinusoid and reference-curve rendering.

Both curves are sampled once per logical pixel column and drawn as
polylines. The amplitude annotation marks the peak nearest the y axis,
x = (pi/2 - phi) / omega, from the centre line y = B up to y = A + B.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QColor, QPainter, QPen, QPolygonF

from params import WaveParams, evaluate
from sinewave.mapping import column_plot_xs, pixel_columns, to_pixel, to_pixel_y

REFERENCE_PARAMS = WaveParams()

# Annotation is skipped below this |A|
MIN_ANNOTATED_AMPLITUDE = 0.1
ANNOTATION_LABEL_DX = 5.0

CURVE_COLOR = QColor(56, 189, 248)
CURVE_WIDTH = 4.0
GLOW_WIDTH = 12.0
GLOW_ALPHA = 60
REFERENCE_COLOR = QColor(250, 204, 21, 120)
REFERENCE_WIDTH = 1.5
CENTER_LINE_COLOR = QColor(255, 255, 255, 102)
ANNOTATION_COLOR = QColor(255, 255, 255, 204)


class CurveSamples(NamedTuple):
    """Pixel-space polyline, one point per column."""

    px: np.ndarray
    py: np.ndarray


class AmplitudeAnnotation(NamedTuple):
    """Vertical amplitude marker at a visible peak.

    Attributes:
        px: Pixel column of the peak.
        base_py: Pixel row of the centre line (y = B).
        peak_py: Pixel row of the peak (y = A + B).
        label: Text such as "A = 1.0".
    """

    px: float
    base_py: float
    peak_py: float
    label: str


def sample_curve(params, viewport) -> CurveSamples:
    """Sample y = A sin(omega x + phi) + B at every pixel column."""
    xs = column_plot_xs(viewport)
    ys = evaluate(params, xs)
    return CurveSamples(px=pixel_columns(viewport), py=to_pixel_y(ys, viewport))


def sample_reference(viewport) -> CurveSamples:
    """Sample the fixed reference curve y = sin(x)."""
    return sample_curve(REFERENCE_PARAMS, viewport)


def center_line_y(params, viewport) -> float:
    """Pixel row of the curve's own axis of oscillation."""
    return to_pixel_y(params.offset, viewport)


def peak_plot_x(params) -> float | None:
    """Plot x of the peak nearest the origin, or None when omega is 0."""
    if params.frequency == 0:
        return None
    x = (math.pi / 2 - params.phase) / params.frequency
    return x if math.isfinite(x) else None


def compute_amplitude_annotation(params, viewport) -> AmplitudeAnnotation | None:
    """Annotation for the current params, or None if it would be skipped.

    Skipped when |A| < MIN_ANNOTATED_AMPLITUDE, when omega is 0, or when
    the peak falls outside [0, width).
    """
    if abs(params.amplitude) < MIN_ANNOTATED_AMPLITUDE:
        return None
    x_peak = peak_plot_x(params)
    if x_peak is None:
        return None
    px, peak_py = to_pixel(x_peak, params.amplitude + params.offset, viewport)
    if not 0 <= px < viewport.width:
        return None
    return AmplitudeAnnotation(
        px=px,
        base_py=center_line_y(params, viewport),
        peak_py=peak_py,
        label=f"A = {params.amplitude:.1f}",
    )


def _polyline(samples: CurveSamples) -> QPolygonF:
    polygon = QPolygonF()
    for x, y in zip(samples.px.tolist(), samples.py.tolist()):
        polygon.append(QPointF(x, y))
    return polygon


def draw_curves(
    painter: QPainter,
    params,
    viewport,
    show_reference: bool = True,
) -> None:
    """Draw reference curve, centre line, main curve and annotation.

    Args:
        painter: Active QPainter in logical pixel coordinates.
        params: WaveParams snapshot for this frame.
        viewport: Current Viewport.
        show_reference: Draw the dashed y = sin(x) reference underneath.
    """
    painter.setBrush(Qt.BrushStyle.NoBrush)

    if show_reference:
        ref_pen = QPen(REFERENCE_COLOR)
        ref_pen.setWidthF(REFERENCE_WIDTH)
        ref_pen.setStyle(Qt.PenStyle.DashLine)
        painter.setPen(ref_pen)
        painter.drawPolyline(_polyline(sample_reference(viewport)))

    base_py = center_line_y(params, viewport)
    center_pen = QPen(CENTER_LINE_COLOR)
    center_pen.setWidthF(1.0)
    center_pen.setDashPattern([5.0, 5.0])
    painter.setPen(center_pen)
    painter.drawLine(QPointF(0, base_py), QPointF(viewport.width, base_py))

    curve = _polyline(sample_curve(params, viewport))
    glow = QColor(CURVE_COLOR)
    glow.setAlpha(GLOW_ALPHA)
    glow_pen = QPen(glow)
    glow_pen.setWidthF(GLOW_WIDTH)
    glow_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    glow_pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    painter.setPen(glow_pen)
    painter.drawPolyline(curve)

    curve_pen = QPen(CURVE_COLOR)
    curve_pen.setWidthF(CURVE_WIDTH)
    curve_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    curve_pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    painter.setPen(curve_pen)
    painter.drawPolyline(curve)

    annotation = compute_amplitude_annotation(params, viewport)
    if annotation is None:
        return
    painter.setPen(QPen(ANNOTATION_COLOR, 1.0))
    painter.drawLine(
        QPointF(annotation.px, annotation.base_py),
        QPointF(annotation.px, annotation.peak_py),
    )
    mid_py = (annotation.base_py + annotation.peak_py) / 2
    painter.drawText(
        QPointF(annotation.px + ANNOTATION_LABEL_DX, mid_py),
        annotation.label,
    )
