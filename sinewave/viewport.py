"""Viewport: logical size, device pixel ratio, scale and plot origin.

A Viewport is rebuilt from scratch on every resize. Only the scale is
carried over, and it is a fixed constant rather than derived from size.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PIXELS_PER_UNIT = 100.0
FALLBACK_WIDTH = 800
FALLBACK_HEIGHT = 600

# Origin placement as a fraction of the logical size
ORIGIN_X_FRACTION = 0.25
ORIGIN_Y_FRACTION = 0.5


def _usable(value) -> bool:
    return value is not None and math.isfinite(value) and value > 0


@dataclass(frozen=True)
class Viewport:
    """Visible drawing area in logical pixels.

    Attributes:
        width: Logical width in pixels.
        height: Logical height in pixels.
        device_pixel_ratio: Device pixels per logical pixel.
        scale: Logical pixels per plot unit.
    """

    width: float = FALLBACK_WIDTH
    height: float = FALLBACK_HEIGHT
    device_pixel_ratio: float = 1.0
    scale: float = PIXELS_PER_UNIT

    def __post_init__(self):
        if not self.scale > 0:
            raise ValueError(f"Viewport scale must be positive, got {self.scale}")

    @property
    def pixel_width(self) -> int:
        """Backing buffer width in device pixels."""
        return int(round(self.width * self.device_pixel_ratio))

    @property
    def pixel_height(self) -> int:
        return int(round(self.height * self.device_pixel_ratio))

    @property
    def origin(self) -> tuple[float, float]:
        """Plot origin in logical pixel coordinates."""
        return self.width * ORIGIN_X_FRACTION, self.height * ORIGIN_Y_FRACTION

    @property
    def is_empty(self) -> bool:
        return self.pixel_width <= 0 or self.pixel_height <= 0

    def resized(self, container_width, container_height, device_pixel_ratio=None):
        """Return a new Viewport for a new container size, keeping the scale."""
        return make_viewport(
            container_width, container_height, device_pixel_ratio,
            scale=self.scale,
        )


def make_viewport(container_width, container_height, device_pixel_ratio=None,
                  scale=PIXELS_PER_UNIT):
    """Build a Viewport for a container, substituting fallbacks.

    Zero, negative, missing or non-finite dimensions fall back to
    FALLBACK_WIDTH x FALLBACK_HEIGHT; a bad ratio falls back to 1.0.
    """
    width = container_width if _usable(container_width) else FALLBACK_WIDTH
    height = container_height if _usable(container_height) else FALLBACK_HEIGHT
    dpr = device_pixel_ratio if _usable(device_pixel_ratio) else 1.0

    viewport = Viewport(
        width=float(width),
        height=float(height),
        device_pixel_ratio=float(dpr),
        scale=scale,
    )
    logger.debug("Canvas resized: %sx%s at %s x", width, height, dpr)
    return viewport
