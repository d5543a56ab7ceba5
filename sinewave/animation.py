"""Perpetual per-frame redraw driver.

Every tick takes one ParamState snapshot and hands it, with the current
Viewport, to a presenter. There is no dirty flag: frames are redrawn
whether or not anything changed. The loop idles while the viewport has
no size and never stops on its own; stop() simply ceases rescheduling.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import NamedTuple

from PyQt6.QtCore import QTimer

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class Frame(NamedTuple):
    """Everything one frame is drawn from."""

    params: object
    viewport: object
    index: int


class AnimationLoop:
    """Idle/Running redraw loop scheduled on a QTimer."""

    FPS = 60

    def __init__(
        self,
        state,
        viewport_source: Callable[[], object],
        present: Callable[[Frame], None],
        fps: int | None = None,
        on_state_change: Callable[[LoopState], None] | None = None,
    ):
        self.state = state
        self.fps = fps or self.FPS
        self.loop_state = LoopState.IDLE
        self.frame_count = 0
        self.error_count = 0
        self._viewport_source = viewport_source
        self._present = present
        self._on_state_change = on_state_change
        self._timer = None

    @property
    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def step(self) -> Frame | None:
        """Run one frame. Returns the drawn Frame, or None while idle."""
        viewport = self._viewport_source()
        if viewport is None or viewport.is_empty:
            if self.loop_state is not LoopState.IDLE:
                logger.debug("Viewport has no size; loop idle")
                self._enter(LoopState.IDLE)
            return None

        if self.loop_state is LoopState.IDLE:
            logger.debug(
                "Loop running at %dx%d device pixels",
                viewport.pixel_width, viewport.pixel_height,
            )
            self._enter(LoopState.RUNNING)

        frame = Frame(self.state.get(), viewport, self.frame_count)
        self.frame_count += 1
        try:
            self._present(frame)
        except Exception:
            self.error_count += 1
            logger.exception("Frame %d failed to draw", frame.index)
        return frame

    def _enter(self, loop_state: LoopState) -> None:
        self.loop_state = loop_state
        if self._on_state_change is not None:
            self._on_state_change(loop_state)

    def start(self) -> None:
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setInterval(int(1000 / self.fps))
            self._timer.timeout.connect(self.step)
        self._timer.start()
        logger.info("Animation loop started at %d fps", self.fps)

    def stop(self) -> None:
        if self._timer is not None and self._timer.isActive():
            self._timer.stop()
            logger.info("Animation loop stopped after %d frames", self.frame_count)
