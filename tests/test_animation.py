"""Tests for the animation loop state machine (no running QApplication).

step() is driven directly; start()/stop() need a Qt event loop and are
not exercised here.
"""

import math
import random

import pytest

from params import Field, ParamState, WaveParams
from sinewave.animation import AnimationLoop, Frame, LoopState
from sinewave.curve import compute_amplitude_annotation, sample_curve, sample_reference
from sinewave.grid import compute_ticks, grid_lines
from sinewave.viewport import Viewport, make_viewport


class Recorder:
    """Presenter that keeps every frame it is given."""

    def __init__(self):
        self.frames = []

    def __call__(self, frame):
        self.frames.append(frame)


def _make_loop(viewport=None, present=None, state=None):
    holder = {"viewport": viewport}
    loop = AnimationLoop(
        state or ParamState(),
        viewport_source=lambda: holder["viewport"],
        present=present or Recorder(),
    )
    return loop, holder


class TestIdle:
    """No drawing until the viewport has a size."""

    def test_starts_idle(self):
        loop, _ = _make_loop()
        assert loop.loop_state is LoopState.IDLE

    def test_no_viewport_stays_idle(self):
        recorder = Recorder()
        loop, _ = _make_loop(present=recorder)
        for _ in range(3):
            assert loop.step() is None
        assert loop.loop_state is LoopState.IDLE
        assert recorder.frames == []

    def test_empty_viewport_stays_idle(self):
        loop, _ = _make_loop(Viewport(width=0.0, height=0.0))
        assert loop.step() is None
        assert loop.loop_state is LoopState.IDLE

    def test_recovers_once_measured(self):
        recorder = Recorder()
        loop, holder = _make_loop(present=recorder)
        loop.step()
        holder["viewport"] = make_viewport(640, 480, 1.0)
        frame = loop.step()
        assert loop.loop_state is LoopState.RUNNING
        assert recorder.frames == [frame]


class TestRunning:

    def test_redraws_every_frame_without_changes(self):
        recorder = Recorder()
        loop, _ = _make_loop(make_viewport(800, 600, 1.0), recorder)
        for _ in range(5):
            loop.step()
        assert len(recorder.frames) == 5
        assert [f.index for f in recorder.frames] == [0, 1, 2, 3, 4]

    def test_frame_uses_snapshot(self):
        state = ParamState()
        captured = []

        def present(frame):
            # A mutation during drawing must not change this frame's params
            state.set(Field.AMPLITUDE, 5.0)
            captured.append(frame.params.amplitude)

        loop, _ = _make_loop(make_viewport(800, 600, 1.0), present, state)
        loop.step()
        assert captured == [1.0]
        assert loop.step().params.amplitude == 5.0

    def test_picks_up_resize_next_frame(self):
        loop, holder = _make_loop(make_viewport(800, 600, 1.0))
        first = loop.step()
        holder["viewport"] = first.viewport.resized(1024, 768, 2.0)
        second = loop.step()
        assert second.viewport.pixel_width == 2048
        assert isinstance(second, Frame)

    def test_presenter_error_does_not_stop_loop(self):
        calls = []

        def flaky(frame):
            calls.append(frame.index)
            if frame.index == 1:
                raise RuntimeError("paint failed")

        loop, _ = _make_loop(make_viewport(800, 600, 1.0), flaky)
        for _ in range(4):
            loop.step()
        assert calls == [0, 1, 2, 3]
        assert loop.error_count == 1
        assert loop.loop_state is LoopState.RUNNING


class TestInterleaving:
    """Random mutations and resizes between simulated frames."""

    @staticmethod
    def _draw(frame):
        vp, params = frame.viewport, frame.params
        grid_lines(vp)
        compute_ticks(vp)
        sample_reference(vp)
        samples = sample_curve(params, vp)
        assert len(samples.px) == math.ceil(vp.width)
        compute_amplitude_annotation(params, vp)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_never_raises(self, seed):
        rng = random.Random(seed)
        state = ParamState()
        loop, holder = _make_loop(None, self._draw, state)
        values = [0.0, -0.0, 1e-12, -3.0, 2.5, 1e6, math.nan, math.inf, "x"]

        for _ in range(200):
            action = rng.random()
            if action < 0.5:
                state.set(rng.choice(list(Field)), rng.choice(values))
            elif action < 0.55:
                state.reset()
            elif action < 0.7:
                holder["viewport"] = make_viewport(
                    rng.choice([0, None, 1, 333, 1280]),
                    rng.choice([0, None, 1, 200, 720]),
                    rng.choice([None, 1.0, 1.25, 2.0]),
                )
            elif action < 0.72:
                holder["viewport"] = None
            loop.step()

        assert loop.error_count == 0
        params = state.get()
        assert all(math.isfinite(v) for v in params)

    def test_reset_between_frames(self):
        state = ParamState(WaveParams(3.0, 2.0, 1.0, -1.0))
        loop, _ = _make_loop(make_viewport(800, 600, 1.0), state=state)
        assert loop.step().params == WaveParams(3.0, 2.0, 1.0, -1.0)
        state.reset()
        assert loop.step().params == WaveParams()


class TestStateChangeCallback:

    def test_reports_each_transition(self):
        seen = []
        holder = {"viewport": None}
        loop = AnimationLoop(
            ParamState(), lambda: holder["viewport"], Recorder(),
            on_state_change=seen.append,
        )
        loop.step()
        holder["viewport"] = make_viewport(800, 600, 1.0)
        loop.step()
        loop.step()
        holder["viewport"] = None
        loop.step()
        assert seen == [LoopState.RUNNING, LoopState.IDLE]
