"""Sinusoid parameters and the state object that owns them.

The curve is y = A * sin(omega * x + phi) + B. Parameters are stored in
plot units (amplitude, offset) and radians (phase); the phase slider works
in multiples of pi and is converted at the input boundary.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, replace

import numpy as np

logger = logging.getLogger(__name__)


class Field(enum.Enum):
    """The four parameters of the sinusoid."""

    AMPLITUDE = "amplitude"
    FREQUENCY = "frequency"
    PHASE = "phase"
    OFFSET = "offset"


@dataclass(frozen=True)
class WaveParams:
    """Immutable snapshot of the sinusoid parameters."""

    amplitude: float = 1.0
    frequency: float = 1.0
    phase: float = 0.0
    offset: float = 0.0

    def __iter__(self):
        # Allows ``A, w, phi, B = params``
        return iter((self.amplitude, self.frequency, self.phase, self.offset))


DEFAULT_PARAMS = WaveParams()

# Field -> WaveParams attribute
_FIELD_ATTRS = {
    Field.AMPLITUDE: "amplitude",
    Field.FREQUENCY: "frequency",
    Field.PHASE: "phase",
    Field.OFFSET: "offset",
}

# Slider channel value -> stored value
_CHANNEL_CONVERTERS = {
    Field.AMPLITUDE: float,
    Field.FREQUENCY: float,
    Field.PHASE: lambda v: float(v) * math.pi,
    Field.OFFSET: float,
}


def channel_to_field(name):
    """Map an input channel name (or a Field) to its Field.

    Raises ValueError for unknown channel names.
    """
    if isinstance(name, Field):
        return name
    try:
        return Field(name)
    except ValueError:
        raise ValueError(f"Unknown parameter channel: {name!r}") from None


def channel_value(field, raw):
    """Convert a raw channel value to the stored representation."""
    return _CHANNEL_CONVERTERS[channel_to_field(field)](raw)


def evaluate(params, x):
    """Evaluate the sinusoid at plot-space x (scalar or array)."""
    amp, freq, phase, offset = params
    return amp * np.sin(freq * np.asarray(x, dtype=float) + phase) + offset


class ParamState:
    """Owner of the current WaveParams.

    Mutations replace the whole snapshot, so readers holding a snapshot from
    get() never see a half-applied update.
    """

    def __init__(self, params: WaveParams | None = None):
        self._params = params if params is not None else DEFAULT_PARAMS
        self.last_changed: Field | None = None

    def get(self) -> WaveParams:
        return self._params

    def set(self, field, value) -> bool:
        """Store value for field. Returns False if the value was rejected."""
        field = channel_to_field(field)
        if isinstance(value, (bool, np.bool_)):
            logger.warning("Rejected boolean %s value: %r", field.value, value)
            return False
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.warning("Rejected non-numeric %s value: %r", field.value, value)
            return False
        if not math.isfinite(value):
            logger.warning("Rejected non-finite %s value: %r", field.value, value)
            return False
        self._params = replace(self._params, **{_FIELD_ATTRS[field]: value})
        self.last_changed = field
        return True

    update = set

    def update_channel(self, name, raw) -> bool:
        """Apply a raw value from an input channel, converting units."""
        field = channel_to_field(name)
        if isinstance(raw, (bool, np.bool_)):
            return self.set(field, raw)
        try:
            value = channel_value(field, raw)
        except (TypeError, ValueError):
            logger.warning("Rejected malformed %s input: %r", field.value, raw)
            return False
        return self.set(field, value)

    def reset(self) -> WaveParams:
        """Restore the default parameters in a single assignment."""
        self._params = DEFAULT_PARAMS
        self.last_changed = None
        return self._params
