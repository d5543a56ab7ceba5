"""Short explanations of what each parameter does to the curve."""

from params import Field

IDLE_NOTE = "Move a slider to see how the wave changes..."

OBSERVATION_NOTES = {
    Field.AMPLITUDE: (
        "A (amplitude): vertical stretch. Watch the distance from the peaks "
        "to the centre line grow as A increases."
    ),
    Field.FREQUENCY: (
        "ω (frequency): horizontal stretch. A larger ω packs more "
        "peaks into each unit of length."
    ),
    Field.PHASE: (
        "φ (phase): horizontal shift. A positive φ moves the wave "
        "left, a negative one moves it right."
    ),
    Field.OFFSET: (
        "B (offset): vertical shift. Watch the wave's centre line move "
        "relative to the x axis."
    ),
}


def observation_note(field):
    """Note for the last changed field, or the idle prompt for None."""
    if field is None:
        return IDLE_NOTE
    return OBSERVATION_NOTES[field]
