"""Built-in example jots."""

from drumjot.duration import Duration
from drumjot.models.jot import JotSpec, LoopSpec, NoteEvent, TimeSignature

eighth = NoteEvent(Duration.EIGHTH)
quarter = NoteEvent(Duration.QUARTER)
half = NoteEvent(Duration.HALF)

quarter_rest = NoteEvent.rest_of(Duration.QUARTER)
half_rest = NoteEvent.rest_of(Duration.HALF)

FOUR_FOUR = TimeSignature(count=4, unit=Duration.QUARTER)


def rock_jot() -> JotSpec:
    """Two bars of a basic rock beat, then two bars of hi-hat alone."""
    return JotSpec(
        title="Simple rock loop",
        track_names=["hihat", "snare", "kick"],
        loops=[
            LoopSpec(
                time=FOUR_FOUR,
                tracks={
                    "hihat": [eighth] * 16,
                    "snare": [quarter_rest, quarter] * 4,
                    "kick": [quarter] * 8,
                },
                repeats=2,
            ),
            LoopSpec(
                time=FOUR_FOUR,
                tracks={
                    "hihat": [eighth] * 8,
                    "snare": [],
                    "kick": [],
                },
                repeats=2,
            ),
        ],
    )
