"""Segment a track's note sequence into bars."""

from collections.abc import Sequence
from fractions import Fraction

from drumjot.duration import Duration, minimal_decompose
from drumjot.models.jot import NoteEvent, TimeSignature
from drumjot.units import QuarterNotes


def rests(durations: Sequence[Duration]) -> list[NoteEvent]:
    """Plain rests for each duration."""
    return [NoteEvent.rest_of(d) for d in durations]


def rest_bar(time: TimeSignature) -> list[NoteEvent]:
    """A full bar of rests."""
    return rests(minimal_decompose(time.bar_length))


def tie(note: NoteEvent, durations: Sequence[Duration]) -> list[NoteEvent]:
    """Split ``note`` into fragments of ``durations``.

    Only the first fragment keeps the note's accent and rest flags; the rest
    of the tie is silent.
    """
    if not durations:
        return []
    return [note.with_duration(durations[0]), *rests(durations[1:])]


def segment_track(time: TimeSignature, notes: Sequence[NoteEvent]) -> list[list[NoteEvent]]:
    """Group notes into bars of ``time.bar_length`` quarter notes.

    Notes that cross a bar line are split: the part that fits closes the
    current bar and the overflow opens the next bar as rests. A trailing
    partial bar is filled with rests, and an empty track yields one bar of
    rests.

    Args:
        time: Time signature defining the bar length.
        notes: The track's notes, in order.

    Returns:
        Bars as lists of notes, each summing exactly to the bar length.

    Raises:
        UnrepresentableDuration: If a split or padding length cannot be
            written with standard note values.
    """
    bar_length = time.bar_length
    bars: list[list[NoteEvent]] = []
    current_bar: list[NoteEvent] = []
    current_length = QuarterNotes(Fraction(0))

    for note in notes:
        end = current_length + note.length
        if end == bar_length:
            current_bar.append(note)
            bars.append(current_bar)
            current_bar = []
            current_length = QuarterNotes(Fraction(0))
        elif end > bar_length:
            current_bar.extend(tie(note, minimal_decompose(bar_length - current_length)))
            bars.append(current_bar)

            overflow = end - bar_length
            # Rather than restarting with the whole overflow, emit every full bar
            # of it as a rest bar so no bar exceeds the bar length
            while overflow >= bar_length:
                bars.append(rest_bar(time))
                overflow -= bar_length
            current_bar = rests(minimal_decompose(overflow))
            current_length = QuarterNotes(overflow)
        else:
            current_bar.append(note)
            current_length = QuarterNotes(end)

    if current_bar or (current_length == 0 and not notes):
        current_bar.extend(rests(minimal_decompose(bar_length - current_length)))
        bars.append(current_bar)

    return bars
