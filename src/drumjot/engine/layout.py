"""Align a loop's tracks and position bars and notes in pixels."""

from collections.abc import Iterable, Sequence
from fractions import Fraction

from drumjot.config import LayoutConfig
from drumjot.engine.segmentation import rest_bar, segment_track
from drumjot.errors import UndeclaredTrackReference
from drumjot.models.jot import LoopSpec, NoteEvent, TimeSignature
from drumjot.models.layout import Bar, PositionedNote, RenderedLoop, RenderedTrack
from drumjot.units import Pixels, QuarterNotes, to_pixels

# Hairline border at the end of every bar
BAR_BORDER = Pixels(1.0)


def bar_width(time: TimeSignature, quarter_note_gap: Pixels) -> Pixels:
    return Pixels(to_pixels(time.bar_length, quarter_note_gap) + BAR_BORDER)


def track_color(index: int, palette: Sequence[str]) -> str:
    """Colour for the track at ``index`` in the declared track list.

    Cycles when there are more tracks than colours.
    """
    return palette[index % len(palette)]


def position_bar(
    notes: Sequence[NoteEvent], offset: Pixels, quarter_note_gap: Pixels
) -> Bar:
    """Place each note after the ones before it in the bar."""
    positioned = []
    elapsed = QuarterNotes(Fraction(0))
    for note in notes:
        positioned.append(PositionedNote.place(note, to_pixels(elapsed, quarter_note_gap)))
        elapsed = QuarterNotes(elapsed + note.length)
    return Bar(horizontal_offset=offset, notes=tuple(positioned))


def check_track_names(loop: LoopSpec, track_names: Sequence[str]) -> None:
    """Raise if the loop uses a track the jot does not declare."""
    for name in loop.tracks:
        if name not in track_names:
            raise UndeclaredTrackReference(name, track_names)


def layout_loop(
    loop: LoopSpec, track_names: Sequence[str], config: LayoutConfig
) -> RenderedLoop:
    """Segment every track of ``loop`` and lay them out in lockstep.

    Tracks with fewer bars than the longest one are padded with bars of
    rests. Tracks are emitted in declared order; declared tracks that the
    loop does not use are left out. The loop is positioned at offset 0;
    ``loop_offsets`` places it within a jot.

    Raises:
        UndeclaredTrackReference: If the loop uses an undeclared track.
        UnrepresentableDuration: If a track cannot be segmented.
    """
    check_track_names(loop, track_names)

    gap = config.quarter_note_gap
    width = bar_width(loop.time, gap)

    segmented = {
        name: segment_track(loop.time, loop.tracks[name])
        for name in track_names
        if name in loop.tracks
    }
    max_bars = max((len(bars) for bars in segmented.values()), default=0)

    tracks: dict[str, RenderedTrack] = {}
    for index, name in enumerate(track_names):
        if name not in segmented:
            continue
        bars = segmented[name]
        bars.extend(rest_bar(loop.time) for _ in range(max_bars - len(bars)))
        tracks[name] = RenderedTrack(
            name=name,
            color=track_color(index, config.palette),
            bars=tuple(
                position_bar(notes, Pixels(i * width), gap) for i, notes in enumerate(bars)
            ),
            height=config.track_height,
        )

    return RenderedLoop(
        time=loop.time,
        horizontal_offset=Pixels(0.0),
        total_width=Pixels(max_bars * width),
        bar_width=width,
        tracks=tracks,
        repeats=loop.repeats,
    )


def loop_offsets(loops: Iterable[RenderedLoop]) -> list[Pixels]:
    """Horizontal start of each loop when laid out left to right.

    Every loop is repeated in place before the next one begins.
    """
    offsets = []
    x = 0.0
    for loop in loops:
        offsets.append(Pixels(x))
        x += loop.span
    return offsets
