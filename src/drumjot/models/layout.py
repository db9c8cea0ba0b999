"""Output data models: bars and loops positioned in pixels.

These are consumed read-only by a presentation layer, which maps the pixel
fields straight to screen positions.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType

from drumjot.duration import Duration, weight
from drumjot.geom import Box
from drumjot.models.jot import NoteEvent, TimeSignature
from drumjot.units import Pixels, QuarterNotes


@dataclass(frozen=True)
class PositionedNote:
    """A note fragment with its offset from the start of its bar."""

    duration: Duration
    horizontal_offset: Pixels
    accent: bool = False
    rest: bool = False
    rhythm_divisor: int | None = None

    @classmethod
    def place(cls, note: NoteEvent, offset: Pixels) -> "PositionedNote":
        return cls(
            duration=note.duration,
            horizontal_offset=offset,
            accent=note.accent,
            rest=note.rest,
            rhythm_divisor=note.rhythm_divisor,
        )

    @property
    def length(self) -> QuarterNotes:
        return weight(self.duration)


@dataclass(frozen=True)
class Bar:
    """One measure of a track."""

    horizontal_offset: Pixels  # from the start of the loop
    notes: tuple[PositionedNote, ...]

    @property
    def length(self) -> QuarterNotes:
        return QuarterNotes(sum((n.length for n in self.notes), Fraction(0)))

    @property
    def is_rest(self) -> bool:
        return all(n.rest for n in self.notes)

    def box(self, y: Pixels, height: Pixels, bar_width: Pixels) -> Box:
        """Screen rectangle of this bar for a track row starting at ``y``."""
        return Box(self.horizontal_offset, y, bar_width, height)


@dataclass(frozen=True)
class RenderedTrack:
    """A track's bars within one loop."""

    name: str
    color: str
    bars: tuple[Bar, ...]
    height: Pixels


@dataclass(frozen=True)
class RenderedLoop:
    """A loop with all tracks aligned to the same number of bars."""

    time: TimeSignature
    horizontal_offset: Pixels  # from the start of the jot
    total_width: Pixels  # one repetition
    bar_width: Pixels
    tracks: Mapping[str, RenderedTrack]
    repeats: int

    def __post_init__(self) -> None:
        # Cached and shared between runs, so callers only get a read-only view
        object.__setattr__(self, "tracks", MappingProxyType(dict(self.tracks)))

    @property
    def bar_count(self) -> int:
        return max((len(t.bars) for t in self.tracks.values()), default=0)

    @property
    def span(self) -> Pixels:
        """Width taken by all repetitions."""
        return Pixels(self.total_width * self.repeats)
