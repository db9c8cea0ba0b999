"""Input data models: the authored jot as the layout engine receives it.

All models are frozen value types. A loop is hashable by structure, so an
edited loop is always a different memoization key than the original.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from drumjot.duration import Duration, weight
from drumjot.units import QuarterNotes


def _check_positive_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class TimeSignature:
    """Number of ``unit`` notes per bar, e.g. 4/4 or 6/8."""

    count: int
    unit: Duration = Duration.QUARTER

    def __post_init__(self) -> None:
        _check_positive_int("Time signature count", self.count)

    @property
    def bar_length(self) -> QuarterNotes:
        """Bar length in quarter notes."""
        return QuarterNotes(weight(self.unit) * self.count)

    def __str__(self) -> str:
        denominator = 4 / weight(self.unit)
        return f"{self.count}/{denominator}"


@dataclass(frozen=True)
class NoteEvent:
    """A single hit or rest on one track."""

    duration: Duration
    accent: bool = False
    rest: bool = False
    # Divisor of the duration, e.g. 3 for a triplet. Not used for bar length.
    rhythm_divisor: int | None = None

    def __post_init__(self) -> None:
        if self.rhythm_divisor is not None:
            _check_positive_int("rhythm_divisor", self.rhythm_divisor)

    @property
    def length(self) -> QuarterNotes:
        return weight(self.duration)

    @classmethod
    def rest_of(cls, duration: Duration) -> "NoteEvent":
        return cls(duration=duration, rest=True)

    def with_duration(self, duration: Duration) -> "NoteEvent":
        return replace(self, duration=duration)


# One instrument's notes within a loop
Track = tuple[NoteEvent, ...]


@dataclass(frozen=True)
class LoopSpec:
    """A block of bars shared by all tracks, played ``repeats`` times."""

    time: TimeSignature
    tracks: Mapping[str, Sequence[NoteEvent]] = field(default_factory=dict)
    repeats: int = 1

    def __post_init__(self) -> None:
        _check_positive_int("Loop repeats", self.repeats)
        frozen = {name: tuple(notes) for name, notes in self.tracks.items()}
        object.__setattr__(self, "tracks", MappingProxyType(frozen))

    def key(self) -> tuple:
        """Structural identity of the loop, independent of track order."""
        tracks = tuple(sorted(self.tracks.items(), key=lambda item: item[0]))
        return (self.time, tracks, self.repeats)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoopSpec):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())


@dataclass(frozen=True)
class JotSpec:
    """A titled sequence of loops over a declared, ordered set of tracks."""

    title: str
    track_names: Sequence[str]
    loops: Sequence[LoopSpec] = ()

    def __post_init__(self) -> None:
        if isinstance(self.track_names, str):
            raise ValueError(f"track_names must be a sequence of names, not {self.track_names!r}")
        names = tuple(self.track_names)
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate track names: {', '.join(duplicates)}")
        object.__setattr__(self, "track_names", names)
        object.__setattr__(self, "loops", tuple(self.loops))
