"""Errors raised while laying out a jot."""

from collections.abc import Sequence


class DrumjotError(Exception):
    """Base class for layout errors caused by the input data."""


class UnrepresentableDuration(DrumjotError, ValueError):
    """A length cannot be tiled by standard note values.

    Only multiples of a sixteenth note are supported; retrying with the same
    length always fails again.
    """

    def __init__(self, length: object) -> None:
        self.length = length
        super().__init__(f"could not find note composition for length {length}")


class UndeclaredTrackReference(DrumjotError, KeyError):
    """A loop references a track that the jot does not declare."""

    def __init__(self, track_name: str, declared: Sequence[str]) -> None:
        self.track_name = track_name
        self.declared = tuple(declared)
        super().__init__(track_name)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        declared = ", ".join(self.declared) or "none"
        return f"loop references undeclared track '{self.track_name}' (declared: {declared})"
