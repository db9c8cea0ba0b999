"""Note durations and minimal decomposition of lengths into standard notes."""

from decimal import Decimal
from enum import IntEnum
from fractions import Fraction

from drumjot.errors import UnrepresentableDuration
from drumjot.units import QuarterNotes


class Duration(IntEnum):
    """Standard note value, ordered by musical length."""

    SIXTEENTH = 0
    EIGHTH = 1
    QUARTER = 2
    HALF = 3
    WHOLE = 4

    @property
    def weight(self) -> QuarterNotes:
        return weight(self)


def weight(duration: Duration) -> QuarterNotes:
    """Length of a duration in quarter notes."""
    match duration:
        case Duration.SIXTEENTH:
            return QuarterNotes(Fraction(1, 4))
        case Duration.EIGHTH:
            return QuarterNotes(Fraction(1, 2))
        case Duration.QUARTER:
            return QuarterNotes(Fraction(1))
        case Duration.HALF:
            return QuarterNotes(Fraction(2))
        case Duration.WHOLE:
            return QuarterNotes(Fraction(4))
    raise ValueError(f"Unknown duration: {duration!r}")


SMALLEST_UNIT = weight(Duration.SIXTEENTH)

# Largest first, for greedy decomposition
_DESCENDING = sorted(Duration, reverse=True)


def to_quarter_notes(length: Fraction | Decimal | int | float | str) -> QuarterNotes:
    """Convert a numeric length to an exact quarter-note fraction.

    Raises:
        UnrepresentableDuration: If the value is not a finite number.
    """
    try:
        return QuarterNotes(Fraction(length))
    except (ValueError, OverflowError, TypeError) as e:
        raise UnrepresentableDuration(length) from e


def minimal_decompose(length: Fraction | Decimal | int | float | str) -> list[Duration]:
    """Return the fewest standard durations that sum exactly to ``length``.

    Repeatedly takes the largest duration that still fits. The weights form a
    canonical coin system (each is a multiple of the next smaller one), so
    the greedy choice is also the shortest sequence.

    Args:
        length: Length in quarter notes. Floats are converted exactly, so
            0.75 works but 0.1 does not.

    Returns:
        Durations in descending order; empty for a zero length.

    Raises:
        UnrepresentableDuration: If ``length`` is negative or not a multiple
            of a sixteenth note.
    """
    remaining = to_quarter_notes(length)
    if remaining < 0 or (remaining / SMALLEST_UNIT).denominator != 1:
        raise UnrepresentableDuration(length)

    durations: list[Duration] = []
    for duration in _DESCENDING:
        count, remaining = divmod(remaining, weight(duration))
        durations.extend([duration] * int(count))
    return durations


def total_length(durations: list[Duration]) -> QuarterNotes:
    """Sum of the weights of ``durations``."""
    return QuarterNotes(sum((weight(d) for d in durations), Fraction(0)))
