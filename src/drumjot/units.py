"""Unit types for the two numeric spaces of a layout.

Durations are measured in quarter notes and kept as exact fractions; screen
positions are measured in pixels. The only way from one to the other is
``to_pixels``, which applies the layout scale.
"""

from fractions import Fraction
from typing import NewType

# Screen distance, relative to the enclosing element
Pixels = NewType("Pixels", float)

# Musical length where a quarter note is 1
QuarterNotes = NewType("QuarterNotes", Fraction)


def to_pixels(length: QuarterNotes, quarter_note_gap: Pixels) -> Pixels:
    """Convert a musical length to pixels at the given quarter-note width."""
    return Pixels(float(length * Fraction(quarter_note_gap)))
