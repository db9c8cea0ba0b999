"""Data models for drumjot."""

from drumjot.models.jot import JotSpec, LoopSpec, NoteEvent, TimeSignature, Track
from drumjot.models.layout import Bar, PositionedNote, RenderedLoop, RenderedTrack
from drumjot.models.results import JotLayout, LoopOutcome

__all__ = [
    "Bar",
    "JotLayout",
    "JotSpec",
    "LoopOutcome",
    "LoopSpec",
    "NoteEvent",
    "PositionedNote",
    "RenderedLoop",
    "RenderedTrack",
    "TimeSignature",
    "Track",
]
