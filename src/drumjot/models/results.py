"""Result models for laying out a whole jot.

Each loop is laid out independently; a loop with bad data becomes a failed
outcome while the rest of the jot still renders.
"""

from dataclasses import dataclass, field

from drumjot.models.layout import RenderedLoop
from drumjot.units import Pixels


@dataclass
class LoopOutcome:
    """Result of laying out one loop."""

    success: bool
    index: int
    loop: RenderedLoop | None = None
    error_message: str | None = None


@dataclass
class JotLayout:
    """Final result of laying out every loop of a jot."""

    title: str
    track_names: tuple[str, ...]
    outcomes: list[LoopOutcome] = field(default_factory=list)
    total_width: Pixels = Pixels(0.0)

    @property
    def success(self) -> bool:
        return all(o.success for o in self.outcomes)

    @property
    def loops(self) -> list[RenderedLoop]:
        """Successfully rendered loops, in jot order."""
        return [o.loop for o in self.outcomes if o.loop is not None]

    @property
    def errors(self) -> list[str]:
        return [
            f"loop {o.index + 1}: {o.error_message}" for o in self.outcomes if not o.success
        ]
