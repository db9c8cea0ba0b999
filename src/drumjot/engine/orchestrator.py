"""Layout engine: lays out every loop of a jot."""

from collections.abc import Sequence
from dataclasses import replace

from rich.console import Console
from rich.markup import escape

from drumjot.config import LayoutConfig, Settings
from drumjot.engine.cache import LayoutCache
from drumjot.engine.layout import layout_loop, loop_offsets
from drumjot.errors import DrumjotError
from drumjot.models.jot import JotSpec, LoopSpec
from drumjot.models.layout import RenderedLoop
from drumjot.models.results import JotLayout, LoopOutcome
from drumjot.units import Pixels

console = Console(stderr=True)


class LayoutEngine:
    """Turns jots into positioned bar grids, memoizing per loop."""

    def __init__(
        self,
        config: LayoutConfig | None = None,
        cache: LayoutCache | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Pixel scale and palette. Defaults to ``LayoutConfig()``.
            cache: Memoization table, shared between engines if given.
            verbose: Print cache misses and loop failures.
        """
        self.config = config or LayoutConfig()
        self.cache = cache if cache is not None else LayoutCache()
        self.verbose = verbose

    @classmethod
    def from_settings(cls, settings: Settings) -> "LayoutEngine":
        return cls(
            config=settings.layout_config(),
            cache=LayoutCache(max_entries=settings.cache_size),
            verbose=settings.verbose,
        )

    def layout_loop(self, loop: LoopSpec, track_names: Sequence[str]) -> RenderedLoop:
        """Lay out a single loop at offset 0, reusing a cached result.

        Raises:
            UndeclaredTrackReference: If the loop uses an undeclared track.
            UnrepresentableDuration: If a track cannot be segmented.
        """
        key = (loop, tuple(track_names), self.config)
        rendered = self.cache.get(key)
        if rendered is None:
            if self.verbose:
                console.print(f"  [cyan]layout[/cyan] {loop.time} loop x{loop.repeats}")
            rendered = layout_loop(loop, key[1], self.config)
            self.cache.put(key, rendered)
        return rendered

    def run(self, jot: JotSpec) -> JotLayout:
        """Lay out every loop of ``jot``, left to right.

        A loop with invalid data is reported as a failed outcome and takes no
        space; the other loops are still laid out.

        Args:
            jot: The jot to lay out.

        Returns:
            JotLayout with one outcome per loop.
        """
        result = JotLayout(title=jot.title, track_names=tuple(jot.track_names))
        placed: list[tuple[LoopOutcome, RenderedLoop]] = []

        for index, loop in enumerate(jot.loops):
            try:
                rendered = self.layout_loop(loop, jot.track_names)
            except DrumjotError as e:
                result.outcomes.append(
                    LoopOutcome(success=False, index=index, error_message=str(e))
                )
                if self.verbose:
                    console.print(f"  [red]loop {index + 1}[/red] failed: {escape(str(e))}")
                continue
            outcome = LoopOutcome(success=True, index=index, loop=rendered)
            result.outcomes.append(outcome)
            placed.append((outcome, rendered))

        offsets = loop_offsets(rendered for _, rendered in placed)
        for (outcome, rendered), offset in zip(placed, offsets):
            outcome.loop = replace(rendered, horizontal_offset=offset)

        result.total_width = Pixels(sum(rendered.span for _, rendered in placed))
        return result

    def invalidate(self, loop: LoopSpec) -> None:
        """Forget cached layouts of ``loop`` after its notes were edited."""
        self.cache.invalidate(loop)
