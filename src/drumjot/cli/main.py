"""Main CLI entry point for drumjot."""

import json

import click
from rich.console import Console
from rich.table import Table

from drumjot import __version__
from drumjot.config import get_settings
from drumjot.duration import SMALLEST_UNIT
from drumjot.models.layout import Bar, RenderedLoop

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="drumjot")
def main() -> None:
    """drumjot - percussion loops laid out as a bar grid.

    Groups each track's notes into bars, splits notes that cross a bar line,
    and pads tracks so every loop renders in lockstep.
    """
    pass


@main.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the computed layout as JSON instead of a grid",
)
@click.option(
    "--gap",
    type=click.FloatRange(min=0, min_open=True),
    help="Width of one quarter note in pixels",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show cache misses and loop failures",
)
def demo(as_json: bool, gap: float | None, verbose: bool) -> None:
    """Lay out the built-in rock loop."""
    from drumjot.engine import LayoutEngine
    from drumjot.fixtures import rock_jot
    from drumjot.serialize import to_serializable

    settings = get_settings()

    # Apply CLI overrides
    if gap is not None:
        settings.quarter_note_gap_pixels = gap
    if verbose:
        settings.verbose = True

    engine = LayoutEngine.from_settings(settings)
    result = engine.run(rock_jot())

    if as_json:
        click.echo(json.dumps(to_serializable(result), indent=2))
    else:
        console.print(f"[bold blue]{result.title}[/bold blue]")
        for outcome in result.outcomes:
            if outcome.loop is not None:
                console.print(_loop_table(outcome.index, outcome.loop))

    if not result.success:
        for error in result.errors:
            console.print(f"[red]Error: {error}[/red]")
        raise SystemExit(1)


@main.command()
def info() -> None:
    """Show the current layout configuration."""
    settings = get_settings()

    console.print("[bold]Configuration[/bold]")
    console.print(f"  Quarter note gap: {settings.quarter_note_gap_pixels}px")
    console.print(f"  Note width: {settings.note_width}px")
    console.print(f"  Track height: {settings.track_height}px")
    console.print(f"  Palette: {', '.join(settings.palette_colors)}")
    console.print(f"  Cache size: {settings.cache_size}")


def _loop_table(index: int, loop: RenderedLoop) -> Table:
    table = Table(
        title=(
            f"Loop {index + 1}: {loop.time}, {loop.bar_count} bars x{loop.repeats} "
            f"at {loop.horizontal_offset:g}px"
        ),
        title_justify="left",
    )
    table.add_column("Track")
    table.add_column("Bars", justify="right")
    table.add_column("Grid", no_wrap=True)
    for track in loop.tracks.values():
        grid = " | ".join(format_bar(bar) for bar in track.bars)
        table.add_row(f"[{track.color}]{track.name}[/]", str(len(track.bars)), grid)
    return table


def format_bar(bar: Bar) -> str:
    """Text grid for a bar, one column per sixteenth note.

    ``X`` is an accented hit, ``x`` a hit, ``.`` the sustain of a hit and
    ``-`` silence.
    """
    cells = []
    for note in bar.notes:
        columns = int(note.length / SMALLEST_UNIT)
        if note.rest:
            cells.append("-" * columns)
        else:
            head = "X" if note.accent else "x"
            cells.append(head + "." * (columns - 1))
    return "".join(cells)


if __name__ == "__main__":
    main()
