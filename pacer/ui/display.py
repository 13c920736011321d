# pacer/ui/display.py
# Rich rendering for playlists, workouts, transitions & run summaries

from __future__ import annotations

from typing import Sequence

from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
from rich.markup import escape
from rich.table import Table

from ..core.bpm import BpmMatchingConfig
from ..core.playlist_engine import GeneratedPlaylist
from ..core.types import Segment
from ..core.workout import Workout
from ..pacer_io.console import console, get_console


# * Format milliseconds as m:ss
def format_clock(ms: int) -> str:
    seconds = max(0, ms) // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def _optional(value: int | None) -> str:
    return "-" if value is None else str(value)


# * Table of playlist segments in playback order
def playlist_table(segments: Sequence[Segment], title: str = "Playlist") -> Table:
    table = Table(title=title, title_style="bold cyan", header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Label")
    table.add_column("Cadence", justify="right")
    table.add_column("BPM", justify="right")
    table.add_column("URI", style="dim", overflow="fold")

    for index, segment in enumerate(segments, start=1):
        table.add_row(
            str(index),
            format_clock(segment.start_ms),
            format_clock(segment.end_ms),
            format_clock(segment.duration_ms),
            segment.label,
            _optional(segment.target_cadence),
            _optional(segment.bpm),
            segment.uri,
        )
    return table


# * Table of workout blocks w/ power targets & text events
def workout_table(workout: Workout) -> Table:
    table = Table(
        title=workout.name or "Workout", title_style="bold cyan", header_style="bold"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Block")
    table.add_column("Duration", justify="right")
    table.add_column("Cadence", justify="right")
    table.add_column("Messages", style="dim")

    for index, block in enumerate(workout.blocks, start=1):
        messages = "\n".join(f"+{m.time_offset}s {m.message}" for m in block.messages)
        table.add_row(
            str(index),
            block.describe(),
            format_clock(block.duration * 1000),
            _optional(block.cadence),
            messages,
        )
    return table


def print_playlist(segments: Sequence[Segment], title: str = "Playlist") -> None:
    console.print(playlist_table(segments, title))
    total = segments[-1].end_ms if segments else 0
    console.print(f"[dim]{len(segments)} segments, total {format_clock(total)}[/]")


def print_workout(workout: Workout) -> None:
    if workout.author:
        console.print(f"[dim]by {workout.author}[/]")
    if workout.description:
        console.print(workout.description)
    console.print(workout_table(workout))
    console.print(
        f"[dim]{len(workout.blocks)} blocks, total {format_clock(workout.total_duration * 1000)}[/]"
    )


# * Summary for a generated playlist incl. clipped tracks & cadence fit
def print_generation_summary(
    playlist: GeneratedPlaylist, config: BpmMatchingConfig | None = None
) -> None:
    clipped = sum(1 for s in playlist.selections if s.is_clipped)
    console.print(
        f"[green]✓[/] Generated [bold]{len(playlist.selections)}[/] tracks for "
        f"[bold]{playlist.workout_name or playlist.workout_id}[/] "
        f"({format_clock(playlist.total_duration_s * 1000)}, {clipped} clipped)"
    )
    config = config or BpmMatchingConfig()
    console.print(
        f"[dim]{playlist.cadence_matches(config)} tracks within "
        f"{config.tolerance_percent}% of cadence, "
        f"average match score {playlist.average_match_score():.0f}/100[/]"
    )


# * One line per segment transition
def print_transition(index: int, total: int, segment: Segment, elapsed_ms: int) -> None:
    console.print(
        f"[dim]{format_clock(elapsed_ms)}[/] [bold cyan]▶[/] "
        f"[{index + 1}/{total}] {escape(segment.label)} "
        f"[dim]({format_clock(segment.duration_ms)})[/]"
    )


def print_run_summary(transitions: int, elapsed_ms: int, completed: bool) -> None:
    status = "[green]Workout complete[/]" if completed else "[yellow]Workout stopped[/]"
    console.print(
        f"{status} after {format_clock(elapsed_ms)} ({transitions} transitions)"
    )


# * Transient progress bar tracking workout completion
def build_run_progress() -> Progress:
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        TimeElapsedColumn(),
        console=get_console(),
        transient=True,
    )
