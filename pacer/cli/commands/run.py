# pacer/cli/commands/run.py
# Drive a playlist in real (or fast-forwarded) time, printing each segment transition

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ...config.settings import get_settings
from ...core.clock import ScaledClock, system_clock_ms
from ...core.timer import PlaybackTimer
from ...core.types import Segment
from ...core.verbose import vlog_config
from ...ui.display import build_run_progress, print_run_summary, print_transition
from ..app import app
from ..decorators import handle_pacer_error
from ..helpers import load_segments
from ..runner import run_playlist


@app.command()
@handle_pacer_error
def run(
    ctx: typer.Context,
    playlist: Optional[Path] = typer.Argument(None, help="Playlist JSON file"),
    demo: bool = typer.Option(False, "--demo", help="Use the built-in demo playlist"),
    speed: Optional[float] = typer.Option(
        None, "--speed", "-s", min=0.001, help="Playback speed multiplier (default from config)"
    ),
    tick_ms: Optional[int] = typer.Option(
        None, "--tick-ms", min=10, help="Poll interval in milliseconds (default from config)"
    ),
) -> None:
    """Play a segment timeline & report when the active segment changes."""
    settings = get_settings(ctx)
    segments = load_segments(playlist, demo)
    speed = speed if speed is not None else settings.speed
    tick_ms = tick_ms if tick_ms is not None else settings.tick_ms
    vlog_config("speed", speed)
    vlog_config("tick_ms", tick_ms)

    clock = ScaledClock(system_clock_ms, speed)
    timer = PlaybackTimer(clock)
    total = len(segments)

    with build_run_progress() as progress:
        task = progress.add_task(
            "Workout", total=max(1, segments[-1].end_ms if segments else 1)
        )

        def on_transition(index: int, segment: Segment) -> None:
            print_transition(index, total, segment, timer.elapsed_ms())

        def on_tick(t: PlaybackTimer) -> None:
            current = t.current_segment()
            label = escape(current.label) if current is not None else "..."
            progress.update(
                task,
                completed=min(t.elapsed_ms(), t.total_duration_ms()),
                description=f"{label} [dim]({t.remaining_in_current_segment_seconds()}s left)[/]",
            )

        summary = run_playlist(
            timer,
            segments,
            tick_ms=tick_ms,
            on_transition=on_transition,
            on_tick=on_tick,
        )

    print_run_summary(summary.transitions, summary.elapsed_ms, summary.completed)
