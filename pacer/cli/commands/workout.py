# pacer/cli/commands/workout.py
# Inspect a .zwo workout & optionally export its blocks as a playlist

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...core.workout import workout_segments
from ...pacer_io import read_workout, write_playlist
from ...pacer_io.console import console
from ...ui.display import print_workout
from ..app import app
from ..decorators import handle_pacer_error


@app.command()
@handle_pacer_error
def workout(
    path: Path = typer.Argument(..., help="Zwift .zwo workout file"),
    out_json: Optional[Path] = typer.Option(
        None, "--out-json", "-o", help="Write one segment per block to this playlist file"
    ),
) -> None:
    """Show the blocks of a workout file."""
    parsed = read_workout(path)
    print_workout(parsed)

    if out_json is not None:
        write_playlist(workout_segments(parsed), out_json)
        console.print(f"[green]✓[/] Wrote block playlist → {out_json}")
