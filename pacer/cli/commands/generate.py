# pacer/cli/commands/generate.py
# Build a BPM-matched playlist for a workout from a local track catalog

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.playlist_engine import generate_playlist
from ...core.verbose import vlog_config
from ...pacer_io import read_catalog, read_workout, write_playlist
from ...pacer_io.console import console
from ...ui.display import print_generation_summary, print_playlist
from ..app import app
from ..decorators import handle_pacer_error


@app.command()
@handle_pacer_error
def generate(
    ctx: typer.Context,
    workout_path: Path = typer.Argument(..., help="Zwift .zwo workout file"),
    catalog_path: Path = typer.Argument(..., help="Track catalog JSON file"),
    out_json: Optional[Path] = typer.Option(
        None, "--out-json", "-o", help="Playlist output path (default from config)"
    ),
    min_clip: Optional[int] = typer.Option(
        None, "--min-clip", min=0, help="Shortest clipped track in seconds"
    ),
) -> None:
    """Fill each workout block with catalog tracks ranked by cadence fit."""
    settings = get_settings(ctx)
    out_path = out_json if out_json is not None else settings.playlist_path
    min_clip_s = min_clip if min_clip is not None else settings.min_clip_seconds
    vlog_config("min_clip_seconds", min_clip_s)
    vlog_config("alternatives", settings.alternatives)

    parsed = read_workout(workout_path)
    tracks = read_catalog(catalog_path)
    playlist = generate_playlist(
        parsed, tracks, min_clip_s=min_clip_s, alternatives=settings.alternatives
    )
    segments = playlist.to_segments()

    print_playlist(segments, title=parsed.name or str(workout_path))
    print_generation_summary(playlist, settings.bpm_config)
    write_playlist(segments, out_path)
    console.print(f"[green]✓[/] Wrote playlist → {out_path}")
