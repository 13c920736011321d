# pacer/cli/commands/show.py
# Print a playlist's segment table & total duration

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...ui.display import print_playlist
from ..app import app
from ..decorators import handle_pacer_error
from ..helpers import load_segments


@app.command()
@handle_pacer_error
def show(
    playlist: Optional[Path] = typer.Argument(None, help="Playlist JSON file"),
    demo: bool = typer.Option(False, "--demo", help="Show the built-in demo playlist"),
) -> None:
    """List the segments of a playlist in playback order."""
    segments = load_segments(playlist, demo)
    title = "Demo playlist" if demo else str(playlist)
    print_playlist(segments, title=title)
