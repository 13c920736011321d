# pacer/cli/helpers.py
# Shared CLI helpers for resolving playlist sources

from __future__ import annotations

from pathlib import Path

import typer

from ..core.demo import demo_segments
from ..core.types import Segment
from ..pacer_io import read_playlist


# * Resolve segments from --demo or a playlist JSON path
def load_segments(playlist: Path | None, demo: bool) -> list[Segment]:
    if demo:
        if playlist is not None:
            raise typer.BadParameter("Pass either a playlist file or --demo, not both")
        return list(demo_segments())
    if playlist is None:
        raise typer.BadParameter("Missing playlist file (or use --demo)")
    return read_playlist(playlist)
