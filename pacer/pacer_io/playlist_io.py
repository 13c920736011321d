# pacer/pacer_io/playlist_io.py
# Read & write playlist (segment) JSON and local track catalog JSON

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from ..core.exceptions import PlaylistFormatError
from ..core.playlist_engine import CatalogTrack
from ..core.types import Segment
from .generics import read_json_safe, write_json_safe


# accept either {"<key>": [...]} or a bare list
def _entries(data: Any, key: str, path: Path) -> list[Any]:
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise PlaylistFormatError(f"{path}: expected a list of {key}")
    return data


# * Load ordered segments from a playlist JSON file
def read_playlist(path: Path) -> list[Segment]:
    entries = _entries(read_json_safe(path), "segments", path)
    segments: list[Segment] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise PlaylistFormatError(f"{path}: segment {index} is not an object", index)
        try:
            segments.append(Segment.from_dict(entry))
        except KeyError as e:
            raise PlaylistFormatError(
                f"{path}: segment {index} is missing {e.args[0]!r}", index
            )
        except (TypeError, ValueError) as e:
            raise PlaylistFormatError(f"{path}: segment {index}: {e}", index)
    return segments


# * Write segments as playlist JSON
def write_playlist(segments: Iterable[Segment], path: Path) -> None:
    write_json_safe({"segments": [s.to_dict() for s in segments]}, path)


# * Load the local track catalog used for playlist generation
def read_catalog(path: Path) -> list[CatalogTrack]:
    entries = _entries(read_json_safe(path), "tracks", path)
    tracks: list[CatalogTrack] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise PlaylistFormatError(f"{path}: track {index} is not an object", index)
        try:
            tracks.append(CatalogTrack.from_dict(entry))
        except KeyError as e:
            raise PlaylistFormatError(
                f"{path}: track {index} is missing {e.args[0]!r}", index
            )
        except (TypeError, ValueError) as e:
            raise PlaylistFormatError(f"{path}: track {index}: {e}", index)
    return tracks
