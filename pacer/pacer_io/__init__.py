# pacer/pacer_io/__init__.py
# Package initialization & exports for pacer I/O operations

from .generics import (
    write_json_safe,
    read_json_safe,
    ensure_parent,
)
from .playlist_io import (
    read_playlist,
    write_playlist,
    read_catalog,
)
from .zwo import parse_zwo, read_workout

__all__ = [
    "write_json_safe",
    "read_json_safe",
    "ensure_parent",
    "read_playlist",
    "write_playlist",
    "read_catalog",
    "parse_zwo",
    "read_workout",
]
