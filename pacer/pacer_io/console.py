# pacer/pacer_io/console.py
# Shared rich Console for every pacer module
# Modules import `console` once; tests resize it via configure_console() & undo w/ reset_console().

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console


# * Stable handle forwarding to whichever Console is current
class SharedConsole:
    __slots__ = ("_target",)

    def __init__(self) -> None:
        self._target = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._target, name)

    @property
    def target(self) -> Console:
        return self._target

    def retarget(self, target: Console) -> Console:
        self._target = target
        return target


console = SharedConsole()


# the real Console, for rich APIs that need one (e.g. Progress)
def get_console() -> Console:
    return console.target


def configure_console(width: Optional[int] = None) -> Console:
    return console.retarget(Console(width=width))


def reset_console() -> Console:
    return console.retarget(Console())
