# pacer/cli/session_log.py
# Per-command session log: category-coloured console lines & an optional plain-text log file

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.markup import escape

from ..core.output import LogLevel
from ..pacer_io.console import console

# console style per category; DEV:<category> lines reuse the base style
CATEGORY_STYLES = {
    "TIMER": "bold magenta",
    "PLAYLIST": "bold green",
    "WORKOUT": "bold yellow",
    "STAGE": "bold cyan",
    "FILE": "blue",
    "CONFIG": "dim cyan",
}

RULE = "-" * 48


# * Session log installed by the root CLI callback for the duration of one command
class CliSessionLog:
    def __init__(
        self, level: LogLevel = LogLevel.NORMAL, log_file: Optional[Path] = None
    ) -> None:
        self._level = level
        self._log_file = log_file
        self._handle: Optional[TextIO] = None
        self._command = "pacer"
        self._opened_at: Optional[float] = None
        self._entries = 0

    # a log file implies verbose; DEBUG only when dev_mode is on as well
    @classmethod
    def for_cli(
        cls, verbose: bool, dev_mode: bool, log_file: Optional[Path] = None
    ) -> "CliSessionLog":
        if not verbose and log_file is None:
            level = LogLevel.NORMAL
        elif dev_mode:
            level = LogLevel.DEBUG
        else:
            level = LogLevel.VERBOSE
        return cls(level, log_file)

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def entries(self) -> int:
        return self._entries

    def log(self, category: str, message: str, detail: Optional[str] = None) -> None:
        if self._level < LogLevel.VERBOSE:
            return
        self._entries += 1
        stamp = self._stamp()
        style = CATEGORY_STYLES.get(category.rsplit(":", 1)[-1], "bold")
        console.print(f"[dim]{stamp}[/] [{style}]{category:<8}[/] {escape(message)}")
        self._write(f"{stamp} [{category}] {message}")
        for line in (detail or "").splitlines():
            console.print(f"           [dim]{escape(line)}[/]")
            self._write(f"    {line}")

    # * Start timing the command & frame it in the log file
    def open_session(self, command: str) -> None:
        self._command = command
        self._opened_at = time.monotonic()
        self._entries = 0
        if self._log_file is not None and self._handle is None:
            try:
                self._log_file.parent.mkdir(parents=True, exist_ok=True)
                self._handle = open(self._log_file, "a", encoding="utf-8")
            except OSError as e:
                console.print(f"[yellow]Warning:[/] log file disabled ({escape(str(e))})")
                self._log_file = None
        self._write(RULE)
        self._write(
            f"pacer {command} @ {datetime.now().isoformat(timespec='seconds')}"
            f" (level {self._level.name})"
        )
        self._write(RULE)

    # * Close the frame w/ run time & entry count, then release the file
    def close_session(self) -> None:
        if self._handle is None:
            return
        self._write(
            f"{self._command} finished after {self._seconds():.2f}s, "
            f"{self._entries} entries"
        )
        self._write(RULE)
        self._handle.close()
        self._handle = None

    def _seconds(self) -> float:
        if self._opened_at is None:
            return 0.0
        return time.monotonic() - self._opened_at

    def _stamp(self) -> str:
        return f"+{self._seconds():7.2f}s"

    def _write(self, line: str) -> None:
        if self._handle is not None:
            self._handle.write(line + "\n")
            self._handle.flush()
