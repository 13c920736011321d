# pacer/core/verbose.py
# Category helpers over the active session log: timer, playlist, workout, file I/O, config & stages

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import LogLevel, active_log, install_log


# * Install the CLI session log & open a session for `command`
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    command: str = "pacer",
) -> None:
    from ..cli.session_log import CliSessionLog

    log = CliSessionLog.for_cli(enabled, dev_mode, log_file)
    install_log(log)
    log.open_session(command)


def vlog(category: str, message: str, detail: str | None = None) -> None:
    active_log().log(category, message, detail)


# timer state changes & segment transitions
def vlog_timer(message: str, detail: str | None = None) -> None:
    vlog("TIMER", message, detail)


# track ranking & block filling during generation
def vlog_playlist(message: str, detail: str | None = None) -> None:
    vlog("PLAYLIST", message, detail)


def vlog_workout(message: str, detail: str | None = None) -> None:
    vlog("WORKOUT", message, detail)


def _file_event(action: str, path: Path, size: int | None) -> None:
    suffix = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"{action} {path}{suffix}")


def vlog_file_read(path: Path, size: int | None = None) -> None:
    _file_event("Read", path, size)


def vlog_file_write(path: Path, size: int | None = None) -> None:
    _file_event("Wrote", path, size)


def vlog_stage(stage: str, description: str | None = None) -> None:
    vlog("STAGE", f"{stage}: {description}" if description else stage)


def vlog_config(key: str, value: Any) -> None:
    vlog("CONFIG", f"{key} = {value}")


# * Only logged when the session runs at DEBUG (dev_mode + --verbose)
def vlog_dev(category: str, message: str, detail: str | None = None) -> None:
    if active_log().level >= LogLevel.DEBUG:
        vlog(f"DEV:{category}", message, detail)


# * Close the active session (flushes & releases the log file)
def cleanup_verbose() -> None:
    active_log().close_session()
