# pacer/core/output.py
# Log levels & the active session-log registry; core modules log through it w/o touching I/O
# * The CLI installs CliSessionLog (pacer/cli/session_log.py); until then everything goes to SilentLog

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


# * How much a CLI session reports; DEBUG also needs dev_mode
class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


# * What the timer, generator & I/O layers need from a log sink
@runtime_checkable
class SessionLog(Protocol):
    @property
    def level(self) -> LogLevel: ...

    def log(self, category: str, message: str, detail: Optional[str] = None) -> None: ...

    def open_session(self, command: str) -> None: ...

    def close_session(self) -> None: ...


# * Sink that drops everything; the default outside the CLI
class SilentLog:
    @property
    def level(self) -> LogLevel:
        return LogLevel.NORMAL

    def log(self, category: str, message: str, detail: Optional[str] = None) -> None:
        pass

    def open_session(self, command: str) -> None:
        pass

    def close_session(self) -> None:
        pass


_active: SessionLog = SilentLog()


def install_log(log: SessionLog) -> None:
    global _active
    _active = log


def active_log() -> SessionLog:
    return _active


# back to SilentLog (tests & after a CLI session)
def uninstall_log() -> None:
    install_log(SilentLog())
