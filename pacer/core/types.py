# pacer/core/types.py
# Core value types: timed playlist segments & immutable timer state snapshots

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

# epoch-millisecond time source; injectable so tests can simulate elapsed time
Clock = Callable[[], int]


# * One timed entry of a playlist, active over the half-open range [start_ms, end_ms)
@dataclass(frozen=True)
class Segment:
    uri: str
    start_ms: int
    end_ms: int
    label: str
    target_cadence: int | None = None
    bpm: int | None = None

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    # check whether a playback offset falls inside this segment
    def contains(self, elapsed_ms: int) -> bool:
        return self.start_ms <= elapsed_ms < self.end_ms

    def __str__(self) -> str:
        return f"{self.label} ({self.start_ms // 1000}s - {self.end_ms // 1000}s)"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "uri": self.uri,
            "start_ms": self.start_ms,
            "end_ms": self.end_ms,
            "label": self.label,
        }
        if self.target_cadence is not None:
            data["target_cadence"] = self.target_cadence
        if self.bpm is not None:
            data["bpm"] = self.bpm
        return data

    # build from a JSON object; raises KeyError/TypeError/ValueError on bad shape
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        cadence = data.get("target_cadence")
        bpm = data.get("bpm")
        return cls(
            uri=str(data["uri"]),
            start_ms=int(data["start_ms"]),
            end_ms=int(data["end_ms"]),
            label=str(data.get("label", "")),
            target_cadence=int(cadence) if cadence is not None else None,
            bpm=int(bpm) if bpm is not None else None,
        )


# * Immutable snapshot of the playback clock; every timer operation yields a new one
@dataclass(frozen=True)
class TimerState:
    # epoch ms of the last start(); None when idle (never started or stopped)
    started_at_ms: int | None = None
    running: bool = False
    # last recorded pause point; kept across stop()
    paused_at_ms: int | None = None
    total_paused_ms: int = 0
    current_index: int = 0
    # instant the end of the playlist was observed; freezes elapsed time
    completed_at_ms: int | None = None

    @property
    def has_started(self) -> bool:
        return self.started_at_ms is not None

    @property
    def has_completed(self) -> bool:
        return self.completed_at_ms is not None


# idle state shared by fresh & stopped timers
IDLE_STATE = TimerState()
