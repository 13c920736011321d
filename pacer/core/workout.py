# pacer/core/workout.py
# Structured workout model (warmup / steady-state / cooldown blocks) & block-to-segment scheduling

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .types import Segment


# * Kinds of workout block understood by the ZWO parser
class BlockKind(str, Enum):
    WARMUP = "warmup"
    STEADY = "steady"
    COOLDOWN = "cooldown"


# * On-screen message shown `time_offset` seconds into a block
@dataclass(frozen=True)
class TextEvent:
    time_offset: int
    message: str


# * One workout block; durations in seconds, power as fraction of FTP
@dataclass(frozen=True)
class WorkoutBlock:
    kind: BlockKind
    duration: int
    power_low: float
    power_high: float
    cadence: int | None = None
    messages: tuple[TextEvent, ...] = ()

    # steady-state blocks hold a single power target
    @property
    def power(self) -> float:
        return self.power_low

    @property
    def is_ramp(self) -> bool:
        return self.power_low != self.power_high

    def describe(self) -> str:
        name = {
            BlockKind.WARMUP: "Warmup",
            BlockKind.STEADY: "Steady",
            BlockKind.COOLDOWN: "Cooldown",
        }[self.kind]
        if self.is_ramp:
            power = f"{self.power_low:.0%}-{self.power_high:.0%} FTP"
        else:
            power = f"{self.power_low:.0%} FTP"
        cadence = f" @ {self.cadence} rpm" if self.cadence is not None else ""
        return f"{name} {power}{cadence}"


# * Parsed workout; total_duration is the sum of block durations in seconds
@dataclass(frozen=True)
class Workout:
    id: str
    name: str
    author: str = ""
    description: str = ""
    blocks: tuple[WorkoutBlock, ...] = field(default_factory=tuple)
    total_duration: int = 0


# * Lay blocks end to end as playlist segments (one per block)
def workout_segments(workout: Workout) -> list[Segment]:
    segments: list[Segment] = []
    offset_ms = 0
    for number, block in enumerate(workout.blocks, start=1):
        end_ms = offset_ms + block.duration * 1000
        segments.append(
            Segment(
                uri=f"block:{number}",
                start_ms=offset_ms,
                end_ms=end_ms,
                label=block.describe(),
                target_cadence=block.cadence,
            )
        )
        offset_ms = end_ms
    return segments
