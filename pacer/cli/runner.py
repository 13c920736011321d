# pacer/cli/runner.py
# Poll loop driving a PlaybackTimer at a fixed tick, reporting segment transitions

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Sequence

from ..core.timer import PlaybackTimer
from ..core.types import Segment
from ..core.verbose import vlog_stage

TransitionCallback = Callable[[int, Segment], None]
TickCallback = Callable[[PlaybackTimer], None]


# * Outcome of a driven run
@dataclass(frozen=True)
class RunSummary:
    transitions: int
    elapsed_ms: int
    completed: bool


# * Load & start the timer, then poll every tick until the workout completes
def run_playlist(
    timer: PlaybackTimer,
    segments: Sequence[Segment],
    *,
    tick_ms: int = 100,
    sleep: Callable[[float], None] = time.sleep,
    on_transition: TransitionCallback | None = None,
    on_tick: TickCallback | None = None,
    max_ticks: int | None = None,
) -> RunSummary:
    timer.load(segments)
    timer.start()
    vlog_stage("Run", f"{len(segments)} segments, tick={tick_ms}ms")

    if not timer.playlist:
        # nothing to play; polling an empty playlist never completes
        timer.stop()
        return RunSummary(transitions=0, elapsed_ms=0, completed=False)

    transitions = 0
    first = timer.current_segment()
    if first is not None and on_transition is not None:
        on_transition(timer.current_index, first)

    ticks = 0
    while timer.is_running:
        segment = timer.poll_for_segment_change()
        if segment is not None:
            transitions += 1
            if on_transition is not None:
                on_transition(timer.current_index, segment)
        if on_tick is not None:
            on_tick(timer)
        if not timer.is_running:
            break

        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            elapsed = timer.elapsed_ms()
            timer.stop()
            return RunSummary(transitions=transitions, elapsed_ms=elapsed, completed=False)
        sleep(tick_ms / 1000)

    return RunSummary(
        transitions=transitions,
        elapsed_ms=timer.elapsed_ms(),
        completed=timer.is_complete(),
    )
