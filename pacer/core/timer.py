# pacer/core/timer.py
# Playback timer: pause-compensated elapsed time & active-segment lookup
#
# State transitions are pure functions over TimerState snapshots; PlaybackTimer
# binds them to a playlist & an injectable clock. Nothing here raises: degenerate
# input (empty playlist, resume w/o pause) yields neutral/zero results.
#
# Not thread-safe. A multi-threaded host must guard every call w/ a single lock.

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from .clock import system_clock_ms
from .demo import demo_segments
from .types import Clock, Segment, TimerState, IDLE_STATE
from .verbose import vlog_dev, vlog_timer


# * Fresh running state anchored at `now_ms`
def started(now_ms: int) -> TimerState:
    return TimerState(
        started_at_ms=now_ms,
        running=True,
        paused_at_ms=None,
        total_paused_ms=0,
        current_index=0,
        completed_at_ms=None,
    )


# * Record a pause point; re-records it when already paused
def paused(state: TimerState, now_ms: int) -> TimerState:
    return replace(state, running=False, paused_at_ms=now_ms)


# * Fold the pause duration into total_paused_ms; no-op unless paused w/ a pause point
# * A finished workout stays finished
def resumed(state: TimerState, now_ms: int) -> TimerState:
    if state.running or state.paused_at_ms is None or state.has_completed:
        return state
    return replace(
        state,
        running=True,
        total_paused_ms=state.total_paused_ms + (now_ms - state.paused_at_ms),
    )


# * Back to idle; the last pause point is kept
def stopped(state: TimerState) -> TimerState:
    return replace(
        state,
        started_at_ms=None,
        running=False,
        total_paused_ms=0,
        current_index=0,
        completed_at_ms=None,
    )


# * Elapsed playback time net of pauses; frozen at completion or at the pause point while not running
def elapsed_ms(state: TimerState, now_ms: int) -> int:
    if state.started_at_ms is None:
        return 0
    if state.running:
        reference = now_ms
    elif state.completed_at_ms is not None:
        reference = state.completed_at_ms
    else:
        reference = state.paused_at_ms if state.paused_at_ms is not None else now_ms
    return reference - state.started_at_ms - state.total_paused_ms


# * First segment in playlist order whose [start, end) contains elapsed
def find_active_index(playlist: Sequence[Segment], elapsed: int) -> int | None:
    for index, segment in enumerate(playlist):
        if segment.start_ms <= elapsed < segment.end_ms:
            return index
    return None


# * End offset of the last segment (assumes playlist sorted by end time)
def total_duration_ms(playlist: Sequence[Segment]) -> int:
    if not playlist:
        return 0
    return playlist[-1].end_ms


# * Playback clock bound to a playlist; answers "which segment is active now"
class PlaybackTimer:
    def __init__(
        self,
        clock: Clock = system_clock_ms,
        segments: Iterable[Segment] = (),
    ) -> None:
        self._clock = clock
        self._playlist: tuple[Segment, ...] = tuple(segments)
        self._state: TimerState = IDLE_STATE

    # ---- playlist ----

    # replace playlist wholesale; running state untouched, order not validated
    def load(self, segments: Iterable[Segment]) -> None:
        self._playlist = tuple(segments)
        vlog_timer(f"Loaded {len(self._playlist)} segments")

    # load the canned three-track demo & return a copy of it
    def load_demo(self) -> list[Segment]:
        segments = demo_segments()
        self.load(segments)
        return list(segments)

    @property
    def playlist(self) -> tuple[Segment, ...]:
        return self._playlist

    @property
    def state(self) -> TimerState:
        return self._state

    # reinstate a previously captured snapshot
    def restore(self, state: TimerState) -> None:
        self._state = state
        vlog_dev("TIMER", "Restored snapshot", repr(state))

    # independent timer sharing playlist, clock & current snapshot
    def copy(self) -> "PlaybackTimer":
        twin = PlaybackTimer(self._clock, self._playlist)
        twin.restore(self._state)
        return twin

    # ---- lifecycle ----

    def start(self) -> None:
        now = self._clock()
        self._state = started(now)
        vlog_timer("Started", f"origin={now}ms, segments={len(self._playlist)}")

    def pause(self) -> None:
        now = self._clock()
        if not self._state.running and self._state.paused_at_ms is not None:
            vlog_timer(
                "Pause while paused: re-recording pause point",
                f"previous={self._state.paused_at_ms}ms, new={now}ms",
            )
        self._state = paused(self._state, now)
        vlog_timer("Paused", f"elapsed={self.elapsed_ms()}ms")

    def resume(self) -> None:
        before = self._state
        self._state = resumed(before, self._clock())
        if self._state is not before:
            vlog_timer("Resumed", f"total paused={self._state.total_paused_ms}ms")

    def stop(self) -> None:
        self._state = stopped(self._state)
        vlog_timer("Stopped")

    # ---- queries ----

    def elapsed_ms(self) -> int:
        return elapsed_ms(self._state, self._clock())

    # * Poll for a segment transition; returns the newly active segment or None
    def poll_for_segment_change(self) -> Segment | None:
        if not self._state.running or not self._playlist:
            return None

        now = self._clock()
        elapsed = elapsed_ms(self._state, now)
        index = find_active_index(self._playlist, elapsed)

        if index is not None:
            if index == self._state.current_index:
                return None
            self._state = replace(self._state, current_index=index)
            segment = self._playlist[index]
            vlog_timer(
                f"Transition -> [{index}] {segment.label}", f"elapsed={elapsed}ms"
            )
            return segment

        if elapsed >= total_duration_ms(self._playlist):
            self._state = replace(self._state, running=False, completed_at_ms=now)
            vlog_timer("Workout complete", f"elapsed={elapsed}ms")

        # gap between segments: keep the current index
        return None

    def current_segment(self) -> Segment | None:
        index = self._state.current_index
        if 0 <= index < len(self._playlist):
            return self._playlist[index]
        return None

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def total_segments(self) -> int:
        return len(self._playlist)

    @property
    def is_running(self) -> bool:
        return self._state.running

    def total_duration_ms(self) -> int:
        return total_duration_ms(self._playlist)

    def total_duration_seconds(self) -> int:
        return self.total_duration_ms() // 1000

    def progress_fraction(self) -> float:
        total = self.total_duration_ms()
        if total == 0:
            return 0.0
        return self.elapsed_ms() / total

    def remaining_in_current_segment_seconds(self) -> int:
        current = self.current_segment()
        if current is None:
            return 0
        return max(0, (current.end_ms - self.elapsed_ms()) // 1000)

    def is_complete(self) -> bool:
        return (
            not self._state.running
            and self._state.has_started
            and self.elapsed_ms() >= self.total_duration_ms()
        )
