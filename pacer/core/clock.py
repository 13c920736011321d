# pacer/core/clock.py
# Time sources for the playback timer: wall clock, manual (simulated) & fast-forward

from __future__ import annotations

import time

from .types import Clock


# * Wall-clock epoch milliseconds
def system_clock_ms() -> int:
    return int(time.time() * 1000)


# * Manually driven clock for deterministic tests & simulations
class ManualClock:
    def __init__(self, now_ms: int = 0) -> None:
        self._now_ms = now_ms

    def __call__(self) -> int:
        return self._now_ms

    @property
    def now_ms(self) -> int:
        return self._now_ms

    # move time forward by delta milliseconds
    def advance(self, delta_ms: int) -> int:
        self._now_ms += delta_ms
        return self._now_ms

    # jump to an absolute instant
    def set(self, now_ms: int) -> None:
        self._now_ms = now_ms

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(now_ms={self._now_ms!r})"


# * Fast-forward view over a base clock; time since creation runs `speed` times faster
class ScaledClock:
    def __init__(self, base: Clock = system_clock_ms, speed: float = 1.0) -> None:
        self._base = base
        self._speed = speed
        self._origin = base()

    def __call__(self) -> int:
        return self._origin + int((self._base() - self._origin) * self._speed)

    @property
    def speed(self) -> float:
        return self._speed
