# pacer/core/bpm.py
# BPM / cadence matching rules used to pick songs for workout blocks

from __future__ import annotations

from dataclasses import dataclass

# sort key assigned to tracks w/o a usable BPM
MISSING_BPM_PENALTY = 2**30

# cadence multiples a song may lock onto (one, two, three or four beats per pedal stroke)
CADENCE_MULTIPLIERS = (1, 2, 3, 4)


# * Match policy between a target cadence (rpm) & a song tempo (bpm)
@dataclass(frozen=True)
class BpmMatchingConfig:
    exact_match: bool = True
    multiple_match: bool = True
    tolerance_percent: int = 10

    def matches(self, target_cadence: int, song_bpm: int) -> bool:
        if self.exact_match and self.multiple_match:
            return self._matches_exact(target_cadence, song_bpm) or self._matches_multiple(
                target_cadence, song_bpm
            )
        if self.exact_match:
            return self._matches_exact(target_cadence, song_bpm)
        if self.multiple_match:
            return self._matches_multiple(target_cadence, song_bpm)
        return False

    def _tolerance(self, target_cadence: int) -> int:
        return (target_cadence * self.tolerance_percent) // 100

    def _matches_exact(self, target_cadence: int, song_bpm: int) -> bool:
        tolerance = self._tolerance(target_cadence)
        return target_cadence - tolerance <= song_bpm <= target_cadence + tolerance

    def _matches_multiple(self, target_cadence: int, song_bpm: int) -> bool:
        tolerance = self._tolerance(target_cadence)
        targets = (target_cadence, target_cadence * 2, target_cadence // 2)
        return any(t - tolerance <= song_bpm <= t + tolerance for t in targets)


# * Score 0-100 for how well a song tempo fits a cadence (100 = exact)
def bpm_match_score(target_cadence: int, song_bpm: int) -> float:
    if target_cadence == 0:
        return 0.0
    if song_bpm == target_cadence:
        return 100.0
    if song_bpm == target_cadence * 2:
        return 90.0
    if song_bpm == target_cadence // 2:
        return 85.0

    diff = abs(song_bpm - target_cadence)
    max_diff = target_cadence * 0.2
    if diff <= max_diff:
        return 100.0 * (1.0 - diff / max_diff)
    return 0.0


# * Sort key for candidate songs (lower is better); every cadence multiple counts equally
def cadence_distance(bpm: int | None, target_cadence: int) -> int:
    if bpm is None or bpm < 0:
        return MISSING_BPM_PENALTY

    tolerance = (target_cadence * 25) // 100
    best: int | None = None
    for multiplier in CADENCE_MULTIPLIERS:
        target_bpm = target_cadence * multiplier
        window = tolerance * multiplier
        if target_bpm - window <= bpm <= target_bpm + window:
            distance = abs(bpm - target_bpm)
            if best is None or distance < best:
                best = distance

    if best is not None:
        return best

    # no multiple within tolerance: rank behind every matching song
    if int(target_cadence * 0.75) <= bpm <= int(target_cadence * 1.25):
        return abs(bpm - target_cadence) + 30_000
    return abs(bpm - target_cadence) + 35_000
