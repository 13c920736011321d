# pacer/core/playlist_engine.py
# Offline playlist generation: fill each workout block w/ catalog tracks ranked by cadence fit

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .bpm import BpmMatchingConfig, bpm_match_score, cadence_distance
from .types import Segment
from .verbose import vlog_playlist, vlog_stage
from .workout import Workout, WorkoutBlock


# * Song available to the generator (local catalog entry)
@dataclass(frozen=True)
class CatalogTrack:
    id: str
    name: str
    uri: str
    duration_ms: int
    bpm: int | None = None
    artist: str = ""

    @property
    def duration_s(self) -> int:
        return self.duration_ms // 1000

    # build from a JSON object; raises KeyError/TypeError/ValueError on bad shape
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogTrack":
        bpm = data.get("bpm")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            uri=str(data["uri"]),
            duration_ms=int(data["duration_ms"]),
            bpm=int(bpm) if bpm is not None else None,
            artist=str(data.get("artist", "")),
        )


# * A track placed on the workout timeline (seconds from workout start)
@dataclass(frozen=True)
class TrackSelection:
    track: CatalogTrack
    start_s: int
    end_s: int
    clip_start_s: int
    clip_end_s: int
    block_label: str = ""
    target_cadence: int | None = None
    alternatives: tuple[CatalogTrack, ...] = ()

    @property
    def is_clipped(self) -> bool:
        return self.clip_end_s < self.track.duration_s


# * Result of playlist generation
@dataclass(frozen=True)
class GeneratedPlaylist:
    selections: tuple[TrackSelection, ...]
    total_duration_s: int
    workout_id: str
    workout_name: str

    @property
    def tracks(self) -> list[CatalogTrack]:
        return [s.track for s in self.selections]

    # selections that carry both a cadence target & a known tempo
    def _rated(self) -> list[TrackSelection]:
        return [
            s
            for s in self.selections
            if s.target_cadence is not None and s.track.bpm is not None
        ]

    # count rated selections whose tempo satisfies the matching policy
    def cadence_matches(self, config: BpmMatchingConfig) -> int:
        return sum(
            1 for s in self._rated() if config.matches(s.target_cadence, s.track.bpm)  # type: ignore[arg-type]
        )

    def average_match_score(self) -> float:
        rated = self._rated()
        if not rated:
            return 0.0
        scores = [bpm_match_score(s.target_cadence, s.track.bpm) for s in rated]  # type: ignore[arg-type]
        return sum(scores) / len(scores)

    # convert selections to timer segments (ms offsets)
    def to_segments(self) -> list[Segment]:
        return [
            Segment(
                uri=s.track.uri,
                start_ms=s.start_s * 1000,
                end_ms=s.end_s * 1000,
                label=f"{s.block_label} - {s.track.name}" if s.block_label else s.track.name,
                target_cadence=s.target_cadence,
                bpm=s.track.bpm,
            )
            for s in self.selections
        ]


# rank catalog for a block; catalog order kept when the block has no cadence target
def _rank_for_block(
    tracks: Sequence[CatalogTrack], block: WorkoutBlock
) -> list[CatalogTrack]:
    if block.cadence is None:
        return list(tracks)
    cadence = block.cadence
    return sorted(tracks, key=lambda t: cadence_distance(t.bpm, cadence))


# fill one block's duration from ranked candidates
def _select_for_block(
    candidates: Sequence[CatalogTrack],
    block: WorkoutBlock,
    block_start_s: int,
    min_clip_s: int,
    alternatives: int,
) -> list[TrackSelection]:
    selections: list[TrackSelection] = []
    remaining = block.duration
    cursor = block_start_s
    label = block.describe()

    for track in candidates:
        if remaining <= 0:
            break
        track_s = track.duration_s
        if track_s <= remaining:
            length = track_s
        elif remaining >= min_clip_s:
            length = remaining
        else:
            vlog_playlist(f"Skip '{track.name}' ({track_s}s, {remaining}s left)")
            continue

        others = tuple(t for t in candidates if t.id != track.id)[:alternatives]
        selections.append(
            TrackSelection(
                track=track,
                start_s=cursor,
                end_s=cursor + length,
                clip_start_s=0,
                clip_end_s=length,
                block_label=label,
                target_cadence=block.cadence,
                alternatives=others,
            )
        )
        cursor += length
        remaining -= length

    if remaining > 0:
        vlog_playlist(f"Block '{label}' left {remaining}s unfilled")
    return selections


# * Generate a BPM-matched playlist covering every block of the workout
def generate_playlist(
    workout: Workout,
    tracks: Sequence[CatalogTrack],
    min_clip_s: int = 30,
    alternatives: int = 3,
) -> GeneratedPlaylist:
    vlog_stage("Generate", f"{workout.name}: {len(workout.blocks)} blocks, {len(tracks)} tracks")
    selections: list[TrackSelection] = []
    used: set[str] = set()
    elapsed_s = 0

    for number, block in enumerate(workout.blocks, start=1):
        ranked = _rank_for_block(tracks, block)
        candidates = [t for t in ranked if t.id not in used]
        if not candidates:
            vlog_playlist(f"Block {number}: every track used, allowing reuse")
            candidates = ranked

        block_selections = _select_for_block(
            candidates, block, elapsed_s, min_clip_s, alternatives
        )
        selections.extend(block_selections)
        used.update(s.track.id for s in block_selections)
        vlog_playlist(
            f"Block {number}: {len(block_selections)} tracks",
            ", ".join(s.track.name for s in block_selections) or None,
        )
        elapsed_s += block.duration

    return GeneratedPlaylist(
        selections=tuple(selections),
        total_duration_s=elapsed_s,
        workout_id=workout.id,
        workout_name=workout.name,
    )
