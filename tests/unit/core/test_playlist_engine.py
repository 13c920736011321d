# tests/unit/core/test_playlist_engine.py
# Unit tests for BPM-matched playlist generation

import pytest

from pacer.core.bpm import BpmMatchingConfig
from pacer.core.clock import ManualClock
from pacer.core.playlist_engine import CatalogTrack, generate_playlist
from pacer.core.timer import PlaybackTimer
from pacer.core.workout import BlockKind, Workout, WorkoutBlock


def _track(id, seconds, bpm=None):
    return CatalogTrack(id=id, name=f"Track {id}", uri=f"uri:{id}", duration_ms=seconds * 1000, bpm=bpm)


@pytest.fixture
def catalog():
    return [
        _track("t1", 180, 170),
        _track("t2", 200, 86),
        _track("t3", 240, 90),
        _track("t4", 300, 180),
        _track("t5", 150),
        _track("t6", 260, 120),
    ]


@pytest.fixture
def workout():
    blocks = (
        WorkoutBlock(BlockKind.WARMUP, 300, 0.5, 0.75, cadence=85),
        WorkoutBlock(BlockKind.STEADY, 600, 0.88, 0.88, cadence=90),
        WorkoutBlock(BlockKind.COOLDOWN, 240, 0.7, 0.45),
    )
    return Workout(id="42", name="Sweet Spot", blocks=blocks, total_duration=1140)


# * Test block filling & ranking
class TestGeneratePlaylist:

    def test_selection_order_and_timing(self, workout, catalog):
        playlist = generate_playlist(workout, catalog)
        placed = [(s.track.id, s.start_s, s.end_s) for s in playlist.selections]
        assert placed == [
            ("t1", 0, 180),
            ("t2", 180, 300),
            ("t3", 300, 540),
            ("t4", 540, 840),
            ("t6", 840, 900),
            ("t5", 900, 1050),
        ]
        assert playlist.total_duration_s == 1140
        assert playlist.workout_id == "42"

    def test_clipped_tracks_fill_block_remainder(self, workout, catalog):
        playlist = generate_playlist(workout, catalog)
        clipped = [s.track.id for s in playlist.selections if s.is_clipped]
        assert clipped == ["t2", "t6"]

    def test_short_remainder_not_clipped(self, workout, catalog):
        playlist = generate_playlist(workout, catalog, min_clip_s=200)
        first_block = [s for s in playlist.selections if s.end_s <= 300]
        # 120s left after t1 is below the 200s clip minimum
        assert [s.track.id for s in first_block] == ["t1"]

    def test_alternatives_exclude_selected_track(self, workout, catalog):
        playlist = generate_playlist(workout, catalog, alternatives=3)
        first = playlist.selections[0]
        assert [t.id for t in first.alternatives] == ["t2", "t3", "t4"]

    def test_reuse_when_catalog_exhausted(self, workout):
        playlist = generate_playlist(workout, [_track("only", 100, 90)])
        assert {s.track.id for s in playlist.selections} == {"only"}
        # one pass over the candidates per block, reusing the track each time
        assert len(playlist.selections) == 3

    def test_empty_catalog(self, workout):
        playlist = generate_playlist(workout, [])
        assert playlist.selections == ()
        assert playlist.to_segments() == []

    def test_match_statistics(self, workout, catalog):
        playlist = generate_playlist(workout, catalog)
        assert playlist.cadence_matches(BpmMatchingConfig()) == 4
        expected = (90 + 100 * (1 - 1 / 17) + 100 + 90 + 0) / 5
        assert playlist.average_match_score() == pytest.approx(expected)


# * Test conversion to timer segments
class TestToSegments:

    def test_segments_in_milliseconds(self, workout, catalog):
        segments = generate_playlist(workout, catalog).to_segments()
        assert segments[0].start_ms == 0
        assert segments[0].end_ms == 180_000
        assert segments[0].uri == "uri:t1"
        assert segments[0].label == "Warmup 50%-75% FTP @ 85 rpm - Track t1"
        assert segments[0].target_cadence == 85
        assert segments[0].bpm == 170

    def test_generated_playlist_drives_timer(self, workout, catalog):
        clock = ManualClock()
        timer = PlaybackTimer(clock, generate_playlist(workout, catalog).to_segments())
        timer.start()
        clock.advance(300_000)
        assert timer.poll_for_segment_change().uri == "uri:t3"
        assert timer.total_duration_ms() == 1_050_000
