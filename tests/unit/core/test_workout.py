# tests/unit/core/test_workout.py
# Unit tests for workout blocks & block-to-segment scheduling

from pacer.core.workout import (
    BlockKind,
    TextEvent,
    Workout,
    WorkoutBlock,
    workout_segments,
)


def _workout():
    blocks = (
        WorkoutBlock(BlockKind.WARMUP, 300, 0.5, 0.75, cadence=85),
        WorkoutBlock(
            BlockKind.STEADY, 600, 0.88, 0.88, cadence=90,
            messages=(TextEvent(10, "Go"),),
        ),
        WorkoutBlock(BlockKind.COOLDOWN, 240, 0.7, 0.45),
    )
    return Workout(id="1", name="Test", blocks=blocks, total_duration=1140)


# * Test block descriptions
class TestWorkoutBlock:

    def test_describe_ramp_with_cadence(self):
        block = WorkoutBlock(BlockKind.WARMUP, 300, 0.5, 0.75, cadence=85)
        assert block.is_ramp
        assert block.describe() == "Warmup 50%-75% FTP @ 85 rpm"

    def test_describe_steady(self):
        block = WorkoutBlock(BlockKind.STEADY, 60, 0.88, 0.88)
        assert not block.is_ramp
        assert block.power == 0.88
        assert block.describe() == "Steady 88% FTP"


# * Test scheduling blocks end to end
class TestWorkoutSegments:

    def test_blocks_laid_back_to_back(self):
        segments = workout_segments(_workout())
        assert [(s.start_ms, s.end_ms) for s in segments] == [
            (0, 300_000),
            (300_000, 900_000),
            (900_000, 1_140_000),
        ]
        assert [s.uri for s in segments] == ["block:1", "block:2", "block:3"]
        assert [s.target_cadence for s in segments] == [85, 90, None]

    def test_empty_workout(self):
        assert workout_segments(Workout(id="0", name="")) == []
