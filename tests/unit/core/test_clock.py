# tests/unit/core/test_clock.py
# Unit tests for time sources

from pacer.core.clock import ManualClock, ScaledClock, system_clock_ms


# * Test manual clock stepping
class TestManualClock:

    def test_advance_and_set(self):
        clock = ManualClock(100)
        assert clock() == 100
        assert clock.advance(50) == 150
        clock.set(10)
        assert clock.now_ms == 10

    def test_repr(self):
        assert repr(ManualClock(5)) == "ManualClock(now_ms=5)"


# * Test fast-forward clock
class TestScaledClock:

    def test_scales_time_since_creation(self):
        base = ManualClock(1000)
        scaled = ScaledClock(base, speed=60.0)
        assert scaled() == 1000
        base.advance(1000)
        assert scaled() == 61_000

    def test_unit_speed_tracks_base(self):
        base = ManualClock(0)
        scaled = ScaledClock(base)
        base.advance(250)
        assert scaled() == 250
        assert scaled.speed == 1.0


def test_system_clock_is_epoch_millis():
    assert system_clock_ms() > 1_600_000_000_000
