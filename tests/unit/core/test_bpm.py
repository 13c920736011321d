# tests/unit/core/test_bpm.py
# Unit tests for cadence / BPM matching rules

import pytest

from pacer.core.bpm import (
    MISSING_BPM_PENALTY,
    BpmMatchingConfig,
    bpm_match_score,
    cadence_distance,
)


# * Test match policy combinations
class TestBpmMatchingConfig:

    def test_exact_within_tolerance(self):
        config = BpmMatchingConfig()
        assert config.matches(90, 95)
        assert config.matches(90, 81)
        assert not config.matches(90, 120)

    def test_multiples_double_and_half(self):
        config = BpmMatchingConfig()
        assert config.matches(90, 180)
        assert config.matches(90, 45)

    def test_exact_only_rejects_double(self):
        config = BpmMatchingConfig(multiple_match=False)
        assert not config.matches(90, 180)
        assert config.matches(90, 92)

    def test_multiple_only_still_accepts_target(self):
        config = BpmMatchingConfig(exact_match=False)
        assert config.matches(90, 90)

    def test_neither_mode_matches_nothing(self):
        config = BpmMatchingConfig(exact_match=False, multiple_match=False)
        assert not config.matches(90, 90)

    def test_zero_tolerance(self):
        config = BpmMatchingConfig(tolerance_percent=0)
        assert config.matches(90, 90)
        assert not config.matches(90, 91)


# * Test 0-100 match score
class TestBpmMatchScore:

    @pytest.mark.parametrize(
        "target, bpm, expected",
        [
            (0, 120, 0.0),
            (90, 90, 100.0),
            (90, 180, 90.0),
            (90, 45, 85.0),
            (90, 99, 50.0),
            (90, 120, 0.0),
        ],
    )
    def test_scores(self, target, bpm, expected):
        assert bpm_match_score(target, bpm) == pytest.approx(expected)


# * Test generator sort key
class TestCadenceDistance:

    def test_missing_bpm_penalized(self):
        assert cadence_distance(None, 90) == MISSING_BPM_PENALTY
        assert cadence_distance(-1, 90) == MISSING_BPM_PENALTY

    def test_multiples_score_by_pure_distance(self):
        assert cadence_distance(92, 90) == 2
        assert cadence_distance(178, 90) == 2
        assert cadence_distance(270, 90) == 0

    def test_fallback_near_target(self):
        # 67 is outside the 1x window (68-112) but inside 75%-125%
        assert cadence_distance(67, 90) == 30_023

    def test_fallback_far_from_target(self):
        assert cadence_distance(130, 90) == 35_040

    def test_matching_always_beats_fallback(self):
        assert cadence_distance(112, 90) < cadence_distance(67, 90)
