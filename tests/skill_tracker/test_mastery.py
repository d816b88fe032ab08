"""Tests for mastery resolution and progress calculation."""

import pytest

from skill_tracker.services.mastery import (
    MASTERY_LEVELS,
    current_level,
    next_level,
    progress_percent,
)

SAMPLE_HOURS = [0, 0.01, 0.5, 1, 1.5, 9.99, 10, 24, 60, 99.5, 250, 777, 1000, 4999.9, 5000, 9999.99]


class TestMasteryLevels:
    """Tests for the threshold table."""

    def test_twelve_levels(self):
        """Test the table runs from beginner to dedicated expert."""
        assert len(MASTERY_LEVELS) == 12
        assert MASTERY_LEVELS[0].hours == 0
        assert MASTERY_LEVELS[0].title == "Complete Beginner"
        assert MASTERY_LEVELS[-1].hours == 10000
        assert MASTERY_LEVELS[-1].title == "Dedicated Expert"

    def test_thresholds_strictly_increase(self):
        """Test the table is sorted with no duplicate thresholds."""
        thresholds = [level.hours for level in MASTERY_LEVELS]
        assert all(a < b for a, b in zip(thresholds, thresholds[1:]))


class TestCurrentLevel:
    """Tests for current mastery title."""

    @pytest.mark.parametrize(
        "hours,title",
        [
            (0, "Complete Beginner"),
            (0.99, "Complete Beginner"),
            (1, "Complete Noob"),
            (1.5, "Complete Noob"),
            (10, "Noob"),
            (25, "Novice"),
            (50, "Amateur"),
            (100, "Apprentice"),
            (250, "Intermediate"),
            (500, "Advanced"),
            (1000, "Master"),
            (2500, "Grand Master"),
            (5000, "Expert"),
            (10000, "Dedicated Expert"),
            (25000, "Dedicated Expert"),
        ],
    )
    def test_titles_at_thresholds(self, hours, title):
        """Test titles at and between thresholds."""
        assert current_level(hours) == title

    def test_negative_hours_fall_back_to_first_level(self):
        """Test that negative totals resolve instead of failing."""
        assert current_level(-3) == "Complete Beginner"

    @pytest.mark.parametrize("hours", SAMPLE_HOURS)
    def test_always_resolves(self, hours):
        """Test every non-negative total has a title."""
        assert current_level(hours)


class TestNextLevel:
    """Tests for next mastery level."""

    def test_next_level_scenario(self):
        """Test next level for 1.5 hours."""
        level = next_level(1.5)
        assert level is not None
        assert level.title == "Noob"
        assert level.threshold_hours == 10
        assert level.hours_remaining == 8.5

    def test_at_threshold_points_to_following_level(self):
        """Test that reaching a threshold exactly moves on to the next one."""
        level = next_level(10)
        assert level.title == "Novice"
        assert level.hours_remaining == 15

    @pytest.mark.parametrize("hours", SAMPLE_HOURS)
    def test_remaining_is_positive(self, hours):
        """Test remaining hours and threshold below the final level."""
        level = next_level(hours)
        assert level is not None
        assert level.hours_remaining > 0
        assert level.threshold_hours > hours

    @pytest.mark.parametrize("hours", [10000, 10000.5, 123456])
    def test_none_at_max_level(self, hours):
        """Test that no next level exists at or beyond the final threshold."""
        assert next_level(hours) is None


class TestProgressPercent:
    """Tests for progress toward the next level."""

    def test_zero_hours(self):
        """Test progress with no time logged."""
        assert progress_percent(0) == 0

    def test_final_level(self):
        """Test progress at and beyond the final threshold."""
        assert progress_percent(10000) == 100
        assert progress_percent(20000) == 100

    def test_midway(self):
        """Test progress halfway through a band."""
        assert progress_percent(0.5) == pytest.approx(50)
        assert progress_percent(5.5) == pytest.approx(50)
        assert progress_percent(750) == pytest.approx(50)

    def test_scenario_value(self):
        """Test progress for 1.5 hours in the 1-10 band."""
        assert progress_percent(1.5) == pytest.approx(0.5 / 9 * 100)

    def test_threshold_resets_progress(self):
        """Test that reaching a threshold starts the next band at 0."""
        assert progress_percent(25) == 0

    def test_negative_hours(self):
        """Test that negative totals count as zero."""
        assert progress_percent(-1) == 0

    @pytest.mark.parametrize("hours", SAMPLE_HOURS + [10000, 15000])
    def test_bounded(self, hours):
        """Test progress always lies in [0, 100]."""
        assert 0 <= progress_percent(hours) <= 100
