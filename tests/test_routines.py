"""Tests for routine templates."""

import pytest

from nuvia.routines import ROUTINE_TEMPLATES, format_time, get_routine


class TestRoutineTemplates:
    """Test the built-in templates."""

    def test_template_ids_are_unique(self):
        """Test that ids are unique."""
        ids = [r.id for r in ROUTINE_TEMPLATES]
        assert len(ids) == len(set(ids))

    def test_pomodoro_total(self):
        """Test the total duration of the pomodoro routine."""
        routine = get_routine("deep-work-pomodoro")
        assert routine.total_duration == 100 * 60

    def test_get_routine_returns_copy(self):
        """Test that templates cannot be modified through lookups."""
        routine = get_routine("exam-mode")
        routine.tasks.clear()

        assert get_routine("exam-mode").tasks

    def test_unknown_routine(self):
        """Test an unknown id."""
        with pytest.raises(KeyError):
            get_routine("nap-time")


class TestFormatTime:
    """Test MM:SS formatting."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "00:00"), (59, "00:59"), (60, "01:00"), (1500, "25:00"), (3900, "65:00"), (-5, "00:00")],
    )
    def test_format_time(self, seconds, expected):
        """Test formatting of several durations."""
        assert format_time(seconds) == expected
