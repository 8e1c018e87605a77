"""
Unit tests for Duration.
"""
import pytest
from datetime import datetime

import pytz

from track_scheduler.exceptions import InvalidDurationError, InsufficientCapacityError
from track_scheduler.scheduling import Duration


class TestDurationCreation:
    """Test constructing durations."""

    def test_create(self):
        assert Duration.create(30).length_in_minutes == 30

    def test_zero_is_allowed(self):
        assert Duration(0).length_in_minutes == 0

    def test_negative_rejected(self):
        with pytest.raises(InvalidDurationError):
            Duration.create(-1)

    @pytest.mark.parametrize("bad", [1.5, "30", None, True])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(InvalidDurationError):
            Duration(bad)

    def test_invalid_duration_is_value_error(self):
        with pytest.raises(ValueError):
            Duration(-5)


class TestDurationCapacity:
    """Test capacity checks and in-place arithmetic."""

    def test_can_accommodate(self):
        budget = Duration(60)
        assert budget.can_accommodate(Duration(60))
        assert budget.can_accommodate(Duration(0))
        assert not budget.can_accommodate(Duration(61))

    def test_can_accommodate_is_pure(self):
        budget = Duration(60)
        budget.can_accommodate(Duration(30))
        assert budget.length_in_minutes == 60

    def test_reduce_by(self):
        budget = Duration(60)
        budget.reduce_by(Duration(45))
        assert budget.length_in_minutes == 15

    def test_reduce_by_too_much_leaves_length(self):
        budget = Duration(20)
        with pytest.raises(InsufficientCapacityError):
            budget.reduce_by(Duration(30))
        assert budget.length_in_minutes == 20

    def test_add_by_has_no_upper_bound(self):
        budget = Duration(60)
        budget.add_by(Duration(600))
        assert budget.length_in_minutes == 660

    def test_copy_is_independent(self):
        budget = Duration(60)
        clone = budget.copy()
        clone.reduce_by(Duration(60))
        assert budget.length_in_minutes == 60
        assert clone.length_in_minutes == 0

    def test_equality(self):
        assert Duration(10) == Duration(10)
        assert Duration(10) != Duration(11)
        assert Duration(10) != 10

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Duration(10))


class TestDurationAddTo:
    """Test advancing points in time."""

    def test_add_to_returns_new_time(self):
        start = datetime(2026, 10, 19, 9, 0)
        later = Duration(90).add_to(start)
        assert later == datetime(2026, 10, 19, 10, 30)
        assert start == datetime(2026, 10, 19, 9, 0)

    def test_add_to_does_not_mutate(self):
        duration = Duration(90)
        duration.add_to(datetime(2026, 10, 19, 9, 0))
        assert duration.length_in_minutes == 90

    def test_add_to_across_dst_change(self):
        tz = pytz.timezone("Europe/Berlin")
        # Clocks go back at 03:00 local on 2026-10-25
        start = tz.localize(datetime(2026, 10, 25, 1, 0))
        later = Duration(180).add_to(start)
        assert later.strftime("%H:%M %Z") == "03:00 CET"
