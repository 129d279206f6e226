"""Tests for weekday labels."""

from datetime import date, datetime

import pytest

from timephrase.core.errors import InvalidArgument, ParseError
from timephrase.core.weekday import (
    date_with_weekday,
    day_of_week,
    long_weekday,
    short_weekday,
    weekday_or_today,
)


def test_day_numbers_start_on_sunday():
    """Test that Sunday is 1 and Saturday is 7."""
    assert day_of_week(date(2016, 6, 5)) == 1
    assert day_of_week(date(2016, 6, 6)) == 2
    assert day_of_week(datetime(2016, 6, 3, 16, 49)) == 6
    assert day_of_week(date(2016, 6, 4)) == 7


def test_text_inputs():
    """Test dash and slash separated date text."""
    assert day_of_week("2016-06-05") == 1
    assert day_of_week("2016/06/05") == 1
    assert long_weekday("2016-06-03") == "星期五"
    assert short_weekday("2016/06/03") == "周五"


def test_unrecognised_text():
    """Test rejection of unrecognised or invalid dates."""
    with pytest.raises(InvalidArgument):
        day_of_week("20160603")
    with pytest.raises(ParseError):
        day_of_week("2016-13-01")
    with pytest.raises(InvalidArgument):
        day_of_week(None)


class TestWeekdayOrToday:
    """Tests for the same-day override."""

    def test_today(self, clock):
        """Test the same-day override."""
        assert weekday_or_today(date(2016, 6, 3), clock=clock) == "今天"

    def test_other_day(self, clock):
        """Test a weekday label for a different day."""
        assert weekday_or_today(date(2016, 6, 4), clock=clock) == "周六"

    def test_only_day_of_month_is_compared(self, clock):
        """Test that a different month with the same day number counts as today."""
        # 2016-07-03 is a Sunday, yet it shares the day number with "now"
        assert weekday_or_today(date(2016, 7, 3), clock=clock) == "今天"


class TestDateWithWeekday:
    """Tests for reservation labels."""

    def test_other_day(self, clock):
        """Test a reservation label for another day."""
        assert date_with_weekday("2016-06-05 09:00:00", clock=clock) == "2016-6-5 (周日) 09:00"

    def test_today(self, clock):
        """Test a reservation label for today."""
        assert date_with_weekday("2016-06-03 16:49:40", clock=clock) == "2016-6-3 (今天) 16:49"

    def test_none_rejected(self, clock):
        """Test that None text is an invalid argument."""
        with pytest.raises(InvalidArgument):
            date_with_weekday(None, clock=clock)
