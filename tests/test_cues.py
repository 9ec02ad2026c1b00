"""
Tests for utils/cues.py
"""

import pytest
from datetime import date, time

from quick_capture.utils.cues import (
    NextWeek,
    NextWeekday,
    RelativeOffset,
    ThisWeekday,
    TimeCue,
    Today,
    Tomorrow,
    Weekday,
    Yesterday,
    DAY_NAMES,
)

# Wednesday
REFERENCE = date(2025, 1, 15)


class TestDateCues:
    """Tests for date cue resolution."""

    def test_fixed_offsets(self):
        assert Today().resolve(REFERENCE) == date(2025, 1, 15)
        assert Tomorrow().resolve(REFERENCE) == date(2025, 1, 16)
        assert Yesterday().resolve(REFERENCE) == date(2025, 1, 14)

    @pytest.mark.parametrize("weekday,expected_day", [
        (DAY_NAMES['thursday'], 16),
        (DAY_NAMES['sunday'], 19),
        (DAY_NAMES['monday'], 20),
        (DAY_NAMES['tuesday'], 21),
        (DAY_NAMES['wednesday'], 22),
    ])
    def test_weekday_is_strictly_future(self, weekday, expected_day):
        assert Weekday(weekday).resolve(REFERENCE) == date(2025, 1, expected_day)

    def test_next_weekday_matches_weekday(self):
        for weekday in range(7):
            assert NextWeekday(weekday).resolve(REFERENCE) == Weekday(weekday).resolve(REFERENCE)

    def test_this_weekday_same_day(self):
        assert ThisWeekday(DAY_NAMES['wed']).resolve(REFERENCE) == REFERENCE

    def test_relative_offset(self):
        assert RelativeOffset(2).resolve(REFERENCE) == date(2025, 1, 17)
        assert RelativeOffset(2, 'week').resolve(REFERENCE) == date(2025, 1, 29)

    def test_next_week(self):
        assert NextWeek().resolve(REFERENCE) == date(2025, 1, 22)

    def test_variants_are_distinct(self):
        assert Weekday(0) != NextWeekday(0)


class TestTimeCue:
    """Tests for 12-hour to 24-hour conversion."""

    @pytest.mark.parametrize("hour,minute,meridiem,expected", [
        (3, 0, 'pm', time(15, 0)),
        (3, 30, 'pm', time(15, 30)),
        (9, 0, 'am', time(9, 0)),
        (12, 0, 'pm', time(12, 0)),
        (12, 15, 'am', time(0, 15)),
        (11, 59, 'PM', time(23, 59)),
    ])
    def test_to_time(self, hour, minute, meridiem, expected):
        assert TimeCue(hour, minute, meridiem).to_time() == expected


class TestDateCueUnion:
    """Tests for the DateCue union."""

    def test_lists_every_variant(self):
        from typing import get_args
        from quick_capture.utils.cues import DateCue

        assert set(get_args(DateCue)) == {
            Today, Tomorrow, Yesterday,
            Weekday, NextWeekday, ThisWeekday,
            RelativeOffset, NextWeek,
        }
