"""
Temporal Cues

Date cues are a closed set of variants, each resolving a reference date to a
target date. Time cues carry a 12-hour clock time.
"""

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import Union

# Day name to weekday mapping (Monday == 0, as in date.weekday())
DAY_NAMES = {
    'monday': 0, 'mon': 0,
    'tuesday': 1, 'tue': 1, 'tues': 1,
    'wednesday': 2, 'wed': 2,
    'thursday': 3, 'thu': 3, 'thur': 3, 'thurs': 3,
    'friday': 4, 'fri': 4,
    'saturday': 5, 'sat': 5,
    'sunday': 6, 'sun': 6,
}

DAY_UNIT = 'day'
WEEK_UNIT = 'week'


def _days_until(reference_date: date, weekday: int, allow_same_day: bool) -> int:
    days = (weekday - reference_date.weekday()) % 7
    if days == 0 and not allow_same_day:
        days = 7
    return days


@dataclass(frozen=True)
class Today:
    def resolve(self, reference_date: date) -> date:
        return reference_date


@dataclass(frozen=True)
class Tomorrow:
    def resolve(self, reference_date: date) -> date:
        return reference_date + timedelta(days=1)


@dataclass(frozen=True)
class Yesterday:
    def resolve(self, reference_date: date) -> date:
        return reference_date - timedelta(days=1)


@dataclass(frozen=True)
class Weekday:
    """A bare weekday name: the next matching date, always after the reference date."""
    weekday: int

    def resolve(self, reference_date: date) -> date:
        return reference_date + timedelta(days=_days_until(reference_date, self.weekday, False))


@dataclass(frozen=True)
class NextWeekday(Weekday):
    """'next <weekday>': same rule as a bare weekday."""


@dataclass(frozen=True)
class ThisWeekday(Weekday):
    """'this <weekday>': the nearest matching date, the reference date included."""

    def resolve(self, reference_date: date) -> date:
        return reference_date + timedelta(days=_days_until(reference_date, self.weekday, True))


@dataclass(frozen=True)
class RelativeOffset:
    amount: int
    unit: str = DAY_UNIT

    def resolve(self, reference_date: date) -> date:
        if self.unit == WEEK_UNIT:
            return reference_date + timedelta(weeks=self.amount)
        return reference_date + timedelta(days=self.amount)


@dataclass(frozen=True)
class NextWeek(RelativeOffset):
    amount: int = 1
    unit: str = WEEK_UNIT


DateCue = Union[
    Today,
    Tomorrow,
    Yesterday,
    Weekday,
    NextWeekday,
    ThisWeekday,
    RelativeOffset,
    NextWeek,
]


@dataclass(frozen=True)
class TimeCue:
    """A 12-hour clock time such as 3:30pm."""
    hour: int
    minute: int
    meridiem: str

    def to_time(self) -> time:
        """Convert to a 24-hour time (12am is midnight, 12pm is noon)."""
        hour = self.hour % 12
        if self.meridiem.lower() == 'pm':
            hour += 12
        return time(hour, self.minute)
