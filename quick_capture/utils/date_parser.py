"""
Natural Language Task Date Parser

Extracts a date/time phrase from a task title, resolves it against a reference
"now" and returns the title with the phrase removed.

Supported patterns:
- Relative days: today, tomorrow, yesterday
- Days of week: next monday, this friday, monday, on mon
- Numeric relative: in 2 days, in 1 week
- Periods: next week
- Clock times: 3pm, 3:30pm, 9 am, at 10am

Examples:
- "Call mom tomorrow"     -> tomorrow at the default hour, "Call mom"
- "Meeting at 3pm"        -> today at 15:00 (tomorrow if 15:00 has passed)
- "Dentist Monday 9am"    -> the coming Monday at 09:00, "Dentist"
- "Follow up in 2 days"   -> two days from today, "Follow up"
"""

import re
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional, Tuple

from quick_capture.mcp.schemas import ParseResult
from quick_capture.utils.config import DEFAULT_HOUR, coerce_hour, get_config_value
from quick_capture.utils.cues import (
    DAY_NAMES,
    DateCue,
    NextWeek,
    NextWeekday,
    RelativeOffset,
    ThisWeekday,
    TimeCue,
    Today,
    Tomorrow,
    Weekday,
    Yesterday,
)
from quick_capture.utils.logger import get_logger

logger = get_logger(__name__)

# Longest names first so "thurs" is not cut short at "thu"
WEEKDAY_ALTERNATION = '|'.join(sorted(DAY_NAMES, key=len, reverse=True))

RELATIVE_DAYS = {
    'today': Today(),
    'tomorrow': Tomorrow(),
    'yesterday': Yesterday(),
}

# Date-cue grammars in precedence order; the first one that matches wins
DATE_CUE_GRAMMARS: List[Tuple[re.Pattern, Callable[[re.Match], DateCue]]] = [
    (
        re.compile(r"\b(?:at\s+)?(today|tomorrow|yesterday)\b(?!['’])", re.IGNORECASE),
        lambda m: RELATIVE_DAYS[m.group(1).lower()],
    ),
    (
        re.compile(rf'\b(?:at\s+)?next\s+({WEEKDAY_ALTERNATION})\b', re.IGNORECASE),
        lambda m: NextWeekday(DAY_NAMES[m.group(1).lower()]),
    ),
    (
        re.compile(rf'\b(?:at\s+)?this\s+({WEEKDAY_ALTERNATION})\b', re.IGNORECASE),
        lambda m: ThisWeekday(DAY_NAMES[m.group(1).lower()]),
    ),
    (
        re.compile(rf'\b(?:(?:at|on)\s+)?({WEEKDAY_ALTERNATION})\b', re.IGNORECASE),
        lambda m: Weekday(DAY_NAMES[m.group(1).lower()]),
    ),
    (
        re.compile(r'\b(?:at\s+)?in\s+(\d{1,4})\s+(day|week)s?\b', re.IGNORECASE),
        lambda m: RelativeOffset(int(m.group(1)), m.group(2).lower()),
    ),
    (
        re.compile(r'\b(?:at\s+)?next\s+week\b', re.IGNORECASE),
        lambda m: NextWeek(),
    ),
]

# 12-hour clock: 3pm, 3:30pm, 9 am, at 10am
TIME_PATTERN = re.compile(
    r'\b(?:at\s+)?(1[0-2]|0?[1-9])(?::([0-5]\d))?\s?(am|pm)\b',
    re.IGNORECASE,
)

LEADING_SEPARATOR = re.compile(r'^\s*[,\-]\s*')
TRAILING_SEPARATOR = re.compile(r'\s*[,\-]\s*$')
# "at" left dangling once its cue is gone, e.g. "Dentist tomorrow at"
TRAILING_FILLER = re.compile(r'\s*\bat$', re.IGNORECASE)


def _remove_span(text: str, match: re.Match) -> str:
    return text[:match.start()] + ' ' + text[match.end():]


def _find_date_cue(text: str) -> Tuple[Optional[DateCue], str]:
    """
    Scan for the first date-cue grammar that matches.

    Args:
        text: The title to scan

    Returns:
        Tuple of (date cue or None, text with the matched phrase removed)
    """
    for pattern, build in DATE_CUE_GRAMMARS:
        match = pattern.search(text)
        if match:
            cue = build(match)
            logger.debug(f"Date cue {cue!r} from '{match.group(0)}'")
            return cue, _remove_span(text, match)
    return None, text


def _find_time_cue(text: str) -> Tuple[Optional[TimeCue], str]:
    """
    Scan for a 12-hour clock time.

    Args:
        text: The title to scan, with any date phrase already removed

    Returns:
        Tuple of (time cue or None, text with the matched phrase removed)
    """
    match = TIME_PATTERN.search(text)
    if not match:
        return None, text

    hour, minute, meridiem = match.groups()
    cue = TimeCue(int(hour), int(minute or 0), meridiem.lower())
    logger.debug(f"Time cue {cue!r} from '{match.group(0)}'")
    return cue, _remove_span(text, match)


def clean_title(text: str) -> str:
    """Collapse whitespace and drop stray fillers and leading/trailing separators."""
    text = ' '.join(text.split())
    text = TRAILING_FILLER.sub('', text)
    text = LEADING_SEPARATOR.sub('', text)
    text = TRAILING_SEPARATOR.sub('', text)
    return text.strip()


def resolve_schedule(
    date_cue: Optional[DateCue],
    time_cue: Optional[TimeCue],
    now: datetime,
    default_hour: int = DEFAULT_HOUR,
) -> Optional[datetime]:
    """
    Combine date and time cues into a datetime relative to now.

    A time without a date means the next time that clock time occurs: today if
    it is still ahead of now, otherwise tomorrow. A date without a time is
    scheduled at default_hour.

    Args:
        date_cue: The recognized date cue, if any
        time_cue: The recognized time cue, if any
        now: Reference datetime
        default_hour: Hour of day used for date-only cues

    Returns:
        datetime carrying now's tzinfo, or None if there are no cues
    """
    if date_cue is None and time_cue is None:
        return None

    clock = time_cue.to_time() if time_cue else time(default_hour)

    if date_cue is not None:
        target = date_cue.resolve(now.date())
        return datetime.combine(target, clock, tzinfo=now.tzinfo)

    scheduled = datetime.combine(now.date(), clock, tzinfo=now.tzinfo)
    if scheduled <= now:
        scheduled += timedelta(days=1)
    return scheduled


def parse_natural_date(
    title: Optional[str],
    now: Optional[datetime] = None,
    default_hour: Optional[int] = None,
) -> Optional[ParseResult]:
    """
    Parse a natural language date/time out of a task title.

    Args:
        title: The task title (e.g., "Dentist tomorrow 3pm")
        now: Reference datetime (defaults to the current local time)
        default_hour: Hour for date-only cues (defaults to the configured value)

    Returns:
        ParseResult with the schedule and cleaned title, or None if the title
        holds no date or time phrase

    Examples:
        >>> result = parse_natural_date("Dentist tomorrow 3pm", now=datetime(2025, 1, 15, 10))
        >>> result.scheduled_for, result.cleaned_title
        (datetime.datetime(2025, 1, 16, 15, 0), 'Dentist')

        >>> parse_natural_date("Buy groceries") is None
        True
    """
    if not title or not title.strip():
        return None

    original = title.strip()
    if now is None:
        now = datetime.now()
    if default_hour is None:
        default_hour = get_config_value("default_hour", DEFAULT_HOUR)
    default_hour = coerce_hour(default_hour)

    date_cue, remainder = _find_date_cue(original)
    time_cue, remainder = _find_time_cue(remainder)

    scheduled_for = resolve_schedule(date_cue, time_cue, now, default_hour)
    if scheduled_for is None:
        return None

    # Fall back to the original if nothing but the date phrase was typed
    cleaned = clean_title(remainder) or original

    return ParseResult(scheduled_for=scheduled_for, cleaned_title=cleaned)
