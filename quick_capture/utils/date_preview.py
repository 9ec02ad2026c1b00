"""
Date Preview Formatter

Renders a resolved schedule as a short label for a preview chip, e.g.
"Today 3pm", "Tomorrow 9:30am", "Friday 2pm", "Feb 1 10am".
"""

from datetime import datetime
from typing import Optional


def format_time(dt: datetime) -> str:
    """
    Format the time of day in 12-hour form.

    Minutes are omitted when they are zero.

    Args:
        dt: The datetime to format

    Returns:
        String like "3pm" or "9:30am"
    """
    hour = dt.hour % 12 or 12
    meridiem = 'am' if dt.hour < 12 else 'pm'
    if dt.minute:
        return f"{hour}:{dt.minute:02d}{meridiem}"
    return f"{hour}{meridiem}"


def format_date_preview(date: datetime, now: Optional[datetime] = None) -> str:
    """
    Get a short label describing when a task is scheduled.

    Args:
        date: The scheduled datetime
        now: Reference datetime (defaults to now)

    Returns:
        "Today <time>", "Tomorrow <time>", "<Weekday> <time>" for two to six
        days out, otherwise "<Mon> <day> <time>"
    """
    if now is None:
        now = datetime.now(date.tzinfo)
    if date.tzinfo is not None and now.tzinfo is not None:
        date = date.astimezone(now.tzinfo)

    days = (date.date() - now.date()).days
    time_str = format_time(date)

    if days == 0:
        return f"Today {time_str}"
    elif days == 1:
        return f"Tomorrow {time_str}"
    elif 2 <= days <= 6:
        return f"{date.strftime('%A')} {time_str}"
    return f"{date.strftime('%b')} {date.day} {time_str}"
